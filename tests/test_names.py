import pytest

from enginecore.names import (
    POOL_SIZE,
    Name,
    NamePool,
    NamePoolFullError,
    default_pool,
)
from enginecore.strings import string_hash


@pytest.fixture
def pool():
    return NamePool()


def test_display_round_trip(pool):
    index = pool.find_or_add_display("Actor")
    assert pool.resolve_display(index) == "Actor"
    assert pool.find_or_add_display("Actor") == index


def test_first_insert_lands_on_hash_slot(pool):
    assert pool.find_or_add_comparison("camera") == string_hash("camera") % POOL_SIZE


def test_tables_are_independent(pool):
    pool.find_or_add_comparison("abc")
    assert pool.display_names() == []
    assert pool.comparison_names() == ["abc"]


def test_listing_contains_all_names(pool):
    words = ["alpha", "beta", "gamma", "delta"]
    for word in words:
        pool.find_or_add_display(word)
    assert sorted(pool.display_names()) == sorted(words)


def test_repeated_lookups_stay_stable(pool):
    words = [f"word{i}" for i in range(10)]
    first = {word: pool.find_or_add_display(word) for word in words}
    for _ in range(3):
        for word in reversed(words):
            assert pool.find_or_add_display(word) == first[word]


def test_pool_full_raises(pool):
    indices = {pool.find_or_add_display(f"name{i}") for i in range(POOL_SIZE)}
    assert indices == set(range(POOL_SIZE))
    with pytest.raises(NamePoolFullError):
        pool.find_or_add_display("one_too_many")
    existing = pool.find_or_add_display("name5")
    assert pool.resolve_display(existing) == "name5"


def test_resolve_empty_slot_is_empty_string(pool):
    assert pool.resolve_display(0) == ""


def test_resolve_out_of_range(pool):
    with pytest.raises(IndexError):
        pool.resolve_comparison(POOL_SIZE)


def test_trailing_number_convention(pool):
    assert Name("Player", pool=pool).number == 0
    assert Name("Player0", pool=pool).number == 1
    assert Name("Player1", pool=pool).number == 2


def test_to_string_round_trip(pool):
    name = Name("Player13", pool=pool)
    assert name.number == 14
    assert name.to_string() == "Player13"
    assert str(name) == "Player13"


def test_leading_zeros_are_dropped(pool):
    assert Name("Item007", pool=pool).to_string() == "Item7"


def test_case_insensitive_equality(pool):
    lower = Name("Player", pool=pool)
    upper = Name("PLAYER", pool=pool)
    assert lower == upper
    assert lower.to_string() == "Player"
    assert upper.to_string() == "PLAYER"
    assert len({lower, upper}) == 1


def test_comparison_key_is_lowercase(pool):
    name = Name("MiXeD", pool=pool)
    assert pool.resolve_comparison(name.comparison_index) == "mixed"


def test_compare(pool):
    assert Name("Player3", pool=pool).compare(Name("player1", pool=pool)) == 2
    assert Name("Player", pool=pool).compare(Name("Enemy", pool=pool)) == -2147483648


def test_number_ignored_by_equality(pool):
    assert Name("Box1", pool=pool) == Name("Box9", pool=pool)


def test_invalid_names(pool):
    assert Name("", pool=pool).is_valid is False
    assert Name("123", pool=pool).is_valid is False
    default = Name(pool=pool)
    assert default.is_valid is False
    assert default.number == 0
    assert Name("Valid", pool=pool).is_valid is True


def test_explicit_number_keeps_text(pool):
    assert Name("Box7", number=0, pool=pool).to_string() == "Box7"
    assert Name("Box", number=5, pool=pool).to_string() == "Box4"


def test_number_too_large(pool):
    with pytest.raises(ValueError):
        Name("Thing99999999999", pool=pool)


def test_default_pool_is_shared():
    assert default_pool() is default_pool()
    name = Name("SharedPoolName")
    assert default_pool().resolve_display(name.display_index) == "SharedPoolName"