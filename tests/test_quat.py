import math

import pytest

from enginecore.quat import Quat
from enginecore.vector import Vector

X_AXIS = Vector(1.0, 0.0, 0.0)
Y_AXIS = Vector(0.0, 1.0, 0.0)
Z_AXIS = Vector(0.0, 0.0, 1.0)


def _norm(q):
    return math.sqrt(sum(c * c for c in q))


def test_default_is_identity():
    assert tuple(Quat()) == (0.0, 0.0, 0.0, 1.0)


def test_zero_euler_is_identity():
    assert tuple(Quat.from_euler(Vector.zero())) == pytest.approx(tuple(Quat()))


@pytest.mark.parametrize(
    "angles",
    [(10.0, 20.0, 30.0), (-45.0, 15.0, 80.0), (60.0, -30.0, -120.0), (0.0, 0.0, 170.0)],
)
def test_euler_round_trip(angles):
    euler = Vector(*angles)
    back = Quat.from_euler(euler).to_euler()
    assert tuple(back) == pytest.approx(angles, abs=1e-6)


def test_from_euler_is_unit_length():
    assert _norm(Quat.from_euler(Vector(33.0, -12.0, 71.0))) == pytest.approx(1.0)


def test_axis_angle_matches_single_axis_euler():
    assert tuple(Quat.from_axis_angle(Z_AXIS, 75.0)) == pytest.approx(
        tuple(Quat.from_euler(Vector(0.0, 0.0, 75.0)))
    )
    assert tuple(Quat.from_axis_angle(X_AXIS, 40.0)) == pytest.approx(
        tuple(Quat.from_euler(Vector(40.0, 0.0, 0.0)))
    )


def test_axis_angle_to_euler():
    assert tuple(Quat.from_axis_angle(Y_AXIS, 25.0).to_euler()) == pytest.approx(
        (0.0, 25.0, 0.0), abs=1e-6
    )


def test_identity_is_neutral_for_multiplication():
    q = Quat.from_euler(Vector(12.0, 34.0, 56.0))
    assert tuple(q * Quat()) == pytest.approx(tuple(q))
    assert tuple(Quat() * q) == pytest.approx(tuple(q))


def test_multiplying_by_conjugate_gives_identity():
    q = Quat.from_euler(Vector(12.0, 34.0, 56.0))
    conj = Quat(-q.x, -q.y, -q.z, q.w)
    assert tuple(q * conj) == pytest.approx(tuple(Quat()), abs=1e-12)


def test_rotations_about_same_axis_compose_additively():
    combined = Quat.from_axis_angle(Z_AXIS, 30.0) * Quat.from_axis_angle(Z_AXIS, 45.0)
    assert tuple(combined) == pytest.approx(tuple(Quat.from_axis_angle(Z_AXIS, 75.0)))


def test_add_sub_round_trip():
    p = Quat(0.5, -0.25, 1.0, 2.0)
    q = Quat(1.5, 0.75, -2.0, 0.5)
    assert (p + q) - q == p


def test_from_identity_matrix():
    identity = [[1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]]
    assert tuple(Quat.from_rotation_matrix(identity)) == pytest.approx(tuple(Quat()))


@pytest.mark.parametrize("deg", [20.0, 60.0, 135.0])
def test_from_z_rotation_matrix(deg):
    t = math.radians(deg)
    c, s = math.cos(t), math.sin(t)
    m = [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]
    assert tuple(Quat.from_rotation_matrix(m)) == pytest.approx(
        tuple(Quat.from_axis_angle(Z_AXIS, deg)), abs=1e-9
    )


@pytest.mark.parametrize(
    "axis, diag",
    [
        (X_AXIS, (1.0, -1.0, -1.0)),
        (Y_AXIS, (-1.0, 1.0, -1.0)),
        (Z_AXIS, (-1.0, -1.0, 1.0)),
    ],
)
def test_from_half_turn_matrices(axis, diag):
    m = [[diag[0], 0.0, 0.0], [0.0, diag[1], 0.0], [0.0, 0.0, diag[2]]]
    assert tuple(Quat.from_rotation_matrix(m)) == pytest.approx(
        tuple(Quat.from_axis_angle(axis, 180.0)), abs=1e-9
    )