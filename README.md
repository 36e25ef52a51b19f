# enginecore

Core building blocks for a small 3D engine, in plain Python with no
third-party dependencies.

## What is inside

- `enginecore.mathutil`: `clamp`, `lerp`, `square`, `inv_sqrt`,
  `radians_to_degrees`, `degrees_to_radians`, and the constants `PI`,
  `SMALL_NUMBER` and `KINDA_SMALL_NUMBER`.
- `enginecore.vector`: `Vector` (x, y, z) with `dot`, `cross`, `distance`,
  `length`, `length_squared`, in-place `normalize`, `get_safe_normal`,
  `get_unsafe_normal` and the `+ - * / -` operators (component-wise or by a
  scalar); `Vector4` with `get_coord` for the Cartesian point; `Vector2`; and
  `compute_normal_from_three_points`.
- `enginecore.quat`: `Quat`, a quaternion (identity by default) built with
  `from_euler`, `from_axis_angle` or `from_rotation_matrix`, converted back with
  `to_euler`. Angles are in degrees as (roll, pitch, yaw); `*` is the Hamilton
  product, `+` and `-` work component by component.
- `enginecore.box`: `Box`, an axis-aligned bounding box built with
  `from_points` or `build_aabb`, with `center`, `extent` and `intersects`. A ray
  test returns the entry parameter along the ray direction, or `None` on a
  miss; the value is negative when the ray starts inside the box.
- `enginecore.transform`: `Transform`, holding a position, a rotation and a
  scale, with `set_rotation` (from a `Quat` or Euler degrees), `translate`,
  `add_scale`, `rotate`, `rotate_roll`, `rotate_pitch`, `rotate_yaw` and `euler`.
- `enginecore.input`: `KeyCode` and `PlayerInput`, which track held keys,
  keys pressed this frame and both mouse buttons, and `calc_ndc_pos`, which
  maps a window pixel to normalised device coordinates.
- `enginecore.containers`: `Array` (index- and count-returning mutators such
  as `add`, `add_unique`, `remove`, `remove_all`, `insert`, `insert_many`,
  `find` returning -1 when absent, `sort` with an optional `less` predicate),
  `Map` (iteration yields `Pair` objects; `find` returns `None` when absent),
  `Set`, `Pair` and `make_pair`.
- `enginecore.strings`: C-style comparisons (`strcmp`, `strncmp`, `stricmp`,
  `strnicmp`, `strupr`), `equals`, `find` and `contains` with the `SearchCase`
  and `SearchDir` options, `left`, `right`, `trim`, `string_hash` (64-bit
  FNV-1a of the UTF-8 bytes), `from_int` and `sanitize_float`.
- `enginecore.names`: `Name` and `NamePool` for interned, case-insensitive
  names with a number suffix; `default_pool` returns the shared pool. Each
  pool table holds 128 entries; `NamePoolFullError` is raised when one is full.
- `enginecore.memory`: `MemoryStats`, thread-safe counts of outstanding bytes
  and allocations for each `AllocationType`, the shared `platform_memory`
  instance, and `index_range` for 8-, 16-, 32- and 64-bit container indices.
- `enginecore.core`: `EndPlayReason`, `UuidGenerator` (sequential 32-bit
  identifiers, also usable as an iterator) and `gen_uuid`.

## Installation

```
pip install .
```

## Examples

Vectors and rotations:

```python
from enginecore.vector import Vector
from enginecore.quat import Quat

v = Vector(3.0, 4.0, 0.0)
print(v.length())                     # 5.0
print(v.get_safe_normal())            # unit vector along v

q = Quat.from_axis_angle(Vector(0.0, 0.0, 1.0), 90.0)
print(q.to_euler())                   # roughly (0, 0, 90)
```

Picking with a ray:

```python
from enginecore.box import Box
from enginecore.vector import Vector

box = Box.build_aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0))
hit = box.intersects(Vector(-5.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
print(hit)                            # 4.0
```

Interned names:

```python
from enginecore.names import Name

a = Name("Player3")
b = Name("player3")
print(a == b)           # True: names compare without regard to case
print(a.number)         # 4: trailing digits n are stored as n + 1
print(a.to_string())    # "Player3"
```

Input state:

```python
from enginecore.input import KeyCode, PlayerInput

player_input = PlayerInput()
player_input.key_down(KeyCode.W)
print(player_input.is_pressed_key(KeyCode.W))   # True
player_input.pre_process_input()                # clears the "pressed this frame" flags
print(player_input.get_key_down(KeyCode.W))     # False
print(player_input.is_pressed_key(KeyCode.W))   # still True until key_up
```

## What it does not do

This is a library of building blocks only. It opens no window, draws
nothing, runs no frame loop and reads no devices: `PlayerInput` only records
the key and mouse events its caller passes in, and nothing in the package
builds or renders a scene from the math types.

## Running the tests

```
pip install .[test]
pytest
```