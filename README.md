# hexgrid

Axial hexagonal grid coordinates with edge and vertex directions, angle
helpers, and conversions to doubled, offset and hexmod coordinate systems.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `hexgrid.hex` – `Hex`, `HexOrientation` and the angle constants
  `DIRECTION_ANGLE_RAD`, `DIRECTION_ANGLE_DEGREES`,
  `DIRECTION_ANGLE_OFFSET_RAD` and `DIRECTION_ANGLE_OFFSET_DEGREES`.
- `hexgrid.edge_direction` – `EdgeDirection`, the six neighbour directions.
- `hexgrid.vertex_direction` – `VertexDirection`, the six diagonal directions.
- `hexgrid.way` – `DirectionWay`, a single direction or a tie between two.
- `hexgrid.conversions` – doubled, offset and hexmod coordinate conversions.

## Coordinates

`Hex` is an immutable, hashable axial coordinate `(x, y)`. The third cube
coordinate is available through `z()`, and coordinates support `+`, `-`,
unary `-` and multiplication by an integer on either side.

```python
from hexgrid.hex import Hex

a = Hex(1, -2)
b = Hex(3, 0)
print(a + b)   # Hex(x=4, y=-2)
print(-a)      # Hex(x=-1, y=2)
print(a * 2)   # Hex(x=2, y=-4)
print(a.z())   # 1
```

`Hex.ZERO` is the origin. `Hex.NEIGHBORS_COORDS` holds the six unit neighbour
offsets and `Hex.DIAGONAL_COORDS` the six diagonal offsets, both indexed
clockwise from `+X`.

`HexOrientation` has two members, `FLAT` and `POINTY`.

## Directions

`EdgeDirection` names the six neighbour directions and `VertexDirection` the
six diagonal directions. Each stores an index from 0 to 5, with 0 pointing
towards `+X` and indices growing clockwise; constructing one with any other
index raises `ValueError`. Both classes carry named constants such as
`EdgeDirection.FLAT_TOP`, `EdgeDirection.POINTY_RIGHT`,
`VertexDirection.FLAT_RIGHT` or `VertexDirection.POINTY_TOP`, and
`all_directions()` returns all six in clockwise order.

Directions can be rotated with `clockwise()`, `counter_clockwise()`,
`rotate_cw(n)`, `rotate_ccw(n)` or the `>>` and `<<` operators, negated with
`-`, and multiplied by an integer to get a `Hex` offset. `into_hex()` returns
the matching entry of `Hex.NEIGHBORS_COORDS` or `Hex.DIAGONAL_COORDS`.

```python
from hexgrid.edge_direction import EdgeDirection
from hexgrid.hex import HexOrientation

top = EdgeDirection.FLAT_TOP
assert -top == EdgeDirection.FLAT_BOTTOM
assert top >> 1 == EdgeDirection.FLAT_TOP_RIGHT
assert top << 1 == EdgeDirection.FLAT_TOP_LEFT

print(top.angle_degrees(HexOrientation.FLAT))  # 270.0
assert EdgeDirection.from_flat_angle_degrees(35.0) == EdgeDirection.FLAT_BOTTOM_RIGHT
print(top * 3)                                  # Hex(x=0, y=-3)
```

### Angles

Both direction types offer:

- `angle(orientation)` and `angle_degrees(orientation)`, with the shortcuts
  `angle_flat()`, `angle_pointy()`, `angle_flat_degrees()` and
  `angle_pointy_degrees()`;
- `unit_vector(orientation)`, returning an `(x, y)` tuple;
- `angle_to(other)` and `angle_degrees_to(other)`, and the static
  `angle_between(a, b)` and `angle_degrees_between(a, b)`;
- `from_angle(angle, orientation)`, `from_angle_degrees(angle, orientation)`
  and their flat and pointy variants, which pick the direction whose sector
  covers the given angle. Any angle is accepted and wrapped into a full turn.

### Edges and vertices

Each edge direction knows its two adjacent vertex directions
(`vertex_ccw()`, `vertex_cw()`, `vertex_directions()`, with the aliases
`diagonal_ccw()` and `diagonal_cw()`), and each vertex direction its two
adjacent edges (`edge_ccw()`, `edge_cw()`, `edge_directions()`, with the
aliases `direction_ccw()` and `direction_cw()`).

## Direction ways

`DirectionWay` holds either a single direction or a tie between two
directions. It compares equal to any direction it contains, and to another
way holding the same directions in the same order.

```python
from hexgrid.way import DirectionWay
from hexgrid.edge_direction import EdgeDirection

way = DirectionWay.tie(EdgeDirection.FLAT_TOP, EdgeDirection.FLAT_TOP_RIGHT)
assert way == EdgeDirection.FLAT_TOP_RIGHT
assert way.is_tie
assert way.unwrap() == EdgeDirection.FLAT_TOP

flipped = DirectionWay.way_from(True, False, False, EdgeDirection.FLAT_TOP)
assert flipped == DirectionWay.single(EdgeDirection.FLAT_BOTTOM)
```

`way_from(is_neg, eq_left, eq_right, direction)` negates the direction when
`is_neg` is set, then ties it with its counter clockwise neighbour if
`eq_left` is set, otherwise with its clockwise neighbour if `eq_right` is set,
and otherwise returns it alone. `map(func)` applies `func` to every direction
in the way and `contains(direction)` tests membership.

## Conversions

```python
from hexgrid.hex import Hex
from hexgrid.conversions import (
    DoubledHexMode, OffsetHexMode,
    to_doubled_coordinates, from_doubled_coordinates,
    to_offset_coordinates, from_offset_coordinates,
    to_hexmod_coordinates, from_hexmod_coordinates,
)

h = Hex(3, -5)
col_row = to_offset_coordinates(h, OffsetHexMode.ODD_ROWS)
assert from_offset_coordinates(col_row, OffsetHexMode.ODD_ROWS) == h

doubled = to_doubled_coordinates(h, DoubledHexMode.DOUBLED_WIDTH)
assert from_doubled_coordinates(doubled, DoubledHexMode.DOUBLED_WIDTH) == h

index = to_hexmod_coordinates(h, 10)
assert from_hexmod_coordinates(index, 10) == h
```

Offset and doubled coordinates are given and returned as `(column, row)`
tuples. The doubled mode defaults to `DoubledHexMode.DOUBLED_WIDTH` and the
offset mode to `OffsetHexMode.ODD_ROWS`. Hexmod values round-trip only for
coordinates within the given radius.

## What it does not do

The package covers coordinates, directions and conversions only. It has no
neighbour or range iteration, rings, lines or other shapes, no layout for
turning coordinates into screen or world positions, no mesh building, no
map storage and no pathfinding or field-of-view algorithms. It is a library
with no command-line program.