"""The six neighbor (edge) directions of a hexagon."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from hexgrid.hex import (
    DIRECTION_ANGLE_DEGREES,
    DIRECTION_ANGLE_OFFSET_DEGREES,
    DIRECTION_ANGLE_OFFSET_RAD,
    DIRECTION_ANGLE_RAD,
    Hex,
    HexOrientation,
)

if TYPE_CHECKING:
    from hexgrid.vertex_direction import VertexDirection

__all__ = ["EdgeDirection"]


def _vertex(index: int) -> VertexDirection:
    # Deferred: the vertex module refers back to this one.
    from hexgrid.vertex_direction import VertexDirection

    return VertexDirection(index)


@dataclass(frozen=True, slots=True)
class EdgeDirection:
    """One of the six neighbor directions, stored as an index from 0 to 5.

    Index 0 points towards ``+X`` and indices grow clockwise::

                  e4
              v4_____ v5
            e3 /     \\ e5
              /       \\
          v3 (         ) v0
              \\       /
            e2 \\_____/ e0
             v2   e1  v1

    ``-d`` is the opposite direction, ``d >> n`` rotates clockwise,
    ``d << n`` rotates counter clockwise and ``d * k`` gives a ``Hex``.
    """

    _index: int = 0

    X_NEG_Y: ClassVar[EdgeDirection]
    FLAT_TOP_RIGHT: ClassVar[EdgeDirection]
    FLAT_NORTH_EAST: ClassVar[EdgeDirection]
    POINTY_TOP_RIGHT: ClassVar[EdgeDirection]
    POINTY_NORTH_EAST: ClassVar[EdgeDirection]
    NEG_Y: ClassVar[EdgeDirection]
    FLAT_TOP: ClassVar[EdgeDirection]
    FLAT_NORTH: ClassVar[EdgeDirection]
    POINTY_TOP_LEFT: ClassVar[EdgeDirection]
    POINTY_NORTH_WEST: ClassVar[EdgeDirection]
    NEG_X: ClassVar[EdgeDirection]
    FLAT_TOP_LEFT: ClassVar[EdgeDirection]
    FLAT_NORTH_WEST: ClassVar[EdgeDirection]
    POINTY_LEFT: ClassVar[EdgeDirection]
    POINTY_WEST: ClassVar[EdgeDirection]
    NEG_X_Y: ClassVar[EdgeDirection]
    FLAT_BOTTOM_LEFT: ClassVar[EdgeDirection]
    FLAT_SOUTH_WEST: ClassVar[EdgeDirection]
    POINTY_BOTTOM_LEFT: ClassVar[EdgeDirection]
    POINTY_SOUTH_WEST: ClassVar[EdgeDirection]
    Y: ClassVar[EdgeDirection]
    FLAT_BOTTOM: ClassVar[EdgeDirection]
    FLAT_SOUTH: ClassVar[EdgeDirection]
    POINTY_BOTTOM_RIGHT: ClassVar[EdgeDirection]
    POINTY_SOUTH_EAST: ClassVar[EdgeDirection]
    X: ClassVar[EdgeDirection]
    FLAT_BOTTOM_RIGHT: ClassVar[EdgeDirection]
    FLAT_SOUTH_EAST: ClassVar[EdgeDirection]
    POINTY_RIGHT: ClassVar[EdgeDirection]
    POINTY_EAST: ClassVar[EdgeDirection]

    def __post_init__(self) -> None:
        if isinstance(self._index, bool) or not isinstance(self._index, int):
            raise TypeError("an edge direction index must be an int")
        if not 0 <= self._index < 6:
            raise ValueError(f"edge direction index out of range: {self._index}")

    @classmethod
    def all_directions(cls) -> tuple[EdgeDirection, ...]:
        """All six directions in clockwise order, matching ``Hex.NEIGHBORS_COORDS``."""
        return tuple(cls(i) for i in range(6))

    def index(self) -> int:
        """Return the inner index, from 0 to 5."""
        return self._index

    def into_hex(self) -> Hex:
        """Return the unit neighbor offset for this direction."""
        return Hex.NEIGHBORS_COORDS[self._index]

    def clockwise(self) -> EdgeDirection:
        """Return the next direction in clockwise order."""
        return EdgeDirection((self._index + 1) % 6)

    def counter_clockwise(self) -> EdgeDirection:
        """Return the next direction in counter clockwise order."""
        return EdgeDirection((self._index + 5) % 6)

    def rotate_ccw(self, offset: int) -> EdgeDirection:
        """Rotate counter clockwise by ``offset`` steps."""
        return EdgeDirection((self._index - offset) % 6)

    def rotate_cw(self, offset: int) -> EdgeDirection:
        """Rotate clockwise by ``offset`` steps."""
        return EdgeDirection((self._index + offset) % 6)

    def _steps_between(self, rhs: EdgeDirection) -> int:
        return (self._index - rhs._index) % 6

    @staticmethod
    def angle_between(a: EdgeDirection, b: EdgeDirection) -> float:
        """Angle from ``b`` to ``a`` in radians."""
        return a.angle_to(b)

    @staticmethod
    def angle_degrees_between(a: EdgeDirection, b: EdgeDirection) -> float:
        """Angle from ``b`` to ``a`` in degrees."""
        return a.angle_degrees_to(b)

    def angle_to(self, rhs: EdgeDirection) -> float:
        """Angle between ``self`` and ``rhs`` in radians."""
        return self._steps_between(rhs) * DIRECTION_ANGLE_RAD

    def angle_degrees_to(self, rhs: EdgeDirection) -> float:
        """Angle between ``self`` and ``rhs`` in degrees."""
        return self._steps_between(rhs) * DIRECTION_ANGLE_DEGREES

    def angle_flat(self) -> float:
        """Angle in radians for flat hexagons."""
        return self.angle(HexOrientation.FLAT)

    def angle_pointy(self) -> float:
        """Angle in radians for pointy hexagons."""
        return self.angle(HexOrientation.POINTY)

    def angle(self, orientation: HexOrientation) -> float:
        """Angle in radians in the given ``orientation``."""
        base = self.angle_to(EdgeDirection(0))
        if orientation is HexOrientation.FLAT:
            return base + DIRECTION_ANGLE_OFFSET_RAD
        return base

    def unit_vector(self, orientation: HexOrientation) -> tuple[float, float]:
        """Unit vector ``(x, y)`` of the direction in the given ``orientation``."""
        a = self.angle(orientation)
        return (math.cos(a), math.sin(a))

    def angle_flat_degrees(self) -> float:
        """Angle in degrees for flat hexagons."""
        return self.angle_degrees(HexOrientation.FLAT)

    def angle_pointy_degrees(self) -> float:
        """Angle in degrees for pointy hexagons."""
        return self.angle_degrees(HexOrientation.POINTY)

    def angle_degrees(self, orientation: HexOrientation) -> float:
        """Angle in degrees in the given ``orientation``."""
        base = self.angle_degrees_to(EdgeDirection(0))
        if orientation is HexOrientation.FLAT:
            return base + DIRECTION_ANGLE_OFFSET_DEGREES
        return base

    @classmethod
    def from_pointy_angle_degrees(cls, angle: float) -> EdgeDirection:
        """Direction covering ``angle`` in degrees for pointy hexagons."""
        return cls.from_flat_angle_degrees(angle + DIRECTION_ANGLE_OFFSET_DEGREES)

    @classmethod
    def from_flat_angle_degrees(cls, angle: float) -> EdgeDirection:
        """Direction covering ``angle`` in degrees for flat hexagons."""
        sector = int((angle % 360.0) / DIRECTION_ANGLE_DEGREES)
        return cls(sector % 6)

    @classmethod
    def from_pointy_angle(cls, angle: float) -> EdgeDirection:
        """Direction covering ``angle`` in radians for pointy hexagons."""
        return cls.from_flat_angle(angle + DIRECTION_ANGLE_OFFSET_RAD)

    @classmethod
    def from_flat_angle(cls, angle: float) -> EdgeDirection:
        """Direction covering ``angle`` in radians for flat hexagons."""
        sector = int((angle % math.tau) / DIRECTION_ANGLE_RAD)
        return cls(sector % 6)

    @classmethod
    def from_angle_degrees(
        cls, angle: float, orientation: HexOrientation
    ) -> EdgeDirection:
        """Direction covering ``angle`` in degrees in the given ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return cls.from_pointy_angle_degrees(angle)
        return cls.from_flat_angle_degrees(angle)

    @classmethod
    def from_angle(cls, angle: float, orientation: HexOrientation) -> EdgeDirection:
        """Direction covering ``angle`` in radians in the given ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return cls.from_pointy_angle(angle)
        return cls.from_flat_angle(angle)

    def diagonal_ccw(self) -> VertexDirection:
        """The counter clockwise neighboring vertex direction."""
        return self.vertex_ccw()

    def vertex_ccw(self) -> VertexDirection:
        """The counter clockwise neighboring vertex direction."""
        return _vertex(self._index)

    def diagonal_cw(self) -> VertexDirection:
        """The clockwise neighboring vertex direction."""
        return self.vertex_cw()

    def vertex_cw(self) -> VertexDirection:
        """The clockwise neighboring vertex direction."""
        return _vertex(self.clockwise()._index)

    def vertex_directions(self) -> tuple[VertexDirection, VertexDirection]:
        """The two adjacent vertex directions, in clockwise order."""
        return (self.vertex_ccw(), self.vertex_cw())

    def __neg__(self) -> EdgeDirection:
        return EdgeDirection((self._index + 3) % 6)

    def __rshift__(self, offset: object) -> EdgeDirection:
        if isinstance(offset, bool) or not isinstance(offset, int):
            return NotImplemented
        return self.rotate_cw(offset)

    def __lshift__(self, offset: object) -> EdgeDirection:
        if isinstance(offset, bool) or not isinstance(offset, int):
            return NotImplemented
        return self.rotate_ccw(offset)

    def __mul__(self, factor: object) -> Hex:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return self.into_hex() * factor

    __rmul__ = __mul__

    def __repr__(self) -> str:
        c = self.into_hex()
        return (
            f"EdgeDirection(index={self._index}, x={c.x}, y={c.y}, z={c.z()})"
        )


for _name, _idx in (
    ("X_NEG_Y", 5),
    ("FLAT_TOP_RIGHT", 5),
    ("FLAT_NORTH_EAST", 5),
    ("POINTY_TOP_RIGHT", 5),
    ("POINTY_NORTH_EAST", 5),
    ("NEG_Y", 4),
    ("FLAT_TOP", 4),
    ("FLAT_NORTH", 4),
    ("POINTY_TOP_LEFT", 4),
    ("POINTY_NORTH_WEST", 4),
    ("NEG_X", 3),
    ("FLAT_TOP_LEFT", 3),
    ("FLAT_NORTH_WEST", 3),
    ("POINTY_LEFT", 3),
    ("POINTY_WEST", 3),
    ("NEG_X_Y", 2),
    ("FLAT_BOTTOM_LEFT", 2),
    ("FLAT_SOUTH_WEST", 2),
    ("POINTY_BOTTOM_LEFT", 2),
    ("POINTY_SOUTH_WEST", 2),
    ("Y", 1),
    ("FLAT_BOTTOM", 1),
    ("FLAT_SOUTH", 1),
    ("POINTY_BOTTOM_RIGHT", 1),
    ("POINTY_SOUTH_EAST", 1),
    ("X", 0),
    ("FLAT_BOTTOM_RIGHT", 0),
    ("FLAT_SOUTH_EAST", 0),
    ("POINTY_RIGHT", 0),
    ("POINTY_EAST", 0),
):
    setattr(EdgeDirection, _name, EdgeDirection(_idx))
del _name, _idx