"""The six diagonal (vertex) directions of a hexagon."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from hexgrid.edge_direction import EdgeDirection
from hexgrid.hex import (
    DIRECTION_ANGLE_DEGREES,
    DIRECTION_ANGLE_OFFSET_DEGREES,
    DIRECTION_ANGLE_OFFSET_RAD,
    DIRECTION_ANGLE_RAD,
    Hex,
    HexOrientation,
)

__all__ = ["VertexDirection"]


@dataclass(frozen=True, slots=True)
class VertexDirection:
    """One of the six diagonal directions, stored as an index from 0 to 5.

    Index 0 points towards ``+X`` (the right vertex of a flat hexagon) and
    indices grow clockwise. On pointy hexagons everything is shifted by
    30 degrees.

    ``-d`` is the opposite direction, ``d >> n`` rotates clockwise,
    ``d << n`` rotates counter clockwise and ``d * k`` gives a ``Hex``.
    """

    _index: int = 0

    X_NEG_Y_NEG_Z: ClassVar[VertexDirection]
    X: ClassVar[VertexDirection]
    FLAT_RIGHT: ClassVar[VertexDirection]
    FLAT_EAST: ClassVar[VertexDirection]
    POINTY_TOP_RIGHT: ClassVar[VertexDirection]
    POINTY_NORTH_EAST: ClassVar[VertexDirection]
    X_NEG_Y_Z: ClassVar[VertexDirection]
    NEG_Y: ClassVar[VertexDirection]
    FLAT_TOP_RIGHT: ClassVar[VertexDirection]
    FLAT_NORTH_EAST: ClassVar[VertexDirection]
    POINTY_TOP: ClassVar[VertexDirection]
    POINTY_NORTH: ClassVar[VertexDirection]
    NEG_X_NEG_Y: ClassVar[VertexDirection]
    Z: ClassVar[VertexDirection]
    FLAT_TOP_LEFT: ClassVar[VertexDirection]
    FLAT_NORTH_WEST: ClassVar[VertexDirection]
    POINTY_TOP_LEFT: ClassVar[VertexDirection]
    POINTY_NORTH_WEST: ClassVar[VertexDirection]
    NEG_X_Y_Z: ClassVar[VertexDirection]
    NEG_X: ClassVar[VertexDirection]
    FLAT_LEFT: ClassVar[VertexDirection]
    FLAT_WEST: ClassVar[VertexDirection]
    POINTY_BOTTOM_LEFT: ClassVar[VertexDirection]
    POINTY_SOUTH_WEST: ClassVar[VertexDirection]
    NEG_X_Y_NEG_Z: ClassVar[VertexDirection]
    Y: ClassVar[VertexDirection]
    FLAT_BOTTOM_LEFT: ClassVar[VertexDirection]
    FLAT_SOUTH_WEST: ClassVar[VertexDirection]
    POINTY_BOTTOM: ClassVar[VertexDirection]
    POINTY_SOUTH: ClassVar[VertexDirection]
    X_Y: ClassVar[VertexDirection]
    NEG_Z: ClassVar[VertexDirection]
    FLAT_BOTTOM_RIGHT: ClassVar[VertexDirection]
    FLAT_SOUTH_EAST: ClassVar[VertexDirection]
    POINTY_BOTTOM_RIGHT: ClassVar[VertexDirection]
    POINTY_SOUTH_EAST: ClassVar[VertexDirection]

    def __post_init__(self) -> None:
        if isinstance(self._index, bool) or not isinstance(self._index, int):
            raise TypeError("a vertex direction index must be an int")
        if not 0 <= self._index < 6:
            raise ValueError(f"vertex direction index out of range: {self._index}")

    @classmethod
    def all_directions(cls) -> tuple[VertexDirection, ...]:
        """All six directions in clockwise order, matching ``Hex.DIAGONAL_COORDS``."""
        return tuple(cls(i) for i in range(6))

    def index(self) -> int:
        """Return the inner index, from 0 to 5."""
        return self._index

    def into_hex(self) -> Hex:
        """Return the diagonal offset for this direction."""
        return Hex.DIAGONAL_COORDS[self._index]

    def clockwise(self) -> VertexDirection:
        """Return the next direction in clockwise order."""
        return VertexDirection((self._index + 1) % 6)

    def counter_clockwise(self) -> VertexDirection:
        """Return the next direction in counter clockwise order."""
        return VertexDirection((self._index + 5) % 6)

    def rotate_ccw(self, offset: int) -> VertexDirection:
        """Rotate counter clockwise by ``offset`` steps."""
        return VertexDirection((self._index - offset) % 6)

    def rotate_cw(self, offset: int) -> VertexDirection:
        """Rotate clockwise by ``offset`` steps."""
        return VertexDirection((self._index + offset) % 6)

    def _steps_between(self, rhs: VertexDirection) -> int:
        return (self._index - rhs._index) % 6

    @staticmethod
    def angle_between(a: VertexDirection, b: VertexDirection) -> float:
        """Angle from ``b`` to ``a`` in radians."""
        return a.angle_to(b)

    @staticmethod
    def angle_degrees_between(a: VertexDirection, b: VertexDirection) -> float:
        """Angle from ``b`` to ``a`` in degrees."""
        return a.angle_degrees_to(b)

    def angle_to(self, rhs: VertexDirection) -> float:
        """Angle between ``self`` and ``rhs`` in radians."""
        return self._steps_between(rhs) * DIRECTION_ANGLE_RAD

    def angle_degrees_to(self, rhs: VertexDirection) -> float:
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
        base = self.angle_to(VertexDirection(0))
        if orientation is HexOrientation.POINTY:
            return (base - DIRECTION_ANGLE_OFFSET_RAD) % math.tau
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
        base = self.angle_degrees_to(VertexDirection(0))
        if orientation is HexOrientation.POINTY:
            return (base - DIRECTION_ANGLE_OFFSET_DEGREES) % 360.0
        return base

    @classmethod
    def from_flat_angle_degrees(cls, angle: float) -> VertexDirection:
        """Direction covering ``angle`` in degrees for flat hexagons."""
        return cls.from_pointy_angle_degrees(angle - DIRECTION_ANGLE_OFFSET_DEGREES)

    @classmethod
    def from_pointy_angle_degrees(cls, angle: float) -> VertexDirection:
        """Direction covering ``angle`` in degrees for pointy hexagons."""
        sector = int((angle % 360.0) / DIRECTION_ANGLE_DEGREES)
        return cls((sector + 1) % 6)

    @classmethod
    def from_flat_angle(cls, angle: float) -> VertexDirection:
        """Direction covering ``angle`` in radians for flat hexagons."""
        return cls.from_pointy_angle(angle - DIRECTION_ANGLE_OFFSET_RAD)

    @classmethod
    def from_pointy_angle(cls, angle: float) -> VertexDirection:
        """Direction covering ``angle`` in radians for pointy hexagons."""
        sector = int((angle % math.tau) / DIRECTION_ANGLE_RAD)
        return cls((sector + 1) % 6)

    @classmethod
    def from_angle_degrees(
        cls, angle: float, orientation: HexOrientation
    ) -> VertexDirection:
        """Direction covering ``angle`` in degrees in the given ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return cls.from_pointy_angle_degrees(angle)
        return cls.from_flat_angle_degrees(angle)

    @classmethod
    def from_angle(cls, angle: float, orientation: HexOrientation) -> VertexDirection:
        """Direction covering ``angle`` in radians in the given ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return cls.from_pointy_angle(angle)
        return cls.from_flat_angle(angle)

    def direction_ccw(self) -> EdgeDirection:
        """The counter clockwise neighboring edge direction."""
        return self.edge_ccw()

    def edge_ccw(self) -> EdgeDirection:
        """The counter clockwise neighboring edge direction."""
        return EdgeDirection(self.counter_clockwise()._index)

    def direction_cw(self) -> EdgeDirection:
        """The clockwise neighboring edge direction."""
        return self.edge_cw()

    def edge_cw(self) -> EdgeDirection:
        """The clockwise neighboring edge direction."""
        return EdgeDirection(self._index)

    def edge_directions(self) -> tuple[EdgeDirection, EdgeDirection]:
        """The two adjacent edge directions, in clockwise order."""
        return (self.edge_ccw(), self.edge_cw())

    def __neg__(self) -> VertexDirection:
        return VertexDirection((self._index + 3) % 6)

    def __rshift__(self, offset: object) -> VertexDirection:
        if isinstance(offset, bool) or not isinstance(offset, int):
            return NotImplemented
        return self.rotate_cw(offset)

    def __lshift__(self, offset: object) -> VertexDirection:
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
            f"VertexDirection(index={self._index}, x={c.x}, y={c.y}, z={c.z()})"
        )


for _name, _idx in (
    ("X_NEG_Y_NEG_Z", 0),
    ("X", 0),
    ("FLAT_RIGHT", 0),
    ("FLAT_EAST", 0),
    ("POINTY_TOP_RIGHT", 0),
    ("POINTY_NORTH_EAST", 0),
    ("X_NEG_Y_Z", 5),
    ("NEG_Y", 5),
    ("FLAT_TOP_RIGHT", 5),
    ("FLAT_NORTH_EAST", 5),
    ("POINTY_TOP", 5),
    ("POINTY_NORTH", 5),
    ("NEG_X_NEG_Y", 4),
    ("Z", 4),
    ("FLAT_TOP_LEFT", 4),
    ("FLAT_NORTH_WEST", 4),
    ("POINTY_TOP_LEFT", 4),
    ("POINTY_NORTH_WEST", 4),
    ("NEG_X_Y_Z", 3),
    ("NEG_X", 3),
    ("FLAT_LEFT", 3),
    ("FLAT_WEST", 3),
    ("POINTY_BOTTOM_LEFT", 3),
    ("POINTY_SOUTH_WEST", 3),
    ("NEG_X_Y_NEG_Z", 2),
    ("Y", 2),
    ("FLAT_BOTTOM_LEFT", 2),
    ("FLAT_SOUTH_WEST", 2),
    ("POINTY_BOTTOM", 2),
    ("POINTY_SOUTH", 2),
    ("X_Y", 1),
    ("NEG_Z", 1),
    ("FLAT_BOTTOM_RIGHT", 1),
    ("FLAT_SOUTH_EAST", 1),
    ("POINTY_BOTTOM_RIGHT", 1),
    ("POINTY_SOUTH_EAST", 1),
):
    setattr(VertexDirection, _name, VertexDirection(_idx))
del _name, _idx