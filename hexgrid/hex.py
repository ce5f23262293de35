"""Axial hexagonal coordinates, orientations and angle constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

__all__ = [
    "DIRECTION_ANGLE_OFFSET_RAD",
    "DIRECTION_ANGLE_OFFSET_DEGREES",
    "DIRECTION_ANGLE_RAD",
    "DIRECTION_ANGLE_DEGREES",
    "Hex",
    "HexOrientation",
]

# Angle between *flat* and *pointy* top orientations (30 degrees).
DIRECTION_ANGLE_OFFSET_RAD: float = math.pi / 6
# Angle between *flat* and *pointy* top orientations, in degrees.
DIRECTION_ANGLE_OFFSET_DEGREES: float = 30.0
# Angle between two adjacent directions (60 degrees).
DIRECTION_ANGLE_RAD: float = math.pi / 3
# Angle between two adjacent directions, in degrees.
DIRECTION_ANGLE_DEGREES: float = 60.0


class HexOrientation(Enum):
    """Whether hexagons have a flat or a pointy top."""

    POINTY = "pointy"
    FLAT = "flat"


@dataclass(frozen=True, slots=True)
class Hex:
    """A hexagonal coordinate in axial form; the cubic ``z`` is derived."""

    x: int
    y: int

    ZERO: ClassVar[Hex]
    NEIGHBORS_COORDS: ClassVar[tuple[Hex, ...]]
    DIAGONAL_COORDS: ClassVar[tuple[Hex, ...]]

    def z(self) -> int:
        """Return the third cubic coordinate, so that ``x + y + z == 0``."""
        return -self.x - self.y

    def __add__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> Hex:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Hex(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Hex:
        return Hex(-self.x, -self.y)


Hex.ZERO = Hex(0, 0)
# Neighbor offsets, indexed by edge direction (clockwise from +X).
Hex.NEIGHBORS_COORDS = (
    Hex(1, 0),
    Hex(0, 1),
    Hex(-1, 1),
    Hex(-1, 0),
    Hex(0, -1),
    Hex(1, -1),
)
# Diagonal offsets, indexed by vertex direction (clockwise from +X).
Hex.DIAGONAL_COORDS = (
    Hex(2, -1),
    Hex(1, 1),
    Hex(-1, 2),
    Hex(-2, 1),
    Hex(-1, -1),
    Hex(1, -2),
)