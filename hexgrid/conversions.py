"""Conversions between axial and doubled, offset or hexmod coordinates."""

from __future__ import annotations

from enum import Enum

from hexgrid.hex import Hex

__all__ = [
    "DoubledHexMode",
    "OffsetHexMode",
    "to_doubled_coordinates",
    "from_doubled_coordinates",
    "to_offset_coordinates",
    "from_offset_coordinates",
    "to_hexmod_coordinates",
    "from_hexmod_coordinates",
]


class DoubledHexMode(Enum):
    """Layout mode for doubled coordinates."""

    DOUBLED_WIDTH = "doubled_width"
    DOUBLED_HEIGHT = "doubled_height"


class OffsetHexMode(Enum):
    """Layout mode for offset coordinates."""

    EVEN_COLUMNS = "even_columns"
    ODD_COLUMNS = "odd_columns"
    EVEN_ROWS = "even_rows"
    ODD_ROWS = "odd_rows"


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _range_count(radius: int) -> int:
    return 3 * radius * (radius + 1) + 1


def _shift(radius: int) -> int:
    return 3 * radius + 2


def to_doubled_coordinates(
    hex: Hex, mode: DoubledHexMode = DoubledHexMode.DOUBLED_WIDTH
) -> tuple[int, int]:
    """Convert ``hex`` to doubled coordinates, returned as ``(column, row)``."""
    if mode is DoubledHexMode.DOUBLED_WIDTH:
        return (2 * hex.x + hex.y, hex.y)
    return (hex.x, 2 * hex.y + hex.x)


def from_doubled_coordinates(
    coords: tuple[int, int], mode: DoubledHexMode = DoubledHexMode.DOUBLED_WIDTH
) -> Hex:
    """Convert doubled ``(column, row)`` coordinates to an axial ``Hex``."""
    col, row = coords
    if mode is DoubledHexMode.DOUBLED_WIDTH:
        return Hex(_div(col - row, 2), row)
    return Hex(col, _div(row - col, 2))


def to_offset_coordinates(
    hex: Hex, mode: OffsetHexMode = OffsetHexMode.ODD_ROWS
) -> tuple[int, int]:
    """Convert ``hex`` to offset coordinates, returned as ``(column, row)``."""
    x, y = hex.x, hex.y
    if mode is OffsetHexMode.EVEN_COLUMNS:
        return (x, y + _div(x + (x & 1), 2))
    if mode is OffsetHexMode.ODD_COLUMNS:
        return (x, y + _div(x - (x & 1), 2))
    if mode is OffsetHexMode.EVEN_ROWS:
        return (x + _div(y + (y & 1), 2), y)
    return (x + _div(y - (y & 1), 2), y)


def from_offset_coordinates(
    coords: tuple[int, int], mode: OffsetHexMode = OffsetHexMode.ODD_ROWS
) -> Hex:
    """Convert offset ``(column, row)`` coordinates to an axial ``Hex``."""
    col, row = coords
    if mode is OffsetHexMode.EVEN_COLUMNS:
        return Hex(col, row - _div(col + (col & 1), 2))
    if mode is OffsetHexMode.ODD_COLUMNS:
        return Hex(col, row - _div(col - (col & 1), 2))
    if mode is OffsetHexMode.EVEN_ROWS:
        return Hex(col - _div(row + (row & 1), 2), row)
    return Hex(col - _div(row - (row & 1), 2), row)


def to_hexmod_coordinates(hex: Hex, radius: int) -> int:
    """Convert ``hex`` to its hexmod index for a hexagon of ``radius``."""
    return (hex.y + _shift(radius) * hex.x) % _range_count(radius)


def from_hexmod_coordinates(coord: int, radius: int) -> Hex:
    """Convert a hexmod index back to an axial ``Hex`` for ``radius``.

    The result is only meaningful for ``coord`` below ``3 * radius * (radius + 1) + 1``.
    """
    shift = _shift(radius)
    ms = _div(coord + radius, shift)
    mcs = _div(coord + 2 * radius, shift - 1)
    return Hex(
        ms * (radius + 1) + mcs * -radius,
        coord + ms * (-2 * radius - 1) + mcs * (-radius - 1),
    )