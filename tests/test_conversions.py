import pytest

from hexgrid.conversions import (
    DoubledHexMode,
    OffsetHexMode,
    from_doubled_coordinates,
    from_hexmod_coordinates,
    from_offset_coordinates,
    to_doubled_coordinates,
    to_hexmod_coordinates,
    to_offset_coordinates,
)
from hexgrid.hex import Hex


def hexagon(radius):
    return [
        Hex(x, y)
        for x in range(-radius, radius + 1)
        for y in range(-radius, radius + 1)
        if abs(x + y) <= radius
    ]


@pytest.mark.parametrize("mode", list(DoubledHexMode))
def test_doubled_coordinates_round_trip(mode):
    for h in hexagon(20):
        assert from_doubled_coordinates(to_doubled_coordinates(h, mode), mode) == h


@pytest.mark.parametrize("mode", list(OffsetHexMode))
def test_offset_coordinates_round_trip(mode):
    for h in hexagon(20):
        assert from_offset_coordinates(to_offset_coordinates(h, mode), mode) == h


def test_hexmod_coordinates_round_trip():
    radius = 20
    for h in hexagon(radius):
        hexmod = to_hexmod_coordinates(h, radius)
        assert from_hexmod_coordinates(hexmod, radius) == h


@pytest.mark.parametrize("radius", [0, 1, 2, 5, 10])
def test_hexmod_is_a_bijection_onto_range(radius):
    coords = hexagon(radius)
    values = {to_hexmod_coordinates(h, radius) for h in coords}
    assert len(values) == len(coords)
    assert values == set(range(len(coords)))


@pytest.mark.parametrize("radius", [0, 3, 7])
def test_hexmod_of_origin(radius):
    assert to_hexmod_coordinates(Hex.ZERO, radius) == 0
    assert from_hexmod_coordinates(0, radius) == Hex.ZERO


def test_origin_is_fixed_in_every_mode():
    for mode in DoubledHexMode:
        assert to_doubled_coordinates(Hex.ZERO, mode) == (0, 0)
    for mode in OffsetHexMode:
        assert to_offset_coordinates(Hex.ZERO, mode) == (0, 0)


def test_doubled_keeps_the_undoubled_axis():
    for h in hexagon(5):
        assert to_doubled_coordinates(h, DoubledHexMode.DOUBLED_WIDTH)[1] == h.y
        assert to_doubled_coordinates(h, DoubledHexMode.DOUBLED_HEIGHT)[0] == h.x


def test_doubled_coordinates_have_even_sum():
    for h in hexagon(8):
        for mode in DoubledHexMode:
            col, row = to_doubled_coordinates(h, mode)
            assert (col + row) % 2 == 0


def test_offset_keeps_one_axis():
    for h in hexagon(5):
        for mode in (OffsetHexMode.EVEN_COLUMNS, OffsetHexMode.ODD_COLUMNS):
            assert to_offset_coordinates(h, mode)[0] == h.x
        for mode in (OffsetHexMode.EVEN_ROWS, OffsetHexMode.ODD_ROWS):
            assert to_offset_coordinates(h, mode)[1] == h.y


def test_default_modes():
    h = Hex(3, -5)
    assert to_doubled_coordinates(h) == to_doubled_coordinates(
        h, DoubledHexMode.DOUBLED_WIDTH
    )
    assert to_offset_coordinates(h) == to_offset_coordinates(h, OffsetHexMode.ODD_ROWS)


def test_pinned_doubled_width_value():
    assert to_doubled_coordinates(Hex(1, 2), DoubledHexMode.DOUBLED_WIDTH) == (4, 2)