import math

import pytest

from hexgrid.edge_direction import EdgeDirection
from hexgrid.hex import Hex, HexOrientation

ALL = EdgeDirection.all_directions()
ANGLES = [i + 0.1 for i in range(-1000, 1000)]


def _sector(angle, thresholds, values):
    a = math.fmod(angle, 360.0)
    if a < 0.0:
        a += 360.0
    for limit, value in zip(thresholds, values):
        if a < limit:
            return value
    return values[-1]


def test_all_directions_order():
    assert [d.index() for d in ALL] == [0, 1, 2, 3, 4, 5]
    assert [d.into_hex() for d in ALL] == list(Hex.NEIGHBORS_COORDS)


def test_rotate_ccw_cw():
    for direction in ALL:
        assert direction == direction.rotate_cw(6)
        assert direction == direction.rotate_cw(12)
        assert direction == direction.rotate_cw(1).rotate_ccw(1)
        assert direction == direction.rotate_ccw(1).rotate_cw(1)
        assert direction.counter_clockwise() == direction.rotate_ccw(1)
        assert direction.counter_clockwise().counter_clockwise() == direction.rotate_ccw(2)
        assert direction.clockwise() == direction.rotate_cw(1)
        assert direction.clockwise().clockwise() == direction.rotate_cw(2)


def test_rotations_reverse_each_other():
    for direction in ALL:
        assert direction == direction.counter_clockwise().clockwise()
        assert direction == direction.clockwise().counter_clockwise()


def test_six_rotations_comes_home():
    for direction in ALL:
        cw = direction
        ccw = direction
        for _ in range(6):
            cw = cw.counter_clockwise()
            ccw = ccw.clockwise()
        assert cw == direction
        assert ccw == direction


@pytest.mark.parametrize(
    "index, angle", [(0, 30.0), (1, 90.0), (2, 150.0), (3, 210.0), (4, 270.0), (5, 330.0)]
)
def test_flat_angles_degrees(index, angle):
    assert EdgeDirection(index).angle_flat_degrees() == pytest.approx(angle)


@pytest.mark.parametrize(
    "index, angle",
    [
        (0, math.pi / 6),
        (1, math.pi / 2),
        (2, 5 * math.pi / 6),
        (3, 7 * math.pi / 6),
        (4, 3 * math.pi / 2),
        (5, 11 * math.pi / 6),
    ],
)
def test_flat_angles_rad(index, angle):
    d = EdgeDirection(index)
    assert d.angle_flat() == pytest.approx(angle)
    assert d.angle(HexOrientation.FLAT) == pytest.approx(angle)


@pytest.mark.parametrize(
    "index, angle", [(0, 0.0), (1, 60.0), (2, 120.0), (3, 180.0), (4, 240.0), (5, 300.0)]
)
def test_pointy_angles_degrees(index, angle):
    d = EdgeDirection(index)
    assert d.angle_pointy_degrees() == pytest.approx(angle)
    assert d.angle_degrees(HexOrientation.POINTY) == pytest.approx(angle)


@pytest.mark.parametrize(
    "index, angle",
    [
        (0, 0.0),
        (1, math.pi / 3),
        (2, 2 * math.pi / 3),
        (3, math.pi),
        (4, 4 * math.pi / 3),
        (5, 5 * math.pi / 3),
    ],
)
def test_pointy_angles_rad(index, angle):
    d = EdgeDirection(index)
    assert d.angle_pointy() == pytest.approx(angle)
    assert d.angle(HexOrientation.POINTY) == pytest.approx(angle)


def test_from_flat_angles():
    thresholds = [60.0, 120.0, 180.0, 240.0, 300.0]
    values = [0, 1, 2, 3, 4, 5]
    for angle in ANGLES:
        expect = EdgeDirection(_sector(angle, thresholds, values))
        assert EdgeDirection.from_flat_angle_degrees(angle) == expect
        assert EdgeDirection.from_flat_angle(math.radians(angle)) == expect


def test_from_pointy_angles():
    thresholds = [30.0, 90.0, 150.0, 210.0, 270.0, 330.0]
    values = [0, 1, 2, 3, 4, 5, 0]
    for angle in ANGLES:
        expect = EdgeDirection(_sector(angle, thresholds, values))
        assert EdgeDirection.from_pointy_angle_degrees(angle) == expect
        assert EdgeDirection.from_pointy_angle(math.radians(angle)) == expect


def test_direction_angle_from_to():
    for d in ALL:
        assert EdgeDirection.from_flat_angle_degrees(d.angle_flat_degrees()) == d
        assert EdgeDirection.from_pointy_angle_degrees(d.angle_pointy_degrees()) == d
        assert EdgeDirection.from_flat_angle(d.angle_flat()) == d
        assert EdgeDirection.from_pointy_angle(d.angle_pointy()) == d


def test_rad_deg():
    for orientation in (HexOrientation.FLAT, HexOrientation.POINTY):
        for d in ALL:
            rad = d.angle(orientation)
            degs = d.angle_degrees(orientation)
            assert rad == pytest.approx(math.radians(degs))
            assert degs == pytest.approx(math.degrees(rad))


def test_documented_examples():
    assert EdgeDirection.from_pointy_angle_degrees(35.0) == EdgeDirection.FLAT_BOTTOM
    assert EdgeDirection.from_flat_angle_degrees(35.0) == EdgeDirection.FLAT_BOTTOM_RIGHT
    assert EdgeDirection.from_pointy_angle(0.6) == EdgeDirection.FLAT_BOTTOM
    assert EdgeDirection.from_flat_angle(0.6) == EdgeDirection.FLAT_BOTTOM_RIGHT
    assert (
        EdgeDirection.from_angle_degrees(35.0, HexOrientation.FLAT)
        == EdgeDirection.FLAT_BOTTOM_RIGHT
    )
    assert (
        EdgeDirection.from_angle_degrees(35.0, HexOrientation.POINTY)
        == EdgeDirection.FLAT_BOTTOM
    )
    assert EdgeDirection.from_angle(0.6, HexOrientation.FLAT) == EdgeDirection.FLAT_BOTTOM_RIGHT
    assert EdgeDirection.from_angle(0.6, HexOrientation.POINTY) == EdgeDirection.FLAT_BOTTOM
    assert EdgeDirection.FLAT_TOP.clockwise() == EdgeDirection.FLAT_TOP_RIGHT
    assert EdgeDirection.FLAT_TOP.counter_clockwise() == EdgeDirection.FLAT_TOP_LEFT


def test_operators():
    d = EdgeDirection.FLAT_TOP
    assert -d == EdgeDirection.FLAT_BOTTOM
    assert d >> 1 == EdgeDirection.FLAT_TOP_RIGHT
    assert d << 1 == EdgeDirection.FLAT_TOP_LEFT
    assert EdgeDirection.X * 3 == Hex(3, 0)
    assert 2 * EdgeDirection.NEG_X_Y == Hex(-2, 2)
    for direction in ALL:
        assert -(-direction) == direction
        assert direction.into_hex() + (-direction).into_hex() == Hex.ZERO


def test_angle_between():
    assert EdgeDirection.angle_degrees_between(EdgeDirection(3), EdgeDirection(1)) == 120.0
    assert EdgeDirection(1).angle_degrees_to(EdgeDirection(3)) == 240.0
    assert EdgeDirection.angle_between(EdgeDirection(2), EdgeDirection(0)) == pytest.approx(
        2 * math.pi / 3
    )


def test_unit_vector():
    x, y = EdgeDirection.X.unit_vector(HexOrientation.POINTY)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(0.0, abs=1e-12)
    x, y = EdgeDirection.Y.unit_vector(HexOrientation.FLAT)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_diagonal_neighbors():
    for d in ALL:
        assert d.diagonal_ccw().direction_cw() == d
        assert d.diagonal_cw().direction_ccw() == d


def test_vertex_directions_indices():
    assert EdgeDirection.FLAT_TOP.diagonal_ccw().index() == 4
    assert EdgeDirection.FLAT_TOP.diagonal_cw().index() == 5
    a, b = EdgeDirection(5).vertex_directions()
    assert (a.index(), b.index()) == (5, 0)


def test_invalid_index():
    with pytest.raises(ValueError):
        EdgeDirection(6)
    with pytest.raises(ValueError):
        EdgeDirection(-1)


def test_default_and_repr():
    assert EdgeDirection() == EdgeDirection.X
    assert repr(EdgeDirection.NEG_Y) == "EdgeDirection(index=4, x=0, y=-1, z=1)"