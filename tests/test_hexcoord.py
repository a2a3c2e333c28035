import pytest

from hexbattle.hexcoord import HEX_DIRECTIONS, HexCoord, hex_range


def test_default_is_origin():
    assert HexCoord() == HexCoord(0, 0)


def test_distance_to_self_is_zero():
    c = HexCoord(3, -2)
    assert c.distance_to(c) == 0


@pytest.mark.parametrize("a,b", [(HexCoord(0, 0), HexCoord(3, -1)), (HexCoord(-2, 4), HexCoord(1, 1))])
def test_distance_is_symmetric(a, b):
    assert a.distance_to(b) == b.distance_to(a)


def test_neighbors_are_at_distance_one():
    c = HexCoord(2, -1)
    ns = c.neighbors()
    assert len(set(ns)) == 6
    assert all(c.distance_to(n) == 1 for n in ns)


def test_neighbors_follow_direction_order():
    assert HexCoord(0, 0).neighbors() == HEX_DIRECTIONS


def test_step_to_self_stays():
    c = HexCoord(4, 4)
    assert c.step_to(c) == c


def test_step_to_clamps_each_axis():
    assert HexCoord(0, 0).step_to(HexCoord(5, -3)) == HexCoord(1, -1)


def test_step_to_adjacent_reaches_target():
    c = HexCoord(1, 1)
    for n in c.neighbors():
        assert c.step_to(n) == n


def test_hashable_in_sets():
    assert len({HexCoord(1, 2), HexCoord(1, 2), HexCoord(2, 1)}) == 2


def test_hex_range_zero_is_origin():
    assert hex_range(0) == [HexCoord(0, 0)]


def test_hex_range_one_is_origin_and_neighbors():
    assert set(hex_range(1)) == {HexCoord(0, 0), *HexCoord(0, 0).neighbors()}


@pytest.mark.parametrize("radius", [1, 2, 5])
def test_hex_range_within_radius_and_ordered(radius):
    tiles = hex_range(radius)
    origin = HexCoord()
    assert all(origin.distance_to(t) <= radius for t in tiles)
    assert tiles == sorted(tiles, key=lambda t: (t.q, t.r))
    assert len(set(tiles)) == len(tiles)


def test_hex_range_contains_every_tile_in_radius():
    radius = 3
    tiles = set(hex_range(radius))
    box = {HexCoord(q, r) for q in range(-5, 6) for r in range(-5, 6)}
    expected = {t for t in box if HexCoord().distance_to(t) <= radius}
    assert tiles == expected


def test_hex_range_negative_is_empty():
    assert hex_range(-1) == []