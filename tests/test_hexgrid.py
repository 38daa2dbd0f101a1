import itertools

from hexworld.hexgrid import (
    DIRECTIONS, ORIGIN, Coordinate, build_hexagonal_area, distance, neighbors, quick_hash, ring, shift,
    variant_index,
)


def _sample_coords(span=4):
    return [Coordinate(q, r) for q in range(-span, span + 1) for r in range(-span, span + 1)]


def test_distance_is_a_metric():
    coords = _sample_coords(3)
    for a in coords:
        assert distance(a, a) == 0
    for a, b in itertools.product(coords, repeat=2):
        d = distance(a, b)
        assert d >= 0
        assert d == distance(b, a)
        assert (d == 0) == (a == b)
    sparse = coords[::3]
    for a, b, c in itertools.product(sparse, repeat=3):
        assert distance(a, c) <= distance(a, b) + distance(b, c)


def test_distance_examples():
    assert distance(ORIGIN, Coordinate(2, 1)) == 3
    assert distance(Coordinate(1, 1), Coordinate(1, 4)) == 3
    assert distance(Coordinate(-3, 3), Coordinate(3, -3)) == 6
    assert Coordinate(0, 0).distance_to(Coordinate(2, -1)) == 2


def test_s_coordinate():
    c = Coordinate(3, -5)
    assert c.q + c.r + c.s == 0


def test_coordinates_are_values():
    a = Coordinate(1, 2)
    b = Coordinate(1, 2)
    assert a == b and hash(a) == hash(b)
    assert len({a, b}) == 1
    assert {a: "x"}[b] == "x"


def test_neighbors_are_six_distinct_adjacent():
    for c in _sample_coords(2) + [Coordinate(1000, -999)]:
        ns = neighbors(c)
        assert len(ns) == 6
        assert len(set(ns)) == 6
        assert all(distance(c, n) == 1 for n in ns)
    assert neighbors(ORIGIN) == [Coordinate(dq, dr) for dq, dr in DIRECTIONS]


def test_shift():
    c = Coordinate(5, -2)
    assert shift(c, 2, 0) == Coordinate(7, -2)
    assert c.shift(-1, 2) == Coordinate(4, 0)
    assert shift(shift(c, 1, -2), -1, 2) == c


def test_hexagonal_area_size():
    for radius in range(0, 9):
        area = build_hexagonal_area(Coordinate(3, -2), radius)
        assert len(area) == 3 * radius * radius + 3 * radius + 1


def test_hexagonal_area_is_the_disk():
    center = Coordinate(-2, 5)
    radius = 4
    area = build_hexagonal_area(center, radius)
    assert all(distance(center, c) <= radius for c in area)
    box = [Coordinate(center.q + dq, center.r + dr)
           for dq in range(-radius - 2, radius + 3) for dr in range(-radius - 2, radius + 3)]
    expected = {c for c in box if distance(center, c) <= radius}
    assert area == expected


def test_hexagonal_area_negative_radius_is_empty():
    assert build_hexagonal_area(ORIGIN, -1) == set()
    assert build_hexagonal_area(ORIGIN, -10) == set()


def test_ring():
    assert ring(ORIGIN, 0) == [ORIGIN]
    assert ring(ORIGIN, -2) == []
    for radius in range(1, 6):
        cells = ring(Coordinate(1, 1), radius)
        assert len(cells) == 6 * radius
        assert len(set(cells)) == 6 * radius
        assert all(distance(Coordinate(1, 1), c) == radius for c in cells)


def test_quick_hash_stable_and_spread():
    c = Coordinate(12, -7)
    assert quick_hash(c) == quick_hash(Coordinate(12, -7))
    assert c.quick_hash() == quick_hash(c)
    hashes = {quick_hash(x) for x in _sample_coords(5)}
    assert len(hashes) == len(_sample_coords(5))
    assert all(0 <= h < 2 ** 64 for h in hashes)
    assert quick_hash(Coordinate(1, 2)) != quick_hash(Coordinate(2, 1))


def test_variant_index():
    picks = [variant_index(c, 3) for c in _sample_coords(5)]
    assert all(0 <= p < 3 for p in picks)
    assert len(set(picks)) == 3
    assert picks == [variant_index(c, 3) for c in _sample_coords(5)]
    assert variant_index(ORIGIN, 0) == 0
