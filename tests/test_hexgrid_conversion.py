import pytest
from hexworld.hexgrid import ORIGIN, Coordinate, coordinate_from_pixel, pixel_offset, hex_corners


def test_axial_pixel_roundtrip():
    size = 10.0
    for q in range(-12, 13):
        for r in range(-12, 13):
            c = Coordinate(q, r)
            x, y = pixel_offset(c, ORIGIN, size)
            assert coordinate_from_pixel((x, y), (0.0, 0.0), size) == c


def test_roundtrip_with_screen_origin_and_center():
    size = 15.0
    origin = (896.0, 560.0)
    center = Coordinate(4, -7)
    for q in range(-6, 7):
        for r in range(-6, 7):
            c = Coordinate(center.q + q, center.r + r)
            dx, dy = pixel_offset(c, center, size)
            rel = coordinate_from_pixel((origin[0] + dx, origin[1] + dy), origin, size)
            assert center.shift(rel.q, rel.r) == c


def test_pixel_offset_flat_top_layout():
    x, y = pixel_offset(Coordinate(2, 0), ORIGIN, 10.0)
    assert x == pytest.approx(30.0)
    assert y == pytest.approx(17.320508, rel=1e-6)
    x, y = pixel_offset(Coordinate(0, 1), ORIGIN, 10.0)
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(17.320508, rel=1e-6)


def test_pixel_to_axial_nearest():
    size = 10.0
    # Point slightly offset from the center should still map to the same hex
    c = Coordinate(2, 3)
    x, y = pixel_offset(c, ORIGIN, size)
    dx, dy = x + size * 0.1, y + size * 0.1  # inside the hex
    assert coordinate_from_pixel((dx, dy), (0.0, 0.0), size) == c


def test_boundary_point_lands_on_either_side():
    size = 10.0
    a, b = Coordinate(0, 0), Coordinate(0, 1)
    ax, ay = pixel_offset(a, ORIGIN, size)
    bx, by = pixel_offset(b, ORIGIN, size)
    mid = ((ax + bx) / 2, (ay + by) / 2)
    assert coordinate_from_pixel(mid, (0.0, 0.0), size) in (a, b)


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        coordinate_from_pixel((1.0, 1.0), (0.0, 0.0), 0)


def test_corners_surround_center():
    size = 15.0
    c = Coordinate(3, -1)
    pts = hex_corners(c, ORIGIN, size, origin=(100.0, 50.0))
    cx, cy = pixel_offset(c, ORIGIN, size)
    assert len(pts) == 6
    for x, y in pts:
        d = ((x - cx - 100.0) ** 2 + (y - cy - 50.0) ** 2) ** 0.5
        assert d == pytest.approx(size)
    # adjacent hexes share an edge: neighbor to the east shares two corners
    east = hex_corners(Coordinate(4, -1), ORIGIN, size, origin=(100.0, 50.0))
    shared = [p for p in pts if any(abs(p[0] - e[0]) < 1e-6 and abs(p[1] - e[1]) < 1e-6 for e in east)]
    assert len(shared) == 2
