# hexgrid.py - Flat-top hex axial math and helpers
from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple

SQRT3 = math.sqrt(3.0)

# Axial unit directions, counter-clockwise starting east (flat-top)
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((+1, 0), (+1, -1), (0, -1), (-1, 0), (-1, +1), (0, +1))

_MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True, order=True)
class Coordinate:
    """Axial lattice position. ``s`` is implied by ``q + r + s == 0``."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def distance_to(self, other: "Coordinate") -> int:
        return distance(self, other)

    def neighbors(self) -> List["Coordinate"]:
        return neighbors(self)

    def shift(self, dq: int, dr: int) -> "Coordinate":
        return shift(self, dq, dr)

    def quick_hash(self) -> int:
        return quick_hash(self)

    def __repr__(self) -> str:
        return f"Coordinate({self.q}, {self.r})"


ORIGIN = Coordinate(0, 0)


def distance(a: Coordinate, b: Coordinate) -> int:
    """Calculate hexagonal distance between two axial coordinates."""
    return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) // 2


def neighbors_axial(c: Coordinate) -> Iterator[Coordinate]:
    for dq, dr in DIRECTIONS:
        yield Coordinate(c.q + dq, c.r + dr)


def neighbors(c: Coordinate) -> List[Coordinate]:
    """Return the six axial neighbors of ``c``."""
    return list(neighbors_axial(c))


def shift(c: Coordinate, dq: int, dr: int) -> Coordinate:
    return Coordinate(c.q + dq, c.r + dr)


def build_hexagonal_area(center: Coordinate, radius: int) -> Set[Coordinate]:
    """All coordinates within ``radius`` steps of ``center`` (a hex-disk).

    The disk holds ``3*radius**2 + 3*radius + 1`` cells.  A negative radius
    yields an empty set.
    """
    area: Set[Coordinate] = set()
    for dq in range(-radius, radius + 1):
        lo = max(-radius, -dq - radius)
        hi = min(radius, -dq + radius)
        for dr in range(lo, hi + 1):
            area.add(Coordinate(center.q + dq, center.r + dr))
    return area


def ring(center: Coordinate, radius: int) -> List[Coordinate]:
    """Coordinates at exactly ``radius`` steps, walking the ring once."""
    if radius < 0:
        return []
    if radius == 0:
        return [center]
    out: List[Coordinate] = []
    # start at the corner reached by walking ``radius`` steps along direction 4
    dq, dr = DIRECTIONS[4]
    c = Coordinate(center.q + dq * radius, center.r + dr * radius)
    for dq, dr in DIRECTIONS:
        for _ in range(radius):
            out.append(c)
            c = Coordinate(c.q + dq, c.r + dr)
    return out


def pixel_offset(c: Coordinate, center: Coordinate, hex_pixel_size: float) -> Tuple[float, float]:
    """Flat-top pixel offset of ``c`` relative to ``center``."""
    dq = c.q - center.q
    dr = c.r - center.r
    x = 1.5 * hex_pixel_size * dq
    y = SQRT3 * hex_pixel_size * (dr + 0.5 * dq)
    return x, y


def axial_round(fq: float, fr: float) -> Tuple[int, int]:
    """Round fractional axial coordinates to nearest hex."""
    fs = -fq - fr
    rq = round(fq)
    rr = round(fr)
    rs = round(fs)

    q_diff = abs(rq - fq)
    r_diff = abs(rr - fr)
    s_diff = abs(rs - fs)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return int(rq), int(rr)


def coordinate_from_pixel(pixel: Tuple[float, float], origin: Tuple[float, float],
                          hex_pixel_size: float) -> Coordinate:
    """Approximate inverse of :func:`pixel_offset`.

    ``origin`` is the pixel position of the reference coordinate ``(0, 0)``.
    Points lying exactly on an edge between two cells are ambiguous and may
    resolve to either neighbour; callers that need a stable pick on edges
    should nudge the pixel first.
    """
    if hex_pixel_size == 0:
        raise ValueError("hex_pixel_size must be non-zero")

    x = pixel[0] - origin[0]
    y = pixel[1] - origin[1]
    fq = (2.0 / 3.0) * x / hex_pixel_size
    fr = ((-1.0 / 3.0) * x + (SQRT3 / 3.0) * y) / hex_pixel_size
    q, r = axial_round(fq, fr)
    return Coordinate(q, r)


def hex_corners(c: Coordinate, center: Coordinate, hex_pixel_size: float,
                origin: Tuple[float, float] = (0.0, 0.0)) -> List[Tuple[float, float]]:
    """Generate the six vertices of the flat-top hexagon drawn for ``c``."""
    ox, oy = pixel_offset(c, center, hex_pixel_size)
    cx = origin[0] + ox
    cy = origin[1] + oy
    points = []
    for i in range(6):
        angle = math.radians(60 * i)  # flat-top hexagon
        points.append((cx + hex_pixel_size * math.cos(angle),
                       cy + hex_pixel_size * math.sin(angle)))
    return points


def quick_hash(c: Coordinate) -> int:
    """Deterministic 64-bit hash of ``(q, r)``.

    Unlike the built-in ``hash`` this is stable across runs, so it can seed
    per-cell random choices without storing them.
    """
    x = 0x345678ABCDEF1234
    for a in (c.q, c.r):
        a &= _MASK64
        a ^= a >> 33
        a = (a * 0xFF51AFD7ED558CCD) & _MASK64
        a ^= a >> 33
        x ^= a
        x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    return x


def variant_index(c: Coordinate, count: int) -> int:
    """Pick one of ``count`` variants for ``c``, always the same one."""
    if count <= 0:
        return 0
    return random.Random(quick_hash(c)).randrange(count)
