# noise.py - seeded gradient noise, fBm and the shaping functions used for terrain
from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np

ArrayLike = Union[float, np.ndarray]

# Gradient directions for 2D Perlin noise
_GRADIENTS = np.array(
    [(1, 1), (-1, 1), (1, -1), (-1, -1), (1, 0), (-1, 0), (0, 1), (0, -1)],
    dtype=np.float64,
)


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a, b, t):
    return a + t * (b - a)


def _out(value: np.ndarray, scalar: bool) -> ArrayLike:
    return float(value) if scalar else value


class Perlin:
    """2D gradient noise over a seeded permutation table.

    Accepts scalars or numpy arrays.  Output is roughly in ``[-1, 1]`` and is
    exactly zero on integer lattice points.
    """

    def __init__(self, seed: int = 0, frequency: float = 1.0):
        self.seed = int(seed) & 0xFFFFFFFF
        self.frequency = float(frequency)
        rng = np.random.RandomState(self.seed)
        p = rng.permutation(256).astype(np.int64)
        self._perm = np.concatenate([p, p])

    def __call__(self, x: ArrayLike, y: ArrayLike) -> ArrayLike:
        scalar = np.ndim(x) == 0 and np.ndim(y) == 0
        x = np.asarray(x, dtype=np.float64) * self.frequency
        y = np.asarray(y, dtype=np.float64) * self.frequency

        x0 = np.floor(x)
        y0 = np.floor(y)
        xf = x - x0
        yf = y - y0
        xi = x0.astype(np.int64) & 255
        yi = y0.astype(np.int64) & 255

        perm = self._perm
        aa = perm[perm[xi] + yi]
        ab = perm[perm[xi] + yi + 1]
        ba = perm[perm[xi + 1] + yi]
        bb = perm[perm[xi + 1] + yi + 1]

        def dot(h, dx, dy):
            g = _GRADIENTS[h & 7]
            return g[..., 0] * dx + g[..., 1] * dy

        u = _fade(xf)
        v = _fade(yf)
        x1 = _lerp(dot(aa, xf, yf), dot(ba, xf - 1, yf), u)
        x2 = _lerp(dot(ab, xf, yf - 1), dot(bb, xf - 1, yf - 1), u)
        return _out(_lerp(x1, x2, v), scalar)


class Fbm:
    """Fractal Brownian motion: octaves of :class:`Perlin`, one seed each.

    The sum is divided by the total amplitude so the output range matches a
    single octave.
    """

    def __init__(self, seed: int = 0, frequency: float = 1.0, persistence: float = 0.5,
                 lacunarity: float = 2.0, octaves: int = 4):
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        self.frequency = float(frequency)
        self.persistence = float(persistence)
        self.lacunarity = float(lacunarity)
        self.octaves = int(octaves)
        self._sources = [Perlin(seed + i) for i in range(self.octaves)]

    def __call__(self, x: ArrayLike, y: ArrayLike) -> ArrayLike:
        scalar = np.ndim(x) == 0 and np.ndim(y) == 0
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        out = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
        amp = 1.0
        freq = self.frequency
        total = 0.0
        for source in self._sources:
            out += source(x * freq, y * freq) * amp
            total += amp
            amp *= self.persistence
            freq *= self.lacunarity
        out /= total
        return _out(out, scalar)


def terrace(value: ArrayLike, points: Sequence[float]) -> ArrayLike:
    """Quantize ``value`` into plateaus between sorted control ``points``.

    Inside each interval the output eases in quadratically from the lower
    point, so wide flats end in a steep rise to the next point.  Values
    outside the control range clamp to the first/last point.
    """
    if len(points) < 2:
        raise ValueError("terrace needs at least two control points")
    scalar = np.ndim(value) == 0
    cp = np.asarray(points, dtype=np.float64)
    v = np.asarray(value, dtype=np.float64)

    n = len(cp)
    idx = np.searchsorted(cp, v, side="right")
    i0 = np.clip(idx - 1, 0, n - 1)
    i1 = np.clip(idx, 0, n - 1)
    in0 = cp[i0]
    in1 = cp[i1]
    span = np.where(i0 == i1, 1.0, in1 - in0)
    alpha = (v - in0) / span
    alpha = alpha * alpha
    out = np.where(i0 == i1, in1, _lerp(in0, in1, alpha))
    return _out(out, scalar)


def curve(value: ArrayLike, points: Sequence[Tuple[float, float]]) -> ArrayLike:
    """Piecewise-linear remap through ``(input, output)`` control points.

    Inputs must be strictly increasing; outputs must not decrease, which keeps
    the remap monotonic.  Values outside the input range clamp to the end
    outputs.
    """
    if len(points) < 2:
        raise ValueError("curve needs at least two control points")
    scalar = np.ndim(value) == 0
    xs = np.asarray([p[0] for p in points], dtype=np.float64)
    ys = np.asarray([p[1] for p in points], dtype=np.float64)
    out = np.interp(np.asarray(value, dtype=np.float64), xs, ys)
    return _out(out, scalar)


def scale_bias(value: ArrayLike, scale: float, bias: float) -> ArrayLike:
    return value * scale + bias
