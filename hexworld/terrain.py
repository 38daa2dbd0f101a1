# terrain.py - deterministic height/humidity field over the hex lattice
from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Tuple

from .biomes import Biome, classify_biome, classify_elevation
from .config import HUMIDITY_BIAS, HUMIDITY_SCALE, TerrainConfig
from .hexgrid import ORIGIN, Coordinate, pixel_offset
from .noise import Fbm, Perlin, curve, scale_bias, terrace

logger = logging.getLogger(__name__)


class TerrainSample(NamedTuple):
    height: float
    humidity: float


class TerrainField:
    """Pure function from a coordinate to ``(height, humidity)``.

    The height is a Perlin field reshaped into terraces, scaled, then pushed
    through a control-point curve.  Humidity is a second, independently
    seeded fBm field multiplied by the negated height (higher ground reads
    drier) and finally rescaled by ``humidity_scale``/``humidity_bias``.

    Both fields are sampled at the hex's absolute pixel position divided by
    ``zoom_divisor``, so neighbouring hexes get smoothly related values.
    A field never changes after construction and may be shared freely.
    """

    def __init__(self, seed: Optional[int] = None, humidity_scale: Optional[float] = None,
                 humidity_bias: Optional[float] = None, config: Optional[TerrainConfig] = None):
        knobs = (seed, humidity_scale, humidity_bias)
        if config is None:
            config = TerrainConfig(
                seed=0 if seed is None else seed,
                humidity_scale=HUMIDITY_SCALE if humidity_scale is None else humidity_scale,
                humidity_bias=HUMIDITY_BIAS if humidity_bias is None else humidity_bias,
            )
        elif any(k is not None for k in knobs):
            raise ValueError("pass either config or seed/humidity knobs, not both")
        self._config = config
        self._height_noise = Perlin(config.seed)
        self._humidity_noise = Fbm(
            seed=config.seed + 1,
            frequency=config.humidity_frequency,
            persistence=config.humidity_persistence,
            lacunarity=config.humidity_lacunarity,
            octaves=config.humidity_octaves,
        )
        logger.info("Terrain field: seed=%d humidity scale=%.3f bias=%.3f",
                    config.seed, config.humidity_scale, config.humidity_bias)

    @classmethod
    def from_config(cls, config: TerrainConfig) -> "TerrainField":
        return cls(config=config)

    @property
    def config(self) -> TerrainConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._config.seed

    @property
    def humidity_scale(self) -> float:
        return self._config.humidity_scale

    @property
    def humidity_bias(self) -> float:
        return self._config.humidity_bias

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerrainField):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def __repr__(self) -> str:
        c = self._config
        return (f"TerrainField(seed={c.seed}, humidity_scale={c.humidity_scale}, "
                f"humidity_bias={c.humidity_bias})")

    # -- continuous sampling ---------------------------------------------------

    def sampling_position(self, coordinate: Coordinate) -> Tuple[float, float]:
        x, y = pixel_offset(coordinate, ORIGIN, self._config.hex_pixel_size)
        zoom = self._config.zoom_divisor
        return x / zoom, y / zoom

    def height_at(self, x: float, y: float) -> float:
        c = self._config
        value = self._height_noise(x, y)
        value = terrace(value, c.terrace_points)
        value = scale_bias(value, c.height_scale, c.height_bias)
        return curve(value, c.curve_points)

    def _humidity_from(self, height: float, x: float, y: float) -> float:
        c = self._config
        value = -height * self._humidity_noise(x, y)
        return scale_bias(value, c.humidity_scale, c.humidity_bias)

    def humidity_at(self, x: float, y: float) -> float:
        return self._humidity_from(self.height_at(x, y), x, y)

    # -- lattice sampling ------------------------------------------------------

    def height(self, coordinate: Coordinate) -> float:
        return self.height_at(*self.sampling_position(coordinate))

    def humidity(self, coordinate: Coordinate) -> float:
        return self.humidity_at(*self.sampling_position(coordinate))

    def sample(self, coordinate: Coordinate) -> TerrainSample:
        x, y = self.sampling_position(coordinate)
        h = self.height_at(x, y)
        return TerrainSample(h, self._humidity_from(h, x, y))

    def classify_sample(self, sample: TerrainSample) -> Tuple[int, Biome]:
        band = classify_elevation(sample.height, self._config.elevation_bias)
        biome = classify_biome(sample.height, sample.humidity, self._config.thresholds)
        return band, biome

    def classify(self, coordinate: Coordinate) -> Tuple[int, Biome]:
        return self.classify_sample(self.sample(coordinate))
