"""
Terrain and viewport tuning knobs.
Safe to tweak without touching generation code.
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Tuple

from .biomes import ELEVATION_BIAS, BiomeThresholds

logger = logging.getLogger(__name__)

# Viewport
GRID_RADIUS: int = 25           # hex steps visible around the center
HEX_PIXEL_SIZE: float = 15.0    # center-to-corner distance in screen pixels

# Noise is sampled in world-pixel space divided by this, so neighbouring
# hexes get correlated terrain
ZOOM_DIVISOR: float = 256.0

# Humidity knobs and the steps used when adjusting them interactively
HUMIDITY_SCALE: float = 0.97
HUMIDITY_BIAS: float = 0.1
HUMIDITY_SCALE_STEP: float = 0.01
HUMIDITY_BIAS_STEP: float = 0.1

# Height shaping: noise -> terrace -> scale/bias -> curve
TERRACE_POINTS: Tuple[float, ...] = (-1.0, -0.2, 0.0, 0.4, 0.8, 1.2, 2.0)
HEIGHT_SCALE: float = 1.15
HEIGHT_BIAS: float = 0.25
CURVE_POINTS: Tuple[Tuple[float, float], ...] = (
    (-1.0, -1.0),
    (0.0, 0.0),
    (0.25, 0.2),
    (0.5, 0.45),
    (0.75, 0.9),
    (1.0, 1.8),
    (1.2, 2.8),
    (1.7, 4.2),
)

# Humidity base noise (fBm)
HUMIDITY_FREQUENCY: float = 0.25
HUMIDITY_PERSISTENCE: float = 0.5
HUMIDITY_LACUNARITY: float = 2.208984375
HUMIDITY_OCTAVES: int = 2


class ConfigError(ValueError):
    """Raised for configuration values that cannot be used."""


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            return int(s)
    raise ConfigError(f"{key}: expected an integer, got {value!r}")


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"{key}: expected a number, got {value!r}")
    try:
        f = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key}: expected a number, got {value!r}") from None
    if not math.isfinite(f):
        raise ConfigError(f"{key}: expected a finite number, got {value!r}")
    return f


@dataclass(frozen=True)
class TerrainConfig:
    """Everything a :class:`~hexworld.terrain.TerrainField` is built from.

    Instances are immutable; use :meth:`with_humidity` or
    :func:`dataclasses.replace` to derive a tweaked copy.
    """

    seed: int = 0
    humidity_scale: float = HUMIDITY_SCALE
    humidity_bias: float = HUMIDITY_BIAS
    hex_pixel_size: float = HEX_PIXEL_SIZE
    zoom_divisor: float = ZOOM_DIVISOR
    terrace_points: Tuple[float, ...] = TERRACE_POINTS
    height_scale: float = HEIGHT_SCALE
    height_bias: float = HEIGHT_BIAS
    curve_points: Tuple[Tuple[float, float], ...] = CURVE_POINTS
    humidity_frequency: float = HUMIDITY_FREQUENCY
    humidity_persistence: float = HUMIDITY_PERSISTENCE
    humidity_lacunarity: float = HUMIDITY_LACUNARITY
    humidity_octaves: int = HUMIDITY_OCTAVES
    elevation_bias: float = ELEVATION_BIAS
    thresholds: BiomeThresholds = field(default_factory=BiomeThresholds)

    def __post_init__(self) -> None:
        # keep the config hashable when lists are passed in
        object.__setattr__(self, "terrace_points", tuple(self.terrace_points))
        object.__setattr__(self, "curve_points", tuple(tuple(p) for p in self.curve_points))
        if self.seed < 0:
            raise ConfigError("seed must be non-negative")
        if self.hex_pixel_size == 0:
            raise ConfigError("hex_pixel_size must be non-zero")
        if self.zoom_divisor <= 0:
            raise ConfigError("zoom_divisor must be positive")
        if self.humidity_octaves < 1:
            raise ConfigError("humidity_octaves must be >= 1")
        tp = self.terrace_points
        if len(tp) < 2 or any(b <= a for a, b in zip(tp, tp[1:])):
            raise ConfigError("terrace_points must be strictly increasing (>= 2 points)")
        cp = self.curve_points
        if len(cp) < 2:
            raise ConfigError("curve_points needs at least two points")
        for (x0, y0), (x1, y1) in zip(cp, cp[1:]):
            if x1 <= x0:
                raise ConfigError("curve_points inputs must be strictly increasing")
            if y1 < y0:
                raise ConfigError("curve_points outputs must not decrease")

    def with_humidity(self, scale_delta: float = 0.0, bias_delta: float = 0.0) -> "TerrainConfig":
        return replace(self,
                       humidity_scale=self.humidity_scale + scale_delta,
                       humidity_bias=self.humidity_bias + bias_delta)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["terrace_points"] = list(self.terrace_points)
        d["curve_points"] = [list(p) for p in self.curve_points]
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TerrainConfig":
        """Build a config from plain data (e.g. parsed JSON).

        Numeric strings are accepted.  Unknown keys are ignored with a
        warning; invalid values raise :class:`ConfigError`.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"expected a mapping of settings, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("TerrainConfig: ignoring unknown key %r", key)
                continue
            if key in ("seed", "humidity_octaves"):
                kwargs[key] = _to_int(key, value)
            elif key == "terrace_points":
                if isinstance(value, (str, bytes)):
                    raise ConfigError(f"{key}: expected a list of numbers, got {value!r}")
                try:
                    kwargs[key] = tuple(_to_float(key, v) for v in value)
                except TypeError:
                    raise ConfigError(f"{key}: expected a list of numbers, got {value!r}") from None
            elif key == "curve_points":
                try:
                    kwargs[key] = tuple((_to_float(key, a), _to_float(key, b)) for a, b in value)
                except (TypeError, ValueError) as exc:
                    if isinstance(exc, ConfigError):
                        raise
                    raise ConfigError(f"{key}: expected (input, output) pairs") from None
            elif key == "thresholds":
                if not isinstance(value, Mapping):
                    raise ConfigError(f"{key}: expected a mapping, got {value!r}")
                names = {f.name for f in fields(BiomeThresholds)}
                unknown = set(value) - names
                if unknown:
                    raise ConfigError(f"{key}: unknown thresholds {sorted(unknown)}")
                kwargs[key] = BiomeThresholds(**{k: _to_float(k, v) for k, v in value.items()})
            else:
                kwargs[key] = _to_float(key, value)
        return cls(**kwargs)
