from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import lru_cache
from typing import Callable, List, Tuple


class Biome(IntEnum):
    WATER_DEEP = 0
    WATER_SHALLOW = 1
    DESERT = 2      # also the beach band just above sea level
    STONE = 3
    TEMPERATE = 4
    BOREAL = 5
    WARM = 6
    SWAMP = 7
    SNOW = 8


class TerrainShape(Enum):
    FLAT = "flat"
    HILL = "hill"
    MOUNT = "mount"
    OCEAN_FLAT = "ocean_flat"


WATER_BIOMES = frozenset({Biome.WATER_DEEP, Biome.WATER_SHALLOW})

# Elevation bands: floor(height + ELEVATION_BIAS), clamped.  A bias below 0.5
# rounds toward the band beneath, so flat tiles outnumber raised ones.
ELEVATION_BIAS: float = 0.4
MIN_ELEVATION_BAND: int = 0
MAX_ELEVATION_BAND: int = 4


@dataclass(frozen=True)
class BiomeThresholds:
    """Cut-off values used by :func:`classify_biome`.

    The ranges overlap; only the evaluation order in :func:`biome_rules`
    makes them meaningful.
    """
    deep_water: float = -0.3     # height
    sea_level: float = 0.0       # height
    beach: float = 0.05          # height
    snow_line: float = 2.5       # height
    stone_height: float = 1.8    # height
    stone_humidity: float = -0.8
    arid: float = -0.5
    warm: float = 0.0
    temperate: float = 0.4
    boreal: float = 0.8


DEFAULT_THRESHOLDS = BiomeThresholds()

BiomeRule = Tuple[Callable[[float, float], bool], Biome]


@lru_cache(maxsize=32)
def biome_rules(t: BiomeThresholds = DEFAULT_THRESHOLDS) -> Tuple[BiomeRule, ...]:
    """Ordered ``(predicate, biome)`` pairs; the first matching rule wins."""
    rules: List[BiomeRule] = [
        (lambda h, hu: h < t.deep_water, Biome.WATER_DEEP),
        (lambda h, hu: h < t.sea_level, Biome.WATER_SHALLOW),
        (lambda h, hu: h < t.beach, Biome.DESERT),
        (lambda h, hu: h > t.snow_line, Biome.SNOW),
        (lambda h, hu: hu < t.stone_humidity or h > t.stone_height, Biome.STONE),
        (lambda h, hu: hu < t.arid, Biome.DESERT),
        (lambda h, hu: hu < t.warm, Biome.WARM),
        (lambda h, hu: hu < t.temperate, Biome.TEMPERATE),
        (lambda h, hu: hu < t.boreal, Biome.BOREAL),
        (lambda h, hu: True, Biome.SWAMP),
    ]
    return tuple(rules)


def classify_biome(height: float, humidity: float,
                   thresholds: BiomeThresholds = DEFAULT_THRESHOLDS) -> Biome:
    for predicate, biome in biome_rules(thresholds):
        if predicate(height, humidity):
            return biome
    return Biome.SWAMP  # unreachable, the last rule always matches


def classify_elevation(height: float, bias: float = ELEVATION_BIAS) -> int:
    """Discrete elevation band used for stacked rendering."""
    band = math.floor(height + bias)
    return max(MIN_ELEVATION_BAND, min(MAX_ELEVATION_BAND, band))
