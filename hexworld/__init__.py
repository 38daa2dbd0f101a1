# hexworld/__init__.py
# Procedural hex-world engine: lattice math, terrain field, viewport grid

from .hexgrid import (
    Coordinate, ORIGIN, DIRECTIONS, SQRT3, distance, neighbors, shift, build_hexagonal_area, ring,
    pixel_offset, coordinate_from_pixel, axial_round, hex_corners, quick_hash, variant_index,
)
from .noise import Perlin, Fbm, terrace, curve, scale_bias
from .biomes import (
    Biome, TerrainShape, BiomeThresholds, DEFAULT_THRESHOLDS, WATER_BIOMES,
    biome_rules, classify_biome, classify_elevation,
)
from .config import TerrainConfig, ConfigError, GRID_RADIUS, HEX_PIXEL_SIZE
from .terrain import TerrainField, TerrainSample
from .grid import Grid, Hexagon, RecenterStats, make_hexagon
from .viewport import Viewport, PAN_DIRECTIONS, UnknownDirectionError

__all__ = [
    "Coordinate", "ORIGIN", "DIRECTIONS", "SQRT3", "distance", "neighbors", "shift",
    "build_hexagonal_area", "ring", "pixel_offset", "coordinate_from_pixel", "axial_round",
    "hex_corners", "quick_hash", "variant_index",
    "Perlin", "Fbm", "terrace", "curve", "scale_bias",
    "Biome", "TerrainShape", "BiomeThresholds", "DEFAULT_THRESHOLDS", "WATER_BIOMES",
    "biome_rules", "classify_biome", "classify_elevation",
    "TerrainConfig", "ConfigError", "GRID_RADIUS", "HEX_PIXEL_SIZE",
    "TerrainField", "TerrainSample",
    "Grid", "Hexagon", "RecenterStats", "make_hexagon",
    "Viewport", "PAN_DIRECTIONS", "UnknownDirectionError",
]
