# grid.py - classified hexagons for the visible hex-disk, with incremental recentering
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, NamedTuple

from .biomes import Biome, TerrainShape
from .hexgrid import Coordinate, build_hexagonal_area
from .terrain import TerrainField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hexagon:
    coordinate: Coordinate
    elevation_band: int
    biome: Biome
    shape: TerrainShape = TerrainShape.FLAT


class RecenterStats(NamedTuple):
    reused: int
    created: int
    dropped: int


def make_hexagon(terrain: TerrainField, coordinate: Coordinate) -> Hexagon:
    band, biome = terrain.classify_sample(terrain.sample(coordinate))
    return Hexagon(coordinate, band, biome)


class Grid:
    """Mapping ``Coordinate -> Hexagon`` covering exactly one area.

    The key set always equals the area passed to the constructor or to the
    latest :meth:`recenter`.  Hexagons are immutable; a coordinate that stays
    in view keeps the very same object across recenters.
    """

    def __init__(self, terrain: TerrainField, area: Iterable[Coordinate]):
        self._terrain = terrain
        self.hexagons: Dict[Coordinate, Hexagon] = {
            c: make_hexagon(terrain, c) for c in area
        }
        logger.info("Built grid of %d hexagons", len(self.hexagons))

    @classmethod
    def around(cls, terrain: TerrainField, center: Coordinate, radius: int) -> "Grid":
        return cls(terrain, build_hexagonal_area(center, radius))

    @property
    def terrain(self) -> TerrainField:
        return self._terrain

    def recenter(self, terrain: TerrainField, new_area: Iterable[Coordinate]) -> RecenterStats:
        """Replace the covered area with ``new_area``.

        Hexagons already present are moved over untouched and cost no terrain
        queries; only coordinates entering the area are computed.  When
        ``terrain`` is configured differently from the field this grid was
        built with, nothing is reused.
        """
        old = self.hexagons
        previous = len(old)
        if terrain != self._terrain:
            logger.info("Terrain changed, rebuilding all hexagons")
            old = {}
        fresh: Dict[Coordinate, Hexagon] = {}
        reused = 0
        for c in new_area:
            hexagon = old.pop(c, None)
            if hexagon is None:
                hexagon = make_hexagon(terrain, c)
            else:
                reused += 1
            fresh[c] = hexagon
        dropped = previous - reused
        self.hexagons = fresh
        self._terrain = terrain
        stats = RecenterStats(reused, len(fresh) - reused, dropped)
        logger.debug("Recentered grid: %d reused, %d created, %d dropped", *stats)
        return stats

    # -- read access -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self.hexagons)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self.hexagons

    def __getitem__(self, coordinate: Coordinate) -> Hexagon:
        return self.hexagons[coordinate]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.hexagons)

    def get(self, coordinate: Coordinate):
        return self.hexagons.get(coordinate)

    def draw_order(self) -> List[Hexagon]:
        """All hexagons, rows top to bottom and q descending within a row."""
        return sorted(self.hexagons.values(), key=lambda h: (h.coordinate.r, -h.coordinate.q))

    def layer(self, band: int) -> List[Hexagon]:
        """Hexagons of exactly ``band``, in draw order."""
        return [h for h in self.draw_order() if h.elevation_band == band]

    def biome_counts(self) -> Counter:
        return Counter(h.biome for h in self.hexagons.values())

    def band_counts(self) -> Counter:
        return Counter(h.elevation_band for h in self.hexagons.values())
