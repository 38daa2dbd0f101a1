"""Camera state for an interactive viewer.

A :class:`Viewport` owns the terrain field and the grid for the current
center/radius and performs the actions a front-end binds to its input:
panning, resizing and nudging the humidity knobs.  Which key triggers which
action is left to the front-end.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .config import GRID_RADIUS, HUMIDITY_BIAS_STEP, HUMIDITY_SCALE_STEP, TerrainConfig
from .grid import Grid, Hexagon, RecenterStats
from .hexgrid import ORIGIN, Coordinate, build_hexagonal_area, coordinate_from_pixel
from .terrain import TerrainField

logger = logging.getLogger(__name__)

# Two lattice steps per pan, so the view moves a visible distance
PAN_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "left": (2, 0),
    "right": (-2, 0),
    "up": (-1, 2),
    "down": (1, -2),
}


class UnknownDirectionError(KeyError):
    """Raised by :meth:`Viewport.pan` for a direction not in ``PAN_DIRECTIONS``."""


class Viewport:
    def __init__(self, config: Optional[TerrainConfig] = None,
                 center: Coordinate = ORIGIN, radius: int = GRID_RADIUS):
        self.config = config if config is not None else TerrainConfig()
        self.center = center
        self.radius = radius
        self.terrain = TerrainField.from_config(self.config)
        self.grid = Grid(self.terrain, build_hexagonal_area(center, radius))

    @property
    def area(self):
        return build_hexagonal_area(self.center, self.radius)

    def move_to(self, center: Coordinate) -> RecenterStats:
        self.center = center
        return self.grid.recenter(self.terrain, self.area)

    def pan(self, direction: str) -> RecenterStats:
        try:
            dq, dr = PAN_DIRECTIONS[direction]
        except KeyError:
            raise UnknownDirectionError(direction) from None
        return self.move_to(self.center.shift(dq, dr))

    def set_radius(self, radius: int) -> RecenterStats:
        self.radius = radius
        return self.grid.recenter(self.terrain, self.area)

    def adjust_humidity(self, scale_delta: float = 0.0, bias_delta: float = 0.0) -> RecenterStats:
        """Shift the humidity knobs and rebuild every hexagon."""
        self.config = self.config.with_humidity(scale_delta, bias_delta)
        self.terrain = TerrainField.from_config(self.config)
        return self.grid.recenter(self.terrain, self.area)

    def wetter(self) -> RecenterStats:
        return self.adjust_humidity(bias_delta=HUMIDITY_BIAS_STEP)

    def drier(self) -> RecenterStats:
        return self.adjust_humidity(bias_delta=-HUMIDITY_BIAS_STEP)

    def more_contrast(self) -> RecenterStats:
        return self.adjust_humidity(scale_delta=HUMIDITY_SCALE_STEP)

    def less_contrast(self) -> RecenterStats:
        return self.adjust_humidity(scale_delta=-HUMIDITY_SCALE_STEP)

    def cell_at_pixel(self, pixel: Tuple[float, float],
                      origin: Tuple[float, float]) -> Optional[Hexagon]:
        """Hexagon drawn under ``pixel`` when the center is drawn at ``origin``."""
        rel = coordinate_from_pixel(pixel, origin, self.config.hex_pixel_size)
        return self.grid.get(self.center.shift(rel.q, rel.r))
