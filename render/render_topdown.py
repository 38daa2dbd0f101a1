# render_topdown.py - top-down hex fill of a Grid with stacked elevation bands
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from PIL import Image, ImageDraw

from hexworld.biomes import MAX_ELEVATION_BAND, Biome
from hexworld.config import HEX_PIXEL_SIZE
from hexworld.grid import Grid
from hexworld.hexgrid import Coordinate, hex_corners

BIOME_COLORS: Dict[Biome, Tuple[int, int, int]] = {
    Biome.WATER_DEEP: (20, 50, 150),
    Biome.WATER_SHALLOW: (50, 120, 180),
    Biome.DESERT: (237, 201, 175),
    Biome.STONE: (139, 137, 137),
    Biome.TEMPERATE: (110, 205, 88),
    Biome.BOREAL: (34, 100, 60),
    Biome.WARM: (150, 170, 60),
    Biome.SWAMP: (70, 90, 50),
    Biome.SNOW: (240, 240, 245),
}

SHADOW_COLOR = (0, 0, 0, 40)
BACKGROUND = (16, 18, 24, 255)


def band_lift(hex_pixel_size: float) -> float:
    """Vertical pixel shift applied per elevation band (negative is up)."""
    return -26.0 * hex_pixel_size / 30.0


def shadow_shift(hex_pixel_size: float) -> Tuple[float, float]:
    return hex_pixel_size / 10.0, -hex_pixel_size / 6.0


def _translate(pts: List[Tuple[float, float]], dx: float, dy: float) -> List[Tuple[float, float]]:
    return [(x + dx, y + dy) for x, y in pts]


def render_grid(grid: Grid, center: Coordinate, hex_pixel_size: float = HEX_PIXEL_SIZE,
                scale: int = 1, size: Optional[Tuple[int, int]] = None) -> Image.Image:
    """Draw ``grid`` with ``center`` in the middle of the image.

    Bands are painted bottom up.  Before band ``n > 0`` is painted, every
    hexagon of exactly band ``n`` casts a translucent shadow; then every
    hexagon of band ``n`` or higher is painted lifted by ``n`` steps, so tall
    cells end up as columns over the lower ones.
    """
    lift = band_lift(hex_pixel_size)
    sx, sy = shadow_shift(hex_pixel_size)
    order = grid.draw_order()
    corners = {h.coordinate: hex_corners(h.coordinate, center, hex_pixel_size) for h in order}

    if size is None:
        xs, ys = [], []
        for h in order:
            for x, y in corners[h.coordinate]:
                xs.append(x)
                ys.append(y)
                ys.append(y + lift * h.elevation_band)
        if not xs:
            xs, ys = [0.0], [0.0]
        padding = hex_pixel_size * 2
        min_x, max_x = min(xs) - padding, max(xs) + padding
        min_y, max_y = min(ys) - padding, max(ys) + padding
        img_w = int(max_x - min_x)
        img_h = int(max_y - min_y)
        ox, oy = -min_x, -min_y
    else:
        img_w, img_h = size
        ox, oy = img_w / 2.0, img_h / 2.0

    img = Image.new("RGBA", (img_w, img_h), BACKGROUND)
    draw = ImageDraw.Draw(img, "RGBA")

    for band in range(MAX_ELEVATION_BAND + 1):
        if band > 0:
            for h in order:
                if h.elevation_band == band:
                    pts = _translate(corners[h.coordinate], ox + sx, oy + sy + lift * band)
                    draw.polygon(pts, fill=SHADOW_COLOR)
        for h in order:
            if h.elevation_band >= band:
                pts = _translate(corners[h.coordinate], ox, oy + lift * band)
                draw.polygon(pts, fill=BIOME_COLORS[h.biome])

    if scale > 1:
        img = img.resize((img_w * scale, img_h * scale), Image.NEAREST)
    return img
