# render/__init__.py
# Package init for rendering modules

from .render_topdown import render_grid, BIOME_COLORS

__all__ = ["render_grid", "BIOME_COLORS"]
