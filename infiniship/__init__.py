"""infiniship
=================

Deterministic pixel-art spaceship sprites from two seeds.

A ship is a 12x12 sprite mirrored around its vertical axis. The shape seed
decides which optional template cells become hull, the color seed picks the
hue bands for hull, cockpit and jets. Typical use::

    from infiniship import SeedPair, generate
    from infiniship.utils.image import to_data_uri

    uri = to_data_uri(generate(SeedPair(color=0x12345678, shape=0x0F0F0F0F)))

See :mod:`infiniship.generator` for the pipeline and sheet composition.
"""

from .border import extend_borders
from .color import RGBAColor, cell_color, convert_hsv_to_rgb
from .config import GeneratorConfig
from .generator import (
    ShipGenerator,
    compose_sheet,
    compose_sheet_with_seeds,
    generate,
    generate_ship_tile,
    generate_with_fresh_seed,
)
from .grid import CellGrid, build_cell_grid
from .raster import PixelBuffer, RasterSurface, rasterize
from .seed import SeedPair, draw_seed_pair, fixed_seed_fn, random_seed_fn
from .types import CellType

__all__ = [
    "CellGrid",
    "CellType",
    "GeneratorConfig",
    "PixelBuffer",
    "RGBAColor",
    "RasterSurface",
    "SeedPair",
    "ShipGenerator",
    "build_cell_grid",
    "cell_color",
    "compose_sheet",
    "compose_sheet_with_seeds",
    "convert_hsv_to_rgb",
    "draw_seed_pair",
    "extend_borders",
    "fixed_seed_fn",
    "generate",
    "generate_ship_tile",
    "generate_with_fresh_seed",
    "random_seed_fn",
    "rasterize",
]
