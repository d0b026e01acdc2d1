"""Ship generation pipeline.

``SeedPair -> build_cell_grid -> extend_borders -> rasterize -> PixelBuffer``

:func:`generate` is a pure function of its seed pair. The remaining entry
points draw fresh seeds from an injectable :data:`~infiniship.types.SeedFn`
and report the seeds used so any result can be replayed.
"""

import logging
from typing import List, Optional, Tuple

from PIL import Image

from infiniship.border import extend_borders
from infiniship.color import COLOR_TRANSPARENT
from infiniship.config import GeneratorConfig
from infiniship.grid import build_cell_grid
from infiniship.raster import PixelBuffer, rasterize
from infiniship.seed import SeedPair, draw_seed_pair, random_seed_fn
from infiniship.tables import SPRITE_HEIGHT, SPRITE_WIDTH, TILE_MARGIN, TILE_SIZE
from infiniship.types import SeedFn
from infiniship.utils.image import encode_png, to_data_uri, upscale


logger = logging.getLogger(__name__)


def generate(seed_pair: SeedPair, monochrome: bool = False) -> PixelBuffer:
    """Render the 12x12 ship sprite for ``seed_pair``."""
    grid = extend_borders(build_cell_grid(seed_pair.shape))
    buffer = PixelBuffer(SPRITE_WIDTH, SPRITE_HEIGHT, fill=COLOR_TRANSPARENT)
    rasterize(grid, seed_pair.color, monochrome, buffer)
    return buffer


def generate_with_fresh_seed(
    monochrome: bool = False, seed_fn: Optional[SeedFn] = None
) -> Tuple[PixelBuffer, SeedPair]:
    """Draw a new seed pair and render it.

    Returns:
        Tuple[PixelBuffer, SeedPair]: The sprite and the seeds that produced it.
    """
    seed_pair = draw_seed_pair(seed_fn or random_seed_fn())
    return generate(seed_pair, monochrome), seed_pair


def generate_ship_tile(seed_pair: SeedPair, monochrome: bool = False) -> PixelBuffer:
    """Render a 16x16 tile holding the sprite inside a transparent margin."""
    tile = PixelBuffer(TILE_SIZE, TILE_SIZE)
    tile.blit(generate(seed_pair, monochrome), TILE_MARGIN, TILE_MARGIN)
    return tile


def compose_sheet_with_seeds(
    tiles_x: int = 8,
    tiles_y: int = 8,
    monochrome: bool = False,
    seed_fn: Optional[SeedFn] = None,
) -> Tuple[PixelBuffer, List[SeedPair]]:
    """Tile ``tiles_x * tiles_y`` independently seeded ships into one buffer.

    Ships are laid out row by row; the returned seeds follow the same order.

    Raises:
        ValueError: If a tile count is negative.
    """
    if tiles_x < 0 or tiles_y < 0:
        raise ValueError(f"Tile counts must be non-negative: {tiles_x}x{tiles_y}")

    source = seed_fn or random_seed_fn()
    sheet = PixelBuffer(TILE_SIZE * tiles_x, TILE_SIZE * tiles_y)
    seeds: List[SeedPair] = []

    for j in range(tiles_y):
        for i in range(tiles_x):
            seed_pair = draw_seed_pair(source)
            sheet.blit(
                generate(seed_pair, monochrome),
                i * TILE_SIZE + TILE_MARGIN,
                j * TILE_SIZE + TILE_MARGIN,
            )
            seeds.append(seed_pair)

    logger.debug("Composed %dx%d sheet (%d ships)", tiles_x, tiles_y, len(seeds))
    return sheet, seeds


def compose_sheet(
    tiles_x: int = 8,
    tiles_y: int = 8,
    monochrome: bool = False,
    seed_fn: Optional[SeedFn] = None,
) -> PixelBuffer:
    sheet, _ = compose_sheet_with_seeds(tiles_x, tiles_y, monochrome, seed_fn)
    return sheet


class ShipGenerator:
    config: GeneratorConfig
    seed_fn: SeedFn

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        seed_fn: Optional[SeedFn] = None,
    ):
        self.config = config or GeneratorConfig()
        self.seed_fn = seed_fn or random_seed_fn()

    def ship(self, seed_pair: Optional[SeedPair] = None) -> Tuple[PixelBuffer, SeedPair]:
        if seed_pair is None:
            seed_pair = draw_seed_pair(self.seed_fn)
        return generate(seed_pair, self.config.monochrome), seed_pair

    def tile(self, seed_pair: Optional[SeedPair] = None) -> Tuple[PixelBuffer, SeedPair]:
        if seed_pair is None:
            seed_pair = draw_seed_pair(self.seed_fn)
        return generate_ship_tile(seed_pair, self.config.monochrome), seed_pair

    def sheet(self) -> Tuple[PixelBuffer, List[SeedPair]]:
        return compose_sheet_with_seeds(
            self.config.tiles_x,
            self.config.tiles_y,
            self.config.monochrome,
            self.seed_fn,
        )

    def preview(self, buffer: PixelBuffer) -> Image.Image:
        """Pillow image of ``buffer`` enlarged by ``config.scale``."""
        return upscale(buffer.to_image(), self.config.scale)

    def png(self, buffer: PixelBuffer) -> bytes:
        return encode_png(buffer, self.config.scale)

    def data_uri(self, buffer: PixelBuffer) -> str:
        return to_data_uri(buffer, self.config.scale)
