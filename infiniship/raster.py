"""Pixel buffers and grid rasterization.

``PixelBuffer`` is the default raster surface: a ``(height, width, 4)``
``uint8`` NumPy array holding RGBA bytes row-major (stride ``width * 4``).
Stores clamp each channel to ``[0, 255]``, so out-of-range colors produced
by the synthesizer saturate instead of wrapping.

Any object satisfying :class:`RasterSurface` can be passed to
:func:`rasterize` instead.
"""

from typing import Optional, Protocol, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from infiniship.color import (
    COLOR_TRANSPARENT,
    COLOR_TRANSPARENT_BLACK,
    RGBAColor,
    cell_color,
)
from infiniship.grid import CellGrid

UInt8Array = npt.NDArray[np.uint8]
Pixel = Tuple[int, int, int, int]


class RasterSurface(Protocol):
    """Minimal write target for rasterization."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def write_pixel(self, x: int, y: int, color: RGBAColor) -> None: ...


class PixelBuffer:
    data: UInt8Array

    def __init__(
        self, width: int, height: int, fill: RGBAColor = COLOR_TRANSPARENT_BLACK
    ):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid buffer size: {width}x{height}")
        self.data = np.empty((height, width, 4), dtype=np.uint8)
        self.fill(fill)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def fill(self, color: RGBAColor) -> None:
        self.data[...] = _clamp(color)

    def write_pixel(self, x: int, y: int, color: RGBAColor) -> None:
        self._check_bounds(x, y)
        self.data[y, x] = _clamp(color)

    def pixel(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b, a = (int(c) for c in self.data[y, x])
        return (r, g, b, a)

    def blit(self, source: "PixelBuffer", x: int, y: int) -> None:
        """
        Copy ``source`` into this buffer with its top-left corner at (x, y).
        Destination pixels are replaced, not alpha-blended.
        """
        if (
            x < 0
            or y < 0
            or x + source.width > self.width
            or y + source.height > self.height
        ):
            raise ValueError(
                f"Cannot place {source.width}x{source.height} buffer at {(x, y)} "
                f"in {self.width}x{self.height} buffer"
            )
        self.data[y : y + source.height, x : x + source.width] = source.data

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.data)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )


def _clamp(color: RGBAColor) -> UInt8Array:
    return np.clip(np.array(color.as_tuple()), 0, 255).astype(np.uint8)


def rasterize(
    grid: CellGrid,
    color_seed: int,
    monochrome: bool = False,
    surface: Optional[RasterSurface] = None,
) -> RasterSurface:
    """Paint ``grid`` onto ``surface`` and its horizontal mirror.

    Walks the left half of the grid row-major; each cell's color is written
    at (x, y) and at (width - x - 1, y).

    Arguments:
        grid: Classified and outlined cell grid.
        color_seed: Bit source for hue bytes.
        monochrome: Render with black / white only.
        surface: Target surface of at least ``grid.width x grid.height``. A
            new ``PixelBuffer`` pre-filled with transparent white is
            allocated when omitted.

    Returns:
        RasterSurface: The surface written to.
    """
    target: RasterSurface = (
        surface
        if surface is not None
        else PixelBuffer(grid.width, grid.height, fill=COLOR_TRANSPARENT)
    )
    for x, y, cell_type in grid.half_cells():
        color = cell_color(cell_type, x, y, color_seed, monochrome)
        target.write_pixel(x, y, color)
        target.write_pixel(grid.width - x - 1, y, color)
    return target
