"""Cell color synthesis.

Maps a cell tag and its grid position, together with the color seed, to an
RGBA color. Hue comes from a byte of the color seed, saturation from the
row bias table and brightness from the column bias table.

Hue is passed to :func:`convert_hsv_to_rgb` as ``360 * byte / 256``; the
conversion reduces it through ``floor`` and ``mod 6`` so any non-negative
magnitude yields a well-defined cyclic result. Cockpit and jets brightness
are offset by +/-40 and are not clamped, so channels may leave ``[0, 255]``.
Clamping only happens when a color is stored in a
:class:`infiniship.raster.PixelBuffer`.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from infiniship.tables import SPRITE_BRIGHTNESS, SPRITE_SATURATION
from infiniship.types import CellType


@dataclass(frozen=True)
class RGBAColor:
    """RGBA color with integer channels, nominally 0-255."""

    r: int
    g: int
    b: int
    a: int

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


COLOR_BLACK = RGBAColor(0, 0, 0, 255)
COLOR_WHITE = RGBAColor(255, 255, 255, 255)
COLOR_TRANSPARENT = RGBAColor(255, 255, 255, 0)
COLOR_TRANSPARENT_BLACK = RGBAColor(0, 0, 0, 0)

JETS_SATURATION: int = 10
ACCENT_BRIGHTNESS: int = 40


def convert_hsv_to_rgb(h: float, s: float, v: float) -> RGBAColor:
    """
    HSV->RGBA for scalar inputs. Products are floored, never clamped.
    """
    if s == 0:
        gray = math.floor(v * 255)
        return RGBAColor(gray, gray, gray, 255)

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i % 6]

    return RGBAColor(
        math.floor(r * 255),
        math.floor(g * 255),
        math.floor(b * 255),
        255,
    )


def hue_from_byte(hue_byte: int) -> float:
    return 360 * hue_byte / 256


def body_hue_byte(color_seed: int, y: int) -> int:
    """Select the hue byte for a body cell by row band."""
    if y < 6:
        return (color_seed >> 8) & 0xFF
    if y < 9:
        return (color_seed >> 16) & 0xFF
    return (color_seed >> 24) & 0xFF


def body_color(color_seed: int, x: int, y: int) -> RGBAColor:
    saturation = SPRITE_SATURATION[y] / 255
    brightness = SPRITE_BRIGHTNESS[x] / 255
    hue = hue_from_byte(body_hue_byte(color_seed, y))
    return convert_hsv_to_rgb(hue, saturation, brightness)


def cockpit_color(color_seed: int, x: int, y: int) -> RGBAColor:
    saturation = SPRITE_SATURATION[y] / 255
    brightness = (SPRITE_BRIGHTNESS[x] + ACCENT_BRIGHTNESS) / 255
    hue = hue_from_byte(color_seed & 0xFF)
    return convert_hsv_to_rgb(hue, saturation, brightness)


def jets_color(color_seed: int, x: int) -> RGBAColor:
    saturation = JETS_SATURATION / 255
    brightness = (SPRITE_BRIGHTNESS[x] - ACCENT_BRIGHTNESS) / 255
    hue = hue_from_byte(color_seed & 0xFF)
    return convert_hsv_to_rgb(hue, saturation, brightness)


def cell_color(
    cell_type: CellType, x: int, y: int, color_seed: int, monochrome: bool = False
) -> RGBAColor:
    """Resolve the color of cell (x, y).

    Arguments:
        cell_type: Tag of the cell.
        x: Column in the left half of the grid.
        y: Row.
        color_seed: Bit source for hue bytes.
        monochrome: Render with black / white only.

    Returns:
        RGBAColor: Opaque black for outline cells, transparent black for
        empty cells, white / black in monochrome mode, otherwise a
        seed-derived color.
    """
    if cell_type is CellType.SOLID:
        return COLOR_BLACK
    if cell_type is CellType.BODY:
        return COLOR_WHITE if monochrome else body_color(color_seed, x, y)
    if cell_type is CellType.COCKPIT:
        return COLOR_WHITE if monochrome else cockpit_color(color_seed, x, y)
    if cell_type is CellType.JETS:
        return COLOR_BLACK if monochrome else jets_color(color_seed, x)
    return COLOR_TRANSPARENT_BLACK
