"""Static ship template tables.

Coordinate tables list ``(x, y)`` cells in the left half of the grid; the
right half is always the horizontal mirror. Only ``BODY_CELLS`` and
``COCKPIT_CELLS`` depend on the shape seed: the list position of each entry
selects the seed bit that decides it.

All tables are persistent vectors built once at import and shared read-only
by every generation.
"""

from pyrsistent import pvector
from pyrsistent.typing import PVector

from infiniship.types import Cell


SPRITE_WIDTH: int = 12
SPRITE_HEIGHT: int = 12
HALF_WIDTH: int = SPRITE_WIDTH // 2

# Transparent margin around a sprite inside a tile.
TILE_MARGIN: int = 2
TILE_SIZE: int = SPRITE_WIDTH + 2 * TILE_MARGIN

SOLID_CELLS: PVector[Cell] = pvector(
    [
        (5, 2),
        (5, 3),
        (5, 4),
        (5, 8),
    ]
)

BODY_CELLS: PVector[Cell] = pvector(
    [
        (4, 1),
        (5, 1),
        (4, 2),
        (3, 3),
        (4, 3),
        (3, 4),
        (4, 4),
        (2, 5),
        (3, 5),
        (4, 5),
        (1, 6),
        (2, 6),
        (3, 6),
        (1, 7),
        (2, 7),
        (3, 7),
        (1, 8),
        (2, 8),
        (3, 8),
        (1, 9),
        (2, 9),
        (3, 9),
        (4, 9),
        (1, 10),
        (2, 10),
        (5, 10),  # shared with JETS_CELLS, jets take precedence
    ]
)

COCKPIT_CELLS: PVector[Cell] = pvector(
    [
        (4, 6),
        (5, 6),
        (4, 7),
        (5, 7),
        (4, 8),
        (5, 5),
        (4, 10),
    ]
)

JETS_CELLS: PVector[Cell] = pvector(
    [
        (5, 9),
        (5, 10),
    ]
)

# Per-column brightness bias; only the first HALF_WIDTH entries are consulted.
SPRITE_BRIGHTNESS: PVector[int] = pvector(
    [40, 70, 100, 130, 160, 190, 220, 220, 190, 160, 130, 100, 70, 40]
)

# Per-row saturation bias.
SPRITE_SATURATION: PVector[int] = pvector(
    [40, 60, 80, 100, 80, 60, 80, 100, 120, 100, 80, 60]
)
