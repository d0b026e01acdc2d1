"""Outline pass.

Every silhouette cell (``BODY``, ``COCKPIT``, ``JETS``) gets a solid outline:
its empty axis neighbours inside the left half are retagged ``SOLID``. The
sweep is a single row-major pass; cells turned solid during the sweep are
not used as new seeds.

Neighbour bounds: up requires ``y > 0``, right requires ``x < half - 1``,
left requires ``x > 0``. The down neighbour is guarded by ``y < height``
only, so a silhouette cell on the last row addresses row ``height``; such an
address lies outside the grid and is treated as a no-op.
"""

from typing import Iterator, Tuple

from infiniship.grid import CellGrid
from infiniship.types import CellType, SILHOUETTE_TYPES


def border_neighbors(grid: CellGrid, x: int, y: int) -> Iterator[Tuple[int, int]]:
    """Yield candidate outline neighbours of (x, y): up, right, down, left."""
    half = grid.width // 2
    if y > 0:
        yield x, y - 1
    if x < half - 1:
        yield x + 1, y
    if y < grid.height:
        yield x, y + 1
    if x > 0:
        yield x - 1, y


def mark_border(grid: CellGrid, x: int, y: int) -> bool:
    """Turn cell (x, y) solid if it is empty.

    Returns True if the cell was retagged. Addresses outside the grid are
    ignored.
    """
    if not grid.in_bounds(x, y):
        return False
    if grid.get(x, y) is not CellType.EMPTY:
        return False
    grid.set(x, y, CellType.SOLID)
    return True


def extend_borders(grid: CellGrid) -> CellGrid:
    """Outline all silhouette cells of ``grid`` in place and return it."""
    for y in range(grid.height):
        for x in range(grid.width // 2):
            if grid.get(x, y) not in SILHOUETTE_TYPES:
                continue
            for nx, ny in border_neighbors(grid, x, y):
                mark_border(grid, nx, ny)
    return grid
