from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from infiniship.tables import (
    BODY_CELLS,
    COCKPIT_CELLS,
    JETS_CELLS,
    SOLID_CELLS,
    SPRITE_HEIGHT,
    SPRITE_WIDTH,
)
from infiniship.types import Cell, CellType


@dataclass
class CellGrid:
    """
    Row-major grid of cell tags for a single ship.
    - ``cells[y * width + x]`` holds the tag for cell (x, y).
    - A grid is built fresh per ship, classified, outlined once and then
      discarded after rasterization.
    """

    width: int = SPRITE_WIDTH
    height: int = SPRITE_HEIGHT

    cells: List[CellType] = field(init=False)

    def __post_init__(self) -> None:
        self.cells = [CellType.EMPTY] * (self.width * self.height)

    def index(self, x: int, y: int) -> int:
        """
        Linear index of cell (x, y), as if the grid were a 1D array.
        """
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> CellType:
        self._check_bounds(x, y)
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        self._check_bounds(x, y)
        self.cells[self.index(x, y)] = cell_type

    def half_cells(self) -> Iterator[Tuple[int, int, CellType]]:
        """
        Yield ``(x, y, tag)`` for the left half of the grid in row-major order.
        """
        for y in range(self.height):
            for x in range(self.width // 2):
                yield x, y, self.cells[self.index(x, y)]

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )


def is_bit_set(seed: int, bit: int) -> bool:
    """Return True if bit ``bit`` of ``seed`` is set."""
    return (seed & (1 << bit)) != 0


def _mark(grid: CellGrid, cells: Iterable[Cell], cell_type: CellType) -> None:
    for x, y in cells:
        grid.set(x, y, cell_type)


def build_cell_grid(shape_seed: int) -> CellGrid:
    """Classify every template cell of a ship from ``shape_seed``.

    Steps run in a fixed order and later steps overwrite earlier tags:

    1. Every cell starts ``EMPTY``.
    2. ``SOLID_CELLS`` are always ``SOLID``.
    3. ``BODY_CELLS[i]`` is ``BODY`` if bit ``i`` is set, else ``EMPTY``.
    4. ``COCKPIT_CELLS[i]`` is ``SOLID`` if bit ``len(BODY_CELLS) + i`` is
       set, else ``COCKPIT``.
    5. ``JETS_CELLS`` are always ``JETS``.

    The result is a pure function of ``shape_seed``. Only the left half is
    populated; the right half stays ``EMPTY`` and is produced by mirroring.
    """
    grid = CellGrid()

    _mark(grid, SOLID_CELLS, CellType.SOLID)

    for i, (x, y) in enumerate(BODY_CELLS):
        grid.set(x, y, CellType.BODY if is_bit_set(shape_seed, i) else CellType.EMPTY)

    offset = len(BODY_CELLS)
    for i, (x, y) in enumerate(COCKPIT_CELLS):
        grid.set(
            x,
            y,
            CellType.SOLID if is_bit_set(shape_seed, offset + i) else CellType.COCKPIT,
        )

    _mark(grid, JETS_CELLS, CellType.JETS)

    return grid
