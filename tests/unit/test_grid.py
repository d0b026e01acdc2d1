# tests/unit/test_grid.py

import pytest

from infiniship.grid import CellGrid, build_cell_grid, is_bit_set
from infiniship.tables import (
    BODY_CELLS,
    COCKPIT_CELLS,
    HALF_WIDTH,
    JETS_CELLS,
    SOLID_CELLS,
    SPRITE_HEIGHT,
    SPRITE_WIDTH,
)
from infiniship.types import CellType
from tests.test_utils import (
    SAMPLE_SHAPE_SEEDS,
    cells_of_type,
    grid_rows,
    template_cells,
)


def test_new_grid_is_all_empty() -> None:
    grid = CellGrid()
    assert grid.width == SPRITE_WIDTH
    assert grid.height == SPRITE_HEIGHT
    assert len(grid.cells) == SPRITE_WIDTH * SPRITE_HEIGHT
    assert all(cell is CellType.EMPTY for cell in grid.cells)


def test_index_is_row_major() -> None:
    grid = CellGrid()
    assert grid.index(0, 0) == 0
    assert grid.index(3, 0) == 3
    assert grid.index(0, 1) == SPRITE_WIDTH
    assert grid.index(5, 10) == 10 * SPRITE_WIDTH + 5


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (12, 0), (0, 12)])
def test_get_set_out_of_bounds_raises(x: int, y: int) -> None:
    grid = CellGrid()
    with pytest.raises(IndexError):
        grid.get(x, y)
    with pytest.raises(IndexError):
        grid.set(x, y, CellType.SOLID)


def test_set_then_get() -> None:
    grid = CellGrid()
    grid.set(2, 7, CellType.COCKPIT)
    assert grid.get(2, 7) is CellType.COCKPIT
    assert grid_rows(grid)[7][2] is CellType.COCKPIT


def test_half_cells_covers_left_half_row_major() -> None:
    grid = CellGrid()
    coords = [(x, y) for x, y, _ in grid.half_cells()]
    assert len(coords) == HALF_WIDTH * SPRITE_HEIGHT
    assert coords[:HALF_WIDTH] == [(x, 0) for x in range(HALF_WIDTH)]
    assert coords[HALF_WIDTH] == (0, 1)


@pytest.mark.parametrize(
    "seed, bit, expected",
    [
        (0, 0, False),
        (1, 0, True),
        (0b100, 2, True),
        (0b100, 1, False),
        (1 << 31, 31, True),
        (0xFFFFFFFF, 32, False),
    ],
)
def test_is_bit_set(seed: int, bit: int, expected: bool) -> None:
    assert is_bit_set(seed, bit) is expected


def test_template_tables_stay_in_left_half() -> None:
    for x, y in template_cells():
        assert 0 <= x < HALF_WIDTH
        assert 0 <= y < SPRITE_HEIGHT


def test_shape_seed_zero() -> None:
    grid = build_cell_grid(0)
    for x, y in BODY_CELLS:
        expected = CellType.JETS if (x, y) in JETS_CELLS else CellType.EMPTY
        assert grid.get(x, y) is expected
    for x, y in COCKPIT_CELLS:
        assert grid.get(x, y) is CellType.COCKPIT
    for x, y in JETS_CELLS:
        assert grid.get(x, y) is CellType.JETS
    assert cells_of_type(grid, CellType.SOLID) == set(SOLID_CELLS)


def test_all_body_bits_set() -> None:
    grid = build_cell_grid((1 << len(BODY_CELLS)) - 1)
    for x, y in BODY_CELLS:
        if (x, y) in JETS_CELLS:
            continue
        assert grid.get(x, y) is CellType.BODY
    # Cockpit bits sit above the body bits and are all clear.
    for x, y in COCKPIT_CELLS:
        assert grid.get(x, y) is CellType.COCKPIT


def test_body_cell_follows_its_own_bit() -> None:
    for i, (x, y) in enumerate(BODY_CELLS):
        if (x, y) in JETS_CELLS:
            continue
        grid = build_cell_grid(1 << i)
        assert cells_of_type(grid, CellType.BODY) == {(x, y)}


def test_cockpit_bits_follow_body_bits() -> None:
    offset = len(BODY_CELLS)
    for i, (x, y) in enumerate(COCKPIT_CELLS):
        grid = build_cell_grid(1 << (offset + i))
        assert grid.get(x, y) is CellType.SOLID
        others = [c for c in COCKPIT_CELLS if c != (x, y)]
        assert all(grid.get(cx, cy) is CellType.COCKPIT for cx, cy in others)
        assert cells_of_type(grid, CellType.BODY) == set()


def test_all_cockpit_bits_set() -> None:
    seed = ((1 << len(COCKPIT_CELLS)) - 1) << len(BODY_CELLS)
    grid = build_cell_grid(seed)
    assert cells_of_type(grid, CellType.COCKPIT) == set()
    assert set(COCKPIT_CELLS) <= cells_of_type(grid, CellType.SOLID)


@pytest.mark.parametrize("seed", SAMPLE_SHAPE_SEEDS)
def test_jets_always_win(seed: int) -> None:
    grid = build_cell_grid(seed)
    for x, y in JETS_CELLS:
        assert grid.get(x, y) is CellType.JETS


@pytest.mark.parametrize("seed", SAMPLE_SHAPE_SEEDS)
def test_solid_cells_always_solid(seed: int) -> None:
    grid = build_cell_grid(seed)
    for x, y in SOLID_CELLS:
        assert grid.get(x, y) is CellType.SOLID


@pytest.mark.parametrize("seed", SAMPLE_SHAPE_SEEDS)
def test_right_half_untouched(seed: int) -> None:
    grid = build_cell_grid(seed)
    for y in range(grid.height):
        for x in range(HALF_WIDTH, grid.width):
            assert grid.get(x, y) is CellType.EMPTY


@pytest.mark.parametrize("seed", SAMPLE_SHAPE_SEEDS)
def test_build_is_deterministic(seed: int) -> None:
    assert build_cell_grid(seed).cells == build_cell_grid(seed).cells


def test_bits_above_cockpit_are_ignored() -> None:
    high = 1 << (len(BODY_CELLS) + len(COCKPIT_CELLS))
    assert build_cell_grid(0x1234 | high).cells == build_cell_grid(0x1234).cells


def test_grids_are_not_shared() -> None:
    first = build_cell_grid(0)
    first.set(0, 0, CellType.SOLID)
    assert build_cell_grid(0).get(0, 0) is CellType.EMPTY
