"""Common type aliases and enumerations.

``CellType`` tags every logical cell of a ship grid. ``SeedFn`` is the
extension point used to inject the randomness source that produces seeds.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple


# Logical grid coordinate (x, y)
Cell = Tuple[int, int]

SeedFn = Callable[[], int]


class CellType(StrEnum):
    """Classification of a single logical cell."""

    EMPTY = auto()
    SOLID = auto()
    BODY = auto()
    COCKPIT = auto()
    JETS = auto()


# Cells that make up the ship proper (as opposed to outline or background).
SILHOUETTE_TYPES: Tuple[CellType, ...] = (
    CellType.BODY,
    CellType.COCKPIT,
    CellType.JETS,
)
