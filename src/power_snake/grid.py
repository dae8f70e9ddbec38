"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]


class WallMode(enum.Enum):
    """Defines behavior when the snake reaches the grid boundary."""

    SOLID = "solid"
    WRAP = "wrap"


class Grid:
    """Fixed-size discrete coordinate space.

    Coordinates are ``(x, y)`` pairs with ``0 <= x < width`` and
    ``0 <= y < height``. The grid holds no entities itself; it only
    answers boundary questions and builds occupancy masks on demand.
    """

    def __init__(
        self,
        width: int = 25,
        height: int = 25,
        wall_mode: WallMode = WallMode.SOLID,
    ) -> None:
        if width < 8 or height < 8:
            raise ValueError("Grid dimensions must be at least 8×8.")
        self.width = width
        self.height = height
        self.wall_mode = wall_mode

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, cell: Cell) -> Cell:
        """Wrap coordinates around the grid edges."""
        x, y = cell
        return x % self.width, y % self.height

    def normalize(self, cell: Cell, wall_mode: WallMode | None = None) -> Cell:
        """Apply the wall mode: wrap in ``WRAP``, identity in ``SOLID``.

        Defaults to the grid's own wall mode.
        """
        mode = wall_mode if wall_mode is not None else self.wall_mode
        if mode == WallMode.WRAP:
            return self.wrap(cell)
        return cell

    def occupancy(self, cells: Iterable[Cell]) -> np.ndarray:
        """Return a ``(height, width)`` boolean mask of the given cells."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in cells:
            if self.in_bounds((x, y)):
                mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return every cell not present in *occupied*, row by row."""
        ys, xs = np.where(~self.occupancy(occupied))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid settings to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "walls": self.wall_mode.value,
        }
