"""Entity registry: apples and ground pickups, with occupancy queries."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

import numpy as np

from power_snake.grid import Cell, Grid
from power_snake.snake import Snake

logger = logging.getLogger(__name__)

# Rejection-sampling attempts before falling back to a full scan.
_MAX_RANDOM_ATTEMPTS = 64


class EntityRegistry:
    """Tracks every grid-aligned entity except the active rocket.

    Apples are kept in insertion order so that seeded runs stay
    reproducible; a cell never holds more than one apple. At most one
    bomb, one magnet pickup, and one rocket pickup exist at any time.
    """

    def __init__(
        self,
        grid: Grid,
        snake: Snake,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.snake = snake
        self.rng = rng if rng is not None else np.random.default_rng()
        self.apples: list[Cell] = []
        self.bomb: Cell | None = None
        self.magnet: Cell | None = None
        self.rocket: Cell | None = None

    def _occupied(self) -> Iterator[Cell]:
        yield from self.snake.body
        yield from self.apples
        for pickup in (self.bomb, self.magnet, self.rocket):
            if pickup is not None:
                yield pickup

    def is_occupied(self, cell: Cell) -> bool:
        """True if a snake segment, apple, or pickup sits on *cell*."""
        if self.snake.occupies(cell):
            return True
        if cell in (self.bomb, self.magnet, self.rocket):
            return True
        return cell in self.apples

    def random_free_cell(self) -> Cell | None:
        """Draw a uniformly random unoccupied cell.

        Tries a bounded number of random draws, then scans the whole grid.
        Returns ``None`` when the board is full.
        """
        for _ in range(_MAX_RANDOM_ATTEMPTS):
            candidate = (
                int(self.rng.integers(self.grid.width)),
                int(self.rng.integers(self.grid.height)),
            )
            if not self.is_occupied(candidate):
                return candidate

        free = self.grid.free_cells(self._occupied())
        if not free:
            logger.warning("No free cell left on the %dx%d grid.",
                           self.grid.width, self.grid.height)
            return None
        return free[int(self.rng.integers(len(free)))]

    def random_spawn_cell(self, min_distance: float) -> Cell | None:
        """Pick a free cell for a pickup, or ``None`` if it lands too close.

        A single cell is drawn; when it is within *min_distance* of the
        head the spawn is cancelled rather than redrawn.
        """
        pos = self.random_free_cell()
        if pos is None:
            return None
        hx, hy = self.snake.head
        if math.hypot(pos[0] - hx, pos[1] - hy) > min_distance:
            return pos
        return None

    def add_apple(self, cell: Cell) -> bool:
        """Place an apple on a free in-bounds cell. Returns True if placed."""
        if not self.grid.in_bounds(cell) or self.is_occupied(cell):
            return False
        self.apples.append(cell)
        return True

    def spawn_apple(self) -> Cell | None:
        """Place an apple on a random free cell."""
        pos = self.random_free_cell()
        if pos is not None:
            self.apples.append(pos)
        return pos

    def remove_apple(self, cell: Cell) -> bool:
        """Remove an apple at the given position. Returns True if removed."""
        if cell in self.apples:
            self.apples.remove(cell)
            return True
        return False

    def take_apples_within(self, center: Cell, radius: float) -> list[Cell]:
        """Remove and return every apple within Euclidean *radius* of *center*."""
        cx, cy = center
        taken = [a for a in self.apples
                 if math.hypot(a[0] - cx, a[1] - cy) <= radius]
        if taken:
            self.apples = [a for a in self.apples if a not in taken]
        return taken

    def to_dict(self) -> dict:
        """Serialize entity positions to a dictionary."""
        def _cell(c: Cell | None) -> list[int] | None:
            return list(c) if c is not None else None

        return {
            "apples": [list(a) for a in self.apples],
            "bomb": _cell(self.bomb),
            "magnet": _cell(self.magnet),
            "rocket": _cell(self.rocket),
        }
