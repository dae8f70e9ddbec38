"""Snake representation and direction handling."""

from __future__ import annotations

import enum
from collections import deque

from power_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_vector(cls, dx: int, dy: int) -> Direction:
        """Look up the direction for an axis-aligned unit vector.

        Raises ``ValueError`` for anything else, e.g. ``(1, 1)`` or ``(0, 0)``.
        """
        try:
            return cls((dx, dy))
        except ValueError:
            raise ValueError(
                f"({dx}, {dy}) is not an axis-aligned unit vector."
            ) from None

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``direction`` is the
    heading applied on the last tick, ``pending_direction`` the one latched
    from input for the next tick.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self.body: deque[Cell] = deque()
        for i in range(length):
            self.body.append((start_x - dx * i, start_y - dy * i))
        self.direction = direction
        self.pending_direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def request_turn(self, new_direction: Direction) -> bool:
        """Latch a direction for the next tick, ignoring 180° reversals.

        The reversal check is against the direction applied on the last
        tick, so the most recent valid request before a tick wins.
        """
        if new_direction == _OPPOSITES[self.direction]:
            return False
        self.pending_direction = new_direction
        return True

    def latch_direction(self) -> Direction:
        """Apply the pending direction; called once at each tick boundary."""
        self.direction = self.pending_direction
        return self.direction

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def push_head(self, cell: Cell) -> None:
        self.body.appendleft(cell)

    def pop_tail(self) -> Cell:
        """Remove and return the tail segment."""
        return self.body.pop()

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": list(self.direction.value),
            "length": len(self.body),
        }
