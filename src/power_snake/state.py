"""The session-owned aggregate mutated by the simulation step."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from power_snake.config import GameConfig
from power_snake.entities import EntityRegistry
from power_snake.grid import Grid
from power_snake.powerups.magnet import MagnetEffect
from power_snake.powerups.rocket import ActiveRocket
from power_snake.snake import Direction, Snake


@dataclass
class GameState:
    """Everything one game session owns.

    Built fresh by :meth:`new` on every (re)initialisation; nothing here
    survives a restart.
    """

    config: GameConfig
    grid: Grid
    snake: Snake
    registry: EntityRegistry
    magnet: MagnetEffect = field(default_factory=MagnetEffect)
    rocket: ActiveRocket | None = None
    score: int = 0
    tick: int = 0

    @classmethod
    def new(
        cls,
        config: GameConfig,
        rng: np.random.Generator | None = None,
    ) -> GameState:
        """Create the opening position: a short snake heading right and one apple."""
        grid = Grid(config.grid_width, config.grid_height, config.walls)
        start_x = config.grid_width // 3 + 2
        start_y = config.grid_height // 2
        snake = Snake(start_x, start_y, Direction.RIGHT, length=config.initial_length)
        registry = EntityRegistry(grid, snake, rng=rng)
        registry.spawn_apple()
        return cls(config=config, grid=grid, snake=snake, registry=registry)

    @property
    def rng(self) -> np.random.Generator:
        return self.registry.rng

    def to_dict(self) -> dict:
        """Serialize the board to a dictionary."""
        return {
            "tick": self.tick,
            "score": self.score,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            **self.registry.to_dict(),
            "magnet_effect": self.magnet.to_dict(),
            "active_rocket": self.rocket.to_dict() if self.rocket else None,
        }
