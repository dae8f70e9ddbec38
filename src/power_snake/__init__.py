"""Power Snake core: grid snake with bomb, magnet, and rocket power-ups."""

from power_snake.config import Difficulty, GameConfig, PowerUpConfig
from power_snake.engine import GameEngine, SessionPhase
from power_snake.entities import EntityRegistry
from power_snake.events import Cue, CueBus
from power_snake.grid import Grid, WallMode
from power_snake.simulation import TickResult, advance
from power_snake.snake import Direction, Snake
from power_snake.state import GameState

__all__ = [
    "Cue",
    "CueBus",
    "Difficulty",
    "Direction",
    "EntityRegistry",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "PowerUpConfig",
    "SessionPhase",
    "Snake",
    "TickResult",
    "WallMode",
    "advance",
]
