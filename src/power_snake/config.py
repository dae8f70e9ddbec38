"""Game settings and power-up tuning."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from power_snake.grid import WallMode

logger = logging.getLogger(__name__)


class Difficulty(enum.Enum):
    """Difficulty presets; each maps to a simulation tick interval."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


TICK_INTERVALS_MS: dict[Difficulty, int] = {
    Difficulty.EASY: 260,
    Difficulty.NORMAL: 210,
    Difficulty.HARD: 160,
}


@dataclass(frozen=True)
class PowerUpConfig:
    """Spawn chances, timers, and sizes for bomb, magnet, and rocket."""

    # Shared
    min_spawn_distance: float = 4.0

    # Bomb
    bomb_chance: float = 0.02
    bomb_apples: int = 14
    bomb_radius: int = 4

    # Magnet
    magnet_chance: float = 0.015
    magnet_duration_ms: int = 15_000
    magnet_radius: float = 3.0

    # Rocket
    rocket_chance: float = 0.012
    rocket_duration_ms: int = 10_000
    rocket_drops: int = 40
    rocket_drop_interval_ms: int = 250
    rocket_speed_px: float = 240.0
    rocket_steer_chance: float = 0.1
    rocket_steer_max: float = 0.2
    rocket_margin_cells: float = 0.4

    def __post_init__(self) -> None:
        for name in ("bomb_chance", "magnet_chance", "rocket_chance",
                     "rocket_steer_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}.")
        if self.bomb_radius < 2:
            raise ValueError("bomb_radius must be at least 2.")
        if self.rocket_drop_interval_ms <= 0:
            raise ValueError("rocket_drop_interval_ms must be positive.")


@dataclass(frozen=True)
class GameConfig:
    """Session configuration, applied when a session is (re)initialised."""

    difficulty: Difficulty = Difficulty.NORMAL
    walls: WallMode = WallMode.SOLID
    grid_width: int = 25
    grid_height: int = 25
    cell_size_px: int = 24
    initial_length: int = 3
    apple_points: int = 10
    sound: bool = True
    powerups: PowerUpConfig = field(default_factory=PowerUpConfig)

    def __post_init__(self) -> None:
        if self.grid_width < 8 or self.grid_height < 8:
            raise ValueError("grid_width and grid_height must each be at least 8.")
        if self.cell_size_px < 1:
            raise ValueError("cell_size_px must be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.initial_length > self.grid_width // 3 + 3:
            raise ValueError(
                "initial_length does not fit the configured grid; "
                "increase grid_width or reduce initial_length."
            )

    @property
    def tick_interval_ms(self) -> int:
        return TICK_INTERVALS_MS[self.difficulty]

    def to_dict(self) -> dict:
        """Serialize to a plain dict (enums become their values)."""
        d = asdict(self)
        d["difficulty"] = self.difficulty.value
        d["walls"] = self.walls.value
        return d

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        powerup_data = data.pop("powerups", {})
        data["powerups"] = PowerUpConfig(**powerup_data)
        if "difficulty" in data:
            data["difficulty"] = Difficulty(data["difficulty"])
        if "walls" in data:
            data["walls"] = WallMode(data["walls"])
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
