"""Bomb, magnet, and rocket power-ups."""

from power_snake.powerups.bomb import detonate, maybe_spawn_bomb
from power_snake.powerups.magnet import MagnetEffect, apply_magnet, maybe_spawn_magnet
from power_snake.powerups.rocket import (
    ActiveRocket,
    launch_rocket,
    maybe_spawn_rocket,
    update_rocket,
)

__all__ = [
    "ActiveRocket",
    "MagnetEffect",
    "apply_magnet",
    "detonate",
    "launch_rocket",
    "maybe_spawn_bomb",
    "maybe_spawn_magnet",
    "maybe_spawn_rocket",
    "update_rocket",
]
