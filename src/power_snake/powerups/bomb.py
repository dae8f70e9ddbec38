"""Bomb pickup: spawns rarely and bursts into a ring of apples."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from power_snake.config import PowerUpConfig
    from power_snake.entities import EntityRegistry
    from power_snake.grid import Cell

logger = logging.getLogger(__name__)

# Random angular jitter added to each evenly spaced explosion ray, in radians.
_ANGLE_JITTER = 0.4


def maybe_spawn_bomb(registry: EntityRegistry, cfg: PowerUpConfig) -> Cell | None:
    """Roll the per-tick bomb spawn chance.

    Needs no bomb on the board and at least one apple.
    """
    if registry.bomb is not None:
        return None
    if registry.rng.random() >= cfg.bomb_chance or not registry.apples:
        return None
    pos = registry.random_spawn_cell(cfg.min_spawn_distance)
    if pos is not None:
        registry.bomb = pos
        logger.debug("Bomb spawned at %s.", pos)
    return pos


def detonate(
    registry: EntityRegistry,
    origin: Cell,
    count: int,
    radius: int,
) -> list[Cell]:
    """Scatter up to *count* apples around *origin*.

    Each candidate follows its own ray at ``2π·i/count`` plus jitter, at a
    random distance in ``[2, radius]``. Candidates are mapped through
    the wall mode; those out of bounds or on an occupied cell are dropped.
    Returns the cells that received an apple.
    """
    rng = registry.rng
    ox, oy = origin
    placed: list[Cell] = []
    for i in range(count):
        angle = (i / count) * math.pi * 2 + rng.random() * _ANGLE_JITTER
        dist = 2 + int(rng.integers(radius - 1))
        cell = registry.grid.normalize((
            ox + round(math.cos(angle) * dist),
            oy + round(math.sin(angle) * dist),
        ))
        if registry.add_apple(cell):
            placed.append(cell)
    logger.debug("Bomb at %s scattered %d apples.", origin, len(placed))
    return placed
