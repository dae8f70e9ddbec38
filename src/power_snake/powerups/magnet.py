"""Magnet pickup and its timed auto-collect effect."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from power_snake.config import PowerUpConfig
    from power_snake.entities import EntityRegistry
    from power_snake.grid import Cell

logger = logging.getLogger(__name__)


@dataclass
class MagnetEffect:
    """The aura granted by the magnet pickup.

    ``until_ms`` is an absolute deadline on the tick clock, not a countdown.
    """

    active: bool = False
    until_ms: float = 0.0

    def activate(self, now_ms: float, duration_ms: float) -> None:
        self.active = True
        self.until_ms = now_ms + duration_ms

    def deactivate(self) -> None:
        self.active = False

    def to_dict(self) -> dict:
        return {"active": self.active, "until_ms": self.until_ms}


def maybe_spawn_magnet(registry: EntityRegistry, effect: MagnetEffect,
                       cfg: PowerUpConfig) -> Cell | None:
    """Roll the per-tick magnet spawn chance while neither item nor aura exist."""
    if registry.magnet is not None or effect.active:
        return None
    if registry.rng.random() >= cfg.magnet_chance:
        return None
    pos = registry.random_spawn_cell(cfg.min_spawn_distance)
    if pos is not None:
        registry.magnet = pos
        logger.debug("Magnet spawned at %s.", pos)
    return pos


def apply_magnet(
    registry: EntityRegistry,
    effect: MagnetEffect,
    now_ms: float,
    radius: float,
) -> list[Cell]:
    """Run one tick of the aura and return the apples it collected.

    Once the deadline is reached the aura switches off and collects
    nothing on that tick.
    """
    if not effect.active:
        return []
    if now_ms >= effect.until_ms:
        effect.deactivate()
        logger.debug("Magnet expired at %.0f ms.", now_ms)
        return []
    return registry.take_apples_within(registry.snake.head, radius)
