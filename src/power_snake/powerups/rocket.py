"""Rocket pickup and the free-flying rocket that rains apples."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from power_snake.config import PowerUpConfig
    from power_snake.entities import EntityRegistry
    from power_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)


@dataclass
class ActiveRocket:
    """A rocket flying in continuous pixel space over the grid.

    All timestamps are absolute milliseconds on the tick clock.
    """

    x: float
    y: float
    vx: float
    vy: float
    until_ms: float
    drops_left: int
    next_drop_ms: float
    last_ms: float

    @property
    def heading(self) -> float:
        """Direction of travel in radians."""
        return math.atan2(self.vy, self.vx)

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "heading": self.heading,
            "drops_left": self.drops_left,
            "until_ms": self.until_ms,
        }


def maybe_spawn_rocket(registry: EntityRegistry, active: ActiveRocket | None,
                       cfg: PowerUpConfig) -> Cell | None:
    """Roll the per-tick rocket spawn chance while no rocket exists at all."""
    if registry.rocket is not None or active is not None:
        return None
    if registry.rng.random() >= cfg.rocket_chance:
        return None
    pos = registry.random_spawn_cell(cfg.min_spawn_distance)
    if pos is not None:
        registry.rocket = pos
        logger.debug("Rocket pickup spawned at %s.", pos)
    return pos


def cell_center(cell: Cell, cell_size: float) -> tuple[float, float]:
    """Pixel position of a cell's center."""
    return (cell[0] * cell_size + cell_size / 2,
            cell[1] * cell_size + cell_size / 2)


def nearest_cell(grid: Grid, x: float, y: float, cell_size: float) -> Cell:
    """Map a pixel position to the nearest cell, clamped to the grid."""
    cx = math.floor((x - cell_size / 2) / cell_size + 0.5)
    cy = math.floor((y - cell_size / 2) / cell_size + 0.5)
    return (max(0, min(grid.width - 1, cx)),
            max(0, min(grid.height - 1, cy)))


def launch_rocket(
    registry: EntityRegistry,
    cell: Cell,
    now_ms: float,
    cfg: PowerUpConfig,
    cell_size: float,
) -> ActiveRocket:
    """Create the flying rocket from a collected pickup at *cell*."""
    x, y = cell_center(cell, cell_size)
    angle = registry.rng.random() * math.pi * 2
    rocket = ActiveRocket(
        x=x,
        y=y,
        vx=math.cos(angle) * cfg.rocket_speed_px,
        vy=math.sin(angle) * cfg.rocket_speed_px,
        until_ms=now_ms + cfg.rocket_duration_ms,
        drops_left=cfg.rocket_drops,
        next_drop_ms=now_ms + cfg.rocket_drop_interval_ms,
        last_ms=now_ms,
    )
    logger.debug("Rocket launched from %s heading %.2f rad.", cell, angle)
    return rocket


def _bounce(pos: float, vel: float, low: float, high: float) -> tuple[float, float]:
    if pos < low:
        return low, -vel
    if pos > high:
        return high, -vel
    return pos, vel


def update_rocket(
    registry: EntityRegistry,
    rocket: ActiveRocket,
    now_ms: float,
    cfg: PowerUpConfig,
    cell_size: float,
) -> ActiveRocket | None:
    """Advance the rocket to *now_ms*, dropping any apples that are due.

    Returns the rocket, or ``None`` once its lifetime has run out.
    """
    rng = registry.rng
    grid = registry.grid

    dt = (now_ms - rocket.last_ms) / 1000.0
    rocket.last_ms = now_ms
    rocket.x += rocket.vx * dt
    rocket.y += rocket.vy * dt

    margin = cell_size * cfg.rocket_margin_cells
    rocket.x, rocket.vx = _bounce(
        rocket.x, rocket.vx, margin, grid.width * cell_size - margin,
    )
    rocket.y, rocket.vy = _bounce(
        rocket.y, rocket.vy, margin, grid.height * cell_size - margin,
    )

    if rng.random() < cfg.rocket_steer_chance:
        turn = (rng.random() * 2 - 1) * cfg.rocket_steer_max
        speed = rocket.speed
        angle = rocket.heading + turn
        rocket.vx = math.cos(angle) * speed
        rocket.vy = math.sin(angle) * speed

    while rocket.drops_left > 0 and now_ms >= rocket.next_drop_ms:
        cx, cy = nearest_cell(grid, rocket.x, rocket.y, cell_size)
        drop = grid.normalize((
            cx + int(rng.integers(-1, 2)),
            cy + int(rng.integers(-1, 2)),
        ))
        # add_apple rejects out-of-bounds and occupied cells.
        registry.add_apple(drop)
        rocket.drops_left -= 1
        rocket.next_drop_ms += cfg.rocket_drop_interval_ms

    if now_ms >= rocket.until_ms:
        logger.debug("Rocket expired with %d drops unused.", rocket.drops_left)
        return None
    return rocket
