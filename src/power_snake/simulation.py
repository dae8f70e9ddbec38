"""The fixed-tick simulation step."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from power_snake.events import Cue
from power_snake.grid import WallMode
from power_snake.powerups import (
    apply_magnet,
    detonate,
    launch_rocket,
    maybe_spawn_bomb,
    maybe_spawn_magnet,
    maybe_spawn_rocket,
    update_rocket,
)
from power_snake.state import GameState

logger = logging.getLogger(__name__)


def _no_cue(cue: Cue) -> None:
    pass


@dataclass(frozen=True)
class TickResult:
    """What happened during one call to :func:`advance`."""

    game_over: bool = False
    grew: bool = False
    apples_eaten: int = 0
    points: int = 0


def advance(
    state: GameState,
    now_ms: float,
    emit: Callable[[Cue], None] = _no_cue,
) -> TickResult:
    """Advance *state* by one tick at wall-clock time *now_ms*.

    Either completes the whole tick or stops at the collision check and
    reports ``game_over``; in that case the board is left untouched.

    Growth is a single flag per tick: however many pickups fire and
    however many apples the magnet takes, at most one tail pop is
    skipped, so the snake grows by at most one segment per tick. Score
    still counts every apple.
    """
    cfg = state.config
    pcfg = cfg.powerups
    snake = state.snake
    registry = state.registry
    grid = state.grid

    snake.latch_direction()
    new_head = grid.normalize(snake.next_head())

    out_of_bounds = not grid.in_bounds(new_head)
    if (grid.wall_mode == WallMode.SOLID and out_of_bounds) or snake.occupies(new_head):
        return TickResult(game_over=True)

    snake.push_head(new_head)
    state.tick += 1

    grew = False
    eaten = 0

    if registry.bomb == new_head:
        registry.bomb = None
        emit(Cue.BOMB_EXPLODE)
        detonate(registry, new_head, pcfg.bomb_apples, pcfg.bomb_radius)
        grew = True
    elif registry.remove_apple(new_head):
        eaten += 1
        emit(Cue.APPLE_EAT)
        grew = True

    if registry.magnet == new_head:
        registry.magnet = None
        state.magnet.activate(now_ms, pcfg.magnet_duration_ms)
        emit(Cue.MAGNET_PICKUP)
        logger.debug("Magnet active until %.0f ms.", state.magnet.until_ms)
        grew = True

    if registry.rocket == new_head:
        registry.rocket = None
        state.rocket = launch_rocket(
            registry, new_head, now_ms, pcfg, cfg.cell_size_px,
        )
        emit(Cue.ROCKET_PICKUP)
        grew = True

    pulled = apply_magnet(registry, state.magnet, now_ms, pcfg.magnet_radius)
    if pulled:
        eaten += len(pulled)
        emit(Cue.MAGNET_COLLECT)
        grew = True

    if not grew:
        snake.pop_tail()

    points = eaten * cfg.apple_points
    state.score += points

    if not registry.apples:
        registry.spawn_apple()

    maybe_spawn_bomb(registry, pcfg)
    maybe_spawn_magnet(registry, state.magnet, pcfg)
    maybe_spawn_rocket(registry, state.rocket, pcfg)

    if state.rocket is not None:
        state.rocket = update_rocket(
            registry, state.rocket, now_ms, pcfg, cfg.cell_size_px,
        )

    return TickResult(grew=grew, apples_eaten=eaten, points=points)
