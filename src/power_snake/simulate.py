"""Headless autopilot runs for soak testing and throughput measurement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from power_snake.config import GameConfig
from power_snake.engine import GameEngine, ScoreStore, SessionPhase
from power_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS: list[Direction] = list(Direction)


@dataclass
class SimulationReport:
    """Results from a batch of autopilot games."""

    total_games: int
    total_ticks: int
    wall_time_seconds: float
    ticks_per_second: float
    mean_score: float
    max_score: int
    best_score: int

    def summary(self) -> str:
        return (
            f"Simulated {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s | "
            f"mean score {self.mean_score:.1f}, max {self.max_score}, "
            f"best {self.best_score}"
        )


def simulate_games(
    *,
    num_games: int = 10,
    max_ticks: int = 500,
    config: GameConfig | None = None,
    seed: int | None = 42,
    store: ScoreStore | None = None,
    turn_prob: float = 0.2,
) -> SimulationReport:
    """Play *num_games* games with a random-turning autopilot.

    Time is synthetic: each tick advances the clock by exactly one tick
    interval, so timed power-ups behave as in real play without waiting.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    engine = GameEngine(config=config, store=store, seed=seed)
    rng = np.random.default_rng(None if seed is None else seed + 1)
    interval = engine.tick_interval_ms

    scores: list[int] = []
    total_ticks = 0
    now_ms = 0.0
    start = time.perf_counter()

    for _ in range(num_games):
        engine.restart()
        for _ in range(max_ticks):
            if rng.random() < turn_prob:
                engine.set_direction(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
            now_ms += interval
            engine.step(now_ms)
            total_ticks += 1
            if engine.phase == SessionPhase.GAME_OVER:
                break
        scores.append(engine.score)

    elapsed = time.perf_counter() - start
    report = SimulationReport(
        total_games=num_games,
        total_ticks=total_ticks,
        wall_time_seconds=elapsed,
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
        mean_score=float(np.mean(scores)),
        max_score=max(scores),
        best_score=engine.best,
    )
    logger.info(report.summary())
    return report
