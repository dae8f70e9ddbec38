"""Game session: lifecycle, input, scoring, and best-score tracking."""

from __future__ import annotations

import enum
import logging
from typing import Protocol

import numpy as np

from power_snake.config import GameConfig
from power_snake.events import Cue, CueBus, CueListener
from power_snake.simulation import TickResult, advance
from power_snake.snake import Direction
from power_snake.state import GameState
from power_snake.storage import BEST_SCORE_KEY, MemoryScoreStore

logger = logging.getLogger(__name__)


class SessionPhase(str, enum.Enum):
    """Lifecycle states for a game session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game-over"


class ScoreStore(Protocol):
    def read(self, key: str, default: int = 0) -> int: ...

    def write(self, key: str, value: int) -> None: ...


class GameEngine:
    """Single-player session wrapping the simulation step.

    The engine owns one :class:`GameState` and moves it through
    ``idle -> running <-> paused -> game-over``. A driver calls
    :meth:`step` once per tick interval; :meth:`step` is a no-op unless
    the session is running. Transitions that are not allowed from the
    current phase are ignored and return ``False``.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: ScoreStore | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self._pending_config: GameConfig | None = None
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.store: ScoreStore = store if store is not None else MemoryScoreStore()
        self.cues = CueBus()
        self.best = self._load_best()
        self.phase = SessionPhase.IDLE
        self.state = GameState.new(self.config, self.rng)
        self.cues.muted = not self.config.sound

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def tick_interval_ms(self) -> int:
        return self.config.tick_interval_ms

    def _load_best(self) -> int:
        try:
            return int(self.store.read(BEST_SCORE_KEY, 0))
        except Exception:
            logger.warning("Could not read the best score; starting from 0.")
            return 0

    def configure(self, config: GameConfig) -> None:
        """Queue new settings; they apply on the next reset or restart."""
        self._pending_config = config

    def reset(self) -> None:
        """Re-initialise the board and return to idle."""
        if self._pending_config is not None:
            self.config = self._pending_config
            self._pending_config = None
            self.cues.muted = not self.config.sound
        self.state = GameState.new(self.config, self.rng)
        self.phase = SessionPhase.IDLE

    def start(self) -> bool:
        if self.phase != SessionPhase.IDLE:
            return False
        self.phase = SessionPhase.RUNNING
        logger.info(
            "Session started (%s, %s walls).",
            self.config.difficulty.value, self.config.walls.value,
        )
        return True

    def pause(self) -> bool:
        if self.phase != SessionPhase.RUNNING:
            return False
        self.phase = SessionPhase.PAUSED
        return True

    def resume(self) -> bool:
        if self.phase != SessionPhase.PAUSED:
            return False
        self.phase = SessionPhase.RUNNING
        return True

    def toggle_pause(self) -> bool:
        """Pause when running, resume when paused."""
        if self.phase == SessionPhase.PAUSED:
            return self.resume()
        return self.pause()

    def restart(self) -> None:
        """Reset then start immediately; allowed from any phase."""
        self.reset()
        self.start()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, direction: Direction) -> bool:
        """Latch *direction* for the next tick unless it reverses the snake."""
        return self.state.snake.request_turn(direction)

    def request_direction(self, dx: int, dy: int) -> bool:
        """Handle a raw ``(dx, dy)`` request from an input source."""
        try:
            direction = Direction.from_vector(dx, dy)
        except ValueError:
            logger.debug("Rejected direction request (%s, %s).", dx, dy)
            return False
        return self.set_direction(direction)

    def subscribe(self, listener: CueListener) -> None:
        self.cues.subscribe(listener)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self, now_ms: float) -> TickResult | None:
        """Run one simulation tick at *now_ms* if the session is running.

        Returns the tick result, or ``None`` when no tick was processed.
        """
        if self.phase != SessionPhase.RUNNING:
            return None
        result = advance(self.state, now_ms, self.cues.emit)
        if result.game_over:
            self._game_over()
        return result

    def _game_over(self) -> None:
        self.phase = SessionPhase.GAME_OVER
        self.cues.emit(Cue.GAME_OVER)
        logger.info(
            "Game over at tick %d with score %d.", self.state.tick, self.score,
        )
        if self.score > self.best:
            self.best = self.score
            logger.info("New best score: %d.", self.best)
            try:
                self.store.write(BEST_SCORE_KEY, self.best)
            except Exception:
                logger.warning("Best score %d was not persisted.", self.best)

    def get_state(self) -> dict:
        """Return a read-only, serializable snapshot for renderers."""
        return {
            "phase": self.phase.value,
            "best": self.best,
            **self.state.to_dict(),
        }
