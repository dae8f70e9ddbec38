"""Frame-driven pacing of the fixed-interval simulation tick."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from power_snake.engine import GameEngine, SessionPhase

logger = logging.getLogger(__name__)

FrameCallback = Callable[[dict], None]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FixedStepDriver:
    """Turns a stream of frame timestamps into simulation ticks.

    :meth:`pump` is called every frame. The first running frame only
    starts the clock; after that a tick fires whenever at least one tick
    interval has elapsed since the previous tick. Pausing does not reset
    the clock; a restart does, whether it goes through the driver or
    straight to the engine. The render callback is invoked on every
    frame regardless of phase.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_frame: FrameCallback | None = None,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self.engine = engine
        self.on_frame = on_frame
        self.clock = clock
        self._last_tick_ms: float | None = None
        self._state = engine.state

    def reset(self) -> None:
        """Forget the last tick time and adopt the engine's current state."""
        self._last_tick_ms = None
        self._state = self.engine.state

    def restart(self) -> None:
        self.engine.restart()
        self.reset()

    def pump(self, now_ms: float | None = None) -> bool:
        """Process one frame. Returns True if a simulation tick ran."""
        now = self.clock() if now_ms is None else now_ms
        ticked = False
        if self.engine.state is not self._state:
            self.reset()
        if self.engine.phase == SessionPhase.RUNNING:
            if self._last_tick_ms is None:
                self._last_tick_ms = now
            if now - self._last_tick_ms >= self.engine.tick_interval_ms:
                self._last_tick_ms = now
                self.engine.step(now)
                ticked = True
        if self.on_frame is not None:
            self.on_frame(self.engine.get_state())
        return ticked

    async def run(
        self,
        frame_interval: float = 1 / 60,
        max_frames: int | None = None,
        stop_on_game_over: bool = True,
    ) -> int:
        """Pump frames cooperatively until stopped. Returns frames processed."""
        frames = 0
        try:
            while max_frames is None or frames < max_frames:
                self.pump()
                frames += 1
                if stop_on_game_over and self.engine.phase == SessionPhase.GAME_OVER:
                    break
                await asyncio.sleep(frame_interval)
        except asyncio.CancelledError:
            logger.info("Frame loop cancelled after %d frames.", frames)
            raise
        return frames
