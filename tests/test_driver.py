"""Tests for the frame-driven tick pacing."""

import asyncio

from power_snake.config import GameConfig, PowerUpConfig
from power_snake.driver import FixedStepDriver
from power_snake.engine import GameEngine, SessionPhase

_QUIET = GameConfig(
    powerups=PowerUpConfig(bomb_chance=0.0, magnet_chance=0.0, rocket_chance=0.0),
)


def _driver(**kwargs) -> FixedStepDriver:
    return FixedStepDriver(GameEngine(_QUIET, seed=0), **kwargs)


class TestPump:
    def test_idle_never_ticks(self):
        driver = _driver()
        assert not driver.pump(0)
        assert not driver.pump(1000)
        assert driver.engine.state.tick == 0

    def test_ticks_once_per_interval(self):
        driver = _driver()
        driver.engine.start()
        ticks = [driver.pump(t) for t in (0, 100, 209, 210, 300, 419, 420)]
        assert ticks == [False, False, False, True, False, False, True]
        assert driver.engine.state.tick == 2

    def test_paused_frames_still_render(self):
        frames: list[dict] = []
        driver = _driver(on_frame=frames.append)
        driver.engine.start()
        driver.pump(0)
        driver.engine.pause()
        assert not driver.pump(500)
        assert len(frames) == 2
        assert frames[-1]["phase"] == "paused"

    def test_resume_ticks_on_next_due_frame(self):
        driver = _driver()
        driver.engine.start()
        driver.pump(0)
        driver.engine.pause()
        driver.pump(1000)
        driver.engine.resume()
        assert driver.pump(1001)

    def test_uses_clock_when_no_time_given(self):
        now = [0.0]
        driver = _driver(clock=lambda: now[0])
        driver.engine.start()
        driver.pump()
        now[0] = 210.0
        assert driver.pump()

    def test_restart_resets_clock(self):
        driver = _driver()
        driver.engine.start()
        driver.pump(0)
        driver.pump(210)
        driver.restart()
        assert driver.engine.phase == SessionPhase.RUNNING
        assert not driver.pump(5000)
        assert driver.pump(5210)

    def test_direct_engine_restart_resets_clock(self):
        driver = _driver()
        driver.engine.start()
        driver.pump(0)
        driver.pump(210)
        driver.engine.restart()
        assert not driver.pump(300)
        assert driver.pump(510)
        assert driver.engine.state.tick == 1


class TestRunLoop:
    def test_runs_requested_frames(self):
        frames: list[dict] = []
        driver = _driver(on_frame=frames.append)
        count = asyncio.run(driver.run(frame_interval=0, max_frames=5))
        assert count == 5
        assert len(frames) == 5

    def test_stops_on_game_over(self):
        clock = iter(range(0, 100_000, 210))
        driver = _driver(clock=lambda: float(next(clock)))
        driver.engine.start()
        count = asyncio.run(driver.run(frame_interval=0, max_frames=100))
        assert driver.engine.phase == SessionPhase.GAME_OVER
        assert count < 100
