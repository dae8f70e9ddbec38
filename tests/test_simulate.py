"""Tests for headless autopilot runs."""

import pytest

from power_snake.config import GameConfig
from power_snake.grid import WallMode
from power_snake.simulate import SimulationReport, simulate_games
from power_snake.storage import MemoryScoreStore


class TestSimulationReport:
    def test_summary_format(self):
        report = SimulationReport(
            total_games=3,
            total_ticks=120,
            wall_time_seconds=0.5,
            ticks_per_second=240.0,
            mean_score=13.3,
            max_score=30,
            best_score=50,
        )
        summary = report.summary()
        assert "3 games" in summary
        assert "120 ticks" in summary
        assert "ticks/s" in summary
        assert "best 50" in summary


class TestSimulateGames:
    def test_basic_run(self):
        report = simulate_games(num_games=3, max_ticks=60, seed=1)
        assert report.total_games == 3
        assert 0 < report.total_ticks <= 180
        assert report.max_score >= report.mean_score >= 0
        assert report.ticks_per_second > 0

    def test_wrap_run(self):
        report = simulate_games(
            num_games=2, max_ticks=40, seed=2,
            config=GameConfig(walls=WallMode.WRAP),
        )
        assert report.total_games == 2

    def test_best_score_tracks_store(self):
        store = MemoryScoreStore({"best-score": 10_000})
        report = simulate_games(num_games=2, max_ticks=30, seed=3, store=store)
        assert report.best_score == 10_000

    def test_invalid_game_count(self):
        with pytest.raises(ValueError, match="num_games"):
            simulate_games(num_games=0)
