"""Tests for cue dispatch."""

from power_snake.events import Cue, CueBus


class TestCue:
    def test_names(self):
        assert {c.value for c in Cue} == {
            "bomb-explode", "apple-eat", "magnet-pickup",
            "rocket-pickup", "magnet-collect", "game-over",
        }


class TestCueBus:
    def test_emit_reaches_every_listener(self):
        bus = CueBus()
        a: list[Cue] = []
        b: list[Cue] = []
        bus.subscribe(a.append)
        bus.subscribe(b.append)
        bus.emit(Cue.APPLE_EAT)
        assert a == [Cue.APPLE_EAT]
        assert b == [Cue.APPLE_EAT]

    def test_unsubscribe(self):
        bus = CueBus()
        heard: list[Cue] = []
        bus.subscribe(heard.append)
        bus.unsubscribe(heard.append)
        bus.emit(Cue.GAME_OVER)
        assert heard == []

    def test_muted(self):
        bus = CueBus()
        heard: list[Cue] = []
        bus.subscribe(heard.append)
        bus.muted = True
        bus.emit(Cue.GAME_OVER)
        assert heard == []

    def test_failing_listener_does_not_stop_others(self, caplog):
        bus = CueBus()
        heard: list[Cue] = []

        def broken(cue):
            raise RuntimeError("speaker unplugged")

        bus.subscribe(broken)
        bus.subscribe(heard.append)
        bus.emit(Cue.BOMB_EXPLODE)
        assert heard == [Cue.BOMB_EXPLODE]
        assert "bomb-explode" in caplog.text
