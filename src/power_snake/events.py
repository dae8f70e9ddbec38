"""Named cues fired by the simulation for audio and other listeners."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Cue(str, enum.Enum):
    """Cue names; listeners receive nothing beyond the name."""

    BOMB_EXPLODE = "bomb-explode"
    APPLE_EAT = "apple-eat"
    MAGNET_PICKUP = "magnet-pickup"
    ROCKET_PICKUP = "rocket-pickup"
    MAGNET_COLLECT = "magnet-collect"
    GAME_OVER = "game-over"


CueListener = Callable[[Cue], None]


class CueBus:
    """Fire-and-forget fan-out of cues to registered listeners.

    A listener that raises is logged and skipped; emitting never fails.
    """

    def __init__(self) -> None:
        self._listeners: list[CueListener] = []
        self.muted = False

    def subscribe(self, listener: CueListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: CueListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, cue: Cue) -> None:
        if self.muted:
            return
        for listener in list(self._listeners):
            try:
                listener(cue)
            except Exception:
                logger.warning("Cue listener failed for %s.", cue.value)
