"""Best-score persistence.

Persistence is best-effort: a store never raises into gameplay. Reads
fall back to the default and writes that fail are logged and dropped.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "best-score"


class MemoryScoreStore:
    """In-process key/value store, used by default and in tests."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self._data: dict[str, int] = dict(initial or {})

    def read(self, key: str, default: int = 0) -> int:
        return self._data.get(key, default)

    def write(self, key: str, value: int) -> None:
        self._data[key] = int(value)


class JsonScoreStore:
    """Integer values stored in a small JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def _load(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text())
        except (OSError, ValueError):
            logger.warning("Could not read score file %s; ignoring it.", self._path)
            return {}
        return raw if isinstance(raw, dict) else {}

    def read(self, key: str, default: int = 0) -> int:
        value = self._load().get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return default
        return value

    def write(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2))
        except OSError:
            logger.warning("Could not persist %s to %s.", key, self._path)
