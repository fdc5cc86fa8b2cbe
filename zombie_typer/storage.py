"""Best-effort key/value persistence for the high score and sound preference."""

from __future__ import annotations

import json
import os

from .constants import HIGH_SCORE_KEY, SOUND_KEY


class JsonStore:
    """
    String key/value pairs kept in a single JSON file.

    Reads tolerate a missing or corrupt file by falling back to defaults;
    writes that fail are reported and otherwise ignored so the game never
    stops over a read-only disk.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def _load(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Failed to read store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self._load().get(key)
        return default if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            print(f"Failed to save {key}: {e}")


class MemoryStore:
    """Same interface as JsonStore, nothing leaves the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)


def load_high_score(store) -> int:
    """Stored high score, or 0 when missing or unparsable."""
    raw = store.get(HIGH_SCORE_KEY)
    if not raw:
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


def save_high_score(store, score: int) -> None:
    store.set(HIGH_SCORE_KEY, str(score))


def load_sound_enabled(store) -> bool:
    """Sound is on unless explicitly stored as "off"."""
    return store.get(SOUND_KEY) != "off"


def save_sound_enabled(store, enabled: bool) -> None:
    store.set(SOUND_KEY, "on" if enabled else "off")
