"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DifficultyProfile:
    """
    Fixed tuning for one difficulty level.

    Attributes
    ----------
    key : str
        Selector value ("easy", "normal", "hard").
    label : str
        Display name used on the HUD and in the summary.
    base_spawn_interval : float
        Spawn interval (ms) at the start of a run.
    base_speed : float
        Zombie speed (units per second) at the start of a run.
    multiplier : float
        Scales the time/score derived difficulty factor.
    min_spawn_interval : float
        Floor for the spawn interval (ms).
    time_divisor : float
        Seconds of play worth one unit of difficulty factor.
    """
    key: str
    label: str
    base_spawn_interval: float
    base_speed: float
    multiplier: float
    min_spawn_interval: float
    time_divisor: float


@dataclass
class Zombie:
    """
    One zombie walking toward the left edge.

    Attributes
    ----------
    id : int
        Unique token assigned by the registry.
    word : str
        The word the player must type to destroy it.
    x : float
        Horizontal position, field relative. Decreases every frame.
    """
    id: int
    word: str
    x: float


class EventKind(Enum):
    STARTED = "started"
    SPAWN = "spawn"
    KILL = "kill"
    MISS = "miss"
    MISMATCH = "mismatch"
    STREAK_PENALTY = "streak_penalty"
    LIFE_GAINED = "life_gained"
    NEW_RECORD = "new_record"
    PAUSED = "paused"
    RESUMED = "resumed"
    ENDED = "ended"


@dataclass(frozen=True)
class GameEvent:
    """Something that happened inside the simulation, for presentation layers."""
    kind: EventKind
    zombie: Zombie | None = None
    text: str = ""


@dataclass(frozen=True)
class SessionSummary:
    """End-of-session numbers shown on the overlay."""
    elapsed_s: int
    score: int
    max_streak: int
    high_score: int
    difficulty_label: str
    cleared: bool = False

    @property
    def title(self) -> str:
        return "Stage Clear!" if self.cleared else "Game Over"

    def lines(self) -> list[str]:
        return [
            f"Play time: {self.elapsed_s}s",
            f"Final score: {self.score}",
            f"Best combo: {self.max_streak}",
            f"High Score: {self.high_score}",
            f"Difficulty: {self.difficulty_label}",
        ]


@dataclass(frozen=True)
class KillOutcome:
    """What a kill changed beyond score and streak."""
    healed: bool = False
    new_record: bool = False


@dataclass(frozen=True)
class InputFeedback:
    """Live feedback for the text box while the player types."""
    target: Zombie | None = None
    error: bool = False
