"""Difficulty profiles and the time/score driven speed and spawn scaling."""

from __future__ import annotations

from typing import NamedTuple

from .constants import (
    MAX_ZOMBIE_SPEED, SPEED_PER_FACTOR, SPAWN_MS_PER_FACTOR, SCORE_DIVISOR
)
from .models import DifficultyProfile

EASY = DifficultyProfile(
    key="easy", label="Easy",
    base_spawn_interval=3400, base_speed=110,
    multiplier=0.4, min_spawn_interval=1500, time_divisor=32,
)
NORMAL = DifficultyProfile(
    key="normal", label="Normal",
    base_spawn_interval=2600, base_speed=150,
    multiplier=1.0, min_spawn_interval=900, time_divisor=24,
)
HARD = DifficultyProfile(
    key="hard", label="Hard",
    base_spawn_interval=1900, base_speed=210,
    multiplier=2.8, min_spawn_interval=600, time_divisor=18,
)

PROFILES: dict[str, DifficultyProfile] = {p.key: p for p in (EASY, NORMAL, HARD)}
DIFFICULTY_ORDER = ("easy", "normal", "hard")


class DynamicDifficulty(NamedTuple):
    """Per-frame values derived from the current factor."""
    zombie_speed: float
    spawn_interval: float


def get_profile(key: str | None) -> DifficultyProfile:
    """Look up a profile by selector value; anything unknown plays as normal."""
    return PROFILES.get(key or "", NORMAL)


def next_difficulty(key: str) -> str:
    """Cycle easy -> normal -> hard -> easy."""
    try:
        idx = DIFFICULTY_ORDER.index(key)
    except ValueError:
        return NORMAL.key
    return DIFFICULTY_ORDER[(idx + 1) % len(DIFFICULTY_ORDER)]


def combined_factor(elapsed_s: float, score: int, profile: DifficultyProfile) -> float:
    """
    Scalar combining active play time and score, scaled by the profile.

    Parameters
    ----------
    elapsed_s : float
        Active (pause-free) seconds since the run was anchored.
    score : int
        Current score.
    profile : DifficultyProfile
        Selected difficulty.
    """
    return (elapsed_s / profile.time_divisor + score / SCORE_DIVISOR) * profile.multiplier


def zombie_speed(factor: float, profile: DifficultyProfile) -> float:
    return min(profile.base_speed + factor * SPEED_PER_FACTOR, MAX_ZOMBIE_SPEED)


def spawn_interval(factor: float, profile: DifficultyProfile) -> float:
    return max(profile.base_spawn_interval - factor * SPAWN_MS_PER_FACTOR, profile.min_spawn_interval)


def scale(elapsed_s: float, score: int, profile: DifficultyProfile) -> DynamicDifficulty:
    """
    Calculate the current zombie speed and spawn interval.

    Speed only grows (capped at MAX_ZOMBIE_SPEED) and the interval only
    shrinks (floored at the profile minimum) as time and score increase.
    """
    factor = combined_factor(elapsed_s, score, profile)
    return DynamicDifficulty(zombie_speed(factor, profile), spawn_interval(factor, profile))
