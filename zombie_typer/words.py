"""Word vocabularies and the difficulty-weighted word picker for new zombies."""

from __future__ import annotations

import random

from .models import DifficultyProfile

EASY_WORDS = [
    "cat", "dog", "sun", "moon", "star",
    "red", "blue", "green", "bird", "fish",
    "tree", "book", "code", "game", "play",
    "up", "down", "left", "right", "door", "home", "room", "fire", "rain", "snow",
]

NORMAL_WORDS = [
    "running", "walking", "jump", "quick", "slow",
    "good", "bad", "key", "map", "wind", "ocean",
    "apple", "grape", "banana", "tomato", "portal", "magic", "zombie", "coder",
]

HARD_WORDS = [
    "typingdrill", "focusedattack", "difficultyrise", "combostriker", "bestrecord",
    "deadline", "timepressure", "accuracycheck", "holdtheline", "crisismode",
]

WORD_TIME_DIVISOR = 28             # seconds per unit of word factor
WORD_SCORE_DIVISOR = 80            # score per unit of word factor


def word_factor(elapsed_s: float, score: int, profile: DifficultyProfile) -> float:
    """How far into the harder vocabularies the next word may reach."""
    return (elapsed_s / WORD_TIME_DIVISOR + score / WORD_SCORE_DIVISOR) * profile.multiplier


def build_pool(difficulty: str, factor: float) -> list[str]:
    """
    Compose the candidate pool for one spawn.

    A vocabulary repeated in the pool is proportionally more likely to be
    drawn. Each difficulty moves through its own factor bands.

    Parameters
    ----------
    difficulty : str
        Profile key ("easy", "normal", "hard"); anything else plays as normal.
    factor : float
        Result of word_factor().
    """
    if difficulty == "easy":
        if factor < 1.5:
            return list(EASY_WORDS)
        if factor < 3:
            return EASY_WORDS + EASY_WORDS + NORMAL_WORDS
        return EASY_WORDS + NORMAL_WORDS

    if difficulty == "hard":
        if factor < 0.8:
            return EASY_WORDS + NORMAL_WORDS + HARD_WORDS
        if factor < 2:
            return NORMAL_WORDS + NORMAL_WORDS + HARD_WORDS
        return HARD_WORDS + HARD_WORDS + NORMAL_WORDS

    if factor < 1:
        return EASY_WORDS + NORMAL_WORDS
    if factor < 2.5:
        return EASY_WORDS + NORMAL_WORDS + NORMAL_WORDS
    if factor < 4:
        return NORMAL_WORDS + NORMAL_WORDS + HARD_WORDS
    return NORMAL_WORDS + HARD_WORDS + HARD_WORDS


def choose_word(elapsed_s: float, score: int, profile: DifficultyProfile,
                rng: random.Random | None = None) -> str:
    """Pick the word for a newly spawned zombie, uniformly from the weighted pool."""
    pool = build_pool(profile.key, word_factor(elapsed_s, score, profile))
    return (rng or random).choice(pool)
