"""Score, streak, lives and high score tracking for one play session."""

from __future__ import annotations

import math

from .constants import (
    INITIAL_LIVES, MAX_LIVES, KILL_SCORE, HEAL_STREAK_INTERVAL, WRONG_INPUT_LIMIT
)
from .models import KillOutcome, SessionSummary
from .storage import load_high_score, save_high_score


class ScoreTracker:
    """
    Tracks the player's standing through a run.

    Score only grows. The streak counts kills since the last miss or
    mistyping penalty, and every HEAL_STREAK_INTERVAL-th kill in a streak
    gives back a life while below MAX_LIVES. The high score is loaded from
    and written back to the store as soon as the score beats it.
    """

    def __init__(self, store=None) -> None:
        self.store = store
        self.high_score = load_high_score(store) if store is not None else 0
        self.reset()

    def reset(self) -> None:
        """Start a fresh run; the high score carries over."""
        self.score = 0
        self.streak = 0
        self.max_streak = 0
        self.lives = INITIAL_LIVES
        self.wrong_inputs = 0

    @property
    def alive(self) -> bool:
        return self.lives > 0

    def record_kill(self) -> KillOutcome:
        self.score += KILL_SCORE
        self.streak += 1
        self.max_streak = max(self.max_streak, self.streak)
        self.wrong_inputs = 0

        healed = False
        if self.streak % HEAL_STREAK_INTERVAL == 0 and self.lives < MAX_LIVES:
            self.lives += 1
            healed = True

        return KillOutcome(healed=healed, new_record=self._update_high_score())

    def record_miss(self) -> bool:
        """A zombie got through. Returns True when that was the last life."""
        self.lives = max(0, self.lives - 1)
        self.streak = 0
        self.wrong_inputs = 0
        return self.lives == 0

    def record_mismatch(self) -> bool:
        """
        A submitted word matched nothing.

        Returns True when this mismatch hit WRONG_INPUT_LIMIT and reset the
        streak; lives are never affected.
        """
        self.wrong_inputs += 1
        if self.wrong_inputs >= WRONG_INPUT_LIMIT:
            self.streak = 0
            self.wrong_inputs = 0
            return True
        return False

    def _update_high_score(self) -> bool:
        if self.score <= self.high_score:
            return False
        self.high_score = self.score
        if self.store is not None:
            save_high_score(self.store, self.high_score)
        return True

    def summarize(self, elapsed_s: float, difficulty_label: str, cleared: bool = False) -> SessionSummary:
        return SessionSummary(
            elapsed_s=max(0, math.floor(elapsed_s + 0.5)),
            score=self.score,
            max_streak=self.max_streak,
            high_score=self.high_score,
            difficulty_label=difficulty_label,
            cleared=cleared,
        )
