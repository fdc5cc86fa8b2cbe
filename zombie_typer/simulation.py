"""
Headless game loop: zombie movement, spawning, misses, kills and pausing.

The host owns the clock. It calls tick() once per frame with a millisecond
timestamp (or step() with a frame delta) and forwards keyboard input to
preview_input()/submit(). Everything the presentation layer needs to react
to is published as GameEvent objects to subscribed listeners.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from enum import Enum

from .constants import DEFAULT_FIELD_WIDTH, SPAWN_MARGIN, MISS_X
from .difficulty import combined_factor, get_profile, scale
from .matcher import InputMatcher
from .models import EventKind, GameEvent, InputFeedback, SessionSummary, Zombie
from .registry import ZombieRegistry
from .session import ScoreTracker
from .words import choose_word, word_factor as vocabulary_factor

Listener = Callable[[GameEvent], None]


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class SubmitResult(Enum):
    IGNORED = "ignored"        # not running, paused, or blank input
    KILL = "kill"
    MISMATCH = "mismatch"
    PENALTY = "penalty"        # mismatch that also reset the streak


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Simulation:
    """
    Owns one game: the zombie registry, the score tracker and the timing
    anchors. No module-level state is involved, so several simulations can
    live side by side.

    Notes
    - All anchors are in the host's millisecond timeline.
    - Pausing freezes the run; resuming shifts every anchor forward by the
      paused duration so the scaling formulas only see active play time.
    """

    def __init__(self, difficulty: str = "normal", store=None,
                 rng: random.Random | None = None,
                 field_width: float = DEFAULT_FIELD_WIDTH,
                 clock: Callable[[], float] | None = None) -> None:
        self.registry = ZombieRegistry()
        self.matcher = InputMatcher(self.registry)
        self.tracker = ScoreTracker(store)
        self.rng = rng or random.Random()
        self.clock = clock or _monotonic_ms
        self.field_width = field_width
        self.profile = get_profile(difficulty)
        self.state = GameState.IDLE
        self.summary: SessionSummary | None = None
        self._listeners: list[Listener] = []
        self._reset_timing()

    def _reset_timing(self) -> None:
        self.start_time: float | None = None
        self.last_frame_time = 0.0
        self.last_spawn_time = 0.0
        self.pause_started_at: float | None = None
        self.zombie_speed = self.profile.base_speed
        self.spawn_interval = self.profile.base_spawn_interval

    # --------------------------------- Events ---------------------------------------

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, kind: EventKind, zombie: Zombie | None = None, text: str = "") -> None:
        event = GameEvent(kind, zombie, text)
        for listener in list(self._listeners):
            listener(event)

    # --------------------------------- State ----------------------------------------

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def ended(self) -> bool:
        return self.state is GameState.ENDED

    @property
    def zombies(self) -> list[Zombie]:
        return self.registry.all()

    def nearest(self) -> Zombie | None:
        return self.registry.nearest()

    def elapsed_ms(self) -> float:
        """Active play time up to the last processed frame."""
        if self.start_time is None:
            return 0.0
        return max(0.0, self.last_frame_time - self.start_time)

    def difficulty_factor(self) -> float:
        return combined_factor(self.elapsed_ms() / 1000, self.tracker.score, self.profile)

    def word_factor(self) -> float:
        if self.start_time is None:
            return 0.0
        return vocabulary_factor(self.elapsed_ms() / 1000, self.tracker.score, self.profile)

    def resize(self, field_width: float) -> None:
        """New spawns enter from the new right edge; walking zombies keep their x."""
        self.field_width = max(1, field_width)

    # --------------------------------- Lifecycle ------------------------------------

    def start(self, difficulty: str | None = None) -> None:
        """Begin a new run from any state, discarding the current one."""
        if difficulty is not None:
            self.profile = get_profile(difficulty)
        self.registry.clear()
        self.tracker.reset()
        self.summary = None
        self._reset_timing()
        self.state = GameState.RUNNING
        self._emit(EventKind.STARTED, text=self.profile.key)

    def pause(self, now_ms: float | None = None) -> bool:
        if self.state is not GameState.RUNNING:
            return False
        self.state = GameState.PAUSED
        self.pause_started_at = self.clock() if now_ms is None else now_ms
        self._emit(EventKind.PAUSED)
        return True

    def resume(self, now_ms: float | None = None) -> bool:
        if self.state is not GameState.PAUSED:
            return False
        now = self.clock() if now_ms is None else now_ms
        if self.pause_started_at is not None and self.start_time is not None:
            paused_for = max(0.0, now - self.pause_started_at)
            self.start_time += paused_for
            self.last_frame_time += paused_for
            self.last_spawn_time += paused_for
        self.pause_started_at = None
        self.state = GameState.RUNNING
        self._emit(EventKind.RESUMED)
        return True

    def toggle_pause(self, now_ms: float | None = None) -> bool:
        if self.state is GameState.PAUSED:
            return self.resume(now_ms)
        return self.pause(now_ms)

    def blur(self, now_ms: float | None = None) -> bool:
        """Window lost focus: pause a running game so it cannot tick unattended."""
        return self.pause(now_ms)

    def end(self, cleared: bool = False) -> SessionSummary | None:
        """
        Finish the run and build its summary.

        Losing is detected by tick(); cleared=True is left for hosts that add
        a stage-clear rule of their own.
        """
        if self.state in (GameState.IDLE, GameState.ENDED):
            return self.summary
        self.state = GameState.ENDED
        self.pause_started_at = None
        self.summary = self.tracker.summarize(self.elapsed_ms() / 1000, self.profile.label, cleared)
        self._emit(EventKind.ENDED, text=self.summary.title)
        return self.summary

    # --------------------------------- Loop -----------------------------------------

    def tick(self, timestamp: float) -> None:
        """
        Advance the run to `timestamp` (ms). Does nothing unless running.

        Order per frame: anchor and first spawn (first frame only), rescale,
        move, resolve misses, then spawn if the interval has elapsed.
        """
        if self.state is not GameState.RUNNING:
            return

        if self.start_time is None:
            self.start_time = timestamp
            self.last_frame_time = timestamp
            self.last_spawn_time = timestamp
            self._spawn(timestamp)

        self.zombie_speed, self.spawn_interval = scale(
            max(0.0, timestamp - self.start_time) / 1000, self.tracker.score, self.profile
        )

        delta = max(0.0, timestamp - self.last_frame_time)
        self.last_frame_time = timestamp

        move_dist = self.zombie_speed * delta / 1000
        for z in self.registry:
            z.x -= move_dist

        for z in [z for z in self.registry if z.x < MISS_X]:
            self._miss(z)

        if self.state is GameState.RUNNING and timestamp - self.last_spawn_time >= self.spawn_interval:
            self._spawn(timestamp)

    def step(self, delta_ms: float) -> None:
        """
        Advance by a frame delta instead of an absolute timestamp.

        The first frame of a run is anchored at 0; hosts driving the game this
        way should pass explicit timestamps (e.g. last_frame_time) to pause()
        and resume().
        """
        if self.start_time is None:
            self.tick(0.0)
        else:
            self.tick(self.last_frame_time + delta_ms)

    def _spawn(self, timestamp: float) -> Zombie:
        elapsed_s = (timestamp - self.start_time) / 1000
        word = choose_word(elapsed_s, self.tracker.score, self.profile, self.rng)
        zombie = self.registry.add(word, self.field_width + SPAWN_MARGIN)
        self.last_spawn_time = timestamp
        self._emit(EventKind.SPAWN, zombie)
        return zombie

    def _miss(self, zombie: Zombie) -> None:
        if self.registry.remove(zombie.id) is None:
            return
        lost = self.tracker.record_miss()
        self._emit(EventKind.MISS, zombie)
        if lost and self.state is GameState.RUNNING:
            self.end(cleared=False)

    # --------------------------------- Input ----------------------------------------

    def preview_input(self, text: str) -> InputFeedback:
        """Prefix feedback for the text box; never changes game state."""
        if self.state is not GameState.RUNNING:
            return InputFeedback()
        return self.matcher.preview(text)

    def submit(self, text: str) -> SubmitResult:
        """
        Handle an explicit submission (Enter).

        An exact match kills the nearest zombie carrying that word. Anything
        else counts as a mismatch, and every WRONG_INPUT_LIMIT-th mismatch in
        a row resets the streak.
        """
        if self.state is not GameState.RUNNING or not text.strip():
            return SubmitResult.IGNORED

        target = self.matcher.resolve(text)
        if target is None:
            penalty = self.tracker.record_mismatch()
            self._emit(EventKind.MISMATCH, text=text.strip())
            if penalty:
                self._emit(EventKind.STREAK_PENALTY)
                return SubmitResult.PENALTY
            return SubmitResult.MISMATCH

        self.registry.remove(target.id)
        outcome = self.tracker.record_kill()
        self._emit(EventKind.KILL, target)
        if outcome.new_record:
            self._emit(EventKind.NEW_RECORD, text=str(self.tracker.high_score))
        if outcome.healed:
            self._emit(EventKind.LIFE_GAINED)
        return SubmitResult.KILL
