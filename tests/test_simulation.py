import random

import pytest

from zombie_typer.constants import HIGH_SCORE_KEY, MAX_ZOMBIE_SPEED
from zombie_typer.difficulty import HARD, scale, NORMAL
from zombie_typer.models import EventKind
from zombie_typer.simulation import GameState, Simulation, SubmitResult
from zombie_typer.storage import MemoryStore


@pytest.fixture
def make_sim():
    def factory(difficulty="normal", store=None, field_width=1000):
        sim = Simulation(difficulty, store=store or MemoryStore(), rng=random.Random(3),
                         field_width=field_width, clock=lambda: 0.0)
        sim.events = []
        sim.subscribe(sim.events.append)
        return sim
    return factory


def kinds(sim, kind):
    return [e for e in sim.events if e.kind is kind]


def build_streak(sim, n):
    for i in range(n):
        sim.registry.add(f"target{'x' * i}", 500)
        assert sim.submit(f"target{'x' * i}") is SubmitResult.KILL


# --------------------------------- Lifecycle ------------------------------------

def test_idle_simulation_does_nothing(make_sim):
    sim = make_sim()
    sim.tick(0)
    sim.tick(5000)
    assert sim.state is GameState.IDLE
    assert sim.zombies == []
    assert sim.submit("cat") is SubmitResult.IGNORED
    assert sim.blur() is False


def test_first_tick_anchors_and_spawns(make_sim):
    sim = make_sim(field_width=600)
    sim.start()
    assert kinds(sim, EventKind.STARTED)
    sim.tick(1000)
    assert sim.start_time == 1000
    assert len(sim.zombies) == 1
    assert sim.zombies[0].x == 660
    assert len(kinds(sim, EventKind.SPAWN)) == 1


def test_step_drives_the_loop_from_zero(make_sim):
    sim = make_sim()
    sim.start()
    sim.step(16)
    assert sim.start_time == 0
    sim.step(16)
    assert sim.last_frame_time == 16
    assert sim.elapsed_ms() == 16


def test_resize_moves_spawn_point(make_sim):
    sim = make_sim()
    sim.resize(300)
    sim.start()
    sim.tick(0)
    assert sim.zombies[0].x == 360


def test_restart_discards_the_run(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    build_streak(sim, 2)
    sim.start("hard")
    assert sim.state is GameState.RUNNING
    assert sim.profile is HARD
    assert sim.zombies == []
    assert sim.tracker.score == 0
    assert sim.tracker.high_score == 20
    assert sim.start_time is None


# --------------------------------- Movement and spawning -------------------------

def test_positions_decrease_while_running(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    zombie = sim.zombies[0]
    last_x = zombie.x
    for t in range(16, 1600, 16):
        sim.tick(t)
        assert zombie.x < last_x
        last_x = zombie.x


def test_movement_uses_current_speed(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(1000)
    zombie = sim.zombies[0]
    sim.tick(1100)
    speed = scale(0.1, 0, NORMAL).zombie_speed
    assert zombie.x == pytest.approx(1060 - speed * 0.1)


def test_spawns_follow_the_interval(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.tick(1000)
    assert len(sim.zombies) == 1
    sim.tick(2600)   # interval has shrunk slightly below 2600 by now
    assert len(sim.zombies) == 2
    assert sim.last_spawn_time == 2600


def test_dynamic_values_stay_in_bounds(make_sim):
    sim = make_sim("hard")
    sim.start()
    t = 0
    while sim.running and t < 120_000:
        sim.tick(t)
        assert HARD.base_speed <= sim.zombie_speed <= MAX_ZOMBIE_SPEED
        assert HARD.min_spawn_interval <= sim.spawn_interval <= HARD.base_spawn_interval
        t += 50
    assert sim.ended


def test_timestamp_before_start_keeps_base_values(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(1000)
    sim.tick(400)
    assert sim.zombie_speed == NORMAL.base_speed
    assert sim.spawn_interval == NORMAL.base_spawn_interval


# --------------------------------- Pausing --------------------------------------

def test_positions_frozen_while_paused(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.tick(100)
    zombie = sim.zombies[0]
    frozen_x = zombie.x

    assert sim.pause(100)
    sim.tick(500)
    sim.tick(3000)
    assert zombie.x == frozen_x
    assert sim.submit(zombie.word) is SubmitResult.IGNORED

    assert sim.resume(3000)
    sim.tick(3100)
    speed = sim.zombie_speed
    assert zombie.x == pytest.approx(frozen_x - speed * 0.1)


def test_paused_time_does_not_count_toward_difficulty(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.tick(1000)
    sim.tick(2000)
    before = sim.difficulty_factor()

    sim.pause(2000)
    sim.resume(62000)
    assert sim.difficulty_factor() == pytest.approx(before)
    assert sim.elapsed_ms() == pytest.approx(2000)

    sim.tick(62000)
    assert sim.difficulty_factor() == pytest.approx(before)
    assert sim.elapsed_ms() == pytest.approx(2000)


def test_pause_and_resume_events(make_sim):
    sim = make_sim()
    sim.start()
    assert sim.toggle_pause(10)
    assert sim.paused
    assert sim.pause(20) is False
    assert sim.toggle_pause(30)
    assert sim.running
    assert sim.resume(40) is False
    assert len(kinds(sim, EventKind.PAUSED)) == 1
    assert len(kinds(sim, EventKind.RESUMED)) == 1


def test_blur_pauses_running_game(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    assert sim.blur(50)
    assert sim.paused
    assert sim.blur(60) is False


def test_pause_uses_clock_when_no_timestamp_given():
    now = [0.0]
    sim = Simulation(store=MemoryStore(), clock=lambda: now[0])
    sim.start()
    sim.tick(0)
    sim.tick(500)
    now[0] = 500
    sim.pause()
    now[0] = 9500
    sim.resume()
    assert sim.start_time == 9000
    assert sim.last_frame_time == 9500


# --------------------------------- Misses ---------------------------------------

def test_zombie_past_the_edge_costs_one_life(make_sim):
    sim = make_sim("normal")
    sim.start()
    sim.tick(0)
    build_streak(sim, 3)
    zombie = sim.zombies[0]
    zombie.x = -61

    sim.tick(0)
    assert sim.tracker.lives == 2
    assert sim.tracker.streak == 0
    assert zombie not in sim.zombies
    assert [e.zombie for e in kinds(sim, EventKind.MISS)] == [zombie]

    sim.tick(16)
    assert sim.tracker.lives == 2
    assert len(kinds(sim, EventKind.MISS)) == 1


def test_zombie_exactly_at_the_margin_is_not_a_miss(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.zombies[0].x = -60
    sim.tick(0)
    assert sim.tracker.lives == 3
    assert len(sim.zombies) == 1


def test_miss_resets_wrong_input_counter(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.submit("xyzzy")
    sim.submit("xyzzy")
    sim.zombies[0].x = -100
    sim.tick(0)
    assert sim.tracker.wrong_inputs == 0


def test_last_life_ends_the_game(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.tick(1400)
    sim.tracker.lives = 1
    sim.registry.add("extra", -200)
    sim.zombies[0].x = -100

    sim.tick(1400)
    assert sim.state is GameState.ENDED
    assert sim.tracker.lives == 0
    assert len(kinds(sim, EventKind.MISS)) == 2
    assert len(kinds(sim, EventKind.ENDED)) == 1
    assert sim.zombies == []

    summary = sim.summary
    assert summary.title == "Game Over"
    assert summary.elapsed_s == 1
    assert summary.difficulty_label == "Normal"

    sim.tick(5000)
    assert sim.zombies == []
    assert sim.submit("extra") is SubmitResult.IGNORED


# --------------------------------- Submissions ----------------------------------

def test_easy_kill_scenario(make_sim):
    sim = make_sim("easy")
    sim.start()
    sim.tick(0)
    word = sim.zombies[0].word

    feedback = sim.preview_input(word[:1])
    assert feedback.target is sim.zombies[0]
    assert not feedback.error

    assert sim.submit(word) is SubmitResult.KILL
    assert sim.tracker.score == 10
    assert sim.tracker.streak == 1
    assert sim.zombies == []
    assert sim.tracker.lives == 3
    assert kinds(sim, EventKind.KILL)[0].zombie.word == word


def test_exact_submission_removes_only_the_nearest_match(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    far = sim.registry.add("portal", 300)
    near = sim.registry.add("portal", 100)
    count = len(sim.zombies)

    assert sim.submit(" portal ") is SubmitResult.KILL
    assert len(sim.zombies) == count - 1
    assert near not in sim.zombies
    assert far in sim.zombies
    assert sim.tracker.lives == 3


def test_three_wrong_words_reset_streak_on_the_third(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    build_streak(sim, 5)
    assert sim.tracker.streak == 5

    assert sim.submit("xyzzy") is SubmitResult.MISMATCH
    assert sim.tracker.streak == 5
    assert sim.submit("xyzzy") is SubmitResult.MISMATCH
    assert sim.tracker.streak == 5
    assert sim.submit("xyzzy") is SubmitResult.PENALTY
    assert sim.tracker.streak == 0
    assert sim.tracker.wrong_inputs == 0
    assert sim.tracker.lives == 3
    assert len(kinds(sim, EventKind.MISMATCH)) == 3
    assert len(kinds(sim, EventKind.STREAK_PENALTY)) == 1


def test_kill_clears_pending_mismatches(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    build_streak(sim, 2)
    sim.submit("xyzzy")
    sim.submit("xyzzy")
    build_streak(sim, 1)
    assert sim.submit("xyzzy") is SubmitResult.MISMATCH
    assert sim.tracker.streak == 3


@pytest.mark.parametrize("text", ["", "   "])
def test_blank_submission_is_ignored(make_sim, text):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    assert sim.submit(text) is SubmitResult.IGNORED
    assert sim.tracker.wrong_inputs == 0


def test_streak_milestone_heals(make_sim):
    sim = make_sim()
    sim.start()
    sim.tick(0)
    sim.tracker.lives = 2
    sim.tracker.streak = 19
    sim.registry.add("omega", 400)
    assert sim.submit("omega") is SubmitResult.KILL
    assert sim.tracker.lives == 3
    assert len(kinds(sim, EventKind.LIFE_GAINED)) == 1


def test_new_record_only_when_beaten(make_sim):
    store = MemoryStore({HIGH_SCORE_KEY: "20"})
    sim = make_sim(store=store)
    sim.start()
    sim.tick(0)
    build_streak(sim, 2)
    assert kinds(sim, EventKind.NEW_RECORD) == []
    build_streak(sim, 1)
    assert len(kinds(sim, EventKind.NEW_RECORD)) == 1
    assert store.get(HIGH_SCORE_KEY) == "30"


def test_preview_input(make_sim):
    sim = make_sim()
    assert sim.preview_input("zzz").error is False   # not running yet
    sim.start()
    sim.tick(0)
    sim.registry.add("banana", 50)
    assert sim.preview_input("ban").target.word == "banana"
    assert sim.preview_input("zzz").error is True
    assert sim.preview_input("   ").error is False
    assert sim.tracker.wrong_inputs == 0


# --------------------------------- Ending ---------------------------------------

def test_stage_clear_extension_point(make_sim):
    sim = make_sim("hard")
    sim.start()
    sim.tick(0)
    sim.tick(3000)
    summary = sim.end(cleared=True)
    assert summary.cleared
    assert summary.title == "Stage Clear!"
    assert summary.elapsed_s == 3
    assert summary.difficulty_label == "Hard"
    assert sim.end() is summary
    assert len(kinds(sim, EventKind.ENDED)) == 1


def test_end_before_start_is_a_no_op(make_sim):
    sim = make_sim()
    assert sim.end() is None
    assert sim.state is GameState.IDLE


def test_listeners_can_unsubscribe(make_sim):
    sim = make_sim()
    seen = []
    sim.subscribe(seen.append)
    sim.unsubscribe(seen.append)
    sim.start()
    assert seen == []


def test_word_factor_tracks_active_time_and_score(make_sim):
    sim = make_sim()
    assert sim.word_factor() == 0.0
    sim.start()
    sim.tick(0)
    sim.tick(2800)
    assert sim.word_factor() == pytest.approx(0.1)
    build_streak(sim, 1)
    assert sim.word_factor() == pytest.approx(0.1 + 10 / 80)
