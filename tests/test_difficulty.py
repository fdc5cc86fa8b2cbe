import pytest

from zombie_typer.constants import MAX_ZOMBIE_SPEED
from zombie_typer.difficulty import (
    EASY, NORMAL, HARD, PROFILES, combined_factor, get_profile, next_difficulty, scale
)


def test_profiles_match_selector_values():
    assert get_profile("easy") is EASY
    assert get_profile("normal") is NORMAL
    assert get_profile("hard") is HARD
    assert (EASY.base_spawn_interval, EASY.base_speed, EASY.min_spawn_interval) == (3400, 110, 1500)
    assert (HARD.base_spawn_interval, HARD.base_speed, HARD.min_spawn_interval) == (1900, 210, 600)


@pytest.mark.parametrize("key", [None, "", "nightmare"])
def test_unknown_difficulty_plays_as_normal(key):
    assert get_profile(key) is NORMAL


def test_next_difficulty_cycles():
    assert next_difficulty("easy") == "normal"
    assert next_difficulty("normal") == "hard"
    assert next_difficulty("hard") == "easy"
    assert next_difficulty("bogus") == "normal"


def test_start_of_run_uses_base_values():
    assert scale(0, 0, NORMAL) == (150, 2600)


def test_factor_combines_time_and_score():
    # 24s on normal is one unit, 120 points is another
    assert combined_factor(24, 0, NORMAL) == pytest.approx(1.0)
    assert combined_factor(24, 120, NORMAL) == pytest.approx(2.0)
    assert combined_factor(32, 0, EASY) == pytest.approx(0.4)
    assert combined_factor(18, 0, HARD) == pytest.approx(2.8)


def test_one_factor_unit_on_normal():
    speed, interval = scale(24, 0, NORMAL)
    assert speed == pytest.approx(195)
    assert interval == pytest.approx(2340)


def test_speed_capped_and_interval_floored():
    speed, interval = scale(600, 5000, HARD)
    assert speed == MAX_ZOMBIE_SPEED
    assert interval == HARD.min_spawn_interval


@pytest.mark.parametrize("profile", list(PROFILES.values()))
def test_values_stay_in_bounds_and_move_monotonically(profile):
    prev_speed, prev_interval = scale(0, 0, profile)
    for step in range(1, 400):
        speed, interval = scale(step * 0.5, step * 10, profile)
        assert profile.base_speed <= speed <= MAX_ZOMBIE_SPEED
        assert profile.min_spawn_interval <= interval <= profile.base_spawn_interval
        assert speed >= prev_speed
        assert interval <= prev_interval
        prev_speed, prev_interval = speed, interval
