import pytest

from zombie_typer.constants import HIGH_SCORE_KEY, SOUND_KEY
from zombie_typer.storage import (
    JsonStore, MemoryStore, load_high_score, load_sound_enabled, save_sound_enabled
)


def test_missing_file_gives_defaults(tmp_path):
    store = JsonStore(str(tmp_path / "store.json"))
    assert store.get("anything") is None
    assert store.get("anything", "fallback") == "fallback"
    assert load_high_score(store) == 0
    assert load_sound_enabled(store) is True


def test_values_survive_a_new_instance(tmp_path):
    path = str(tmp_path / "nested" / "store.json")
    JsonStore(path).set(HIGH_SCORE_KEY, "120")
    JsonStore(path).set(SOUND_KEY, "off")
    store = JsonStore(path)
    assert load_high_score(store) == 120
    assert load_sound_enabled(store) is False


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", ""])
def test_corrupt_file_gives_defaults(tmp_path, content):
    path = tmp_path / "store.json"
    path.write_text(content, encoding="utf-8")
    assert load_high_score(JsonStore(str(path))) == 0


def test_write_failure_is_swallowed(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = JsonStore(str(blocker / "store.json"))
    store.set(HIGH_SCORE_KEY, "50")
    assert "Failed to save" in capsys.readouterr().out
    assert store.get(HIGH_SCORE_KEY) is None


@pytest.mark.parametrize("raw, expected", [
    ("abc", 0),
    ("-5", 0),
    ("", 0),
    ("42", 42),
])
def test_high_score_parsing(raw, expected):
    assert load_high_score(MemoryStore({HIGH_SCORE_KEY: raw})) == expected


@pytest.mark.parametrize("raw, expected", [
    ("off", False),
    ("on", True),
    ("garbage", True),
])
def test_sound_preference(raw, expected):
    assert load_sound_enabled(MemoryStore({SOUND_KEY: raw})) is expected


def test_save_sound_preference():
    store = MemoryStore()
    save_sound_enabled(store, False)
    assert store.get(SOUND_KEY) == "off"
    save_sound_enabled(store, True)
    assert store.get(SOUND_KEY) == "on"
