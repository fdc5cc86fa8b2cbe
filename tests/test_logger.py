from zombie_typer.logger import GameLogger
from zombie_typer.models import EventKind, GameEvent, Zombie


def test_log_has_header(tmp_path):
    log_file = tmp_path / "log.md"
    GameLogger(str(log_file))
    content = log_file.read_text(encoding="utf-8")
    assert content.startswith("# Zombie Typer Game Log")
    assert "| Timestamp | Event | Word | Details |" in content


def test_events_become_rows(tmp_path):
    log_file = tmp_path / "log.md"
    logger = GameLogger(str(log_file))
    logger.handle(GameEvent(EventKind.KILL, Zombie(4, "banana", 120.0)))
    logger.handle(GameEvent(EventKind.MISMATCH, text="bananna"))
    logger.handle(GameEvent(EventKind.ENDED, text="Game Over"))
    logger.handle(GameEvent(EventKind.STREAK_PENALTY))

    rows = log_file.read_text(encoding="utf-8").splitlines()
    assert any("| KILL | banana | Zombie #4 |" in row for row in rows)
    assert any("| MISMATCH | bananna |" in row for row in rows)
    assert any("| ENDED |  | Game Over |" in row for row in rows)
    assert any("| STREAK_PENALTY |" in row for row in rows)


def test_unwritable_log_does_not_raise(tmp_path, capsys):
    logger = GameLogger(str(tmp_path / "missing" / "log.md"))
    logger.log_row("KILL", "cat")
    out = capsys.readouterr().out
    assert "Failed to initialize log file" in out
    assert "Failed to log kill" in out
