"""Markdown logger for gameplay events (kills, misses, mistypes, session end)."""

import datetime

from .models import EventKind, GameEvent

_DETAILS = {
    EventKind.STARTED: "Run started",
    EventKind.PAUSED: "Paused",
    EventKind.RESUMED: "Resumed",
    EventKind.STREAK_PENALTY: "Streak reset after repeated mistypes",
    EventKind.LIFE_GAINED: "Streak milestone restored a life",
}


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Zombie Typer Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Gameplay Events\n\n")
                f.write("| Timestamp | Event | Word | Details |\n")
                f.write("|-----------|-------|------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def log_row(self, event: str, word: str = "", details: str = "") -> None:
        """
        Append one event row.

        Parameters
        ----------
        event : str
            Short event name (KILL, MISS, ...)
        word : str, optional
            Word involved, if any
        details : str, optional
            Additional details about the event
        """
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            word = word.replace("|", "\\|")

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {word} | {details} |\n")

        except Exception as e:
            print(f"Failed to log {event.lower()}: {e}")

    def handle(self, event: GameEvent) -> None:
        """Simulation listener: turns each event into a log row."""
        name = event.kind.name
        if event.kind in (EventKind.SPAWN, EventKind.KILL, EventKind.MISS):
            self.log_row(name, event.zombie.word, f"Zombie #{event.zombie.id}")
        elif event.kind is EventKind.MISMATCH:
            self.log_row(name, event.text, "No zombie carries this word")
        elif event.kind is EventKind.NEW_RECORD:
            self.log_row(name, details=f"High score {event.text}")
        elif event.kind is EventKind.ENDED:
            self.log_row(name, details=event.text)
        else:
            self.log_row(name, details=_DETAILS.get(event.kind, ""))
