"""Zombie Typer: type the words zombies carry before they reach the left edge."""

from .models import EventKind, GameEvent, SessionSummary, Zombie
from .simulation import GameState, Simulation, SubmitResult

__all__ = [
    "EventKind", "GameEvent", "GameState", "SessionSummary",
    "Simulation", "SubmitResult", "Zombie",
]
