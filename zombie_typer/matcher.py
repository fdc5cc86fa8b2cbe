"""Keystroke interpretation against the zombies on the field."""

from __future__ import annotations

from .models import InputFeedback, Zombie
from .registry import ZombieRegistry


class InputMatcher:
    """
    Maps what the player has typed onto the registry.

    preview() runs on every edit and never changes game state; resolve() is
    used on submission and returns the zombie to kill, if any.
    """

    def __init__(self, registry: ZombieRegistry) -> None:
        self.registry = registry

    def preview(self, text: str) -> InputFeedback:
        if not text.strip():
            return InputFeedback()
        target = self.registry.matching_prefix(text)
        return InputFeedback(target=target, error=target is None)

    def resolve(self, text: str) -> Zombie | None:
        return self.registry.matching_exact(text)
