"""Active zombie bookkeeping with nearest/matching lookups."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator

from .models import Zombie


def _front(zombies: Iterable[Zombie]) -> Zombie | None:
    # Strict comparison keeps the earliest-added zombie on equal positions.
    front = None
    for z in zombies:
        if front is None or z.x < front.x:
            front = z
    return front


class ZombieRegistry:
    """
    Owns every zombie currently on the field.

    Zombies are kept in spawn order, so "nearest" ties (identical positions)
    resolve to the zombie that was added first.
    """

    def __init__(self) -> None:
        self._zombies: dict[int, Zombie] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._zombies)

    def __iter__(self) -> Iterator[Zombie]:
        return iter(list(self._zombies.values()))

    def add(self, word: str, x: float) -> Zombie:
        """Create a zombie with a fresh id and track it."""
        zombie_id = next(self._ids)
        while zombie_id in self._zombies:
            zombie_id = next(self._ids)
        zombie = Zombie(zombie_id, word, x)
        self._zombies[zombie.id] = zombie
        return zombie

    def add_zombie(self, zombie: Zombie) -> None:
        if zombie.id in self._zombies:
            raise ValueError(f"zombie {zombie.id} is already registered")
        self._zombies[zombie.id] = zombie

    def remove(self, zombie_id: int) -> Zombie | None:
        """Stop tracking a zombie. Returns it, or None if it was already gone."""
        return self._zombies.pop(zombie_id, None)

    def all(self) -> list[Zombie]:
        return list(self._zombies.values())

    def clear(self) -> None:
        self._zombies.clear()

    def nearest(self) -> Zombie | None:
        """The zombie closest to the left edge (smallest x), if any."""
        return _front(self._zombies.values())

    def matching_exact(self, text: str) -> Zombie | None:
        """Nearest zombie whose word equals the trimmed input."""
        trimmed = text.strip()
        if not trimmed:
            return None
        return _front(z for z in self._zombies.values() if z.word == trimmed)

    def matching_prefix(self, text: str) -> Zombie | None:
        """Nearest zombie whose word starts with the trimmed input."""
        trimmed = text.strip()
        if not trimmed:
            return None
        return _front(z for z in self._zombies.values() if z.word.startswith(trimmed))
