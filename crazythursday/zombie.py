"""Zombies on the battlefield and the horde that spawns and moves them."""

from __future__ import annotations

import random
from dataclasses import dataclass

FIELD_WIDTH = 25
FIELD_HEIGHT = 25

HEALTHY_THRESHOLD = 45

_ENEMY_HP: dict[int, tuple[int, ...]] = {
    1: (36, 45, 54, 63, 72),
    2: (40, 50, 60, 70, 80),
    3: (44, 55, 66, 77, 88),
}

_MOVE_INTERVAL = 20
_SPAWN_INTERVAL = 30
_SPAWN_PROBABILITY = 15


@dataclass
class Zombie:
    """A single zombie: its cell on the field and its health."""

    x: int
    y: int
    health: int

    @property
    def display_char(self) -> str:
        """'*' for a healthy zombie, '+' for a wounded one."""
        return "*" if self.health >= HEALTHY_THRESHOLD else "+"


class ZombieManager:
    """Spawns zombies at the top of the field and walks them down."""

    def __init__(
        self,
        difficulty: int,
        game_level: int,
        rng: random.Random | None = None,
    ) -> None:
        try:
            hp_by_level = _ENEMY_HP[difficulty]
        except KeyError:
            raise ValueError(f"difficulty must be 1, 2 or 3, got {difficulty}") from None
        if not 1 <= game_level <= len(hp_by_level):
            raise ValueError(
                f"game level must be between 1 and {len(hp_by_level)}, got {game_level}"
            )
        self._init_hp = hp_by_level[game_level - 1]
        self._rng = rng if rng is not None else random.Random()
        self._zombies: list[Zombie] = []
        self._move_counter = 0
        self._spawn_counter = 0

    def update(self) -> None:
        """Advance one tick: move the horde and try to spawn when due."""
        self._move_counter += 1
        if self._move_counter >= _MOVE_INTERVAL:
            self.move_zombies()
            self._move_counter = 0

        self._spawn_counter += 1
        if self._spawn_counter >= _SPAWN_INTERVAL:
            self.spawn_zombie()
            self._spawn_counter = 0

    def spawn_zombie(self) -> None:
        """With a fixed chance, put a new zombie in a random column of the top row."""
        if self._rng.random() < _SPAWN_PROBABILITY / 100:
            x = self._rng.randint(0, FIELD_WIDTH - 1)
            self._zombies.append(Zombie(x, 0, self._init_hp))

    def move_zombies(self) -> None:
        """Move every zombie one row down."""
        for zombie in self._zombies:
            zombie.y += 1

    def process_collision(self, x: int, y: int, damage: int) -> int:
        """Hit every zombie at (x, y) with ``damage``.

        Returns the damage counted for zombies killed by this hit; zombies
        that survive keep their reduced health and count for nothing.
        """
        total = 0
        survivors = []
        for zombie in self._zombies:
            if zombie.x == x and zombie.y == y:
                zombie.health -= damage
                if zombie.health <= 0:
                    total += damage
                    continue
            survivors.append(zombie)
        self._zombies = survivors
        return total

    def take_escaped(self) -> int:
        """Remove the zombies that walked off the bottom and return how many."""
        remaining = [z for z in self._zombies if z.y < FIELD_HEIGHT]
        escaped = len(self._zombies) - len(remaining)
        self._zombies = remaining
        return escaped

    @property
    def zombies(self) -> tuple[Zombie, ...]:
        """The zombies currently on the field, in spawn order."""
        return tuple(self._zombies)

    @property
    def init_hp(self) -> int:
        """Health every new zombie starts with."""
        return self._init_hp

    def __repr__(self) -> str:
        return f"ZombieManager(init_hp={self._init_hp}, zombies={len(self._zombies)})"