"""The Thursday fight: the defenders hold the bottom row against the horde."""

from __future__ import annotations

import random
import time
from typing import Callable

from .player import Player
from .weapon import Weapon
from .weekcycle import WeekCycle
from .zombie import FIELD_HEIGHT, FIELD_WIDTH, ZombieManager

PLAYER_CHAR = "A"
BULLET_CHAR = "|"

GAME_DURATION_BY_WEEK: tuple[int, ...] = (40, 40, 50, 50, 60)

ESCAPE_DAMAGE = 10
HP_PER_SURVIVOR = 100

HINT_LINE = "A/D: move left/right | Space: shoot | Z/C: move faster | P: pause"

_LEFT_KEYS = {"A", "LEFT"}
_RIGHT_KEYS = {"D", "RIGHT"}


class Combat:
    """State of one fight, advanced tick by tick by the caller."""

    def __init__(
        self,
        player: Player,
        week_cycle: WeekCycle,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        week = week_cycle.current_week
        if not 1 <= week <= len(GAME_DURATION_BY_WEEK):
            raise ValueError(
                f"week must be between 1 and {len(GAME_DURATION_BY_WEEK)}, got {week}"
            )
        self.player = player
        self.weapon = Weapon(player.weapon_level)
        self.zombie_manager = ZombieManager(player.difficulty_level, week, rng)
        self.player_x = FIELD_WIDTH // 2
        self.player_y = FIELD_HEIGHT - 1
        self.initial_hp = player.total_hp
        self.hp = player.total_hp
        self.game_duration = GAME_DURATION_BY_WEEK[week - 1]
        self._clock = clock if clock is not None else time.monotonic
        self._start = self._clock()
        self._paused_since: float | None = None
        self._paused_total = 0.0
        self._bullets: list[list[int]] = []

    @property
    def paused(self) -> bool:
        """True while the fight is paused."""
        return self._paused_since is not None

    @property
    def bullets(self) -> tuple[tuple[int, int], ...]:
        """Positions of the bullets in flight, oldest first."""
        return tuple((x, y) for x, y in self._bullets)

    def _move(self, step: int) -> None:
        self.player_x = min(FIELD_WIDTH - 1, max(0, self.player_x + step))

    def handle_key(self, key: str) -> bool:
        """Act on one key press; return whether the key means anything.

        Keys are single characters or the names "left" and "right" for the
        arrow keys. While paused, only "p" has an effect.
        """
        name = key.upper()
        if name == "P":
            self.toggle_pause()
            return True
        if self.paused:
            return False
        if name in _LEFT_KEYS:
            self._move(-1)
        elif name in _RIGHT_KEYS:
            self._move(1)
        elif name == "Z":
            self._move(-3)
        elif name == "C":
            self._move(3)
        elif name == " ":
            self.shoot()
        else:
            return False
        return True

    def shoot(self) -> None:
        """Fire a volley whose spread follows the weapon and room at the edges."""
        x = self.player_x
        multiple = self.weapon.multiple
        if multiple == 3 and 1 < x < FIELD_WIDTH - 2:
            offsets = range(-1, 2)
        elif multiple == 5 and 2 < x < FIELD_WIDTH - 3:
            offsets = range(-2, 3)
        elif multiple == 5 and x in (2, FIELD_WIDTH - 3):
            offsets = range(-1, 2)
        else:
            offsets = range(0, 1)
        row = self.player_y - 1
        self._bullets.extend([x + dx, row] for dx in offsets)

    def update(self) -> None:
        """Advance one tick: bullets fly, zombies act, hits and escapes count."""
        if self.paused:
            return
        for bullet in self._bullets:
            bullet[1] -= 1
        self._bullets = [b for b in self._bullets if b[1] >= 0]

        self.zombie_manager.update()

        damage = self.weapon.damage
        self._bullets = [
            b
            for b in self._bullets
            if self.zombie_manager.process_collision(b[0], b[1], damage) <= 0
        ]

        escaped_damage = self.zombie_manager.take_escaped() * ESCAPE_DAMAGE
        if escaped_damage > 0:
            self.hp = max(0, self.hp - escaped_damage)

    def render(self) -> str:
        """Draw the field with its border and the status lines below it."""
        scene = [[" "] * FIELD_WIDTH for _ in range(FIELD_HEIGHT)]
        scene[self.player_y][self.player_x] = PLAYER_CHAR
        for x, y in self._bullets:
            if 0 <= y < FIELD_HEIGHT:
                scene[y][x] = BULLET_CHAR
        for zombie in self.zombie_manager.zombies:
            if 0 <= zombie.y < FIELD_HEIGHT:
                scene[zombie.y][zombie.x] = zombie.display_char

        border = "+" + "-" * FIELD_WIDTH + "+"
        lines = [border]
        lines.extend("|" + "".join(row) + "|" for row in scene)
        lines.append(border)

        survivors = (self.hp + HP_PER_SURVIVOR - 1) // HP_PER_SURVIVOR
        lines.extend(
            [
                "=== YOUR HOME ===",
                f"HP: {self.hp}/{self.initial_hp} (Survivors: {survivors})",
                f"Time left: {self.remaining_time()}s",
                f"Weapon: Lv.{self.weapon.level} (Damage: {self.weapon.damage})",
                f"Enemy HP: {self.zombie_manager.init_hp}",
                HINT_LINE,
            ]
        )
        return "\n".join(lines)

    def toggle_pause(self) -> None:
        """Pause the fight, or resume it and stop the pause counting as time."""
        now = self._clock()
        if self._paused_since is None:
            self._paused_since = now
        else:
            self._paused_total += now - self._paused_since
            self._paused_since = None

    def _elapsed_seconds(self) -> int:
        now = self._clock()
        paused = self._paused_total
        if self._paused_since is not None:
            paused += now - self._paused_since
        return int(now - self._start - paused)

    def is_time_up(self) -> bool:
        """True once the fight has lasted its full duration."""
        return self._elapsed_seconds() >= self.game_duration

    def remaining_time(self) -> int:
        """Whole seconds left in the fight, never below zero."""
        return max(0, self.game_duration - self._elapsed_seconds())

    def is_over(self) -> bool:
        """True when the camp has fallen or time has run out."""
        return self.hp <= 0 or self.is_time_up()

    def victory(self) -> bool:
        """True when the fight is over and the camp still stands."""
        return self.is_over() and self.hp > 0

    def __repr__(self) -> str:
        return (
            f"Combat(hp={self.hp}/{self.initial_hp}, x={self.player_x}, "
            f"bullets={len(self._bullets)}, paused={self.paused})"
        )