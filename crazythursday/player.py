"""The player's camp: people, food, gold, workers and weapon level."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

WEAPON_UPGRADE_COST: Mapping[int, int] = MappingProxyType(
    {1: 30, 2: 30, 3: 30, 4: 40, 5: 40, 6: 40, 7: 50, 8: 50, 9: 50}
)

_DIFFICULTY_LEVELS = {"EASY": 1, "MEDIUM": 2, "HARD": 3}
_DEFAULT_DIFFICULTY_LEVEL = 2


class Player:
    """Resources and daily worker assignments of the survivors."""

    WEAPON_UPGRADE_COST = WEAPON_UPGRADE_COST

    def __init__(
        self,
        initial_people: int,
        initial_crop: int,
        initial_gold: int,
        difficulty: str,
        base_hp: int,
        food_per_person: int,
    ) -> None:
        self.people = initial_people
        self.available_people = initial_people
        self.crop = initial_crop
        self.gold = initial_gold
        self.weapon_level = 1
        self.difficulty = difficulty
        self.base_hp = base_hp
        self.food_per_person = food_per_person
        self.farming_workers = 0
        self.mining_workers = 0
        self.recruiting_workers = 0
        self.shopping_workers = 0
        self.exploring_workers = 0

    def add_crop(self, amount: int) -> None:
        """Change the food stock; it never drops below zero."""
        self.crop = max(0, self.crop + amount)

    def add_gold(self, amount: int) -> None:
        """Change the gold stock; it never drops below zero."""
        self.gold = max(0, self.gold + amount)

    def add_people(self, amount: int) -> None:
        """Change the population and the free workers alike, never below zero."""
        self.people = max(0, self.people + amount)
        self.available_people = max(0, self.available_people + amount)

    def assign_workers(
        self,
        farming: int,
        mining: int,
        recruiting: int,
        shopping: int,
        exploring: int,
    ) -> bool:
        """Assign workers to tasks.

        Nothing changes if more workers are asked for than are free; the
        return value tells whether the assignment was made.
        """
        total = farming + mining + recruiting + shopping + exploring
        if total > self.available_people:
            return False
        self.farming_workers = farming
        self.mining_workers = mining
        self.recruiting_workers = recruiting
        self.shopping_workers = shopping
        self.exploring_workers = exploring
        self.available_people -= total
        return True

    def reset_daily_workers(self) -> None:
        """Free everyone and clear all assignments for a new day."""
        self.available_people = self.people
        self.farming_workers = 0
        self.mining_workers = 0
        self.recruiting_workers = 0
        self.shopping_workers = 0
        self.exploring_workers = 0

    def upgrade_weapon(self) -> None:
        """Pay for and raise the weapon level by one.

        Raises ValueError when the weapon is already at its highest level.
        """
        try:
            cost = WEAPON_UPGRADE_COST[self.weapon_level]
        except KeyError:
            raise ValueError(
                f"weapon level {self.weapon_level} cannot be upgraded"
            ) from None
        self.gold -= cost
        self.weapon_level += 1

    def consume_daily_food(self) -> None:
        """Feed everyone; when the food runs out, one person starves."""
        self.crop = max(0, self.crop - self.people * self.food_per_person)
        if self.crop == 0:
            self.people = max(0, self.people - 1)

    @property
    def difficulty_level(self) -> int:
        """1 for EASY, 2 for MEDIUM, 3 for HARD; unknown names count as MEDIUM."""
        return _DIFFICULTY_LEVELS.get(self.difficulty, _DEFAULT_DIFFICULTY_LEVEL)

    @property
    def total_hp(self) -> int:
        """Hit points of the camp: every person adds the base HP."""
        return self.people * self.base_hp

    def __repr__(self) -> str:
        return (
            f"Player(people={self.people}, available={self.available_people}, "
            f"crop={self.crop}, gold={self.gold}, weapon_level={self.weapon_level}, "
            f"difficulty={self.difficulty!r})"
        )