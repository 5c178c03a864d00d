"""The defenders' weapon: level, damage per bullet and spread of a volley."""

from __future__ import annotations

DAMAGE_BY_LEVEL: tuple[int, ...] = (20, 30, 40, 30, 35, 40, 50, 40, 50, 60)
MULTIPLE_BY_LEVEL: tuple[int, ...] = (1, 1, 1, 3, 3, 3, 3, 5, 5, 5)

_MAX_LEVEL = len(DAMAGE_BY_LEVEL)


class Weapon:
    """A weapon whose damage and shot count follow its level."""

    def __init__(self, level: int = 1) -> None:
        if not 1 <= level <= _MAX_LEVEL:
            raise ValueError(f"weapon level must be between 1 and {_MAX_LEVEL}, got {level}")
        self.level = level

    def upgrade(self) -> None:
        """Raise the level by one; nothing happens at the highest level."""
        if self.can_upgrade():
            self.level += 1

    def can_upgrade(self) -> bool:
        """Tell whether a higher level exists."""
        return self.level < self.max_level()

    @property
    def damage(self) -> int:
        """Damage dealt by one bullet."""
        return DAMAGE_BY_LEVEL[self.level - 1]

    @property
    def multiple(self) -> int:
        """Number of bullets fired side by side in one shot."""
        return MULTIPLE_BY_LEVEL[self.level - 1]

    @staticmethod
    def max_level() -> int:
        """Highest level a weapon can reach."""
        return _MAX_LEVEL

    def __repr__(self) -> str:
        return f"Weapon(level={self.level}, damage={self.damage}, multiple={self.multiple})"