"""Calendar of the game: working days from Friday to Thursday."""

from __future__ import annotations

WEEKDAY_NAMES: tuple[str, ...] = ("Friday", "Monday", "Tuesday", "Wednesday", "Thursday")

_THURSDAY = WEEKDAY_NAMES.index("Thursday")
_DAYS_PER_WEEK = len(WEEKDAY_NAMES)


class WeekCycle:
    """Tracks the day number and weekday, skipping weekends."""

    def __init__(self, total_days: int) -> None:
        self.total_days = total_days
        self._day = 1
        self._weekday_index = 0

    def advance_day(self) -> None:
        """Move to the next working day; Thursday is followed by Friday."""
        self._day += 1
        if self._weekday_index == _THURSDAY:
            self._weekday_index = 0
        else:
            self._weekday_index += 1

    @property
    def day_name(self) -> str:
        """Name of the current weekday."""
        return WEEKDAY_NAMES[self._weekday_index]

    @property
    def is_thursday(self) -> bool:
        """True on Thursday, the day of the attack."""
        return self._weekday_index == _THURSDAY

    @property
    def current_day(self) -> int:
        """Day number, starting at 1."""
        return self._day

    @property
    def current_week(self) -> int:
        """Week number, starting at 1; a week has five working days."""
        return (self._day - 1) // _DAYS_PER_WEEK + 1

    def __repr__(self) -> str:
        return (
            f"WeekCycle(day={self._day}, weekday={self.day_name!r}, "
            f"total_days={self.total_days})"
        )