"""Difficulty presets that shape a new game."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DifficultyConfig:
    """Starting conditions and yields for one difficulty level."""

    initial_people: int
    crop_yield: int
    gold_yield: int
    explore_risk: float


PRESETS: Mapping[str, DifficultyConfig] = MappingProxyType(
    {
        "EASY": DifficultyConfig(
            initial_people=5, crop_yield=40, gold_yield=40, explore_risk=0.05
        ),
        "MEDIUM": DifficultyConfig(
            initial_people=3, crop_yield=30, gold_yield=30, explore_risk=0.10
        ),
        "HARD": DifficultyConfig(
            initial_people=2, crop_yield=20, gold_yield=20, explore_risk=0.20
        ),
    }
)


def get_config(difficulty: str) -> DifficultyConfig:
    """Return the preset for ``difficulty``; raise KeyError if it is unknown."""
    try:
        return PRESETS[difficulty]
    except KeyError:
        raise KeyError(f"unknown difficulty: {difficulty!r}") from None


def is_valid_difficulty(difficulty: str) -> bool:
    """Tell whether ``difficulty`` names a preset."""
    return difficulty in PRESETS