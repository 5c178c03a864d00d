"""Rules of a zombie-survival game: difficulty presets, the week cycle, the player's camp, weapons, zombies and Thursday combat."""

__version__ = "1.0.0"