# crazythursday

`crazythursday` holds the rules of a zombie-survival game. You lead a group of survivors
through working weeks that run from Friday to Thursday. Every Thursday a horde attacks
your home, and you have to hold it off on a 25×25 board.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `crazythursday.difficulty`

- `DifficultyConfig` is a frozen dataclass with four fields: `initial_people`, `crop_yield`, `gold_yield` and `explore_risk`.
- `PRESETS` is a read-only mapping with the keys `"EASY"`, `"MEDIUM"` and `"HARD"`.
- `get_config(name)` returns the preset for that name. It raises `KeyError` for an unknown name.
- `is_valid_difficulty(name)` tells you whether a preset with that name exists.

### `crazythursday.weekcycle`

- `WeekCycle(total_days)` starts on day 1, which is a Friday.
- `advance_day()` moves to the next working day. Thursday is followed by Friday.
- Read-only properties:
  - `day_name`
  - `is_thursday`
  - `current_day`
  - `current_week`, which counts five working days per week.
- `WEEKDAY_NAMES` lists the five day names in order.

### `crazythursday.player`

`Player(initial_people, initial_crop, initial_gold, difficulty, base_hp, food_per_person)` stores the camp's state in plain attributes:

- `people`, `available_people`, `crop`, `gold` and `weapon_level`
- one worker count per task: `farming_workers`, `mining_workers`, `recruiting_workers`, `shopping_workers` and `exploring_workers`

Methods:

- `add_crop(amount)`, `add_gold(amount)` and `add_people(amount)` change a resource and never let it go below zero.
- `assign_workers(farming, mining, recruiting, shopping, exploring)` returns `False` and changes nothing if you ask for more workers than are free. Otherwise it records the assignment and returns `True`.
- `reset_daily_workers()` makes everyone available again and clears all assignments.
- `consume_daily_food()` takes `people * food_per_person` from the crop. If the crop reaches zero, one person starves.
- `upgrade_weapon()` charges the cost listed in `WEAPON_UPGRADE_COST` and raises the weapon level by one. The gold is deducted without checking the balance. At level 10 it raises `ValueError`.

Properties:

- `difficulty_level` gives 1 for EASY, 2 for MEDIUM and 3 for HARD. Any other name counts as 2.
- `total_hp` is `people * base_hp`.

### `crazythursday.weapon`

- `Weapon(level=1)` accepts levels 1 to 10. Any other level raises `ValueError`.
- The `damage` and `multiple` properties come from fixed tables:
  - damage runs from 20 to 60
  - the number of shots fired at once is 1, 3 or 5
- `upgrade()` raises the level by one. At the top level it does nothing.
- `can_upgrade()` tells you whether a higher level exists.
- `Weapon.max_level()` returns 10.

### `crazythursday.zombie`

`Zombie(x, y, health)` is one zombie. Its `display_char` is `"*"` while its health is 45 or more, and `"+"` below that.

`ZombieManager(difficulty, game_level, rng=None)` runs the horde:

- `difficulty` is 1–3 and `game_level` is 1–5; other values raise `ValueError`.
- Together they set `init_hp`, the health of each new zombie.
- `update()` is one tick:
  - every 20 ticks the zombies move down one row (`move_zombies()`)
  - every 30 ticks `spawn_zombie()` has a 15% chance to add a zombie in a random column of the top row
- `process_collision(x, y, damage)` damages every zombie at that cell. It returns the damage counted for the zombies it kills.
- `take_escaped()` removes the zombies that walked off the bottom and returns how many there were.
- `zombies` is a tuple of the zombies on the board, in the order they spawned.
- Pass a `random.Random` as `rng` to make spawning reproducible.

### `crazythursday.combat`

`Combat(player, week_cycle, clock=None, rng=None)` sets up one fight:

- The fight lasts 40, 40, 50, 50 or 60 seconds, for weeks 1 to 5. Any other week raises `ValueError`.
- `clock` defaults to `time.monotonic`. `rng` is passed on to the `ZombieManager`.
- The camp's HP starts at the player's `total_hp`.

`handle_key(key)` accepts:

| Key | Effect |
| --- | --- |
| `"a"` or `"left"` | move one cell left |
| `"d"` or `"right"` | move one cell right |
| `"z"` | move three cells left |
| `"c"` | move three cells right |
| `" "` | shoot |
| `"p"` | pause or resume |

It returns whether the key had a meaning. While the fight is paused, only `"p"` works.

Other members:

- `shoot()` fires a volley. Its width follows the weapon and narrows near the edges.
- `update()` advances one tick:
  - bullets move up
  - the horde moves and spawns
  - hits are applied
  - each escaped zombie costs the camp 10 HP
- `render()` returns the bordered board followed by status lines: HP and survivors, time left, weapon, enemy HP and a key hint.
- `toggle_pause()` pauses and resumes the fight. Time spent paused does not count.
- `paused`, `bullets`, `player_x`, `player_y`, `hp` and `initial_hp` expose the current state.
- `remaining_time()`, `is_time_up()`, `is_over()` and `victory()` report on the clock and the outcome.

## Example

```python
import random

from crazythursday.combat import Combat
from crazythursday.difficulty import get_config
from crazythursday.player import Player
from crazythursday.weekcycle import WeekCycle

config = get_config("MEDIUM")
player = Player(config.initial_people, config.initial_people * 10,
                config.initial_people * 10, "MEDIUM", 100, 2)
week = WeekCycle(25)
while not week.is_thursday:
    week.advance_day()

fight = Combat(player, week, rng=random.Random(7))
fight.handle_key(" ")
fight.update()
print(fight.render())
```

## What this package does not do

The package contains rules and state only. It has no:

- terminal front end, animations or menus
- main game loop
- daily activities such as farming, mining, shopping, recruiting or exploring (the presets only hold their yields and risk)
- saving of games
- command to install or run

You read the keys, call `update()` at your own frame rate, and show what `render()` returns.