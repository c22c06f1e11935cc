# runerpg

Game rules for a quick rune-based role-playing game. A run is a series of
rooms and battles. The player attacks with six runes, and each level-up gives
five points to spend on stats and rune levels.

The package has no dependencies. It holds the game logic and data, and you can
build a front end on top of it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

- `runerpg.attributes` holds the enumerations `Target`, `Rarity`, `AttackType`,
  `Element` and `StatusEffectKind`. It also has the per-tick chances
  `RUNE_CHANCE`, `BOSS_CHANCE` and `RARITY_CHANCES`, and two cost helpers:
  `rarity_multiplier(rarity)` and `target_cost(target, elapsed_time)`.
- `runerpg.statuseffects` holds the `StatusEffect` buffs and debuffs:
  `BuffLifesteal`, `BuffLucky`, `BuffAdrenaline`, `BuffElemental`,
  `DebuffPoison`, `DebuffBleed`, `DebuffSleep` and `DebuffSick`. It also has
  `StatusEffectInstance`, which binds an effect to a target and a caster.
  `StatusEffectInstance` offers `is_caster`, `is_target`, `is_buff` and
  `should_remove`. A `turns_remaining` of `-1` means the effect never runs out.
- `runerpg.resistance` has `element_resistance(rune_element, rarity, resisted)`.
  It returns the resistance that a rune of one element and rarity grants
  against fire, water, electric or wind. It raises `ValueError` for any other
  element.
- `runerpg.rune` has the `Rune` dataclass.
  - `Rune()` is the default "Skip Turn" rune.
  - `Rune.generate(rarity, elapsed_time, rng)` rolls a random rune. You can pass
    any object with a `randint` method as `rng`.
  - Other methods give the name with its level bonus (`format_name`,
    `formatted_name`) and a description (`effect_text`).
  - `power_label` and `crit_label` give the card labels.
  - `resistance`, `fire_resistance`, `water_resistance`, `electric_resistance`
    and `wind_resistance` give the resistances the rune grants.
- `runerpg.player` has `Player` and `CharacterStats`.
  - `Player` carries base stats, experience and six rune slots.
  - Its resistance methods sum the resistances of its runes.
  - `instance()` returns its battle stats as a `CharacterStats`.
- `runerpg.run` has `CurrentRun`.
  - It tracks progress and elapsed time and the player.
  - It holds the rune being added and the slot it will replace: see
    `toggle_replacing`, `cancel_replacing` and `can_confirm_replacement`.
  - `format_duration(seconds)` renders a time such as `"1h 02m 5.50s"`.
- `runerpg.levelup` has `Stat` and `LevelUpAllocation`.
  - `LevelUpAllocation.begin(player)` records where each stat and rune level
    started.
  - `remaining`, `stat_range`, `rune_range`, `can_confirm` and `points_text`
    report how the five points are being spent.
- `runerpg.textbox` has `layout_text(...)`, which places the characters of a
  string inside a box of a given width and height. It wraps at word breaks or
  at the box edge, and it marks a selected range. It returns a list of
  `GlyphPlacement` records.

## Example

```python
import random

from runerpg.attributes import Rarity
from runerpg.rune import Rune
from runerpg.run import format_duration

rune = Rune.generate(Rarity.RARE, elapsed_time=12.0, rng=random.Random(7))
print(rune.formatted_name())
print(rune.effect_text())
print(rune.power_label(), rune.crit_label())
print(rune.fire_resistance())

print(format_duration(3725.5))  # 1h 02m 5.50s
```

## What it does not do

The package has no game loop, no screens and no rendering. `layout_text`
computes positions but draws nothing. There are no enemies and no battle turns
or attacks, and nothing moves a run from room to room. Status effects carry
their strengths and kinds. The package has no code that applies them to
characters during a battle.