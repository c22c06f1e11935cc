"""Buffs and debuffs that runes apply, and their live instances in battle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attributes import StatusEffectKind


class StatusEffect:
    """A buff or debuff carried by a rune."""

    kind: StatusEffectKind = StatusEffectKind.NO_EFFECT

    def __init__(self) -> None:
        self.turn_counter = 0

    @property
    def is_buff(self) -> bool:
        """True when the effect helps its holder."""
        return self.kind.is_buff

    @property
    def name(self) -> str:
        """A display name for the effect."""
        return self.kind.name.replace("_", " ").title()

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class BuffLifesteal(StatusEffect):
    """Heals the holder from the damage it deals."""

    kind = StatusEffectKind.LIFESTEAL

    def __init__(self, strength: float) -> None:
        super().__init__()
        self.strength = strength / 2


class BuffLucky(StatusEffect):
    """Raises the holder's critical hit chance."""

    kind = StatusEffectKind.LUCKY

    def __init__(self, crit_chance: float) -> None:
        super().__init__()
        self.crit_chance = crit_chance


class BuffAdrenaline(StatusEffect):
    """Raises the holder's attack."""

    kind = StatusEffectKind.ADRENALINE

    def __init__(self, attack_boost: float) -> None:
        super().__init__()
        self.attack_boost = attack_boost / 2


class BuffElemental(StatusEffect):
    """Raises one of the holder's elemental resistances."""

    kind = StatusEffectKind.ELEMENTAL

    def __init__(self, resistance_boost: float) -> None:
        super().__init__()
        self.chosen_type = 0
        self.resistance_boost = resistance_boost


class DebuffPoison(StatusEffect):
    """Deals damage over time; the strength is always fixed."""

    kind = StatusEffectKind.POISON

    def __init__(self, poison_dmg: float) -> None:
        super().__init__()
        # The requested strength is deliberately ignored: poison always deals 10.
        self.poison_dmg = 10


class DebuffBleed(StatusEffect):
    """Deals damage over time."""

    kind = StatusEffectKind.BLEED

    def __init__(self, bleed_dmg: float) -> None:
        super().__init__()
        self.bleed_dmg = int(bleed_dmg)


class DebuffSleep(StatusEffect):
    """Puts the holder to sleep."""

    kind = StatusEffectKind.SLEEP

    def __init__(self) -> None:
        super().__init__()
        self.asleep = False


class DebuffSick(StatusEffect):
    """Weakens the holder by a multiplier."""

    kind = StatusEffectKind.SICK

    def __init__(self, sick_mult: float = 0.15) -> None:
        super().__init__()
        self.sick_mult = sick_mult


@dataclass(eq=False)
class StatusEffectInstance:
    """A status effect applied by a caster to a target during a battle.

    A turn count of -1 means the effect never runs out.
    """

    status_effect: StatusEffect
    target: Any
    caster: Any
    turns_remaining: int = 0

    def is_caster(self, character: Any) -> bool:
        """True when the given character cast this effect."""
        return self.caster is character

    def is_target(self, character: Any) -> bool:
        """True when the given character is under this effect."""
        return self.target is character

    @property
    def is_buff(self) -> bool:
        """True when the underlying effect is a buff."""
        return self.status_effect.is_buff

    def should_remove(self) -> bool:
        """True when the effect has run out of turns."""
        return self.turns_remaining != -1 and self.turns_remaining <= 0