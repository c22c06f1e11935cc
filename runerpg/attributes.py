"""Rune attributes and the numeric tables that depend on them."""

from __future__ import annotations

from enum import IntEnum


class Target(IntEnum):
    """Who a rune affects when it is cast."""

    SINGLE_ENEMY = 0
    ALL_ENEMIES = 1
    SELF = 2
    SELF_AND_SINGLE_ENEMY = 3
    SELF_AND_ALL_ENEMIES = 4

    @property
    def hits_enemies_only(self) -> bool:
        """True for the targets that never include the caster."""
        return self <= Target.ALL_ENEMIES


class Rarity(IntEnum):
    """How rare a rune is."""

    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4


class AttackType(IntEnum):
    """Whether a rune attacks physically or specially."""

    PHYSICAL = 0
    SPECIAL = 1


class Element(IntEnum):
    """The element of a rune."""

    NO_ELEMENT = 0
    FIRE = 1
    WATER = 2
    ELECTRIC = 3
    WIND = 4
    OMNI = 5
    PURE = 6


class StatusEffectKind(IntEnum):
    """The kinds of status effect a rune may carry."""

    NO_EFFECT = 0
    LIFESTEAL = 1
    LUCKY = 2
    ADRENALINE = 3
    ELEMENTAL = 4
    POISON = 5
    BLEED = 6
    SLEEP = 7
    SICK = 8

    @property
    def is_buff(self) -> bool:
        """True for the kinds that help whoever they are applied to."""
        return StatusEffectKind.LIFESTEAL <= self <= StatusEffectKind.ELEMENTAL

    @property
    def is_debuff(self) -> bool:
        """True for the kinds that harm whoever they are applied to."""
        return self >= StatusEffectKind.POISON


# Per-tick chances used when progressing through a run.
RUNE_CHANCE = 0.08474409185231704
BOSS_CHANCE = 0.0038016583035531547
RARITY_CHANCES = {
    Rarity.COMMON: 0.44641928058933833,
    Rarity.UNCOMMON: 0.08474409185231704,
    Rarity.RARE: 0.014745844781072659,
    Rarity.EPIC: 0.0006200876164358948,
    Rarity.LEGENDARY: 0.00015604169167720937,
}

_RARITY_MULTIPLIERS = {
    Rarity.COMMON: 1.0,
    Rarity.UNCOMMON: 1.125,
    Rarity.RARE: 1.25,
    Rarity.EPIC: 1.5,
    Rarity.LEGENDARY: 2.0,
}

_TARGET_COST_FACTORS = {
    Target.SINGLE_ENEMY: 1.0,
    Target.ALL_ENEMIES: 4.0,
    Target.SELF: 1.5,
    Target.SELF_AND_SINGLE_ENEMY: 2.5,
    Target.SELF_AND_ALL_ENEMIES: 3.0,
}


def rarity_multiplier(rarity: Rarity | int) -> float:
    """Return the factor by which a rune's points grow with its rarity."""
    return _RARITY_MULTIPLIERS[Rarity(rarity)]


def target_cost(target: Target | int, elapsed_time: float) -> float:
    """Return the point cost of a buff or debuff on a rune with this target."""
    return _TARGET_COST_FACTORS[Target(target)] * (1 + elapsed_time)