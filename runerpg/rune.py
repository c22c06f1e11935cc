"""Runes: the player's attacks, their random generation and their descriptions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from .attributes import (
    AttackType,
    Element,
    Rarity,
    StatusEffectKind,
    Target,
    rarity_multiplier,
    target_cost,
)
from .resistance import element_resistance
from .statuseffects import (
    BuffAdrenaline,
    BuffElemental,
    BuffLifesteal,
    BuffLucky,
    DebuffBleed,
    DebuffPoison,
    DebuffSick,
    DebuffSleep,
    StatusEffect,
)

_GENERATED_NAME = "RuneNameGoesHere"
_EFFECT_ROLLS = 2
_MAX_ADDITIONAL_LEVEL = 5

_ATTACK_TEXT = {
    AttackType.PHYSICAL: "A physical attack",
    AttackType.SPECIAL: "A special attack",
}

_ELEMENT_TEXT = {
    Element.NO_ELEMENT: " affected by armor",
    Element.FIRE: " affected by fire resistance and armor",
    Element.WATER: " affected by water resistance and armor",
    Element.ELECTRIC: " affected by electric resistance and armor",
    Element.WIND: " affected by wind resistance and armor",
    Element.OMNI: " affected by all resistances and unaffected by armor",
    Element.PURE: " unaffected by any resistances or armor",
}

_TARGET_TEXT = {
    Target.SINGLE_ENEMY: " on a single enemy.",
    Target.ALL_ENEMIES: " on all enemies.",
    Target.SELF: " on yourself.",
    Target.SELF_AND_SINGLE_ENEMY: " on a single enemy and yourself.",
    Target.SELF_AND_ALL_ENEMIES: " on everyone, including yourself.",
}

# For each kind: the inclusive range its strength is drawn from (if any) and its factory.
_EFFECT_FACTORIES: dict[
    StatusEffectKind, tuple[Optional[tuple[int, int]], Callable[..., StatusEffect]]
] = {
    StatusEffectKind.LIFESTEAL: ((1, 4), BuffLifesteal),
    StatusEffectKind.LUCKY: ((20, 50), BuffLucky),
    StatusEffectKind.ADRENALINE: ((1, 4), BuffAdrenaline),
    StatusEffectKind.ELEMENTAL: ((90, 110), BuffElemental),
    StatusEffectKind.POISON: ((5, 15), DebuffPoison),
    StatusEffectKind.BLEED: ((20, 30), DebuffBleed),
    StatusEffectKind.SLEEP: (None, DebuffSleep),
    StatusEffectKind.SICK: ((10, 30), DebuffSick),
}


class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _random_value(rng: _IntSource, low: float, high: float) -> int:
    """Draw an integer between two bounds inclusive, truncating and ordering them."""
    low, high = int(low), int(high)
    if low > high:
        low, high = high, low
    return rng.randint(low, high)


def _draw_kind(rng: _IntSource) -> Optional[StatusEffectKind]:
    value = _random_value(rng, 0, 15)
    if value == StatusEffectKind.NO_EFFECT or value > StatusEffectKind.SICK:
        return None
    return StatusEffectKind(value)


def _make_effect(kind: StatusEffectKind, rng: _IntSource) -> StatusEffect:
    strength_range, factory = _EFFECT_FACTORIES[kind]
    if strength_range is None:
        return factory()
    return factory(float(_random_value(rng, *strength_range)))


def _cost_delta(kind: StatusEffectKind, target: Target, cost: float) -> float:
    """Points gained (positive) or spent (negative) by putting an effect on a rune.

    A buff on an enemy-only rune, or a debuff on a rune that also hits its caster,
    is a drawback and so refunds points.
    """
    return cost if kind.is_buff == target.hits_enemies_only else -cost


@dataclass(eq=False)
class Rune:
    """A rune the player can attack with."""

    name: str = "Skip Turn"
    additional_level: int = 0
    target: Target = Target.SELF
    rarity: Rarity = Rarity.COMMON
    attack_type: AttackType = AttackType.SPECIAL
    element: Element = Element.NO_ELEMENT
    flat_damage: float = 0.0
    buffs: list[StatusEffect] = field(default_factory=list)
    debuffs: list[StatusEffect] = field(default_factory=list)
    crit_chance: float = 0.0
    crit_multiplier: float = 1.0

    @classmethod
    def generate(
        cls,
        rarity: Rarity | int,
        elapsed_time: float = 0.0,
        rng: Optional[_IntSource] = None,
    ) -> "Rune":
        """Create a random rune whose strength grows with rarity and elapsed time."""
        rng = rng if rng is not None else random.Random()
        rarity = Rarity(rarity)
        points = (5.0 + 5 * elapsed_time) * rarity_multiplier(rarity)

        additional_level = _random_value(rng, 0, _MAX_ADDITIONAL_LEVEL)
        target = Target(_random_value(rng, 0, len(Target) - 1))
        cost = target_cost(target, elapsed_time)
        attack_type = AttackType(_random_value(rng, 0, len(AttackType) - 1))
        element = Element(_random_value(rng, 0, len(Element) - 1))

        rune = cls(
            name=_GENERATED_NAME,
            additional_level=additional_level,
            target=target,
            rarity=rarity,
            attack_type=attack_type,
            element=element,
        )

        effects_first = _random_value(rng, 0, 1) == 0
        if effects_first:
            # This path only weighs the effects' cost; none are kept on the rune.
            for _ in range(_EFFECT_ROLLS):
                if points - cost >= 0:
                    break
                kind = _draw_kind(rng)
                if kind is None:
                    break
                points += _cost_delta(kind, target, cost)
            points -= rune._roll_crit(rng, points)
        else:
            points -= rune._roll_crit(rng, points)
            for _ in range(_EFFECT_ROLLS):
                if points - cost >= 0:
                    break
                kind = _draw_kind(rng)
                if kind is None:
                    break
                rune.buffs.append(_make_effect(kind, rng))
                points += _cost_delta(kind, target, cost)

        rune.flat_damage = points * 75 + 75 * elapsed_time
        return rune

    def _roll_crit(self, rng: _IntSource, points: float) -> float:
        """Split half the points between crit chance and multiplier; return the chance."""
        chance = float(_random_value(rng, 1, 0.5 * points))
        self.crit_chance = chance
        self.crit_multiplier = 0.5 * points - chance
        return chance

    def format_name(self, additional_levels: int) -> str:
        """Return the name, followed by the given level bonus if the rune has one."""
        if self.additional_level <= 0:
            return self.name
        return f"{self.name} +{additional_levels}"

    def formatted_name(self) -> str:
        """Return the name with the rune's own level bonus."""
        return self.format_name(self.additional_level)

    def effect_text(self) -> str:
        """Describe what the rune does."""
        effects = [*self.buffs, *self.debuffs]
        if effects:
            return ", ".join(effect.name for effect in effects)
        return (
            _ATTACK_TEXT[AttackType(self.attack_type)]
            + _ELEMENT_TEXT[Element(self.element)]
            + _TARGET_TEXT[Target(self.target)]
        )

    def power_label(self) -> str:
        """The rune's power as shown on its card."""
        return f"Power: {int(self.flat_damage)}"

    def crit_label(self) -> str:
        """The rune's critical hit multiplier and chance as shown on its card."""
        return f"Crit: {self.crit_multiplier:.1f}x @ {int(self.crit_chance * 100.0)}%"

    def resistance(self, element: Element | int) -> float:
        """Resistance to the given element that holding this rune grants."""
        return element_resistance(self.element, self.rarity, element)

    def fire_resistance(self) -> float:
        """Fire resistance granted by this rune."""
        return self.resistance(Element.FIRE)

    def water_resistance(self) -> float:
        """Water resistance granted by this rune."""
        return self.resistance(Element.WATER)

    def electric_resistance(self) -> float:
        """Electric resistance granted by this rune."""
        return self.resistance(Element.ELECTRIC)

    def wind_resistance(self) -> float:
        """Wind resistance granted by this rune."""
        return self.resistance(Element.WIND)