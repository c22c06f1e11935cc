import pytest

from runerpg.attributes import StatusEffectKind
from runerpg.statuseffects import (
    BuffAdrenaline,
    BuffElemental,
    BuffLifesteal,
    BuffLucky,
    DebuffBleed,
    DebuffPoison,
    DebuffSick,
    DebuffSleep,
    StatusEffectInstance,
)


class _Character:
    pass


def test_lifesteal_halves_strength():
    effect = BuffLifesteal(4)
    assert effect.strength == 2
    assert effect.turn_counter == 0
    assert effect.kind is StatusEffectKind.LIFESTEAL


def test_lucky_keeps_crit_chance():
    assert BuffLucky(35).crit_chance == 35


def test_adrenaline_halves_boost():
    assert BuffAdrenaline(3).attack_boost == 1.5


def test_elemental_defaults():
    effect = BuffElemental(100)
    assert effect.resistance_boost == 100
    assert effect.chosen_type == 0


def test_poison_damage_is_fixed():
    assert DebuffPoison(5).poison_dmg == 10
    assert DebuffPoison(15).poison_dmg == 10


def test_bleed_truncates_to_int():
    effect = DebuffBleed(25.9)
    assert effect.bleed_dmg == 25
    assert isinstance(effect.bleed_dmg, int)


def test_sleep_starts_awake():
    assert DebuffSleep().asleep is False


def test_sick_multiplier():
    assert DebuffSick(20).sick_mult == 20
    assert DebuffSick().sick_mult == 0.15


@pytest.mark.parametrize(
    "effect, is_buff",
    [
        (BuffLifesteal(1), True),
        (BuffLucky(20), True),
        (BuffAdrenaline(1), True),
        (BuffElemental(90), True),
        (DebuffPoison(5), False),
        (DebuffBleed(20), False),
        (DebuffSleep(), False),
        (DebuffSick(10), False),
    ],
)
def test_buff_classification(effect, is_buff):
    assert effect.is_buff is is_buff


def test_effect_name():
    assert DebuffSleep().name == "Sleep"
    assert BuffLifesteal(2).name == "Lifesteal"


def test_effects_compare_by_identity():
    assert BuffLucky(20) != BuffLucky(20)
    effect = BuffLucky(20)
    assert [effect].count(effect) == 1


def test_instance_caster_and_target():
    caster, target, other = _Character(), _Character(), _Character()
    instance = StatusEffectInstance(BuffLucky(30), target, caster)
    assert instance.is_caster(caster)
    assert not instance.is_caster(target)
    assert instance.is_target(target)
    assert not instance.is_target(other)


def test_instance_delegates_is_buff():
    who = _Character()
    assert StatusEffectInstance(BuffLucky(30), who, who).is_buff
    assert not StatusEffectInstance(DebuffSleep(), who, who).is_buff


@pytest.mark.parametrize(
    "turns, remove",
    [(-1, False), (0, True), (-2, True), (1, False), (3, False)],
)
def test_should_remove(turns, remove):
    who = _Character()
    instance = StatusEffectInstance(DebuffBleed(20), who, who, turns)
    assert instance.should_remove() is remove


def test_default_turns_means_remove():
    who = _Character()
    instance = StatusEffectInstance(DebuffPoison(5), who, who)
    assert instance.turns_remaining == 0
    assert instance.should_remove()