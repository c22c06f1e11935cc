"""The player character and the combat stats derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .rune import Rune

RUNE_SLOTS = 6


@dataclass
class CharacterStats:
    """A snapshot of a character's stats as used in battle."""

    max_health: int = 0
    physical_attack: int = 0
    special_attack: int = 0
    physical_armor: int = 0
    special_armor: int = 0
    speed: int = 0
    evasion: int = 0
    crit_chance: float = 0.0
    crit_multiplier: float = 1.0
    debuff_resistance: float = 0.0
    fire_resistance: float = 0.0
    water_resistance: float = 0.0
    electric_resistance: float = 0.0
    wind_resistance: float = 0.0


def _default_runes() -> list[Rune]:
    return [Rune() for _ in range(RUNE_SLOTS)]


@dataclass(eq=False)
class Player:
    """The player: base stats, experience and the runes they carry."""

    health: int = 100
    current_health: int = 100
    physical_attack: int = 1
    special_attack: int = 1
    physical_armor: int = 1
    special_armor: int = 1
    speed: int = 1
    evasion: int = 0
    experience: int = 0
    experience_level: int = 1
    runes: list[Rune] = field(default_factory=_default_runes)

    def level(self) -> int:
        """The player's current level."""
        return self.experience_level

    def fire_resistance(self) -> float:
        """Total fire resistance granted by the player's runes."""
        return sum(rune.fire_resistance() for rune in self.runes)

    def water_resistance(self) -> float:
        """Total water resistance granted by the player's runes."""
        return sum(rune.water_resistance() for rune in self.runes)

    def electric_resistance(self) -> float:
        """Total electric resistance granted by the player's runes."""
        return sum(rune.electric_resistance() for rune in self.runes)

    def wind_resistance(self) -> float:
        """Total wind resistance granted by the player's runes."""
        return sum(rune.wind_resistance() for rune in self.runes)

    def instance(self) -> CharacterStats:
        """Return the player's battle stats."""
        return CharacterStats(
            max_health=self.health,
            physical_attack=self.physical_attack,
            special_attack=self.special_attack,
            physical_armor=self.physical_armor,
            special_armor=self.special_armor,
            speed=self.speed,
            evasion=self.evasion,
            crit_chance=0.0,
            crit_multiplier=1.0,
            debuff_resistance=0.0,
            fire_resistance=self.fire_resistance(),
            water_resistance=self.water_resistance(),
            electric_resistance=self.electric_resistance(),
            wind_resistance=self.wind_resistance(),
        )