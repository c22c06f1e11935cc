"""Spending the points a player earns on levelling up."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .player import Player

POINTS_PER_LEVEL = 5


class Stat(Enum):
    """A player stat that level-up points can be spent on."""

    HEALTH = ("health", "Health")
    PHYSICAL_ARMOR = ("physical_armor", "Physical Armor")
    SPECIAL_ARMOR = ("special_armor", "Special Armor")
    PHYSICAL_ATTACK = ("physical_attack", "Physical Attack")
    SPECIAL_ATTACK = ("special_attack", "Special Attack")
    SPEED = ("speed", "Speed")
    EVASION = ("evasion", "Evasion")

    def __init__(self, attribute: str, label: str) -> None:
        self.attribute = attribute
        self.label = label

    def value_of(self, player: Player) -> int:
        """Read this stat from a player."""
        return getattr(player, self.attribute)


@dataclass(eq=False)
class LevelUpAllocation:
    """Tracks points spent on a player's stats and rune levels since levelling up.

    The player is changed directly; the allocation remembers where each value
    started so it can tell how many points remain and how far each may go.
    """

    player: Player
    start_stats: dict[Stat, int]
    start_rune_levels: tuple[int, ...]

    @classmethod
    def begin(cls, player: Player) -> "LevelUpAllocation":
        """Start allocating points for the given player."""
        return cls(
            player=player,
            start_stats={stat: stat.value_of(player) for stat in Stat},
            start_rune_levels=tuple(rune.additional_level for rune in player.runes),
        )

    def _spent(self) -> int:
        on_stats = sum(stat.value_of(self.player) - start for stat, start in self.start_stats.items())
        on_runes = sum(
            rune.additional_level - start
            for rune, start in zip(self.player.runes, self.start_rune_levels)
        )
        return on_stats + on_runes

    def remaining(self) -> int:
        """Points not yet spent."""
        return POINTS_PER_LEVEL - self._spent()

    def stat_range(self, stat: Stat) -> tuple[int, int]:
        """The lowest and highest value the stat may be set to."""
        stat = Stat(stat)
        return self.start_stats[stat], stat.value_of(self.player) + self.remaining()

    def rune_range(self, index: int) -> tuple[int, int]:
        """The lowest and highest additional level the rune in a slot may have."""
        if not 0 <= index < len(self.start_rune_levels):
            raise IndexError(f"no rune slot {index}")
        current = self.player.runes[index].additional_level
        return self.start_rune_levels[index], current + self.remaining()

    def can_confirm(self) -> bool:
        """True once every point has been spent."""
        return self.remaining() == 0

    def points_text(self) -> str:
        """The remaining points as shown on the level-up screen."""
        return f"Points Remaining: {self.remaining()}/{POINTS_PER_LEVEL}"