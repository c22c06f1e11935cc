"""The state of the current run: timers, the player and rune replacement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .player import Player
from .rune import Rune

NO_REPLACEMENT = -1


def format_duration(seconds: float) -> str:
    """Format a duration as hours, minutes and seconds, e.g. ``1h 02m 5.50s``."""
    hours = int(seconds / 3600)
    minutes = int(math.fmod(int(seconds / 60), 60))
    remainder = seconds - (hours * 3600 + minutes * 60)
    return f"{hours}h {minutes:02d}m {remainder:02.2f}s"


@dataclass(eq=False)
class CurrentRun:
    """Everything about the run in progress."""

    progress_time: float = 0.0
    elapsed_time: float = 0.0
    player: Player = field(default_factory=Player)
    adding_rune: Rune = field(default_factory=Rune)
    replacing_index: int = NO_REPLACEMENT
    enemies_killed: int = 0
    bosses_killed: int = 0

    def progress_time_string(self) -> str:
        """The total progress time, formatted."""
        return format_duration(self.progress_time)

    def elapsed_time_string(self) -> str:
        """The time elapsed in the current stretch, formatted."""
        return format_duration(self.elapsed_time)

    def toggle_replacing(self, index: int) -> None:
        """Choose the rune slot the new rune will replace, or unchoose it."""
        if not 0 <= index < len(self.player.runes):
            raise IndexError(f"no rune slot {index}")
        self.replacing_index = NO_REPLACEMENT if self.replacing_index == index else index

    def cancel_replacing(self) -> None:
        """Give up on replacing a rune."""
        self.replacing_index = NO_REPLACEMENT

    def can_confirm_replacement(self) -> bool:
        """True when a slot has been chosen for the new rune."""
        return self.replacing_index != NO_REPLACEMENT