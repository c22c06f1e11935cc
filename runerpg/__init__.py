"""Game rules for a rune-based role-playing game: runes, status effects, resistances, runs, level-up points and text layout."""

__version__ = "0.1.0"