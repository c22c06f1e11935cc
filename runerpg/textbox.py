"""Lay text out inside a rectangle, with optional word wrapping and selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

GlyphWidth = Union[float, Callable[[str], float]]

_BLANKS = (" ", "\t")
_BREAKS = (" ", "\t", "\n")


@dataclass(frozen=True)
class GlyphPlacement:
    """Where one character lands inside the box.

    ``index`` is the character's selection index, ``width`` its advance
    including spacing, and ``selected`` whether it falls in the selection.
    """

    char: str
    index: int
    x: float
    y: float
    width: float
    height: float
    selected: bool

    @property
    def visible(self) -> bool:
        """False for blanks, which take up room but draw no glyph."""
        return self.char not in _BLANKS


def _advance_function(glyph_width: GlyphWidth) -> Callable[[str], float]:
    if callable(glyph_width):
        return glyph_width
    width = float(glyph_width)
    return lambda _char: width


def layout_text(
    text: str,
    width: float,
    height: float,
    glyph_width: GlyphWidth = 1.0,
    base_size: int = 10,
    font_size: Optional[float] = None,
    spacing: float = 0.0,
    word_wrap: bool = True,
    select_start: int = 0,
    select_length: int = 0,
) -> list[GlyphPlacement]:
    """Place the characters of ``text`` inside a box of the given size.

    ``glyph_width`` is either a fixed advance or a function giving the advance
    of a character, both in units of the font's ``base_size``; ``font_size``
    scales them. With word wrapping, lines break at the last blank that fits;
    without it, they break wherever the next character would overflow. Layout
    stops at the first line that would overflow the box's height.
    """
    if base_size <= 0:
        raise ValueError("base_size must be positive")
    advance = _advance_function(glyph_width)
    scale = (base_size if font_size is None else font_size) / base_size
    line_height = (base_size + base_size // 2) * scale
    glyph_height = base_size * scale

    placements: list[GlyphPlacement] = []
    length = len(text)
    offset_x = 0.0
    offset_y = 0.0
    measuring = word_wrap
    start_line = -1
    end_line = -1
    last_k = -1

    i = 0
    k = 0
    while i < length:
        char = text[i]
        step = 0.0
        if char != "\n":
            step = advance(char) * scale
            if i + 1 < length:
                step += spacing

        if measuring:
            if char in _BREAKS:
                end_line = i
            if offset_x + step > width:
                end_line = i if end_line < 1 else end_line
                if i == end_line:
                    end_line -= 1
                if start_line + 1 == end_line:
                    end_line = i - 1
                measuring = False
            elif i + 1 == length:
                end_line = i
                measuring = False
            elif char == "\n":
                measuring = False

            if not measuring:
                # Go back to the start of the measured line and draw it.
                offset_x = 0.0
                i = start_line
                step = 0.0
                last_k, k = k - 1, last_k
        else:
            if char == "\n":
                if not word_wrap:
                    offset_y += line_height
                    offset_x = 0.0
            else:
                if not word_wrap and offset_x + step > width:
                    offset_y += line_height
                    offset_x = 0.0
                if offset_y + glyph_height > height:
                    break
                selected = select_start >= 0 and select_start <= k < select_start + select_length
                placements.append(
                    GlyphPlacement(
                        char=char,
                        index=k,
                        x=offset_x,
                        y=offset_y,
                        width=step,
                        height=glyph_height,
                        selected=selected,
                    )
                )

            if word_wrap and i == end_line:
                offset_y += line_height
                offset_x = 0.0
                start_line = end_line
                end_line = -1
                step = 0.0
                select_start += last_k - k
                k = last_k
                measuring = True

        offset_x += step
        i += 1
        k += 1

    return placements