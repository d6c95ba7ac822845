"""Lay out one line of text onto the rows of a shared line height."""

from __future__ import annotations

import math

from bitbanner.config import SPACE_ADVANCE
from bitbanner.glyphs import RenderContext
from bitbanner.schema import FontData


def _word_before(text: str, index: int) -> str:
    """Non-space run before position ``index``, skipping any spaces first."""
    i = index - 1
    while i >= 0 and text[i] == " ":
        i -= 1
    end = i + 1
    while i >= 0 and text[i] != " ":
        i -= 1
    return text[i + 1 : end]


def _word_after(text: str, index: int) -> str:
    """Non-space run after position ``index``, skipping any spaces first."""
    i = index + 1
    while i < len(text) and text[i] == " ":
        i += 1
    start = i
    while i < len(text) and text[i] != " ":
        i += 1
    return text[start:i]


def is_word_boundary(text: str, index: int) -> bool:
    """True if the space at ``index`` separates two multi-character words.

    Spaces next to single-character tokens are character-level spacing,
    however many of them there are.
    """
    if index < 0 or index >= len(text) or text[index] != " ":
        return False
    return len(_word_before(text, index)) > 1 and len(_word_after(text, index)) > 1


def space_advance(text: str, index: int, word_spacing: float) -> float:
    if is_word_boundary(text, index):
        return SPACE_ADVANCE + word_spacing
    return SPACE_ADVANCE


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _start_positions(
    text: str,
    row: int,
    context: RenderContext,
    char_spacing: int,
    word_spacing: float,
) -> list[float]:
    """Exact (fractional) start column of every character for one output row."""
    positions = [0.0] * len(text)
    for idx in range(1, len(text)):
        prev, cur = text[idx - 1], text[idx]
        if prev == " ":
            advance = space_advance(text, idx - 1, word_spacing)
        else:
            prev_glyph = context.glyph(prev)
            cur_glyph = context.glyph(cur)
            advance = float(prev_glyph.width + context.kerning(prev, cur) + char_spacing)

            # Odd height differences shift half-pixel boundaries below the placed glyph
            below_glyph = row >= cur_glyph.offset + cur_glyph.height
            if (prev_glyph.height - cur_glyph.height) % 2 != 0 and below_glyph:
                advance += 0.5
        positions[idx] = positions[idx - 1] + advance
    return positions


def _compose_row(
    text: str,
    row: int,
    context: RenderContext,
    char_spacing: int,
    word_spacing: float,
) -> str:
    positions = _start_positions(text, row, context, char_spacing, word_spacing)
    buffer: list[str] = []
    carried = 0.0

    for idx, char in enumerate(text):
        x = positions[idx] + carried
        if char == " ":
            fragment = " " * math.ceil(space_advance(text, idx, word_spacing))
        else:
            fragment = context.glyph(char).fragment(row)

        column = round_half_away(x)
        carried += x - column

        needed = column + len(fragment)
        if len(buffer) < needed:
            buffer.extend(" " * (needed - len(buffer)))

        for offset, ch in enumerate(fragment):
            target = column + offset
            # Ink never overwrites ink already placed by an earlier glyph
            if target >= 0 and buffer[target] == " ":
                buffer[target] = ch

    return "".join(buffer).rstrip(" ")


def compose_line(
    text: str,
    font: FontData,
    char_spacing: int,
    word_spacing: float,
    scale: float,
    *,
    context: RenderContext | None = None,
) -> list[str]:
    """Compose a single line (no newlines) into ``line_height`` rows.

    Rows are trimmed of trailing spaces. ``context`` lets a caller share the
    per-call glyph and kerning caches across several lines of one render.
    """
    if not text:
        return []
    if context is None:
        context = RenderContext(font, scale)
    return [
        _compose_row(text, row, context, char_spacing, word_spacing)
        for row in range(context.line_height)
    ]
