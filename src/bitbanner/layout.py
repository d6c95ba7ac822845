"""Assemble multi-line text into one aligned, uniformly padded plain block."""

from __future__ import annotations

from bitbanner.composer import compose_line
from bitbanner.glyphs import RenderContext
from bitbanner.schema import Alignment, FontData, RenderOptions
from bitbanner.utils import visible_width


def strip_blank_rows(rows: list[str]) -> list[str]:
    """Drop all-space rows from the top and bottom of a block."""
    start = 0
    while start < len(rows) and not rows[start].strip():
        start += 1
    end = len(rows)
    while end > start and not rows[end - 1].strip():
        end -= 1
    return rows[start:end]


def block_width(rows: list[str]) -> int:
    return max((visible_width(row) for row in rows), default=0)


def left_padding(width: int, max_width: int, alignment: Alignment) -> int:
    """Columns of left padding that align a block of ``width`` within ``max_width``."""
    if width >= max_width:
        return 0
    if alignment == "center":
        return (max_width - width) // 2
    if alignment == "right":
        return max_width - width
    return 0


def align_block(rows: list[str], max_width: int, alignment: Alignment) -> list[str]:
    """Pad every row of one line-block identically, then fill each to ``max_width``."""
    pad = " " * left_padding(block_width(rows), max_width, alignment)
    aligned = []
    for row in rows:
        padded = pad + row
        aligned.append(padded + " " * max(0, max_width - visible_width(padded)))
    return aligned


def pad_to_uniform_width(rows: list[str]) -> list[str]:
    width = block_width(rows)
    return [row + " " * (width - visible_width(row)) for row in rows]


def assemble_block(text: str, font: FontData, options: RenderOptions) -> list[str]:
    """Render ``text`` (possibly multi-line) as an uncolored block of equal-width rows.

    Each line is composed on its own, trimmed of blank top/bottom rows, and
    aligned against the widest line. Lines are stacked with
    ``options.line_spacing`` blank rows between inked blocks; a line with no
    ink contributes exactly one blank row.
    """
    if not text or not font.characters:
        return []

    context = RenderContext(font, options.scale)
    blocks: list[list[str]] = []
    for line in text.split("\n"):
        composed = compose_line(
            line,
            font,
            options.char_spacing,
            options.word_spacing,
            options.scale,
            context=context,
        )
        blocks.append(strip_blank_rows(composed))

    max_width = max((block_width(block) for block in blocks), default=0)

    output: list[str] = []
    emitted_ink = False
    for block in blocks:
        if not block:
            output.append("")
            continue
        # Spacing goes between inked blocks only
        if emitted_ink:
            output.extend([""] * options.line_spacing)
        output.extend(align_block(block, max_width, options.alignment))
        emitted_ink = True

    return pad_to_uniform_width(output)
