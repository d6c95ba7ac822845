"""Plain glyph inspection for .bit fonts."""

from __future__ import annotations

from bitbanner.kerning import max_row_len
from bitbanner.schema import FontData

EMPTY = "\u00b7"  # ·


def preview_glyph(rows: list[str], char: str) -> str:
    """Render a single glyph as text.

    Returns a string with a header line and the bitmap rows, spaces shown as ·
    so the glyph's full box is visible.
    """
    width = max_row_len(rows)
    height = len(rows)

    lines: list[str] = []
    lines.append(f"'{char}' ({width}\u00d7{height})")

    for row in rows:
        lines.append(row.ljust(width).replace(" ", EMPTY))

    return "\n".join(lines)


def preview_font(font: FontData, chars: str | None = None) -> str:
    """Inspect a .bit font glyph by glyph, in the order the file defines them.

    ``chars`` narrows the output to the given characters; any the font lacks
    are listed as ``(not found)`` so gaps in coverage show up in place.
    """
    wanted = font.characters.keys() if chars is None else chars
    return "\n\n".join(_glyph_section(font, char) for char in wanted)


def _glyph_section(font: FontData, char: str) -> str:
    rows = font.characters.get(char)
    if rows is None:
        return f"'{char}' (not found)"
    return preview_glyph(rows, char)
