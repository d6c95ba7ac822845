"""Visual kerning between adjacent glyph bitmaps.

Kerning here is derived from ink, not from declared widths: the adjustment
makes the closest visible pixels of two glyphs land in adjacent columns.
User character spacing is added on top by the line composer.
"""

from __future__ import annotations


def max_row_len(rows: list[str]) -> int:
    """Width of a glyph: the longest row's character count."""
    return max((len(row) for row in rows), default=0)


def normalize_glyph(rows: list[str], height: int) -> list[str]:
    """Pad a glyph to ``height`` rows, every row space-padded to the glyph's width."""
    width = max_row_len(rows)
    out = [row.ljust(width) for row in rows[:height]]
    out.extend(" " * width for _ in range(height - len(out)))
    return out


def _rightmost_ink(row: str) -> int:
    for x in range(len(row) - 1, -1, -1):
        if row[x] != " ":
            return x
    return -1


def _leftmost_ink(row: str) -> int:
    for x, ch in enumerate(row):
        if ch != " ":
            return x
    return -1


def compute_kerning(left: list[str], right: list[str]) -> int:
    """Return the horizontal adjustment to apply after ``left``'s declared width.

    With the adjustment applied, the tightest visual gap between the two
    glyphs is exactly one column (touching). Only rows where both glyphs have
    ink are compared; if no row has both, the globally rightmost ink of
    ``left`` and leftmost ink of ``right`` are used instead. Returns 0 when
    either glyph has no ink at all.
    """
    if not left or not right:
        return 0

    height = max(len(left), len(right))
    a = normalize_glyph(left, height)
    b = normalize_glyph(right, height)

    width_a = max_row_len(a)
    if width_a == 0:
        return 0

    min_dist: int | None = None
    max_a_global = -1
    min_b_global: int | None = None

    for row_a, row_b in zip(a, b):
        max_a = _rightmost_ink(row_a)
        min_b = _leftmost_ink(row_b)

        if max_a != -1:
            max_a_global = max(max_a_global, max_a)
        if min_b != -1:
            min_b_global = min_b if min_b_global is None else min(min_b_global, min_b)

        if max_a != -1 and min_b != -1:
            # Distance assuming right starts immediately after left's width
            dist = (width_a + min_b) - max_a
            min_dist = dist if min_dist is None else min(min_dist, dist)

    if min_dist is None:
        # No row has ink in both (e.g. ' followed by .)
        if max_a_global == -1 or min_b_global is None:
            return 0
        min_dist = (width_a + min_b_global) - max_a_global

    return 1 - min_dist
