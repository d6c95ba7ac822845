"""Glyph resolution: scaling, baseline alignment, and per-render caches.

Bitmap rows are treated as top-anchored: row 0 of every glyph sits on the
same line. Glyphs shorter than the shared baseline are pushed down onto it,
glyphs with ink below it (descenders) hang past it.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field

from bitbanner.config import (
    BASELINE_REFERENCE_CHARS,
    DEFAULT_MISSING_WIDTH,
    HALF_PIXEL_CHARS,
    MISSING_WIDTH_FALLBACK_CHARS,
    SPACE_ADVANCE,
)
from bitbanner.kerning import compute_kerning, max_row_len
from bitbanner.schema import FontData

logger = logging.getLogger(__name__)


@dataclass
class DescenderInfo:
    """Baseline bookkeeping for one glyph at one scale."""

    has_descender: bool
    baseline_height: int  # Rows from the glyph top down to and including the baseline
    descender_height: int  # Ink rows below the baseline
    total_height: int
    vertical_offset: int  # Rows to shift down when placed in the line


@dataclass
class ResolvedGlyph:
    """A character's bitmap prepared for one render call."""

    char: str
    rows: list[str]
    width: int
    height: int
    offset: int = 0
    blank: bool = False

    @property
    def placed(self) -> list[str]:
        """Rows as laid into the line, with the vertical offset applied."""
        return [" " * self.width] * self.offset + self.rows

    def fragment(self, row: int) -> str:
        """The part of this glyph drawn on output row ``row``."""
        idx = row - self.offset
        if 0 <= idx < len(self.rows):
            return self.rows[idx]
        return ""


def scale_glyph(rows: list[str], scale: float) -> list[str]:
    """Resample bitmap rows by nearest-neighbor repetition or selection.

    2x and 4x repeat every cell; 0.5x keeps every second column and row.
    The block character in each cell is preserved as-is.
    """
    if scale == 1.0:
        return list(rows)
    if scale < 1.0:
        step = round(1 / scale)
        return [row[::step] for row in rows[::step]]
    factor = round(scale)
    return ["".join(ch * factor for ch in row) for row in rows for _ in range(factor)]


def has_ink(row: str) -> bool:
    return row.strip(" ") != ""


def _ink_span(rows: list[str]) -> tuple[int, int] | None:
    """(first, last) row index containing ink, or None for a blank glyph."""
    inked = [i for i, row in enumerate(rows) if has_ink(row)]
    if not inked:
        return None
    return inked[0], inked[-1]


def prepare_rows(rows: list[str], scale: float) -> list[str]:
    """Scale a glyph and drop zero-length rows."""
    return [row for row in scale_glyph(rows, scale) if row]


def _shared_baseline_row(spans: dict[str, tuple[int, int]]) -> int:
    """Most common ink-bottom row among reference glyphs.

    Ties go to the tallest reference glyph, then to the one whose ink
    starts lowest.
    """
    refs = {c: s for c, s in spans.items() if c in BASELINE_REFERENCE_CHARS} or spans
    counts = Counter(bottom for _, bottom in refs.values())
    best = max(counts.values())
    ranked = sorted(
        (
            (bottom - top, top, bottom)
            for top, bottom in refs.values()
            if counts[bottom] == best
        ),
        reverse=True,
    )
    return ranked[0][2]


def analyze_descenders(font: FontData, scale: float) -> dict[str, DescenderInfo]:
    """Compute baseline alignment for every inked glyph of ``font``.

    Returns an empty dict when no glyph reaches below the shared baseline;
    callers then fall back to vertical centering.
    """
    spans: dict[str, tuple[int, int]] = {}
    heights: dict[str, int] = {}
    for char, raw in font.characters.items():
        if char == " ":
            continue
        rows = prepare_rows(raw, scale)
        span = _ink_span(rows)
        if span is None:
            continue
        spans[char] = span
        heights[char] = len(rows)

    if not spans:
        return {}

    baseline = _shared_baseline_row(spans)
    depths = {c: max(0, bottom - baseline) for c, (_, bottom) in spans.items()}
    if not any(depths.values()):
        return {}

    info: dict[str, DescenderInfo] = {}
    for char, height in heights.items():
        own_baseline = min(height - 1, baseline)
        info[char] = DescenderInfo(
            has_descender=depths[char] > 0,
            baseline_height=own_baseline + 1,
            descender_height=depths[char],
            total_height=height,
            vertical_offset=baseline - own_baseline,
        )
    return info


def compute_line_height(font: FontData, scale: float, descenders: dict[str, DescenderInfo]) -> int:
    """Shared row count of a composed line: tallest scaled glyph or offset glyph."""
    height = max((len(prepare_rows(rows, scale)) for rows in font.characters.values()), default=0)
    for info in descenders.values():
        height = max(height, info.total_height + info.vertical_offset)
    return height


def missing_glyph_width(font: FontData) -> int:
    """Width used for characters the font does not define."""
    space = font.characters.get(" ")
    if space:
        return max_row_len(space)
    for char in MISSING_WIDTH_FALLBACK_CHARS:
        rows = font.characters.get(char)
        if rows:
            return max_row_len(rows)
    return DEFAULT_MISSING_WIDTH


def has_half_pixel_conflict(text: str, font: FontData, scale: float) -> bool:
    """True if any character used in ``text`` draws a half-height block once scaled.

    Whole-cell shadow offsets cannot line up with half-pixel glyphs, so
    callers suppress shadows when this is true.
    """
    for char in set(text):
        rows = font.characters.get(char)
        if rows is None:
            continue
        for row in scale_glyph(rows, scale):
            if any(ch in HALF_PIXEL_CHARS for ch in row):
                return True
    return False


@dataclass
class RenderContext:
    """Caches scoped to a single render call.

    Never share an instance between calls; fonts are only read.
    """

    font: FontData
    scale: float
    descenders: dict[str, DescenderInfo] = field(init=False)
    line_height: int = field(init=False)
    missing_width: int = field(init=False)
    _glyphs: dict[str, ResolvedGlyph] = field(init=False, default_factory=dict)
    _kerning: dict[tuple[str, str], int] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.descenders = analyze_descenders(self.font, self.scale)
        self.line_height = compute_line_height(self.font, self.scale, self.descenders)
        self.missing_width = missing_glyph_width(self.font)

    def glyph(self, char: str) -> ResolvedGlyph:
        resolved = self._glyphs.get(char)
        if resolved is None:
            resolved = self._resolve(char)
            self._glyphs[char] = resolved
        return resolved

    def kerning(self, left: str, right: str) -> int:
        """Kerning between two adjacent characters; spaces never kern."""
        pair = (left, right)
        if pair not in self._kerning:
            if left == " " or right == " ":
                self._kerning[pair] = 0
            else:
                self._kerning[pair] = compute_kerning(
                    self.glyph(left).placed, self.glyph(right).placed
                )
        return self._kerning[pair]

    def _space_like(self, char: str) -> ResolvedGlyph:
        width = math.ceil(SPACE_ADVANCE)
        return ResolvedGlyph(
            char=char,
            rows=[" " * width],
            width=width,
            height=self.line_height,
            blank=True,
        )

    def _resolve(self, char: str) -> ResolvedGlyph:
        if char == " ":
            return self._space_like(char)

        raw = self.font.characters.get(char)
        if raw is None:
            width = self.missing_width
            return ResolvedGlyph(
                char=char,
                rows=[" " * width] * self.line_height,
                width=width,
                height=self.line_height,
                blank=True,
            )

        rows = prepare_rows(raw, self.scale)
        if not any(has_ink(row) for row in rows):
            logger.debug("Glyph %r has no ink at scale %s, treating as space", char, self.scale)
            return self._space_like(char)

        info = self.descenders.get(char)
        if info is not None:
            offset = info.vertical_offset
        elif len(rows) < self.line_height:
            offset = (self.line_height - len(rows)) // 2
        else:
            offset = 0

        return ResolvedGlyph(
            char=char,
            rows=rows,
            width=max_row_len(rows),
            height=len(rows),
            offset=offset,
        )


def resolve_glyph(char: str, font: FontData, scale: float) -> ResolvedGlyph:
    """Resolve a single character outside of a composed line."""
    return RenderContext(font, scale).glyph(char)
