"""Export rendered banners to plain text or PNG."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from PIL import Image, ImageDraw

from bitbanner.config import (
    EXPORT_FORMATS,
    FULL_BLOCK,
    LOWER_HALF_BLOCK,
    PNG_CELL_SIZE,
    SHADE_ALPHA,
    UPPER_HALF_BLOCK,
)
from bitbanner.utils import sanitize_filename, strip_ansi, visible_width

logger = logging.getLogger(__name__)

# One escape sequence or one visible character
_TOKEN_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|.", re.DOTALL)
_FG_COLOR_PATTERN = re.compile(r"\x1b\[38;2;(\d+);(\d+);(\d+)m")

_DEFAULT_RGBA = (255, 255, 255, 255)


def to_plain_text(lines: list[str]) -> str:
    """Join rendered rows with newlines, escape sequences removed."""
    return "\n".join(strip_ansi(line) for line in lines)


def _fill(
    draw: ImageDraw.ImageDraw, x: int, y: int, width: int, height: int, rgba: tuple[int, ...]
) -> None:
    if width <= 0 or height <= 0:
        return
    draw.rectangle([x, y, x + width - 1, y + height - 1], fill=rgba)


def _draw_cell(
    draw: ImageDraw.ImageDraw,
    col: int,
    row: int,
    char: str,
    rgba: tuple[int, int, int, int],
    cell_width: int,
    cell_height: int,
) -> None:
    x = col * cell_width
    y = row * cell_height
    half = cell_height // 2

    if char == FULL_BLOCK:
        _fill(draw, x, y, cell_width, cell_height, rgba)
    elif char == UPPER_HALF_BLOCK:
        _fill(draw, x, y, cell_width, half, rgba)
    elif char == LOWER_HALF_BLOCK:
        _fill(draw, x, y + half, cell_width, half, rgba)
    elif char in SHADE_ALPHA:
        _fill(draw, x, y, cell_width, cell_height, (*rgba[:3], SHADE_ALPHA[char]))
    elif char.isprintable() and not char.isspace():
        _fill(draw, x, y, cell_width, cell_height, rgba)


def render_png(
    lines: list[str],
    cell_width: int = PNG_CELL_SIZE,
    cell_height: int = PNG_CELL_SIZE,
) -> Image.Image:
    """Paint rendered rows onto a transparent RGBA image, one cell per character.

    Colors come from the 24-bit foreground escapes in each row; uncolored
    characters are white. Shade glyphs become translucent fills.

    Raises:
        ValueError: If there is nothing to draw.
    """
    if not lines:
        msg = "No content to export"
        raise ValueError(msg)

    max_width = max(visible_width(line) for line in lines) or 1
    img = Image.new("RGBA", (max_width * cell_width, len(lines) * cell_height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    for row, line in enumerate(lines):
        rgba = _DEFAULT_RGBA
        col = 0
        for token in _TOKEN_PATTERN.findall(line):
            if token.startswith("\x1b["):
                match = _FG_COLOR_PATTERN.fullmatch(token)
                if match:
                    r, g, b = (min(int(v), 255) for v in match.groups())
                    rgba = (r, g, b, 255)
                # Reset keeps the last color; every colored cell sets its own
                continue
            _draw_cell(draw, col, row, token, rgba, cell_width, cell_height)
            col += 1

    return img


def export_lines(lines: list[str], path: str | Path, fmt: str = "txt") -> Path:
    """Write rendered rows to ``path`` in the given format.

    The file name is sanitized and the format's extension appended when
    missing. Returns the path written.

    Raises:
        ValueError: On an unknown format, an unusable file name, or empty PNG content.
    """
    if fmt not in EXPORT_FORMATS:
        valid = ", ".join(sorted(EXPORT_FORMATS))
        msg = f"Unsupported format: '{fmt}' (must be one of: {valid})"
        raise ValueError(msg)

    target = Path(path)
    filename = sanitize_filename(target.name)
    if not filename:
        msg = f"Invalid filename: '{target.name}'"
        raise ValueError(msg)

    extension = EXPORT_FORMATS[fmt]
    if not filename.lower().endswith(extension):
        filename += extension
    output = target.parent / filename
    output.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "png":
        render_png(lines).save(output, format="PNG")
    else:
        output.write_text(to_plain_text(lines) + "\n", encoding="utf-8")

    logger.info("Exported %d rows to %s", len(lines), output)
    return output
