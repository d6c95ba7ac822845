"""Shadow compositing and ANSI coloring of a plain rendered block.

The compositor is the only stage that produces escape sequences. It stamps
an optional shadow copy and the main text onto a canvas big enough for both,
then colors each inked cell according to a single resolved color mode.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bitbanner.config import DEFAULT_RAINBOW_COLORS, SHADOW_STYLES
from bitbanner.schema import GradientDirection, RenderOptions
from bitbanner.utils import hex_to_rgb

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"


@dataclass(frozen=True)
class Solid:
    pass


@dataclass(frozen=True)
class Gradient:
    end: str
    direction: GradientDirection


@dataclass(frozen=True)
class Rainbow:
    palette: tuple[str, ...]
    frame: int
    speed: int


ColorStyle = Solid | Gradient | Rainbow


@dataclass
class Cell:
    """One canvas cell; row/col are the pre-shadow block coordinates."""

    char: str
    is_main: bool
    row: int
    col: int


def resolve_color_mode(options: RenderOptions) -> ColorStyle:
    """Collapse the color-related options into one variant.

    An explicit ``color_mode`` wins; the legacy ``use_gradient`` flag only
    applies in single-color mode and only with a distinct end color.
    """
    if options.color_mode == "rainbow":
        palette = options.rainbow_colors or DEFAULT_RAINBOW_COLORS
        return Rainbow(tuple(palette), options.rainbow_frame, options.rainbow_speed)
    if options.color_mode == "gradient" and options.gradient_color:
        return Gradient(options.gradient_color, options.gradient_direction)
    if (
        options.use_gradient
        and options.gradient_color
        and options.gradient_color.upper() != options.text_color.upper()
    ):
        return Gradient(options.gradient_color, options.gradient_direction)
    return Solid()


def colorize(char: str, rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m{char}{RESET}"


def _clamp(value: int) -> int:
    return max(0, min(value, 255))


def _gradient_factor(
    direction: GradientDirection, cell: Cell, x: int, block_height: int, canvas_width: int
) -> float:
    if direction in ("up-down", "down-up"):
        factor = cell.row / (block_height - 1) if block_height > 1 else 0.0
        return 1.0 - factor if direction == "down-up" and block_height > 1 else factor
    # Horizontal gradients span the whole canvas so glyphs of any height agree
    factor = x / (canvas_width - 1) if canvas_width > 1 else 0.0
    return 1.0 - factor if direction == "right-left" else factor


def _blend(
    start: tuple[int, int, int], end: tuple[int, int, int], factor: float
) -> tuple[int, int, int]:
    r, g, b = (_clamp(int(s + factor * (e - s))) for s, e in zip(start, end))
    return (r, g, b)


def _build_canvas(
    block: list[str],
    shadow_x: int,
    shadow_y: int,
    shadow_char: str | None,
) -> tuple[list[list[Cell | None]], int]:
    """Stamp shadow then main text; returns (canvas, canvas_width)."""
    height = len(block)
    width = max((len(row) for row in block), default=0)

    min_x, max_x = min(0, shadow_x), width + max(0, shadow_x)
    min_y, max_y = min(0, shadow_y), height + max(0, shadow_y)
    canvas_width = max_x - min_x
    canvas: list[list[Cell | None]] = [[None] * canvas_width for _ in range(max_y - min_y)]

    if shadow_char is not None:
        for y, row in enumerate(block):
            for x, ch in enumerate(row):
                if ch != " ":
                    cy, cx = y + shadow_y - min_y, x + shadow_x - min_x
                    canvas[cy][cx] = Cell(shadow_char, False, y, x)

    # Main text always wins over shadow
    for y, row in enumerate(block):
        for x, ch in enumerate(row):
            if ch != " ":
                canvas[y - min_y][x - min_x] = Cell(ch, True, y, x)

    return canvas, canvas_width


def apply_style(
    block: list[str],
    options: RenderOptions,
    *,
    half_pixel_conflict: bool = False,
) -> list[str]:
    """Color a plain block and composite its shadow.

    ``half_pixel_conflict`` comes from ``glyphs.has_half_pixel_conflict`` for
    the rendered text; when true, an offset shadow is skipped for this call.
    Space cells are emitted bare; rows are trimmed of trailing spaces.
    """
    if not block:
        return []

    shadow_enabled = options.shadow
    if shadow_enabled and (options.shadow_x or options.shadow_y) and half_pixel_conflict:
        logger.info("Shadow disabled: text uses half-pixel glyphs")
        shadow_enabled = False

    shadow_char, shadow_hex = SHADOW_STYLES[options.shadow_style]
    mode = resolve_color_mode(options)

    if shadow_enabled:
        canvas, canvas_width = _build_canvas(block, options.shadow_x, options.shadow_y, shadow_char)
    else:
        canvas, canvas_width = _build_canvas(block, 0, 0, None)

    text_rgb = hex_to_rgb(options.text_color)
    shadow_rgb = hex_to_rgb(shadow_hex) if shadow_hex else text_rgb
    end_rgb = hex_to_rgb(mode.end) if isinstance(mode, Gradient) else text_rgb
    block_height = len(block)

    lines = []
    for canvas_row in canvas:
        parts = []
        for x, cell in enumerate(canvas_row):
            if cell is None:
                parts.append(" ")
                continue

            if isinstance(mode, Rainbow) and cell.is_main:
                frame_offset = mode.frame // mode.speed if mode.speed > 0 else 0
                idx = (cell.col + cell.row + frame_offset) % len(mode.palette)
                rgb = hex_to_rgb(mode.palette[idx])
            elif isinstance(mode, Gradient):
                factor = _gradient_factor(mode.direction, cell, x, block_height, canvas_width)
                rgb = _blend(text_rgb, end_rgb, factor)
            elif cell.is_main:
                rgb = text_rgb
            else:
                rgb = shadow_rgb

            parts.append(colorize(cell.char, rgb))
        lines.append("".join(parts).rstrip(" "))

    return lines
