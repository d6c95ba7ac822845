"""CLI helper functions, decorators, and option definitions for bitbanner."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, NoReturn

import click

from bitbanner.loader import FontRegistry, load_font_file
from bitbanner.schema import FontData

# CLI direction names -> gradient directions
DIRECTIONS = {
    "down": "up-down",
    "up": "down-up",
    "right": "left-right",
    "left": "right-left",
}

# Names of the shared render options (used to split kwargs in commands)
_RENDER_OPTION_NAMES = (
    "color",
    "gradient",
    "direction",
    "rainbow",
    "frame",
    "char_spacing",
    "word_spacing",
    "line_spacing",
    "scale",
    "shadow",
    "shadow_x",
    "shadow_y",
    "shadow_style",
    "align",
)


def shared_render_options(func):
    """Decorator that adds the style options accepted by render commands."""
    options = [
        click.option("--color", default="#FFFFFF", help="Text color (#RRGGBB or ANSI code)"),
        click.option("--gradient", default=None, help="Gradient end color (#RRGGBB or ANSI code)"),
        click.option(
            "--direction",
            type=click.Choice(list(DIRECTIONS)),
            default="down",
            help="Gradient direction",
        ),
        click.option("--rainbow", is_flag=True, help="Cycle the default rainbow palette"),
        click.option("--frame", type=int, default=0, help="Rainbow animation frame"),
        click.option(
            "--char-spacing", type=int, default=1, help="Columns between characters (0-10)"
        ),
        click.option(
            "--word-spacing", type=int, default=2, help="Extra columns between words (0-20)"
        ),
        click.option("--line-spacing", type=int, default=1, help="Blank rows between lines (0-10)"),
        click.option(
            "--scale",
            type=click.Choice(["0.5", "1", "2", "4"]),
            default="1",
            help="Glyph scale factor",
        ),
        click.option("--shadow", is_flag=True, help="Draw a drop shadow"),
        click.option("--shadow-x", type=int, default=1, help="Shadow column offset (-5 to 5)"),
        click.option("--shadow-y", type=int, default=1, help="Shadow row offset (-5 to 5)"),
        click.option(
            "--shadow-style",
            type=click.Choice(["light", "medium", "dark"]),
            default="light",
            help="Shade character used for the shadow",
        ),
        click.option(
            "--align",
            type=click.Choice(["left", "center", "right"]),
            default="center",
            help="Alignment of multi-line text",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _split_kwargs(all_kwargs: dict) -> tuple[dict, dict]:
    """Split kwargs into (render_opts, command_opts)."""
    render = {k: all_kwargs[k] for k in _RENDER_OPTION_NAMES}
    cmd = {k: v for k, v in all_kwargs.items() if k not in _RENDER_OPTION_NAMES}
    return render, cmd


def _build_options_data(opts: dict) -> dict[str, Any]:
    """Convert CLI option dict into RenderOptions fields.

    Raises:
        ValueError: On an unparseable color or conflicting color flags.
    """
    from bitbanner.utils import parse_color

    if opts["rainbow"] and opts["gradient"]:
        msg = "Choose either --gradient or --rainbow, not both"
        raise ValueError(msg)

    data: dict[str, Any] = {
        "char_spacing": opts["char_spacing"],
        "word_spacing": opts["word_spacing"],
        "line_spacing": opts["line_spacing"],
        "alignment": opts["align"],
        "text_color": parse_color(opts["color"]),
        "gradient_direction": DIRECTIONS[opts["direction"]],
        "scale": float(opts["scale"]),
        "shadow": opts["shadow"],
        "shadow_x": opts["shadow_x"],
        "shadow_y": opts["shadow_y"],
        "shadow_style": opts["shadow_style"],
    }

    if opts["gradient"]:
        data["gradient_color"] = parse_color(opts["gradient"])
        data["color_mode"] = "gradient"
    elif opts["rainbow"]:
        data["color_mode"] = "rainbow"
        data["rainbow_frame"] = opts["frame"]

    return data


def _build_registry(font_path: str | None) -> FontRegistry:
    """Fresh registry with an optional user font file or directory."""
    registry = FontRegistry()
    if font_path:
        registry.register_path(font_path)
    return registry


def _resolve_font(font: str, font_path: str | None) -> FontData:
    """Load FONT as a .bit file path if one exists, otherwise by name."""
    candidate = Path(font)
    if candidate.is_file():
        return load_font_file(candidate)
    return _build_registry(font_path).load(font)


def _fail(message: str) -> NoReturn:
    """Print an error in red and exit with status 1."""
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _error_text(e: Exception) -> str:
    # KeyError wraps its message in quotes
    if isinstance(e, KeyError) and e.args:
        return str(e.args[0])
    return str(e)


def _print_issues(issues: list[str]) -> None:
    click.secho(f"Invalid options ({len(issues)}):", fg="red", err=True)
    for issue in issues:
        click.secho(f"  - {issue}", fg="red", err=True)
