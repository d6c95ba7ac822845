"""CLI entry point for bitbanner - render text as colored block-character banners."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from bitbanner.cli_helpers import (
    _build_options_data,
    _build_registry,
    _error_text,
    _fail,
    _print_issues,
    _resolve_font,
    _split_kwargs,
    shared_render_options,
)

# -- CLI group --------------------------------------------------------------------------


@click.group()
@click.version_option(version="0.1.0", prog_name="bitbanner")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Render text as ANSI block-character banners from .bit bitmap fonts."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


# -- render ----------------------------------------------------------------------------


@cli.command()
@click.argument("text")
@click.option("-f", "--font", default="blocky", help="Font name or path to a .bit file")
@click.option(
    "--font-path",
    type=click.Path(exists=True),
    default=None,
    help="Extra .bit file or directory of fonts",
)
@click.option("--plain", is_flag=True, help="Print without colors")
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Also write to a .txt or .png file (a directory gets a name from TEXT)",
)
@shared_render_options
def render(text, **all_kwargs):
    """Render TEXT as a banner. A literal \\n in TEXT starts a new line."""
    from bitbanner.renderer import render_plain, render_text, shadow_suppressed
    from bitbanner.schema import RenderOptions
    from bitbanner.validator import validate_options

    render_opts, cmd = _split_kwargs(all_kwargs)
    text = text.replace("\\n", "\n")

    try:
        data = _build_options_data(render_opts)
    except ValueError as e:
        _fail(str(e))

    issues = validate_options(data)
    if issues:
        _print_issues(issues)
        sys.exit(1)
    options = RenderOptions.model_validate(data)

    try:
        font = _resolve_font(cmd["font"], cmd["font_path"])
    except (KeyError, ValueError, OSError) as e:
        _fail(_error_text(e))

    if shadow_suppressed(text, font, options):
        click.secho(
            "Warning: shadow disabled, this text uses half-pixel glyphs", fg="yellow", err=True
        )

    lines = render_plain(text, font, options) if cmd["plain"] else render_text(text, font, options)
    for line in lines:
        click.echo(line)

    if cmd["output"]:
        from bitbanner.export import export_lines
        from bitbanner.utils import generate_slug

        output = Path(cmd["output"])
        if output.is_dir():
            output = output / generate_slug(text)
        fmt = "png" if output.suffix.lower() == ".png" else "txt"
        try:
            written = export_lines(lines, output, fmt)
        except (ValueError, OSError) as e:
            _fail(str(e))
        click.secho(f"Wrote {written}", fg="green", err=True)


# -- fonts -----------------------------------------------------------------------------


@cli.command()
@click.option(
    "--font-path",
    type=click.Path(exists=True),
    default=None,
    help="Extra .bit file or directory of fonts",
)
def fonts(font_path):
    """List available fonts."""
    try:
        registry = _build_registry(font_path)
    except (ValueError, OSError) as e:
        _fail(str(e))

    for name in registry.names():
        click.echo(name)


# -- validate --------------------------------------------------------------------------


@cli.command("validate")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False))
def validate_cmd(font_file):
    """Validate a .bit font file."""
    from bitbanner.validator import validate_file

    issues = validate_file(font_file)
    if not issues:
        click.secho(f"Validation passed: {font_file}", fg="green")
        return

    click.secho(f"Validation issues in {font_file} ({len(issues)}):", fg="yellow")
    for issue in issues:
        click.echo(f"  - {issue}")
    sys.exit(1)


# -- preview ---------------------------------------------------------------------------


@cli.command("preview")
@click.argument("font")
@click.option("--chars", default=None, help="Characters to preview (default: all)")
@click.option(
    "--font-path",
    type=click.Path(exists=True),
    default=None,
    help="Extra .bit file or directory of fonts",
)
def preview_cmd(font, chars, font_path):
    """Show the glyphs of FONT (a font name or a .bit file)."""
    from bitbanner.preview import preview_font as show_preview

    try:
        font_data = _resolve_font(font, font_path)
    except (KeyError, ValueError, OSError) as e:
        _fail(_error_text(e))

    click.echo(f"Font: {font_data.name} ({len(font_data.characters)} characters)")
    if font_data.author:
        click.echo(f"Author: {font_data.author}")
    click.echo()
    click.echo(show_preview(font_data, chars))
