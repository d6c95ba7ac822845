"""Public rendering entry points.

Text goes through the block assembler (glyph resolution, kerning, line
composition, alignment) and then the style compositor (shadow, colors).
Each call builds its own caches, so concurrent calls sharing one font are
safe as long as nobody mutates the font.
"""

from __future__ import annotations

from bitbanner.compositor import apply_style
from bitbanner.glyphs import has_half_pixel_conflict
from bitbanner.layout import assemble_block
from bitbanner.schema import FontData, RenderOptions


def render_plain(text: str, font: FontData, options: RenderOptions | None = None) -> list[str]:
    """Render ``text`` without colors: equal-width rows of block characters."""
    if options is None:
        options = RenderOptions()
    return assemble_block(text, font, options)


def render_text(text: str, font: FontData, options: RenderOptions | None = None) -> list[str]:
    """Render ``text`` to ANSI-colored rows, one per terminal line.

    Args:
        text: Text to draw; ``"\\n"`` starts a new line.
        font: Font to draw with. Characters it lacks render as blank gaps.
        options: Validated style options (defaults when omitted).

    Returns:
        Rows with 24-bit foreground escapes around every inked cell. Empty
        text, or a font with no characters, yields an empty list.
    """
    if options is None:
        options = RenderOptions()

    block = assemble_block(text, font, options)
    if not block:
        return []

    conflict = options.shadow and has_half_pixel_conflict(text, font, options.scale)
    return apply_style(block, options, half_pixel_conflict=conflict)


def shadow_suppressed(text: str, font: FontData, options: RenderOptions) -> bool:
    """True if ``render_text`` would drop the requested shadow for this text."""
    if not options.shadow or not (options.shadow_x or options.shadow_y):
        return False
    return has_half_pixel_conflict(text, font, options.scale)
