"""Constants and configuration for bitbanner."""

# Block-drawing "pixels" used by .bit fonts
FULL_BLOCK = "\u2588"  # █
UPPER_HALF_BLOCK = "\u2580"  # ▀
LOWER_HALF_BLOCK = "\u2584"  # ▄
LIGHT_SHADE = "\u2591"  # ░
MEDIUM_SHADE = "\u2592"  # ▒
DARK_SHADE = "\u2593"  # ▓

# Half-height blocks conflict with whole-row shadow offsets
HALF_PIXEL_CHARS = frozenset({UPPER_HALF_BLOCK, LOWER_HALF_BLOCK})

# Shadow styles: name -> (glyph, fixed color or None to inherit the text color)
SHADOW_STYLES: dict[str, tuple[str, str | None]] = {
    "light": (LIGHT_SHADE, None),
    "medium": (MEDIUM_SHADE, None),
    "dark": (DARK_SHADE, None),
}

# Option ranges (inclusive)
CHAR_SPACING_RANGE = (0, 10)
WORD_SPACING_RANGE = (0, 20)
LINE_SPACING_RANGE = (0, 10)
SHADOW_OFFSET_RANGE = (-5, 5)
SCALE_RANGE = (0.5, 4.0)
SCALE_FACTORS = (0.5, 1.0, 2.0, 4.0)

# Option defaults
DEFAULT_CHAR_SPACING = 1
DEFAULT_WORD_SPACING = 2
DEFAULT_LINE_SPACING = 1
DEFAULT_TEXT_COLOR = "#FFFFFF"
DEFAULT_RAINBOW_SPEED = 5  # Frames per color shift

# A manual space advances half a pixel (one column once rounded up)
SPACE_ADVANCE = 0.5

# Width of glyphs missing from a font: the font's space, else the first of
# these characters the font defines, else DEFAULT_MISSING_WIDTH
MISSING_WIDTH_FALLBACK_CHARS = "xM!"
DEFAULT_MISSING_WIDTH = 4

# Glyphs whose ink bottom defines the shared baseline
BASELINE_REFERENCE_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")

DEFAULT_RAINBOW_COLORS = (
    "#FF0000",  # Red
    "#FF7F00",  # Orange
    "#FFFF00",  # Yellow
    "#00FF00",  # Green
    "#00FFFF",  # Cyan
    "#0000FF",  # Blue
    "#8B00FF",  # Violet
)

# ANSI foreground color codes accepted on the command line
ANSI_COLOR_MAP: dict[str, str] = {
    "30": "#000000",
    "31": "#CD0000",
    "32": "#00CD00",
    "33": "#CDCD00",
    "34": "#0000EE",
    "35": "#CD00CD",
    "36": "#00CDCD",
    "37": "#E5E5E5",
    "90": "#7F7F7F",
    "91": "#FF0000",
    "92": "#00FF00",
    "93": "#FFFF00",
    "94": "#5C5CFF",
    "95": "#FF00FF",
    "96": "#00FFFF",
    "97": "#FFFFFF",
}

# Font files
FONT_EXTENSION = ".bit"

# PNG export: pixels per terminal cell, alpha per shade glyph
PNG_CELL_SIZE = 16
SHADE_ALPHA: dict[str, int] = {
    LIGHT_SHADE: 64,
    MEDIUM_SHADE: 128,
    DARK_SHADE: 191,
}

# Export formats: name -> file extension
EXPORT_FORMATS: dict[str, str] = {
    "txt": ".txt",
    "png": ".png",
}
MAX_FILENAME_LENGTH = 200
