"""ANSI, color, and filename helpers shared across bitbanner."""

import re
from pathlib import PurePosixPath

from bitbanner.config import ANSI_COLOR_MAP, MAX_FILENAME_LENGTH
from bitbanner.schema import is_hex_color

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

_INVALID_FILENAME_CHARS = re.compile(r'[/:*?"<>|]')
_RESERVED_NAMES = {"CON", "PRN", "AUX", "NUL"} | {
    f"{p}{n}" for p in ("COM", "LPT") for n in range(1, 10)
}


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences."""
    return ANSI_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    """Printable character count of a possibly colored string."""
    return len(strip_ansi(text))


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """'#RRGGBB' -> (r, g, b). Malformed input yields black."""
    value = color[1:] if color.startswith("#") else color
    if len(value) != 6:
        return (0, 0, 0)
    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError:
        return (0, 0, 0)


def parse_color(value: str) -> str:
    """Accept '#RRGGBB' or an ANSI foreground code ("31", "94", ...).

    Raises:
        ValueError: If the value is neither.
    """
    if value.startswith("#"):
        if is_hex_color(value):
            return value.upper()
        msg = f"Invalid hex color '{value}' (expected #RRGGBB)"
        raise ValueError(msg)
    if value in ANSI_COLOR_MAP:
        return ANSI_COLOR_MAP[value]
    msg = f"Unknown color code '{value}'"
    raise ValueError(msg)


def generate_slug(text: str) -> str:
    """Name an export file after the banner text it holds.

    Runs of letters and digits become hyphen-joined words; line breaks and
    punctuation only separate them. Text with no usable words falls back to
    "banner".

    "Hello World" -> "hello-world"
    "A\\nB!" -> "a-b"
    """
    words = re.findall(r"[a-z0-9]+", text.lower())
    return "-".join(words) or "banner"


def sanitize_filename(filename: str) -> str:
    """Reduce a user-supplied name to a safe base filename ('' if nothing is left)."""
    if not filename:
        return ""

    base = PurePosixPath(filename.replace("\\", "/")).name
    base = _INVALID_FILENAME_CHARS.sub("", base).strip(" ")
    if not base:
        return ""

    stem, dot, ext = base.rpartition(".")
    if not dot:
        stem, ext = base, ""
    if stem.upper() in _RESERVED_NAMES:
        base = "_" + base
        stem = "_" + stem

    if len(base) > MAX_FILENAME_LENGTH:
        suffix = f".{ext}" if dot else ""
        if len(suffix) >= MAX_FILENAME_LENGTH:
            base = base[:MAX_FILENAME_LENGTH]
        else:
            base = stem[: MAX_FILENAME_LENGTH - len(suffix)] + suffix

    return base
