"""Font discovery: bundled .bit fonts plus user-registered files and directories."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from bitbanner.config import FONT_EXTENSION
from bitbanner.schema import FontData
from bitbanner.validator import validate_font

logger = logging.getLogger(__name__)

BUNDLED_FONTS_DIR = Path(__file__).parent / "fonts"


def load_font_file(path: str | Path) -> FontData:
    """Parse and validate a single .bit font file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On a wrong extension, malformed JSON, or invalid font content.
    """
    filepath = Path(path)
    if filepath.suffix.lower() != FONT_EXTENSION:
        msg = f"File {filepath} does not have {FONT_EXTENSION} extension"
        raise ValueError(msg)

    raw = filepath.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse JSON in {filepath}: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Invalid font data in {filepath}: root element must be a JSON object"
        raise ValueError(msg)

    issues = validate_font(data, check_heights=False)
    if issues:
        msg = f"Invalid font data in {filepath}: {'; '.join(issues)}"
        raise ValueError(msg)

    return FontData.model_validate(data)


class FontRegistry:
    """Named fonts available for rendering.

    Registered fonts override bundled fonts of the same name. Lookups are
    case-insensitive.
    """

    def __init__(self, bundled_dir: Path | None = BUNDLED_FONTS_DIR):
        self.bundled_dir = bundled_dir
        self._custom: dict[str, FontData] = {}

    def register_file(self, path: str | Path) -> str:
        """Load one .bit file and register it. Returns the font name."""
        font = load_font_file(path)
        self._custom[font.name.lower()] = font
        logger.info("Registered font '%s' from %s", font.name, path)
        return font.name

    def register_directory(self, path: str | Path) -> list[str]:
        """Register every .bit file in a directory.

        Files that fail to load are logged and skipped. Raises ``ValueError``
        when nothing could be loaded.
        """
        dirpath = Path(path)
        font_files = sorted(
            p for p in dirpath.iterdir() if p.is_file() and p.suffix.lower() == FONT_EXTENSION
        )

        loaded: list[str] = []
        errors: list[str] = []
        for font_file in font_files:
            try:
                loaded.append(self.register_file(font_file))
            except (OSError, ValueError) as e:
                logger.warning("Failed to load %s: %s", font_file.name, e)
                errors.append(f"{font_file.name}: {e}")

        if not loaded:
            if errors:
                msg = f"No fonts could be loaded from {dirpath}. Errors: {'; '.join(errors)}"
            else:
                msg = f"No {FONT_EXTENSION} font files found in {dirpath}"
            raise ValueError(msg)

        return loaded

    def register_path(self, path: str | Path) -> list[str]:
        """Register a font file or a directory of fonts."""
        target = Path(path)
        if not target.exists():
            msg = f"Path {target} does not exist"
            raise FileNotFoundError(msg)
        if target.is_dir():
            return self.register_directory(target)
        return [self.register_file(target)]

    def load(self, name: str) -> FontData:
        """Look up a font by name, registered fonts first.

        Raises:
            KeyError: If no registered or bundled font has that name.
        """
        key = name.lower()
        if key in self._custom:
            return self._custom[key]

        bundled = self._bundled_path(key)
        if bundled is None:
            msg = f"Font '{name}' not found in custom or bundled fonts"
            raise KeyError(msg)
        return load_font_file(bundled)

    def names(self) -> list[str]:
        """Sorted names of every available font."""
        found = {p.stem for p in self._bundled_files()}
        found.update(font.name for font in self._custom.values())
        return sorted(found)

    def _bundled_files(self) -> list[Path]:
        if self.bundled_dir is None or not self.bundled_dir.is_dir():
            return []
        return sorted(p for p in self.bundled_dir.iterdir() if p.suffix.lower() == FONT_EXTENSION)

    def _bundled_path(self, key: str) -> Path | None:
        for path in self._bundled_files():
            if path.stem.lower() == key:
                return path
        return None


_default_registry = FontRegistry()


def load_font(name: str) -> FontData:
    return _default_registry.load(name)


def list_fonts() -> list[str]:
    return _default_registry.names()


def register_path(path: str | Path) -> list[str]:
    return _default_registry.register_path(path)
