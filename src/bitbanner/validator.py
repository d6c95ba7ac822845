"""Validation reports for .bit font files and render options."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bitbanner.config import FONT_EXTENSION
from bitbanner.schema import RenderOptions

REQUIRED_FIELDS = ("name", "characters")


def validate_font(data: dict[str, Any], *, check_heights: bool = True) -> list[str]:
    """Run all validation checks on a font dict. Returns list of issues (empty = valid).

    ``check_heights=False`` skips the height-consistency warning, which does
    not stop a font from rendering.
    """
    issues: list[str] = []

    _check_schema(data, issues)
    _check_name(data, issues)
    _check_metadata(data, issues)
    _check_characters_nonempty(data, issues)
    _check_character_keys(data, issues)
    _check_rows(data, issues)
    if check_heights:
        _check_height_consistency(data, issues)

    return issues


def validate_file(path: str | Path) -> list[str]:
    """Load JSON from file path, then validate."""
    filepath = Path(path)

    if not filepath.exists():
        return [f"File not found: {path}"]

    if filepath.suffix.lower() != FONT_EXTENSION:
        return [f"File {filepath.name} does not have {FONT_EXTENSION} extension"]

    try:
        raw = filepath.read_text(encoding="utf-8")
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return [f"Invalid JSON: {e}"]

    if not isinstance(data, dict):
        return ["Root element must be a JSON object"]

    return validate_font(data)


def validate_options(data: dict[str, Any]) -> list[str]:
    """Check render options, one issue per offending field.

    Each issue reads ``"<field>: <message>"``; messages that do not already
    quote the rejected value get ``" (got <value>)"`` appended.
    """
    try:
        RenderOptions.model_validate(data)
    except ValidationError as e:
        return [_format_error(err) for err in e.errors()]
    return []


def _format_error(err: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in err["loc"]) or "options"
    if err["type"] == "value_error":
        return f"{field}: {err['msg'].removeprefix('Value error, ')}"
    return f"{field}: {err['msg']} (got {err['input']!r})"


# --- Individual checks ---


def _check_schema(data: dict[str, Any], issues: list[str]) -> None:
    """Check required fields are present."""
    for field in REQUIRED_FIELDS:
        if field not in data:
            issues.append(f"Missing required field: '{field}'")


def _check_name(data: dict[str, Any], issues: list[str]) -> None:
    name = data.get("name")
    if name is None:
        return
    if not isinstance(name, str) or not name.strip():
        issues.append("Field 'name' must be a non-empty string")


def _check_metadata(data: dict[str, Any], issues: list[str]) -> None:
    """Optional author/license fields must be strings."""
    for field in ("author", "license"):
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            issues.append(f"Field '{field}' must be a string")


def _check_characters_nonempty(data: dict[str, Any], issues: list[str]) -> None:
    characters = data.get("characters")
    if characters is None:
        return
    if not isinstance(characters, dict):
        issues.append("Field 'characters' must be an object")
    elif len(characters) == 0:
        issues.append("Font must contain at least 1 character")


def _check_character_keys(data: dict[str, Any], issues: list[str]) -> None:
    characters = data.get("characters")
    if not isinstance(characters, dict):
        return
    for char in characters:
        if len(char) != 1:
            issues.append(f"Character key '{char}' must be exactly one character")


def _check_rows(data: dict[str, Any], issues: list[str]) -> None:
    """Every glyph must be a list of strings."""
    characters = data.get("characters")
    if not isinstance(characters, dict):
        return

    for char, rows in characters.items():
        if not isinstance(rows, list):
            issues.append(f"Character '{char}': rows must be a list of strings")
            continue
        for i, row in enumerate(rows):
            if not isinstance(row, str):
                issues.append(f"Character '{char}' row {i}: must be a string")


def _check_height_consistency(data: dict[str, Any], issues: list[str]) -> None:
    """Warn if >30% of glyphs differ from the most common height."""
    characters = data.get("characters")
    if not isinstance(characters, dict):
        return

    heights = [
        len(rows) for char, rows in characters.items() if char != " " and isinstance(rows, list)
    ]
    if not heights:
        return

    common_height, _ = Counter(heights).most_common(1)[0]
    outlier_count = sum(1 for h in heights if h != common_height)

    total = len(heights)
    if outlier_count / total > 0.3:
        pct = round(outlier_count / total * 100)
        issues.append(
            f"Height inconsistency: {outlier_count}/{total} ({pct}%) glyphs "
            f"differ from the common height {common_height}"
        )
