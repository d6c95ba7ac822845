"""Shared fixtures for bitbanner tests."""

import json

import pytest

from bitbanner.config import FULL_BLOCK, UPPER_HALF_BLOCK
from bitbanner.schema import FontData

F = FULL_BLOCK


# -- Simple data fixtures ---------------------------------------------------


@pytest.fixture()
def one_char_font():
    """A font with a single two-row glyph: 'A' = one column of full blocks."""
    return FontData(name="one", characters={"A": [F, F]})


@pytest.fixture()
def empty_font():
    """A font with no characters at all."""
    return FontData(name="empty")


@pytest.fixture()
def square_font():
    """Two-column, one-row glyphs for lowercase a-d plus a 3-column space."""
    return FontData(
        name="square",
        characters={
            " ": ["   "],
            "a": [F * 2],
            "b": [F * 2],
            "c": [F * 2],
            "d": [F * 2],
        },
    )


@pytest.fixture()
def descender_font():
    """Top-anchored 3-row capitals with a 4-row 'g' hanging one row lower."""
    return FontData(
        name="desc",
        characters={
            "A": [F * 2, F * 2, F * 2],
            "B": [F * 2, F * 2, F * 2],
            "g": ["  ", F * 2, F * 2, " " + F],
            ".": [" ", " ", F],
        },
    )


@pytest.fixture()
def mixed_height_font():
    """'T' is 3 rows tall, '-' is a single row (no descenders anywhere)."""
    return FontData(
        name="mixed",
        characters={
            "T": [F * 3, " " + F + " ", " " + F + " "],
            "-": [F * 2],
        },
    )


@pytest.fixture()
def half_block_font():
    """'A' uses only full blocks; 'h' contains an upper half block."""
    return FontData(
        name="half",
        characters={
            "A": [F, F],
            "h": [F, UPPER_HALF_BLOCK],
        },
    )


@pytest.fixture()
def sample_font_data():
    """A minimal .bit font dict with a few test glyphs."""
    return {
        "name": "Test Font",
        "author": "Test Author",
        "license": "MIT",
        "characters": {
            "A": [" " + F + " ", F + " " + F, F * 3],
            "B": [F * 2 + " ", F * 3, F * 2 + " "],
            "1": [F + " ", F + " ", F + " "],
        },
    }


@pytest.fixture()
def font_file(tmp_path, sample_font_data):
    """The sample font written to a temporary .bit file."""
    path = tmp_path / "test-font.bit"
    path.write_text(json.dumps(sample_font_data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def font_dir(tmp_path, sample_font_data):
    """A directory holding two valid fonts, one broken font, and a non-font file."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    (directory / "first.bit").write_text(json.dumps(sample_font_data), encoding="utf-8")
    second = {**sample_font_data, "name": "Second"}
    (directory / "second.BIT").write_text(json.dumps(second), encoding="utf-8")
    (directory / "broken.bit").write_text("{not json", encoding="utf-8")
    (directory / "notes.txt").write_text("not a font", encoding="utf-8")
    return directory
