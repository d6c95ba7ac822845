"""Tests for plain text and PNG export of rendered banners."""

import pytest
from PIL import Image

from bitbanner.compositor import colorize
from bitbanner.config import DARK_SHADE, LIGHT_SHADE, MEDIUM_SHADE
from bitbanner.export import export_lines, render_png, to_plain_text

F = "█"
RED = (255, 0, 0)


class TestToPlainText:
    def test_strips_escapes(self):
        lines = [colorize(F, RED) + " " + colorize(F, RED), colorize(F, RED)]
        assert to_plain_text(lines) == F + " " + F + "\n" + F

    def test_plain_rows_unchanged(self):
        assert to_plain_text(["ab", "cd"]) == "ab\ncd"


class TestRenderPng:
    def test_size_from_cells(self):
        img = render_png([F * 3, F], cell_width=4, cell_height=2)
        assert img.size == (12, 4)
        assert img.mode == "RGBA"

    def test_default_cell_size(self):
        assert render_png([F]).size == (16, 16)

    def test_escapes_do_not_take_cells(self):
        img = render_png([colorize(F, RED) * 2], cell_width=2, cell_height=2)
        assert img.size == (4, 2)

    def test_full_block_uses_escape_color(self):
        img = render_png([colorize(F, RED)], cell_width=4, cell_height=4)
        assert img.getpixel((0, 0)) == (255, 0, 0, 255)
        assert img.getpixel((3, 3)) == (255, 0, 0, 255)

    def test_uncolored_is_white(self):
        img = render_png([F], cell_width=2, cell_height=2)
        assert img.getpixel((1, 1)) == (255, 255, 255, 255)

    def test_spaces_transparent(self):
        img = render_png([" " + F], cell_width=2, cell_height=2)
        assert img.getpixel((0, 0))[3] == 0
        assert img.getpixel((2, 0))[3] == 255

    def test_upper_half_block(self):
        img = render_png(["▀"], cell_width=4, cell_height=4)
        assert img.getpixel((0, 0))[3] == 255
        assert img.getpixel((0, 3))[3] == 0

    def test_lower_half_block(self):
        img = render_png(["▄"], cell_width=4, cell_height=4)
        assert img.getpixel((0, 0))[3] == 0
        assert img.getpixel((0, 3))[3] == 255

    def test_shades_are_translucent(self):
        img = render_png([LIGHT_SHADE + MEDIUM_SHADE + DARK_SHADE], cell_width=1, cell_height=1)
        assert [img.getpixel((x, 0))[3] for x in range(3)] == [64, 128, 191]

    def test_short_rows_leave_transparent_cells(self):
        img = render_png([F * 2, F], cell_width=1, cell_height=1)
        assert img.getpixel((1, 1))[3] == 0

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="No content"):
            render_png([])


class TestExportLines:
    def test_writes_text(self, tmp_path):
        out = export_lines([colorize(F, RED), F], tmp_path / "banner.txt")
        assert out == tmp_path / "banner.txt"
        assert out.read_text(encoding="utf-8") == F + "\n" + F + "\n"

    def test_appends_extension(self, tmp_path):
        out = export_lines([F], tmp_path / "banner")
        assert out.name == "banner.txt"

    def test_writes_png(self, tmp_path):
        out = export_lines([F * 2], tmp_path / "banner.png", "png")
        with Image.open(out) as img:
            assert img.size == (32, 16)

    def test_creates_parent_dirs(self, tmp_path):
        out = export_lines([F], tmp_path / "nested" / "dir" / "b.txt")
        assert out.is_file()

    def test_sanitizes_name(self, tmp_path):
        out = export_lines([F], tmp_path / "my*ban?ner.txt")
        assert out.name == "mybanner.txt"

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported format"):
            export_lines([F], tmp_path / "b.svg", "svg")

    def test_invalid_filename(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid filename"):
            export_lines([F], tmp_path / "***")

    def test_empty_png(self, tmp_path):
        with pytest.raises(ValueError, match="No content"):
            export_lines([], tmp_path / "b.png", "png")
