"""Tests for the Pydantic v2 schema models (FontData, RenderOptions)."""

import pytest
from pydantic import ValidationError

from bitbanner.schema import FontData, RenderOptions, is_hex_color

# ---------------------------------------------------------------------------
# FontData
# ---------------------------------------------------------------------------


class TestFontData:
    def test_valid_creation(self):
        font = FontData(name="Test", characters={"A": ["█"]})
        assert font.name == "Test"
        assert font.characters["A"] == ["█"]

    def test_metadata_defaults(self):
        font = FontData(name="Test")
        assert font.author == ""
        assert font.license == ""
        assert font.characters == {}

    def test_multi_char_key_raises(self):
        with pytest.raises(ValidationError, match="exactly one character"):
            FontData(name="Test", characters={"AB": ["█"]})

    def test_empty_key_raises(self):
        with pytest.raises(ValidationError, match="exactly one character"):
            FontData(name="Test", characters={"": ["█"]})

    def test_missing_name_raises(self):
        with pytest.raises(ValidationError):
            FontData(characters={"A": ["█"]})

    def test_frozen(self):
        font = FontData(name="Test")
        with pytest.raises(ValidationError):
            font.name = "Other"


# ---------------------------------------------------------------------------
# RenderOptions
# ---------------------------------------------------------------------------


class TestRenderOptionsDefaults:
    def test_defaults(self):
        opts = RenderOptions()
        assert opts.char_spacing == 1
        assert opts.word_spacing == 2
        assert opts.line_spacing == 1
        assert opts.alignment == "center"
        assert opts.text_color == "#FFFFFF"
        assert opts.color_mode == "single"
        assert opts.scale == 1.0
        assert opts.shadow is False
        assert opts.shadow_style == "light"

    def test_defaults_round_trip_unchanged(self):
        opts = RenderOptions()
        again = RenderOptions.model_validate(opts.model_dump())
        assert again == opts

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            RenderOptions(colour="#FFFFFF")


class TestRenderOptionsRanges:
    @pytest.mark.parametrize(
        ("field", "low", "high"),
        [
            ("char_spacing", 0, 10),
            ("word_spacing", 0, 20),
            ("line_spacing", 0, 10),
            ("shadow_x", -5, 5),
            ("shadow_y", -5, 5),
        ],
    )
    def test_bounds_accepted(self, field, low, high):
        assert getattr(RenderOptions(**{field: low}), field) == low
        assert getattr(RenderOptions(**{field: high}), field) == high

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("char_spacing", -1),
            ("char_spacing", 11),
            ("word_spacing", -1),
            ("word_spacing", 21),
            ("line_spacing", -1),
            ("line_spacing", 11),
            ("shadow_x", -6),
            ("shadow_x", 6),
            ("shadow_y", -6),
            ("shadow_y", 6),
        ],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError, match=f"{field} must be between"):
            RenderOptions(**{field: value})

    def test_error_names_field_value_and_bound(self):
        with pytest.raises(ValidationError) as exc_info:
            RenderOptions(word_spacing=25)
        err = exc_info.value.errors()[0]
        assert err["loc"] == ("word_spacing",)
        assert err["input"] == 25
        assert "between 0 and 20" in err["msg"]

    @pytest.mark.parametrize("scale", [0.5, 1.0, 2.0, 4.0])
    def test_supported_scales(self, scale):
        assert RenderOptions(scale=scale).scale == scale

    @pytest.mark.parametrize("scale", [0.25, 4.5])
    def test_scale_out_of_range(self, scale):
        with pytest.raises(ValidationError, match="scale must be between"):
            RenderOptions(scale=scale)

    def test_scale_not_a_supported_factor(self):
        with pytest.raises(ValidationError, match="scale must be one of"):
            RenderOptions(scale=3.0)

    def test_negative_frame_rejected(self):
        with pytest.raises(ValidationError, match="rainbow_frame must be >= 0"):
            RenderOptions(rainbow_frame=-1)

    def test_zero_speed_allowed(self):
        assert RenderOptions(rainbow_speed=0).rainbow_speed == 0


class TestRenderOptionsEnums:
    def test_invalid_alignment(self):
        with pytest.raises(ValidationError):
            RenderOptions(alignment="justify")

    def test_invalid_direction(self):
        with pytest.raises(ValidationError):
            RenderOptions(gradient_direction="diagonal")

    def test_invalid_shadow_style(self):
        with pytest.raises(ValidationError):
            RenderOptions(shadow_style="heavy")

    def test_invalid_color_mode(self):
        with pytest.raises(ValidationError):
            RenderOptions(color_mode="plaid")


class TestRenderOptionsColors:
    @pytest.mark.parametrize("color", ["FFFFFF", "#FFF", "#GGGGGG", "#FFFFFFF", "red"])
    def test_malformed_text_color(self, color):
        with pytest.raises(ValidationError, match="text_color must be a hex color"):
            RenderOptions(text_color=color)

    def test_lowercase_hex_accepted(self):
        assert RenderOptions(text_color="#ff00aa").text_color == "#ff00aa"

    def test_gradient_color_validated(self):
        with pytest.raises(ValidationError, match="gradient_color must be a hex color"):
            RenderOptions(gradient_color="#12345")

    def test_rainbow_palette_validated(self):
        with pytest.raises(ValidationError, match=r"rainbow_colors\[1\]"):
            RenderOptions(rainbow_colors=("#FF0000", "blue"))

    def test_gradient_mode_requires_end_color(self):
        with pytest.raises(ValidationError, match="gradient_color is required"):
            RenderOptions(color_mode="gradient")

    def test_legacy_flag_requires_end_color(self):
        with pytest.raises(ValidationError, match="gradient_color is required"):
            RenderOptions(use_gradient=True)

    def test_gradient_mode_with_color(self):
        opts = RenderOptions(color_mode="gradient", gradient_color="#000000")
        assert opts.gradient_color == "#000000"


class TestIsHexColor:
    def test_valid(self):
        assert is_hex_color("#A1b2C3")

    def test_invalid(self):
        assert not is_hex_color("#A1b2C")
        assert not is_hex_color("A1b2C3#")
