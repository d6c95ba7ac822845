"""Pydantic v2 models for .bit fonts and render options."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator

from bitbanner.config import (
    CHAR_SPACING_RANGE,
    DEFAULT_CHAR_SPACING,
    DEFAULT_LINE_SPACING,
    DEFAULT_RAINBOW_SPEED,
    DEFAULT_TEXT_COLOR,
    DEFAULT_WORD_SPACING,
    LINE_SPACING_RANGE,
    SCALE_FACTORS,
    SCALE_RANGE,
    SHADOW_OFFSET_RANGE,
    WORD_SPACING_RANGE,
)

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

Alignment = Literal["left", "center", "right"]
GradientDirection = Literal["up-down", "down-up", "left-right", "right-left"]
ColorMode = Literal["single", "gradient", "rainbow"]
ShadowStyle = Literal["light", "medium", "dark"]


def is_hex_color(value: str) -> bool:
    """True for a 7-character '#RRGGBB' string."""
    return bool(HEX_COLOR_PATTERN.match(value))


def _check_range(field: str, value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    if value < low or value > high:
        msg = f"{field} must be between {low} and {high}, got {value}"
        raise ValueError(msg)
    return value


def _check_color(field: str, value: str) -> str:
    if not is_hex_color(value):
        msg = f"{field} must be a hex color like #FFFFFF, got {value!r}"
        raise ValueError(msg)
    return value


class FontData(BaseModel):
    """A bitmap font: character -> rows of block-drawing characters."""

    model_config = ConfigDict(frozen=True)

    name: str
    author: str = ""
    license: str = ""
    characters: dict[str, list[str]] = {}

    @field_validator("characters")
    @classmethod
    def keys_are_single_chars(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        for key in v:
            if len(key) != 1:
                msg = f"Character key {key!r} must be exactly one character"
                raise ValueError(msg)
        return v


class RenderOptions(BaseModel):
    """Style parameters for one render call.

    Constructing an instance validates every field; out-of-range values are
    rejected, never clamped. ``RenderOptions()`` holds the defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Spacing
    char_spacing: int = DEFAULT_CHAR_SPACING
    word_spacing: int = DEFAULT_WORD_SPACING
    line_spacing: int = DEFAULT_LINE_SPACING

    alignment: Alignment = "center"

    # Color
    text_color: str = DEFAULT_TEXT_COLOR
    gradient_color: str | None = None
    gradient_direction: GradientDirection = "up-down"
    use_gradient: bool = False
    color_mode: ColorMode = "single"

    # Rainbow
    rainbow_colors: tuple[str, ...] = ()
    rainbow_frame: int = 0
    rainbow_speed: int = DEFAULT_RAINBOW_SPEED

    scale: float = 1.0

    # Shadow
    shadow: bool = False
    shadow_x: int = 0
    shadow_y: int = 0
    shadow_style: ShadowStyle = "light"

    @field_validator("char_spacing")
    @classmethod
    def char_spacing_in_range(cls, v: int) -> int:
        return _check_range("char_spacing", v, CHAR_SPACING_RANGE)

    @field_validator("word_spacing")
    @classmethod
    def word_spacing_in_range(cls, v: int) -> int:
        return _check_range("word_spacing", v, WORD_SPACING_RANGE)

    @field_validator("line_spacing")
    @classmethod
    def line_spacing_in_range(cls, v: int) -> int:
        return _check_range("line_spacing", v, LINE_SPACING_RANGE)

    @field_validator("shadow_x", "shadow_y")
    @classmethod
    def shadow_offset_in_range(cls, v: int, info: ValidationInfo) -> int:
        return _check_range(info.field_name, v, SHADOW_OFFSET_RANGE)

    @field_validator("rainbow_frame", "rainbow_speed")
    @classmethod
    def not_negative(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            msg = f"{info.field_name} must be >= 0, got {v}"
            raise ValueError(msg)
        return v

    @field_validator("scale")
    @classmethod
    def scale_supported(cls, v: float) -> float:
        low, high = SCALE_RANGE
        if v < low or v > high:
            msg = f"scale must be between {low} and {high}, got {v}"
            raise ValueError(msg)
        if v not in SCALE_FACTORS:
            allowed = ", ".join(str(f) for f in SCALE_FACTORS)
            msg = f"scale must be one of {allowed}, got {v}"
            raise ValueError(msg)
        return v

    @field_validator("text_color")
    @classmethod
    def text_color_is_hex(cls, v: str) -> str:
        return _check_color("text_color", v)

    @field_validator("gradient_color")
    @classmethod
    def gradient_color_is_hex(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_color("gradient_color", v)

    @field_validator("rainbow_colors")
    @classmethod
    def rainbow_colors_are_hex(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for i, color in enumerate(v):
            _check_color(f"rainbow_colors[{i}]", color)
        return v

    @model_validator(mode="after")
    def gradient_has_end_color(self) -> "RenderOptions":
        wants_gradient = self.use_gradient or self.color_mode == "gradient"
        if wants_gradient and self.gradient_color is None:
            msg = "gradient_color is required when a gradient is requested"
            raise ValueError(msg)
        return self
