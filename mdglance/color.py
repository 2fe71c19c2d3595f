"""Colour conversion, document themes and code highlighting themes."""

from __future__ import annotations

import dataclasses
import plistlib
from dataclasses import dataclass, field
from enum import Enum
from functools import cache
from pathlib import Path
from typing import Any

_SRGB_FORMATS = frozenset({"Rgba8UnormSrgb", "Bgra8UnormSrgb"})


def _channel(value: int) -> float:
    return (value & 0xFF) / 255.0


def hex_to_linear_rgba(c: int) -> tuple[float, float, float, float]:
    """Convert a 0xRRGGBB sRGB colour to linear RGBA."""

    def linear(channel: int) -> float:
        x = _channel(channel)
        if x > 0.04045:
            return ((x + 0.055) / 1.055) ** 2.4
        return x / 12.92

    return (linear(c >> 16), linear(c >> 8), linear(c), 1.0)


def native_color(c: int, texture_format: str) -> tuple[float, float, float, float]:
    """Convert a 0xRRGGBB colour to RGBA suited to the given texture format."""
    if texture_format in _SRGB_FORMATS:
        return hex_to_linear_rgba(c)
    return (_channel(c >> 16), _channel(c >> 8), _channel(c), 1.0)


class ThemeLoadError(Exception):
    """Raised when a syntax theme cannot be read or parsed."""


class ThemeDefaults(Enum):
    """Built-in code highlighting themes, valued by their configuration name."""

    BASE16_EIGHTIES_DARK = "base16-eighties-dark"
    BASE16_MOCHA_DARK = "base16-mocha-dark"
    BASE16_OCEAN_DARK = "base16-ocean-dark"
    BASE16_OCEAN_LIGHT = "base16-ocean-light"
    COLDARK_COLD = "coldark-cold"
    COLDARK_DARK = "coldark-dark"
    DARK_NEON = "dark-neon"
    DRACULA = "dracula"
    GITHUB = "github"
    GRUVBOX_DARK = "gruvbox-dark"
    GRUVBOX_LIGHT = "gruvbox-light"
    LEET = "leet"
    MONOKAI_EXTENDED = "monokai-extended"
    MONOKAI_EXTENDED_LIGHT = "monokai-extended-light"
    NORD = "nord"
    ONE_HALF_DARK = "one-half-dark"
    ONE_HALF_LIGHT = "one-half-light"
    SOLARIZED_DARK = "solarized-dark"
    SOLARIZED_LIGHT = "solarized-light"
    SUBLIME_SNAZZY = "sublime-snazzy"
    TWO_DARK = "two-dark"
    VISUAL_STUDIO_DARK_PLUS = "visual-studio-dark-plus"
    ZENBURN = "zenburn"

    @classmethod
    def from_kebab(cls, name: str) -> ThemeDefaults | None:
        try:
            return cls(name)
        except ValueError:
            return None


RGBA = tuple[int, int, int, int]

# GitHub's own background is white like the light theme's, so code blocks use
# the lighter grey of the GitHub website instead.
_GITHUB_CODE_BACKGROUND: RGBA = (0xF6, 0xF8, 0xFA, 0xFF)


@dataclass
class HighlighterTheme:
    """A code highlighting theme."""

    name: str | None = None
    background: RGBA | None = None
    foreground: RGBA | None = None
    rules: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_default(cls, default: ThemeDefaults) -> HighlighterTheme:
        background = _GITHUB_CODE_BACKGROUND if default is ThemeDefaults.GITHUB else None
        return cls(name=default.value, background=background)


def _parse_hex_color(value: Any) -> RGBA | None:
    if not isinstance(value, str) or not value.startswith("#"):
        return None
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        return None
    try:
        raw = int(digits, 16)
    except ValueError:
        return None
    return ((raw >> 24) & 0xFF, (raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF)


def _theme_from_plist(data: Any) -> HighlighterTheme:
    if not isinstance(data, dict) or not isinstance(data.get("settings"), list):
        raise ValueError("theme has no `settings` list")
    theme = HighlighterTheme(name=data.get("name"))
    for entry in data["settings"]:
        if not isinstance(entry, dict):
            raise ValueError("theme settings entries must be dictionaries")
        settings = entry.get("settings", {})
        if "scope" not in entry and isinstance(settings, dict):
            theme.background = _parse_hex_color(settings.get("background"))
            theme.foreground = _parse_hex_color(settings.get("foreground"))
        else:
            theme.rules.append(entry)
    return theme


@dataclass(frozen=True)
class SyntaxTheme:
    """Either a built-in highlighting theme or a path to a custom one."""

    default: ThemeDefaults | None = None
    path: Path | None = None

    def __post_init__(self) -> None:
        if (self.default is None) == (self.path is None):
            raise ValueError("a syntax theme is either a default or a custom path")

    @classmethod
    def defaults(cls, default: ThemeDefaults) -> SyntaxTheme:
        return cls(default=default)

    @classmethod
    def custom(cls, path: str | Path) -> SyntaxTheme:
        return cls(path=Path(path))


_EXPECTS_MESSAGE = (
    "Expects either a default theme name or a path to a custom theme. E.g.\n"
    'default: "inspired-github"\n'
    'custom:  { path = "/path/to/custom.tmTheme" }'
)


def parse_syntax_theme(value: Any) -> SyntaxTheme:
    """Parse a syntax theme from a configuration value."""
    if isinstance(value, str):
        default = ThemeDefaults.from_kebab(value)
        if default is None:
            variants = ", ".join(f'"{theme.value}"' for theme in ThemeDefaults)
            raise ValueError(
                f'"{value}" didn\'t match any of the expected variants: [{variants}]'
            )
        return SyntaxTheme.defaults(default)
    if isinstance(value, dict) and isinstance(value.get("path"), str):
        return SyntaxTheme.custom(value["path"])
    raise ValueError(_EXPECTS_MESSAGE)


def load_syntax_theme(syntax_theme: SyntaxTheme) -> HighlighterTheme:
    """Produce the highlighting theme a syntax theme refers to."""
    if syntax_theme.default is not None:
        return HighlighterTheme.from_default(syntax_theme.default)
    path = syntax_theme.path
    try:
        handle = open(path, "rb")
    except OSError as err:
        raise ThemeLoadError(f"Failed opening theme from path {path}") from err
    with handle:
        try:
            return _theme_from_plist(plistlib.load(handle))
        except Exception as err:
            raise ThemeLoadError(f"Failed loading theme from path {path}") from err


@dataclass
class Theme:
    """Colours used to render a document."""

    text_color: int
    background_color: int
    code_color: int
    quote_block_color: int
    link_color: int
    select_color: int
    checkbox_color: int
    code_highlighter: HighlighterTheme

    def with_code_highlighter(self, highlighter: HighlighterTheme) -> Theme:
        """A copy of this theme using another code highlighter."""
        return dataclasses.replace(self, code_highlighter=highlighter)


@cache
def _cached_highlighter(default: ThemeDefaults) -> HighlighterTheme:
    return HighlighterTheme.from_default(default)


def dark_theme() -> Theme:
    """The default dark theme."""
    return Theme(
        text_color=0x9DACBB,
        background_color=0x1A1D22,
        code_color=0xB38FAC,
        quote_block_color=0x1D2025,
        link_color=0x4182EB,
        select_color=0x3675CB,
        checkbox_color=0x0A5301,
        code_highlighter=dataclasses.replace(
            _cached_highlighter(ThemeDefaults.BASE16_OCEAN_DARK)
        ),
    )


def light_theme() -> Theme:
    """The default light theme."""
    return Theme(
        text_color=0x000000,
        background_color=0xFFFFFF,
        code_color=0x95114E,
        quote_block_color=0xEEF9FE,
        link_color=0x5466FF,
        select_color=0xCDE8F0,
        checkbox_color=0x96ECAE,
        code_highlighter=dataclasses.replace(_cached_highlighter(ThemeDefaults.GITHUB)),
    )