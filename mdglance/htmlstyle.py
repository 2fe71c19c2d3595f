"""The subset of inline CSS that affects rendering."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

_HEX_PATTERN = re.compile(r"\+?[0-9a-fA-F]+")
_U32_MAX = 2**32 - 1


class FontWeight(Enum):
    NORMAL = auto()
    BOLD = auto()


class FontStyle(Enum):
    NORMAL = auto()
    ITALIC = auto()


class TextDecoration(Enum):
    NORMAL = auto()
    UNDERLINE = auto()


class StyleKind(Enum):
    """The recognised style properties."""

    BACKGROUND_COLOR = auto()
    COLOR = auto()
    FONT_WEIGHT = auto()
    FONT_STYLE = auto()
    TEXT_DECORATION = auto()


@dataclass(frozen=True)
class Style:
    """A recognised style property and its parsed value."""

    kind: StyleKind
    value: int | FontWeight | FontStyle | TextDecoration


def _parse_hex(text: str) -> int | None:
    if not _HEX_PATTERN.fullmatch(text):
        return None
    number = int(text, 16)
    return number if number <= _U32_MAX else None


_KEYWORDS: dict[str, tuple[StyleKind, dict[str, Enum]]] = {
    "font-weight:": (StyleKind.FONT_WEIGHT, {"bold": FontWeight.BOLD}),
    "font-style:": (StyleKind.FONT_STYLE, {"italic": FontStyle.ITALIC}),
    "text-decoration:": (
        StyleKind.TEXT_DECORATION,
        {"underline": TextDecoration.UNDERLINE},
    ),
}


def _parse_part(part: str) -> Style | None:
    for prefix, kind in (
        ("background-color:#", StyleKind.BACKGROUND_COLOR),
        ("color:#", StyleKind.COLOR),
    ):
        if part.startswith(prefix):
            color = _parse_hex(part[len(prefix) :])
            if color is not None:
                return Style(kind, color)
    for prefix, (kind, values) in _KEYWORDS.items():
        if part.startswith(prefix):
            value = values.get(part[len(prefix) :])
            if value is not None:
                return Style(kind, value)
    return None


def iter_styles(style: str) -> Iterator[Style]:
    """Yield the recognised declarations of a ``style`` attribute, in order.

    Declarations are split on ``;`` and matched exactly, without trimming.
    """
    for part in style.split(";"):
        parsed = _parse_part(part)
        if parsed is not None:
            yield parsed