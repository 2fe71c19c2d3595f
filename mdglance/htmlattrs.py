"""Attributes of HTML elements that affect how they are rendered."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from mdglance.images import parse_px

_ALIGNMENTS = frozenset({"left", "center", "right"})
_UINT_PATTERN = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


class ColorScheme(Enum):
    """A resolved light or dark colour scheme."""

    DARK = auto()
    LIGHT = auto()


_MEDIA_QUERIES = {
    "(prefers-color-scheme: dark)": ColorScheme.DARK,
    "(prefers-color-scheme: light)": ColorScheme.LIGHT,
}


def prefers_color_scheme(value: str) -> ColorScheme | None:
    """The scheme a ``media`` query selects, or ``None`` if it selects none."""
    return _MEDIA_QUERIES.get(value)


class AttrKind(Enum):
    """The recognised kinds of attribute."""

    ALIGN = auto()
    HREF = auto()
    ANCHOR = auto()
    WIDTH = auto()
    HEIGHT = auto()
    SRC = auto()
    START = auto()
    STYLE = auto()
    IS_CHECKBOX = auto()
    IS_CHECKED = auto()
    MEDIA = auto()
    SRCSET = auto()


@dataclass(frozen=True)
class Attr:
    """A recognised attribute with its parsed value, if it carries one."""

    kind: AttrKind
    value: Any = None

    def to_anchor(self) -> str | None:
        """The anchor name for an ``id`` attribute, otherwise ``None``."""
        return self.value if self.kind is AttrKind.ANCHOR else None


def _parse_uint(text: str, limit: int) -> int | None:
    if not _UINT_PATTERN.fullmatch(text):
        return None
    number = int(text)
    return number if number <= limit else None


def _parse_px(text: str) -> int | None:
    try:
        return parse_px(text)
    except ValueError:
        return None


def _parse_attr(name: str, value: str) -> Attr | None:
    match name:
        case "align":
            return Attr(AttrKind.ALIGN, value) if value in _ALIGNMENTS else None
        case "href":
            return Attr(AttrKind.HREF, value)
        case "id":
            return Attr(AttrKind.ANCHOR, f"#{value}")
        case "width" | "height":
            px = _parse_px(value)
            if px is None:
                return None
            return Attr(AttrKind.WIDTH if name == "width" else AttrKind.HEIGHT, px)
        case "src":
            return Attr(AttrKind.SRC, value)
        case "start":
            start = _parse_uint(value, _USIZE_MAX)
            return None if start is None else Attr(AttrKind.START, start)
        case "style":
            return Attr(AttrKind.STYLE, value)
        case "type":
            return Attr(AttrKind.IS_CHECKBOX) if value == "checkbox" else None
        case "checked":
            return Attr(AttrKind.IS_CHECKED)
        case "media":
            scheme = prefers_color_scheme(value)
            return None if scheme is None else Attr(AttrKind.MEDIA, scheme)
        case "srcset":
            return Attr(AttrKind.SRCSET, value)
    return None


def iter_attrs(attrs: Iterable[tuple[str, str]] | Mapping[str, str]) -> Iterator[Attr]:
    """Yield the recognised attributes, skipping unknown or unparsable ones."""
    pairs = attrs.items() if isinstance(attrs, Mapping) else attrs
    for name, value in pairs:
        attr = _parse_attr(name, value)
        if attr is not None:
            yield attr


def _find(attrs: Iterable[tuple[str, str]] | Mapping[str, str], kind: AttrKind) -> Any:
    return next((attr.value for attr in iter_attrs(attrs) if attr.kind is kind), None)


def find_align(attrs: Iterable[tuple[str, str]] | Mapping[str, str]) -> str | None:
    """The first valid ``align`` value, if any."""
    return _find(attrs, AttrKind.ALIGN)


def find_style(attrs: Iterable[tuple[str, str]] | Mapping[str, str]) -> str | None:
    """The first ``style`` value, if any."""
    return _find(attrs, AttrKind.STYLE)