"""HTML tag names understood by the interpreter, and per-element state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class HeaderType(Enum):
    """Heading levels ``h1`` to ``h6``."""

    H1 = auto()
    H2 = auto()
    H3 = auto()
    H4 = auto()
    H5 = auto()
    H6 = auto()

    def size_multiplier(self) -> float:
        """Font size relative to body text, per the HTML rendering guidelines."""
        return _SIZE_MULTIPLIERS[self]


_SIZE_MULTIPLIERS = {
    HeaderType.H1: 2.0,
    HeaderType.H2: 1.5,
    HeaderType.H3: 1.17,
    HeaderType.H4: 1.0,
    HeaderType.H5: 0.83,
    HeaderType.H6: 0.67,
}


class TagName(Enum):
    """Tags with special handling; several HTML names may share one."""

    ANCHOR = auto()
    BLOCK_QUOTE = auto()
    BOLD_OR_STRONG = auto()
    BREAK = auto()
    CODE = auto()
    DETAILS = auto()
    DIV = auto()
    EMPHASIS_OR_ITALIC = auto()
    H1 = auto()
    H2 = auto()
    H3 = auto()
    H4 = auto()
    H5 = auto()
    H6 = auto()
    HORIZONTAL_RULER = auto()
    PICTURE = auto()
    SOURCE = auto()
    IMAGE = auto()
    INPUT = auto()
    LIST_ITEM = auto()
    ORDERED_LIST = auto()
    PARAGRAPH = auto()
    PREFORMATTED_TEXT = auto()
    SECTION = auto()
    SMALL = auto()
    SPAN = auto()
    STRIKETHROUGH = auto()
    SUMMARY = auto()
    TABLE = auto()
    TABLE_BODY = auto()
    TABLE_DATA_CELL = auto()
    TABLE_HEAD = auto()
    TABLE_HEADER = auto()
    TABLE_ROW = auto()
    UNDERLINE = auto()
    UNORDERED_LIST = auto()

    @property
    def header_type(self) -> HeaderType | None:
        """The heading level for ``h1`` to ``h6``, otherwise ``None``."""
        return _HEADERS.get(self)


_HEADERS = {
    TagName.H1: HeaderType.H1,
    TagName.H2: HeaderType.H2,
    TagName.H3: HeaderType.H3,
    TagName.H4: HeaderType.H4,
    TagName.H5: HeaderType.H5,
    TagName.H6: HeaderType.H6,
}

_TAGS: dict[str, TagName] = {
    "a": TagName.ANCHOR,
    "blockquote": TagName.BLOCK_QUOTE,
    "b": TagName.BOLD_OR_STRONG,
    "strong": TagName.BOLD_OR_STRONG,
    "br": TagName.BREAK,
    "code": TagName.CODE,
    "kbd": TagName.CODE,
    "details": TagName.DETAILS,
    "div": TagName.DIV,
    "em": TagName.EMPHASIS_OR_ITALIC,
    "i": TagName.EMPHASIS_OR_ITALIC,
    "h1": TagName.H1,
    "h2": TagName.H2,
    "h3": TagName.H3,
    "h4": TagName.H4,
    "h5": TagName.H5,
    "h6": TagName.H6,
    "hr": TagName.HORIZONTAL_RULER,
    "picture": TagName.PICTURE,
    "source": TagName.SOURCE,
    "img": TagName.IMAGE,
    "input": TagName.INPUT,
    "li": TagName.LIST_ITEM,
    "ol": TagName.ORDERED_LIST,
    "p": TagName.PARAGRAPH,
    "pre": TagName.PREFORMATTED_TEXT,
    "section": TagName.SECTION,
    "small": TagName.SMALL,
    "span": TagName.SPAN,
    "s": TagName.STRIKETHROUGH,
    "del": TagName.STRIKETHROUGH,
    "summary": TagName.SUMMARY,
    "table": TagName.TABLE,
    "tbody": TagName.TABLE_BODY,
    "td": TagName.TABLE_DATA_CELL,
    "th": TagName.TABLE_HEADER,
    "thead": TagName.TABLE_HEAD,
    "tr": TagName.TABLE_ROW,
    "u": TagName.UNDERLINE,
    "ins": TagName.UNDERLINE,
    "ul": TagName.UNORDERED_LIST,
}


def tag_name(name: str) -> TagName:
    """Look up the tag for an HTML element name.

    Raises ``ValueError`` for names without special handling.
    """
    try:
        return _TAGS[name]
    except KeyError:
        raise ValueError(f"Unsupported tag: {name}") from None


@dataclass
class Header:
    """A heading being built, with its level and alignment."""

    ty: HeaderType
    align: str | None = None


@dataclass(frozen=True)
class ListType:
    """An ordered list with its start index, or an unordered list."""

    start: int | None = None

    @classmethod
    def ordered(cls, start: int) -> ListType:
        return cls(start)

    @classmethod
    def unordered(cls) -> ListType:
        return cls(None)

    @property
    def is_ordered(self) -> bool:
        return self.start is not None


@dataclass
class TextOptions:
    """How many enclosing tags of each text style the current element is inside."""

    underline: int = 0
    bold: int = 0
    italic: int = 0
    strike_through: int = 0
    small: int = 0
    code: int = 0
    pre_formatted: int = 0
    block_quote: int = 0
    link: list[str] = field(default_factory=list)