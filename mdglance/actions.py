"""Actions that key combos can trigger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class HistDirection(Enum):
    """Direction to move through the file history."""

    NEXT = auto()
    PREV = auto()


class VertDirection(Enum):
    """Vertical direction for scrolling and jumping."""

    UP = auto()
    DOWN = auto()


class Zoom(Enum):
    """Zoom adjustments."""

    IN = auto()
    OUT = auto()
    RESET = auto()


class ActionKind(Enum):
    """The kind of an action, which decides what argument it carries."""

    HISTORY = auto()
    TO_EDGE = auto()
    SCROLL = auto()
    PAGE = auto()
    ZOOM = auto()
    COPY = auto()
    QUIT = auto()


_ARG_TYPES: dict[ActionKind, type | None] = {
    ActionKind.HISTORY: HistDirection,
    ActionKind.TO_EDGE: VertDirection,
    ActionKind.SCROLL: VertDirection,
    ActionKind.PAGE: VertDirection,
    ActionKind.ZOOM: Zoom,
    ActionKind.COPY: None,
    ActionKind.QUIT: None,
}


@dataclass(frozen=True)
class Action:
    """An action together with its argument, if its kind takes one."""

    kind: ActionKind
    arg: HistDirection | VertDirection | Zoom | None = None

    def __post_init__(self) -> None:
        expected = _ARG_TYPES[self.kind]
        if expected is None:
            if self.arg is not None:
                raise ValueError(f"{self.kind.name} takes no argument, got {self.arg!r}")
        elif not isinstance(self.arg, expected):
            raise ValueError(
                f"{self.kind.name} requires a {expected.__name__}, got {self.arg!r}"
            )

    @classmethod
    def history(cls, direction: HistDirection) -> Action:
        return cls(ActionKind.HISTORY, direction)

    @classmethod
    def to_edge(cls, direction: VertDirection) -> Action:
        return cls(ActionKind.TO_EDGE, direction)

    @classmethod
    def scroll(cls, direction: VertDirection) -> Action:
        return cls(ActionKind.SCROLL, direction)

    @classmethod
    def page(cls, direction: VertDirection) -> Action:
        return cls(ActionKind.PAGE, direction)

    @classmethod
    def zoom(cls, zoom: Zoom) -> Action:
        return cls(ActionKind.ZOOM, zoom)

    @classmethod
    def copy(cls) -> Action:
        return cls(ActionKind.COPY)

    @classmethod
    def quit(cls) -> Action:
        return cls(ActionKind.QUIT)