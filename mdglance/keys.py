"""Keys, modifiers and key combos."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from string import ascii_lowercase


class Modifiers(Flag):
    """Modifier keys held while a key is pressed."""

    NONE = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    LOGO = auto()


class VirtKey(Enum):
    """Keys known by their meaning rather than their position."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    KEY0 = auto()
    KEY1 = auto()
    KEY2 = auto()
    KEY3 = auto()
    KEY4 = auto()
    KEY5 = auto()
    KEY6 = auto()
    KEY7 = auto()
    KEY8 = auto()
    KEY9 = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()
    GRAVE = auto()
    AT = auto()
    ASTERISK = auto()
    MINUS = auto()
    EQUALS = auto()
    PLUS = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    BACKSLASH = auto()
    SEMICOLON = auto()
    COLON = auto()
    APOSTROPHE = auto()
    COMMA = auto()
    PERIOD = auto()
    SLASH = auto()
    ESCAPE = auto()
    TAB = auto()
    INSERT = auto()
    DELETE = auto()
    BACK = auto()
    RETURN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    SPACE = auto()
    LALT = auto()
    RALT = auto()
    LCONTROL = auto()
    RCONTROL = auto()
    LWIN = auto()
    RWIN = auto()
    LSHIFT = auto()
    RSHIFT = auto()


KEY_NAMES: tuple[tuple[str, VirtKey], ...] = (
    *((letter, VirtKey[letter.upper()]) for letter in ascii_lowercase),
    *((str(digit), VirtKey[f"KEY{digit}"]) for digit in range(10)),
    *((f"F{n}", VirtKey[f"F{n}"]) for n in range(1, 13)),
    ("Up", VirtKey.UP),
    ("Right", VirtKey.RIGHT),
    ("Down", VirtKey.DOWN),
    ("Left", VirtKey.LEFT),
    ("`", VirtKey.GRAVE),
    ("@", VirtKey.AT),
    ("*", VirtKey.ASTERISK),
    ("-", VirtKey.MINUS),
    ("=", VirtKey.EQUALS),
    ("+", VirtKey.PLUS),
    ("[", VirtKey.LBRACKET),
    ("]", VirtKey.RBRACKET),
    ("\\", VirtKey.BACKSLASH),
    (";", VirtKey.SEMICOLON),
    (":", VirtKey.COLON),
    ("'", VirtKey.APOSTROPHE),
    (",", VirtKey.COMMA),
    (".", VirtKey.PERIOD),
    ("/", VirtKey.SLASH),
    ("Escape", VirtKey.ESCAPE),
    ("Tab", VirtKey.TAB),
    ("Insert", VirtKey.INSERT),
    ("Delete", VirtKey.DELETE),
    ("Backspace", VirtKey.BACK),
    ("Enter", VirtKey.RETURN),
    ("Home", VirtKey.HOME),
    ("End", VirtKey.END),
    ("PageUp", VirtKey.PAGE_UP),
    ("PageDown", VirtKey.PAGE_DOWN),
    ("Space", VirtKey.SPACE),
)

_NAME_TO_KEY = dict(KEY_NAMES)
_KEY_TO_NAME = {key: name for name, key in KEY_NAMES}

_INVISIBLE_KEYS = frozenset(
    [
        *(VirtKey[f"F{n}"] for n in range(1, 13)),
        VirtKey.UP,
        VirtKey.RIGHT,
        VirtKey.DOWN,
        VirtKey.LEFT,
        VirtKey.ESCAPE,
        VirtKey.TAB,
        VirtKey.INSERT,
        VirtKey.DELETE,
        VirtKey.BACK,
        VirtKey.RETURN,
        VirtKey.HOME,
        VirtKey.END,
        VirtKey.PAGE_UP,
        VirtKey.PAGE_DOWN,
        VirtKey.SPACE,
    ]
)

_MODIFIER_LABELS = (
    (Modifiers.ALT, "Alt"),
    (Modifiers.CTRL, "Ctrl"),
    (Modifiers.LOGO, "Os"),
    (Modifiers.SHIFT, "Shift"),
)


@dataclass(frozen=True)
class Key:
    """A key: either a resolved virtual key or a raw scan code."""

    code: VirtKey | int

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, (VirtKey, int)):
            raise TypeError(f"Key code must be a VirtKey or a scan code, got {self.code!r}")

    @classmethod
    def new(cls, resolved: VirtKey | None, scan_code: int) -> Key:
        """Prefer the resolved key, falling back to the scan code."""
        return cls(resolved if resolved is not None else scan_code)

    @property
    def is_scan_code(self) -> bool:
        return not isinstance(self.code, VirtKey)

    def __str__(self) -> str:
        if isinstance(self.code, VirtKey):
            name = _KEY_TO_NAME.get(self.code)
            return name if name is not None else f"<unsupported: {self.code.name}>"
        return f"<scan code: {self.code}>"


def parse_key(text: str) -> Key:
    """Parse a key from its configuration name."""
    try:
        return Key(_NAME_TO_KEY[text])
    except KeyError:
        raise ValueError(f"Unsupported key: {text}") from None


@dataclass(frozen=True)
class ModifiedKey:
    """A key pressed together with a set of modifiers."""

    key: Key
    modifiers: Modifiers = Modifiers.NONE

    def __post_init__(self) -> None:
        if isinstance(self.key, VirtKey):
            object.__setattr__(self, "key", Key(self.key))

    def __str__(self) -> str:
        if not self.modifiers:
            if self.key.code in _INVISIBLE_KEYS:
                return f"<{self.key}>"
            return str(self.key)
        mods = "+".join(label for flag, label in _MODIFIER_LABELS if flag in self.modifiers)
        return f"<{mods}+{self.key}>"


def _as_modified_key(item: ModifiedKey | Key | VirtKey) -> ModifiedKey:
    if isinstance(item, ModifiedKey):
        return item
    if isinstance(item, (Key, VirtKey)):
        return ModifiedKey(item)
    raise TypeError(f"Cannot use {item!r} as a key in a combo")


@dataclass(frozen=True)
class KeyCombo:
    """A sequence of modified keys pressed one after another."""

    keys: tuple[ModifiedKey, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(_as_modified_key(k) for k in self.keys))

    def __iter__(self):
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def __str__(self) -> str:
        return "".join(str(key) for key in self.keys)

    def starts_with(self, other: KeyCombo) -> bool:
        """Whether ``other`` is a prefix of this combo."""
        return self.keys[: len(other.keys)] == other.keys