"""Reading keybindings from configuration values and TOML documents."""

from __future__ import annotations

import tomllib
from string import ascii_uppercase
from typing import Any

from mdglance.actions import Action, HistDirection, VertDirection, Zoom
from mdglance.keybindings import Keybindings, default_keybindings
from mdglance.keys import Key, KeyCombo, ModifiedKey, Modifiers, VirtKey, parse_key

_ACTIONS: dict[str, Action] = {
    "HistoryNext": Action.history(HistDirection.NEXT),
    "HistoryPrevious": Action.history(HistDirection.PREV),
    "ToTop": Action.to_edge(VertDirection.UP),
    "ToBottom": Action.to_edge(VertDirection.DOWN),
    "ScrollUp": Action.scroll(VertDirection.UP),
    "ScrollDown": Action.scroll(VertDirection.DOWN),
    "PageUp": Action.page(VertDirection.UP),
    "PageDown": Action.page(VertDirection.DOWN),
    "ZoomIn": Action.zoom(Zoom.IN),
    "ZoomOut": Action.zoom(Zoom.OUT),
    "ZoomReset": Action.zoom(Zoom.RESET),
    "Copy": Action.copy(),
    "Quit": Action.quit(),
}

_MODIFIERS: dict[str, Modifiers] = {
    "Alt": Modifiers.ALT,
    "Ctrl": Modifiers.CTRL,
    "Os": Modifiers.LOGO,
    "Shift": Modifiers.SHIFT,
}

_MAX_SCAN_CODE = 2**32


def _is_scan_code(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value < _MAX_SCAN_CODE
    )


def parse_action(value: Any) -> Action:
    """Parse an action from its configuration name, such as ``"ScrollDown"``."""
    if isinstance(value, str) and value in _ACTIONS:
        return _ACTIONS[value]
    expected = ", ".join(f"`{name}`" for name in _ACTIONS)
    raise ValueError(f"unknown action {value!r}, expected one of {expected}")


def parse_config_key(value: Any) -> tuple[Key, bool]:
    """Parse a key name or scan code.

    Upper-case letters stand for the letter with Shift held. Returns the key
    and whether Shift is implied.
    """
    if isinstance(value, str):
        if len(value) == 1 and value in ascii_uppercase:
            return Key(VirtKey[value]), True
        return parse_key(value), False
    if _is_scan_code(value):
        return Key(value), False
    raise ValueError(f"expected a key name or a scan code, got {value!r}")


def _parse_modifiers(value: Any) -> Modifiers:
    names = [value] if isinstance(value, str) else value
    if not isinstance(names, list):
        raise ValueError(f"expected a modifier or a list of modifiers, got {value!r}")
    modifiers = Modifiers.NONE
    for name in names:
        if not isinstance(name, str) or name not in _MODIFIERS:
            expected = ", ".join(f"`{m}`" for m in _MODIFIERS)
            raise ValueError(f"unknown modifier {name!r}, expected one of {expected}")
        modifiers |= _MODIFIERS[name]
    return modifiers


def parse_modified_key(value: Any) -> ModifiedKey:
    """Parse a key, or a table with ``key`` and ``mod`` entries."""
    if isinstance(value, dict):
        if "key" not in value or "mod" not in value:
            raise ValueError(
                f"a modified key needs both `key` and `mod` entries, got {value!r}"
            )
        key, shift = parse_config_key(value["key"])
        modifiers = _parse_modifiers(value["mod"])
    else:
        key, shift = parse_config_key(value)
        modifiers = Modifiers.NONE
    if shift:
        modifiers |= Modifiers.SHIFT
    return ModifiedKey(key, modifiers)


def parse_key_combo(value: Any) -> KeyCombo:
    """Parse a single modified key or a list of them."""
    if isinstance(value, list):
        return KeyCombo(tuple(parse_modified_key(item) for item in value))
    return KeyCombo((parse_modified_key(value),))


def parse_keybindings(value: Any) -> Keybindings:
    """Parse a list of ``[action, combo]`` pairs."""
    if not isinstance(value, list):
        raise ValueError(f"expected a list of keybindings, got {value!r}")
    bindings = []
    for entry in value:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"expected an [action, combo] pair, got {entry!r}")
        action, combo = entry
        bindings.append((parse_action(action), parse_key_combo(combo)))
    return Keybindings(bindings)


def load_keybindings(text: str) -> tuple[Keybindings, Keybindings | None]:
    """Read the ``[keybindings]`` section of a TOML document.

    Returns the base bindings (the built-in defaults when ``base`` is absent)
    and the extra bindings, or ``None`` when ``extra`` is absent.
    """
    document = tomllib.loads(text)
    section = document.get("keybindings", {})
    if not isinstance(section, dict):
        raise ValueError("`keybindings` must be a table")
    base = (
        parse_keybindings(section["base"]) if "base" in section else default_keybindings()
    )
    extra = parse_keybindings(section["extra"]) if "extra" in section else None
    return base, extra