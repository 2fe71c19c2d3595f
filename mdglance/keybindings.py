"""Lists of keybindings, the built-in defaults and merging of user bindings."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from mdglance.actions import Action, HistDirection, VertDirection, Zoom
from mdglance.keys import KeyCombo, ModifiedKey, Modifiers, VirtKey

_log = logging.getLogger(__name__)

Binding = tuple[Action, KeyCombo]


@dataclass
class Keybindings:
    """An ordered list of key combos, each associated with an action."""

    bindings: list[Binding] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.bindings = list(self.bindings)

    def extend(self, items: Iterable[Binding]) -> None:
        self.bindings.extend(items)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)


def default_keybindings() -> Keybindings:
    """The built-in keybindings, using Command instead of Ctrl on macOS."""
    ctrl_or_command = Modifiers.LOGO if sys.platform == "darwin" else Modifiers.CTRL
    shift = Modifiers.SHIFT

    def combo(*keys: ModifiedKey | VirtKey) -> KeyCombo:
        return KeyCombo(keys)

    return Keybindings(
        [
            (Action.copy(), combo(ModifiedKey(VirtKey.C, ctrl_or_command))),
            (Action.zoom(Zoom.IN), combo(ModifiedKey(VirtKey.EQUALS, ctrl_or_command))),
            (Action.zoom(Zoom.OUT), combo(ModifiedKey(VirtKey.MINUS, ctrl_or_command))),
            (Action.history(HistDirection.NEXT), combo(ModifiedKey(VirtKey.RIGHT, Modifiers.ALT))),
            (Action.history(HistDirection.PREV), combo(ModifiedKey(VirtKey.LEFT, Modifiers.ALT))),
            (Action.scroll(VertDirection.UP), combo(VirtKey.UP)),
            (Action.scroll(VertDirection.DOWN), combo(VirtKey.DOWN)),
            (Action.page(VertDirection.UP), combo(VirtKey.PAGE_UP)),
            (Action.page(VertDirection.DOWN), combo(VirtKey.PAGE_DOWN)),
            (Action.to_edge(VertDirection.UP), combo(VirtKey.HOME)),
            (Action.to_edge(VertDirection.DOWN), combo(VirtKey.END)),
            (Action.quit(), combo(VirtKey.ESCAPE)),
            # vim-like bindings
            (Action.copy(), combo(VirtKey.Y)),
            (Action.scroll(VertDirection.UP), combo(VirtKey.K)),
            (Action.scroll(VertDirection.DOWN), combo(VirtKey.J)),
            (Action.to_edge(VertDirection.UP), combo(VirtKey.G, VirtKey.G)),
            (Action.to_edge(VertDirection.DOWN), combo(ModifiedKey(VirtKey.G, shift))),
            (Action.quit(), combo(VirtKey.Q)),
            (
                Action.quit(),
                combo(ModifiedKey(VirtKey.Z, shift), ModifiedKey(VirtKey.Z, shift)),
            ),
            (
                Action.quit(),
                combo(ModifiedKey(VirtKey.Z, shift), ModifiedKey(VirtKey.Q, shift)),
            ),
            (Action.history(HistDirection.NEXT), combo(VirtKey.B, VirtKey.N)),
            (Action.history(HistDirection.PREV), combo(VirtKey.B, VirtKey.P)),
        ]
    )


def merge_keybindings(
    base: Iterable[Binding], extra: Iterable[Binding] | None
) -> Keybindings:
    """Combine base and extra bindings.

    A base binding whose combo starts with an extra combo is dropped in favour
    of the extra one. The inputs are left untouched.
    """
    bindings = list(base)
    if extra is None:
        return Keybindings(bindings)

    extra = list(extra)
    for _, extra_combo in extra:
        kept = []
        for action, combo in bindings:
            if combo.starts_with(extra_combo):
                _log.debug(
                    "Base keybinding %s ignored in favor of extra keybinding %s",
                    combo,
                    extra_combo,
                )
            else:
                kept.append((action, combo))
        bindings = kept

    bindings.extend(extra)
    return Keybindings(bindings)