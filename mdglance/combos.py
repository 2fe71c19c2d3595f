"""Matching of pressed keys against single and multi-key combos."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from itertools import combinations

from mdglance.actions import Action
from mdglance.keybindings import Binding, merge_keybindings
from mdglance.keys import KeyCombo, ModifiedKey, VirtKey

_log = logging.getLogger(__name__)

_MODIFIER_KEYS = frozenset(
    [
        VirtKey.LALT,
        VirtKey.RALT,
        VirtKey.LCONTROL,
        VirtKey.RCONTROL,
        VirtKey.LWIN,
        VirtKey.RWIN,
        VirtKey.LSHIFT,
        VirtKey.RSHIFT,
    ]
)

# A trie node maps a key to either the next node or the action it completes.
_Node = dict[ModifiedKey, "Action | _Node"]


class KeyComboError(ValueError):
    """Raised when a set of keybindings cannot be turned into key combos."""


class KeyCombos:
    """Maps single or multi-key combos to their actions.

    Combos are stored as a trie so that combos sharing a prefix share nodes.
    """

    def __init__(
        self, base: Iterable[Binding], extra: Iterable[Binding] | None = None
    ) -> None:
        bindings = list(merge_keybindings(base, extra))

        # A combo starting with another combo could never be reached, since the
        # prefix would always fire first.
        for (_, combo1), (_, combo2) in combinations(bindings, 2):
            if combo1.starts_with(combo2):
                raise KeyComboError(_unreachable_message(combo1, combo2))
            if combo2.starts_with(combo1):
                raise KeyComboError(_unreachable_message(combo2, combo1))

        self._root: _Node = {}
        for action, combo in bindings:
            if not len(combo):
                raise KeyComboError(f"A keycombo for {action!r} contained no keys")
            self._insert(combo, action)

        self._position: _Node = self._root
        self._in_multikey_combo = False

    def _insert(self, combo: KeyCombo, action: Action) -> None:
        *prefix, last = combo.keys
        node = self._root
        for key in prefix:
            node = node.setdefault(key, {})
        node[last] = action

    def munch(self, modified_key: ModifiedKey) -> Action | None:
        """Process a key and return the action it completes, if any."""
        if modified_key.key.code in _MODIFIER_KEYS:
            return None

        _log.debug("Received key: %s", modified_key)
        action = self._munch(modified_key)
        if action is not None:
            _log.debug("Emitting action: %r", action)
        return action

    def _munch(self, modified_key: ModifiedKey) -> Action | None:
        entry = self._position.get(modified_key)
        if isinstance(entry, Action):
            self.reset()
            return entry
        if entry is not None:
            self._in_multikey_combo = True
            self._position = entry
            return None

        was_in_combo = self._in_multikey_combo
        self.reset()
        if was_in_combo:
            # The key that broke a multi-key combo may start a new one.
            return self._munch(modified_key)
        return None

    def reset(self) -> None:
        """Return to the start of all combos."""
        self._position = self._root
        self._in_multikey_combo = False


def _unreachable_message(combo: KeyCombo, prefix: KeyCombo) -> str:
    return (
        "A keycombo starts with another keycombo making it unreachable\n"
        f"\tCombo: {combo}\n\tPrefix: {prefix}"
    )