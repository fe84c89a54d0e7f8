"""Key names understood by the menu state machine."""

from __future__ import annotations

from enum import Enum


class Key(str, Enum):
    """Named (non-character) keys."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TAB = "tab"
    SHIFT_TAB = "shift+tab"
    ENTER = "enter"
    BACKSPACE = "backspace"
    INTERRUPT = "ctrl+c"


PREV_KEYS = frozenset({Key.UP.value, "k", Key.SHIFT_TAB.value})
NEXT_KEYS = frozenset({Key.DOWN.value, "j", Key.TAB.value})
SAVE_KEYS = frozenset({"s"})
CANCEL_KEYS = frozenset({"q", Key.INTERRUPT.value})
DIGIT_KEYS = frozenset("0123456789")

# prompt_toolkit reports control keys by their control-code name.
_PROMPT_TOOLKIT_ALIASES = {
    "s-tab": Key.SHIFT_TAB.value,
    "c-i": Key.TAB.value,
    "c-m": Key.ENTER.value,
    "c-j": Key.ENTER.value,
    "c-h": Key.BACKSPACE.value,
    "c-c": Key.INTERRUPT.value,
}


def normalize_key(name: str) -> str:
    """Map a key identifier to the canonical name used by the menu.

    Args:
        name: Key identifier, either canonical, a prompt_toolkit key
            name, or a single character.

    Returns:
        Canonical key name.
    """
    if isinstance(name, Key):
        return name.value
    return _PROMPT_TOOLKIT_ALIASES.get(name, name)


def is_printable(key: str) -> bool:
    """Return True for a single printable character."""
    return len(key) == 1 and key.isprintable()
