"""Edit state machine for struct menus.

``MenuState`` owns the field descriptors, the cursor and the edit mode.
Hosts feed it one decoded key at a time through ``handle_key`` and
re-render after each call; it never blocks and performs no I/O.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from .config import MenuSettings
from .keys import (
    CANCEL_KEYS,
    DIGIT_KEYS,
    NEXT_KEYS,
    PREV_KEYS,
    SAVE_KEYS,
    Key,
    is_printable,
    normalize_key,
)
from .schema import FieldDescriptor, FieldKind, SkippedField

logger = logging.getLogger(__name__)

# Committed integers must fit a signed 64-bit value.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class MenuMode(Enum):
    """Whether the user is moving between fields or editing one."""

    NAVIGATING = "navigating"
    EDITING = "editing"


class MenuSignal(Enum):
    """Result of handling a key, telling the host what to do next."""

    CONTINUE = "continue"
    SAVE = "save"
    CANCEL = "cancel"


def parse_int(text: str) -> int:
    """Parse an integer edit buffer.

    Raises:
        ValueError: If the text is not an integer or is out of range.
    """
    try:
        value = int(text, 10)
    except ValueError:
        raise ValueError(f'parsing "{text}": invalid syntax') from None
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


class MenuState:
    """Cursor, mode and field descriptors of a running menu.

    Args:
        fields: Ordered field descriptors (at least one).
        settings: Menu settings; defaults are used if omitted.
        diagnostics: Fields skipped while building the menu.
    """

    def __init__(
        self,
        fields: List[FieldDescriptor],
        settings: Optional[MenuSettings] = None,
        diagnostics: Optional[List[SkippedField]] = None,
    ) -> None:
        if not fields:
            raise ValueError("MenuState requires at least one field")
        self._fields = list(fields)
        self.settings = settings or MenuSettings()
        self.diagnostics = list(diagnostics or [])
        self.cursor_index = 0
        self.mode = MenuMode.NAVIGATING
        self.cancelled = False
        self.saved = False

    # ─────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        return tuple(self._fields)

    @property
    def editing(self) -> bool:
        return self.mode is MenuMode.EDITING

    @property
    def finished(self) -> bool:
        """True once the menu was saved or cancelled."""
        return self.saved or self.cancelled

    @property
    def current_field(self) -> FieldDescriptor:
        return self._fields[self.cursor_index]

    def field(self, raw_name: str) -> FieldDescriptor:
        """Look up a descriptor by its source field name.

        Raises:
            KeyError: If no descriptor has that name.
        """
        for descriptor in self._fields:
            if descriptor.raw_name == raw_name:
                return descriptor
        raise KeyError(raw_name)

    def values(self) -> dict[str, object]:
        """Committed values keyed by source field name."""
        return {f.raw_name: f.value for f in self._fields}

    # ─────────────────────────────────────────────────────────────────
    # Key dispatch
    # ─────────────────────────────────────────────────────────────────

    def handle_key(self, key: str) -> MenuSignal:
        """Apply one key event.

        Args:
            key: Canonical key name or prompt_toolkit key identifier.

        Returns:
            SAVE or CANCEL when the menu should close, else CONTINUE.
        """
        if self.finished:
            return self._terminal_signal()

        key = normalize_key(key)
        if key == Key.INTERRUPT:
            return self._cancel()
        if self.editing:
            self._handle_edit_key(key)
            return MenuSignal.CONTINUE
        return self._handle_nav_key(key)

    def handle_keys(self, keys) -> MenuSignal:
        """Apply a sequence of keys, stopping at the first terminal signal."""
        signal = MenuSignal.CONTINUE
        for key in keys:
            signal = self.handle_key(key)
            if signal is not MenuSignal.CONTINUE:
                break
        return signal

    def _terminal_signal(self) -> MenuSignal:
        return MenuSignal.CANCEL if self.cancelled else MenuSignal.SAVE

    def _cancel(self) -> MenuSignal:
        self.cancelled = True
        logger.debug("Menu cancelled")
        return MenuSignal.CANCEL

    def _handle_nav_key(self, key: str) -> MenuSignal:
        if key in PREV_KEYS:
            self.move_cursor(-1)
        elif key in NEXT_KEYS:
            self.move_cursor(1)
        elif key == Key.ENTER:
            self.begin_edit()
        elif key in SAVE_KEYS:
            self.saved = True
            logger.debug("Menu saved")
            return MenuSignal.SAVE
        elif key in CANCEL_KEYS:
            return self._cancel()
        elif key in DIGIT_KEYS:
            current = self.current_field
            if current.kind is FieldKind.INTEGER:
                current.value = int(key)
                current.clear_error()
        return MenuSignal.CONTINUE

    def _handle_edit_key(self, key: str) -> None:
        current = self.current_field
        if key == Key.ENTER:
            self.commit_edit()
        elif current.kind is FieldKind.BOOLEAN:
            self._edit_bool(current, key)
        elif key == Key.BACKSPACE:
            self._backspace(current)
        elif is_printable(key):
            self._append(current, key)

    # ─────────────────────────────────────────────────────────────────
    # Cursor and mode
    # ─────────────────────────────────────────────────────────────────

    def move_cursor(self, step: int) -> None:
        """Move the cursor by ``step``, clamped to the field range.

        The error on the field left behind is always cleared.
        """
        self.current_field.clear_error()
        target = self.cursor_index + step
        self.cursor_index = max(0, min(target, len(self._fields) - 1))

    def begin_edit(self) -> None:
        """Enter edit mode on the field under the cursor."""
        self.current_field.edit_buffer = ""
        self.mode = MenuMode.EDITING

    def commit_edit(self) -> bool:
        """Finalize the edit on the current field.

        Returns:
            True if the value was committed. On a parse failure the value
            is kept, the error is stored on the field, and the cursor
            stays put so the error remains visible.
        """
        current = self.current_field
        if current.kind is FieldKind.STRING:
            current.value = current.edit_buffer
        elif current.kind is FieldKind.INTEGER:
            buffer = current.edit_buffer
            if buffer in ("", "-"):
                current.value = 0
            else:
                try:
                    current.value = parse_int(buffer)
                except ValueError as e:
                    current.error_message = str(e)
                    current.edit_buffer = ""
                    self.mode = MenuMode.NAVIGATING
                    logger.debug("Rejected %s=%r: %s", current.raw_name, buffer, e)
                    return False

        current.edit_buffer = ""
        current.clear_error()
        self.mode = MenuMode.NAVIGATING
        if self.settings.advance_on_commit:
            self.move_cursor(1)
        return True

    # ─────────────────────────────────────────────────────────────────
    # Per-kind editing rules
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def _append(current: FieldDescriptor, char: str) -> None:
        if current.kind is FieldKind.INTEGER:
            if char in DIGIT_KEYS or (char == "-" and not current.edit_buffer):
                current.edit_buffer += char
        else:
            current.edit_buffer += char

    @staticmethod
    def _backspace(current: FieldDescriptor) -> None:
        if not current.edit_buffer:
            return
        current.edit_buffer = current.edit_buffer[:-1]
        if current.kind is FieldKind.INTEGER and not current.edit_buffer:
            current.value = 0

    @staticmethod
    def _edit_bool(current: FieldDescriptor, key: str) -> None:
        if key in ("t", "1"):
            current.value = True
        elif key in ("f", "0"):
            current.value = False
        elif key in (Key.LEFT, Key.RIGHT):
            current.value = not current.value
        # Anything else leaves the value alone.
