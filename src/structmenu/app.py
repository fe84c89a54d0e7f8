"""prompt_toolkit host loop for struct menus.

The core state machine knows nothing about terminals; this module wires
it to a full-screen prompt_toolkit application that redraws the rendered
layout after each key press.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPress, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from .config import MenuSettings
from .extractor import build_menu
from .menu import MenuSignal, MenuState
from .renderer import render
from .writer import write_back

logger = logging.getLogger(__name__)

NAMED_KEYS = (
    Keys.Up,
    Keys.Down,
    Keys.Left,
    Keys.Right,
    Keys.Tab,
    Keys.BackTab,
    Keys.Enter,
    Keys.ControlJ,
    Keys.Backspace,
    Keys.ControlC,
    Keys.BracketedPaste,
)


def key_name(key_press: KeyPress) -> str:
    """Return the prompt_toolkit identifier of a key press."""
    key = key_press.key
    if isinstance(key, Keys):
        return key.value
    return key


def key_names(key_press: KeyPress) -> Iterator[str]:
    """Yield the menu keys carried by a key press.

    A bracketed paste arrives as one key press holding the pasted text;
    it is expanded into one key per character.
    """
    if key_press.key == Keys.BracketedPaste:
        yield from key_press.data
    else:
        yield key_name(key_press)


def dispatch_key(state: MenuState, event: KeyPressEvent) -> MenuSignal:
    """Feed a key press event into ``state`` and exit the app when done.

    Args:
        state: Menu state receiving the key.
        event: prompt_toolkit key press event.

    Returns:
        The signal produced by the state machine.
    """
    signal = MenuSignal.CONTINUE
    keys = (name for key_press in event.key_sequence for name in key_names(key_press))
    for key in keys:
        signal = state.handle_key(key)
        if signal is not MenuSignal.CONTINUE:
            logger.debug("Exiting menu with %s", signal.value)
            event.app.exit(result=state)
            break
    return signal


def build_key_bindings(state: MenuState) -> KeyBindings:
    """Create bindings that forward every key to the state machine.

    Named keys and pastes are bound explicitly: prompt_toolkit's default
    bindings handle them, and an explicit binding outranks ``Keys.Any``.
    """
    bindings = KeyBindings()

    def _forward(event: KeyPressEvent) -> None:
        dispatch_key(state, event)

    bindings.add(Keys.Any)(_forward)
    for key in NAMED_KEYS:
        bindings.add(key)(_forward)

    return bindings


def build_application(state: MenuState, **app_kwargs: Any) -> Application:
    """Create a full-screen application displaying ``state``.

    Args:
        state: Menu state to display and drive.
        **app_kwargs: Extra Application arguments (e.g. input/output).

    Returns:
        Application whose ``run()`` returns the final state.
    """
    control = FormattedTextControl(lambda: render(state), focusable=True)
    return Application(
        layout=Layout(Window(content=control, wrap_lines=True)),
        key_bindings=build_key_bindings(state),
        full_screen=True,
        **app_kwargs,
    )


def run_menu(
    record: Any,
    field_names: Optional[Sequence[str]] = None,
    as_blacklist: bool = False,
    settings: Optional[MenuSettings] = None,
    *,
    strict: bool = True,
    **app_kwargs: Any,
) -> MenuState:
    """Show a menu for ``record`` and return the final state.

    The record itself is not modified; see ``edit_record``.
    """
    state = build_menu(record, field_names, as_blacklist, settings, strict=strict)
    build_application(state, **app_kwargs).run()
    return state


def edit_record(
    record: Any,
    field_names: Optional[Sequence[str]] = None,
    as_blacklist: bool = False,
    settings: Optional[MenuSettings] = None,
    *,
    strict: bool = True,
    **app_kwargs: Any,
) -> MenuState:
    """Show a menu for ``record`` and write the values back on save.

    Returns:
        The final state; check ``state.cancelled`` to see whether the
        record was left untouched.
    """
    state = run_menu(
        record,
        field_names,
        as_blacklist,
        settings,
        strict=strict,
        **app_kwargs,
    )
    if state.saved:
        write_back(state, record)
    else:
        logger.info("Menu cancelled, %s left unchanged", type(record).__name__)
    return state
