"""Expose the fields of a record as an editable terminal menu.

Example usage:
    from structmenu import build_menu, render, write_back

    state = build_menu(form, ["internal_id"], as_blacklist=True)
    for key in keys_from_somewhere():
        if state.handle_key(key) is not MenuSignal.CONTINUE:
            break
        print(render(state))
    if not state.cancelled:
        write_back(state, form)

Or let prompt_toolkit drive the loop:
    from structmenu import edit_record

    edit_record(form)
"""

from .app import build_application, edit_record, run_menu
from .config import MenuSettings, load_settings
from .errors import (
    ConfigError,
    FieldValueError,
    InvalidTargetError,
    NoExposedFieldsError,
    NotARecordError,
    StructMenuError,
    TypeMismatchError,
    UnsupportedFieldKindError,
)
from .extractor import build_menu
from .keys import Key, normalize_key
from .menu import MenuMode, MenuSignal, MenuState
from .renderer import render
from .schema import FieldDescriptor, FieldKind, SkippedField, SkipReason
from .writer import WriteReport, write_back

__all__ = [
    # Schema types
    "FieldKind",
    "FieldDescriptor",
    "SkippedField",
    "SkipReason",
    # Menu
    "build_menu",
    "MenuState",
    "MenuMode",
    "MenuSignal",
    "MenuSettings",
    "Key",
    "normalize_key",
    "render",
    # Write-back
    "write_back",
    "WriteReport",
    # Host loop
    "build_application",
    "run_menu",
    "edit_record",
    # Config
    "load_settings",
    # Errors
    "StructMenuError",
    "InvalidTargetError",
    "NotARecordError",
    "UnsupportedFieldKindError",
    "NoExposedFieldsError",
    "TypeMismatchError",
    "FieldValueError",
    "ConfigError",
]
