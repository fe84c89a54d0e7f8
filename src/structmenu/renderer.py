"""Text rendering for struct menus."""

from __future__ import annotations

from prompt_toolkit.utils import get_cwidth

from .menu import MenuState
from .schema import FieldDescriptor, FieldKind

HELP_TEXT = "Press s to save and quit.\nPress q to quit without saving.\n"
ERROR_PREFIX = "ERROR: "

BOOL_TRUE_TOGGLE = "[t] ||  f "
BOOL_FALSE_TOGGLE = " t  || [f]"


def format_value(field: FieldDescriptor, editing: bool, caret: str) -> str:
    """Render a field value for the value column.

    Args:
        field: The field descriptor.
        editing: Whether this field is being edited.
        caret: Caret symbol appended to the edit buffer.

    Returns:
        Display string.
    """
    match field.kind:
        case FieldKind.BOOLEAN:
            if editing:
                return BOOL_TRUE_TOGGLE if field.value else BOOL_FALSE_TOGGLE
            return "true" if field.value else "false"
        case _:
            if editing:
                return field.edit_buffer + caret
            return str(field.value)


def _pad(text: str, width: int) -> str:
    """Right-pad ``text`` to ``width`` terminal cells."""
    return text + " " * max(0, width - get_cwidth(text))


def render(state: MenuState) -> str:
    """Render the full menu layout for ``state``.

    The result holds the optional header, one row per field, the current
    field's description and error, and the save/cancel help.
    """
    settings = state.settings
    lines = []
    if settings.header_text:
        lines.append(settings.header_text)
    lines.append("")

    name_width = max(get_cwidth(f.display_name) for f in state.fields)
    marker_width = settings.marker_width

    for i, field in enumerate(state.fields):
        is_current = i == state.cursor_index
        if not is_current:
            marker = ""
        elif state.editing:
            marker = settings.edit_cursor_marker
        else:
            marker = settings.nav_cursor_marker

        value = format_value(field, state.editing and is_current, settings.caret_symbol)
        lines.append(
            f"{_pad(marker, marker_width)} ⟦ {_pad(field.display_name, name_width)} ⟧: {value}"
        )

    current = state.current_field
    lines.append("")
    lines.append(current.description or "")
    if current.error_message:
        lines.append(f"{ERROR_PREFIX}{current.error_message}")
    lines.append("")

    return "\n".join(lines) + "\n" + HELP_TEXT
