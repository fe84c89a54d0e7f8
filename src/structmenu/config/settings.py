"""Menu settings model using Pydantic."""

from prompt_toolkit.utils import get_cwidth
from pydantic import BaseModel, ConfigDict, field_validator


class MenuSettings(BaseModel):
    """Appearance and behavior of a struct menu.

    ``MenuSettings()`` gives usable defaults; override individual fields
    with keyword arguments or ``model_copy(update=...)``.
    """
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    nav_cursor_marker: str = "> "  # cursor during navigation
    edit_cursor_marker: str = ">>"  # cursor during edit
    caret_symbol: str = "|"  # shown right of the buffer during edit
    advance_on_commit: bool = True  # jump to the next field after a commit
    header_text: str = ""  # message displayed above the menu

    @field_validator("nav_cursor_marker", "edit_cursor_marker", "caret_symbol")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @property
    def marker_width(self) -> int:
        """Terminal cell width of the widest cursor marker."""
        return max(get_cwidth(self.nav_cursor_marker), get_cwidth(self.edit_cursor_marker))
