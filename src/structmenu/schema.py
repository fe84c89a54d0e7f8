"""Field descriptor types for struct menus.

A ``FieldDescriptor`` is the editable state of one record field. Its kind
is fixed when the menu is built, and every later step (editing, rendering,
write-back) dispatches on ``FieldKind`` instead of inspecting types again.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .errors import FieldValueError

FieldValue = Union[str, bool, int]


class FieldKind(Enum):
    """Kinds of values a menu field can hold.

    Attributes:
        STRING: Free text, edited through a buffer.
        BOOLEAN: Toggle, edited with t/f/0/1/left/right.
        INTEGER: Signed integer, edited through a buffer.
    """

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"

    @property
    def python_type(self) -> type:
        """The exact Python type a value of this kind must have."""
        return _PYTHON_TYPES[self]

    @classmethod
    def for_value(cls, value: Any) -> Optional["FieldKind"]:
        """Return the kind matching the exact runtime type of ``value``.

        ``bool`` is a subclass of ``int``, so subclasses are not matched;
        ``True`` is BOOLEAN and an ``IntEnum`` member is unsupported.
        """
        for kind, python_type in _PYTHON_TYPES.items():
            if type(value) is python_type:
                return kind
        return None

    def accepts(self, value: Any) -> bool:
        """Check whether ``value`` can be stored in a field of this kind."""
        return type(value) is self.python_type


_PYTHON_TYPES = {
    FieldKind.STRING: str,
    FieldKind.BOOLEAN: bool,
    FieldKind.INTEGER: int,
}


class SkipReason(Enum):
    """Why a field was left out of a menu or a write-back."""

    UNEXPORTED = "unexported"
    FROZEN = "frozen"
    UNSUPPORTED_KIND = "unsupported_kind"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class SkippedField:
    """A non-fatal diagnostic for a field that was skipped.

    Attributes:
        name: Source field identifier.
        reason: Why it was skipped.
        message: Human-readable explanation.
    """

    name: str
    reason: SkipReason
    message: str


@dataclass
class FieldDescriptor:
    """Editable state for one record field.

    Attributes:
        raw_name: Source field identifier, used for write-back lookup.
        kind: Field kind, fixed at construction.
        value: Committed value; its type always matches ``kind``.
        display_name: Label shown in the menu (defaults to ``raw_name``).
        description: Optional help text shown in the footer.
        edit_buffer: In-progress text while editing a STRING/INTEGER field.
        error_message: Set when a commit fails to parse.
    """

    raw_name: str
    kind: FieldKind
    value: FieldValue
    display_name: str = ""
    description: Optional[str] = None
    edit_buffer: str = field(default="", repr=False)
    error_message: Optional[str] = None

    def __post_init__(self):
        """Validate the initial value against the kind."""
        if not self.display_name:
            self.display_name = self.raw_name
        self._check(self.value)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "value" and "kind" in self.__dict__:
            self._check(value)
        super().__setattr__(name, value)

    def _check(self, value: Any) -> None:
        if not self.kind.accepts(value):
            raise FieldValueError(self.raw_name, self.kind.value, value)

    @property
    def uses_buffer(self) -> bool:
        """Whether editing this field goes through ``edit_buffer``."""
        return self.kind is not FieldKind.BOOLEAN

    def clear_error(self) -> None:
        """Forget any pending parse error."""
        self.error_message = None
