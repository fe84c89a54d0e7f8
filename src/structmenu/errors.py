"""Error types for struct menus.

Construction-time problems (bad target, unsupported field, nothing to show)
are raised from ``build_menu``. Write-back problems are raised from
``write_back`` after every other field has been processed.
"""

from typing import List, Optional


class StructMenuError(Exception):
    """Base exception for all struct menu errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidTargetError(StructMenuError):
    """Raised when the target is not a mutable record instance.

    Classes, frozen records and immutable builtins all land here.
    """

    def __init__(self, target: object, reason: str):
        type_name = type(target).__name__
        message = f"Invalid target ({type_name}): {reason}"
        super().__init__(message, {"type": type_name, "reason": reason})
        self.reason = reason


class NotARecordError(StructMenuError):
    """Raised when the target is mutable but not a dataclass or pydantic model."""

    def __init__(self, target: object):
        type_name = type(target).__name__
        message = (
            f"Not a record: {type_name}. "
            "Pass a dataclass instance or a pydantic model instance."
        )
        super().__init__(message, {"type": type_name})


class UnsupportedFieldKindError(StructMenuError):
    """Raised in strict mode when a field is not str, bool or int."""

    def __init__(self, field_name: str, value_type: str):
        message = (
            f"Unsupported field kind for '{field_name}': {value_type} "
            "(expected str, bool or int)"
        )
        super().__init__(message, {"field": field_name, "type": value_type})
        self.field_name = field_name


class NoExposedFieldsError(StructMenuError):
    """Raised when no fields remain after filtering and skipping."""

    def __init__(self, record_type: str, skipped: Optional[List[str]] = None):
        message = f"No fields to expose to users in {record_type}"
        details = {"type": record_type}
        if skipped:
            details["skipped"] = skipped
            message += f" (skipped: {', '.join(skipped[:5])}"
            if len(skipped) > 5:
                message += f" +{len(skipped) - 5} more"
            message += ")"
        super().__init__(message, details)


class TypeMismatchError(StructMenuError):
    """Raised by write-back when destination fields have a different kind.

    All other fields have already been written when this is raised;
    ``report`` holds the partial result.
    """

    def __init__(self, mismatches: List[str], report=None):
        message = f"Type mismatch on write-back for: {', '.join(mismatches)}"
        super().__init__(message, {"fields": mismatches})
        self.mismatches = mismatches
        self.report = report


class FieldValueError(StructMenuError, TypeError):
    """Raised when a descriptor is given a value that does not match its kind."""

    def __init__(self, field_name: str, kind: str, value: object):
        message = (
            f"Field '{field_name}' is {kind}, got {type(value).__name__}: {value!r}"
        )
        super().__init__(message, {"field": field_name, "kind": kind})


class ConfigError(StructMenuError):
    """Raised when a menu configuration file cannot be loaded."""

    def __init__(self, path: str, error_message: str):
        message = f"Invalid menu configuration in {path}: {error_message}"
        super().__init__(message, {"path": path, "error_message": error_message})
        self.path = path
