"""Build a menu from a record.

Example:
    @dataclass
    class Application:
        first_name: str = field(default="", metadata={"smname": "First Name"})
        can_travel: bool = field(
            default=False,
            metadata={"smname": "Travel", "smdes": "Can you travel for work?"},
        )

    state = build_menu(Application())
"""

import logging
from typing import Any, List, Optional, Sequence

from .config import MenuSettings
from .errors import NoExposedFieldsError, UnsupportedFieldKindError
from .menu import MenuState
from .record import FieldSlot, layout_for
from .schema import FieldDescriptor, FieldKind, SkippedField, SkipReason

logger = logging.getLogger(__name__)

_SKIP_MESSAGES = {
    SkipReason.UNEXPORTED: "left unexposed (private field)",
    SkipReason.FROZEN: "left unexposed (field is frozen)",
}


def build_menu(
    record: Any,
    field_names: Optional[Sequence[str]] = None,
    as_blacklist: bool = False,
    settings: Optional[MenuSettings] = None,
    *,
    strict: bool = True,
) -> MenuState:
    """Create a menu exposing the fields of ``record``.

    If ``field_names`` is empty, every field is exposed. Otherwise it is a
    whitelist, or a blacklist when ``as_blacklist`` is True.

    Args:
        record: Dataclass or pydantic model instance to expose.
        field_names: Field identifiers to include (or exclude).
        as_blacklist: Treat ``field_names`` as fields to exclude.
        settings: Menu settings; defaults are used if omitted.
        strict: Raise on fields that are not str/bool/int instead of
            skipping them.

    Returns:
        A MenuState positioned on the first field, in navigation mode.

    Raises:
        InvalidTargetError: If the record is not a mutable instance.
        NotARecordError: If the record is not a dataclass or pydantic model.
        UnsupportedFieldKindError: In strict mode, for an unsupported field.
        NoExposedFieldsError: If no fields remain.
    """
    layout = layout_for(record)
    listed = set(field_names or ())
    unknown = listed - set(layout.names)
    if unknown:
        logger.warning(
            "Filter names not found in %s: %s",
            layout.type_name,
            ", ".join(sorted(unknown)),
        )

    descriptors: List[FieldDescriptor] = []
    diagnostics: List[SkippedField] = []

    for slot in layout:
        if listed and (slot.name in listed) == as_blacklist:
            continue

        if not slot.settable:
            diagnostics.append(
                _skip(slot.name, slot.blocked, _SKIP_MESSAGES[slot.blocked])
            )
            continue

        value = slot.get(record)
        kind = FieldKind.for_value(value)
        if kind is None:
            if strict:
                raise UnsupportedFieldKindError(slot.name, type(value).__name__)
            diagnostics.append(
                _skip(
                    slot.name,
                    SkipReason.UNSUPPORTED_KIND,
                    f"left unexposed (unsupported type {type(value).__name__})",
                )
            )
            continue

        descriptors.append(_describe(slot, kind, value))

    if not descriptors:
        raise NoExposedFieldsError(
            layout.type_name, [d.name for d in diagnostics]
        )

    logger.debug(
        "Built menu for %s with %d field(s), %d skipped",
        layout.type_name,
        len(descriptors),
        len(diagnostics),
    )
    return MenuState(descriptors, settings or MenuSettings(), diagnostics)


def _describe(slot: FieldSlot, kind: FieldKind, value: Any) -> FieldDescriptor:
    return FieldDescriptor(
        raw_name=slot.name,
        kind=kind,
        value=value,
        display_name=slot.display_name or slot.name,
        description=slot.description,
    )


def _skip(name: str, reason: SkipReason, message: str) -> SkippedField:
    logger.warning("Field '%s' %s", name, message)
    return SkippedField(name=name, reason=reason, message=message)
