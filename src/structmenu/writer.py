"""Write committed menu values back into a record."""

import logging
from dataclasses import dataclass, field
from typing import Any, List

from pydantic import ValidationError

from .errors import TypeMismatchError
from .menu import MenuState
from .record import layout_for
from .schema import SkippedField, SkipReason

logger = logging.getLogger(__name__)


@dataclass
class WriteReport:
    """Outcome of a write-back.

    Attributes:
        written: Names of fields that were assigned.
        skipped: Fields that were missing or not settable on the destination.
    """

    written: List[str] = field(default_factory=list)
    skipped: List[SkippedField] = field(default_factory=list)


def write_back(state: MenuState, destination: Any) -> WriteReport:
    """Copy every descriptor value into ``destination``.

    Missing or unsettable destination fields are skipped with a warning.
    Fields whose destination type differs from the descriptor kind are
    not written; no coercion is attempted (an int or str is never turned
    into a bool). Processing continues past mismatches, and a single
    ``TypeMismatchError`` is raised at the end if any occurred.

    Args:
        state: The final menu state.
        destination: Record of the same shape as the menu's source.

    Returns:
        WriteReport listing written and skipped fields.

    Raises:
        InvalidTargetError: If the destination is not a mutable instance.
        NotARecordError: If the destination is not a record.
        TypeMismatchError: If any field had a different kind.
    """
    layout = layout_for(destination)
    report = WriteReport()
    mismatches: List[str] = []

    for descriptor in state.fields:
        name = descriptor.raw_name
        slot = layout.get(name)
        if slot is None:
            message = "not found in destination"
            logger.warning("Field '%s' %s", name, message)
            report.skipped.append(SkippedField(name, SkipReason.NOT_FOUND, message))
            continue
        if not slot.settable:
            message = "cannot be set on destination"
            logger.warning("Field '%s' %s (%s)", name, message, slot.blocked.value)
            report.skipped.append(SkippedField(name, slot.blocked, message))
            continue

        current = slot.get(destination)
        if not descriptor.kind.accepts(current):
            logger.warning(
                "Field '%s' is %s in destination, menu holds %s",
                name,
                type(current).__name__,
                descriptor.kind.value,
            )
            mismatches.append(name)
            continue

        try:
            slot.set(destination, descriptor.value)
        except ValidationError as e:
            logger.warning("Field '%s' rejected by model validation: %s", name, e)
            mismatches.append(name)
            continue
        report.written.append(name)

    if mismatches:
        raise TypeMismatchError(mismatches, report)

    logger.debug(
        "Wrote %d field(s), skipped %d", len(report.written), len(report.skipped)
    )
    return report
