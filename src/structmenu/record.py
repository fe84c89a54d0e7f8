"""Record introspection.

Records are dataclass instances or pydantic model instances. Each record
class gets a ``RecordLayout``: an ordered index from field identifier to a
``FieldSlot`` that knows whether the field can be written and how to read
and write it. Layouts are built once per class and shared by the extractor
and the writer.
"""

import dataclasses
import logging
import weakref
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel

from .errors import InvalidTargetError, NotARecordError
from .schema import SkipReason

logger = logging.getLogger(__name__)

# Annotation keys for display name and description overrides.
NAME_TAG = "smname"
DESCRIPTION_TAG = "smdes"

_IMMUTABLE_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    range,
)

# Layouts per record class, dropped when the class is garbage collected.
_layouts: "weakref.WeakKeyDictionary[type, RecordLayout]" = (
    weakref.WeakKeyDictionary()
)


@dataclass(frozen=True)
class FieldSlot:
    """Layout entry for one declared field of a record class.

    Attributes:
        name: Declared field name.
        display_name: Override from the ``smname`` annotation, or None.
        description: Text from the ``smdes`` annotation, or None.
        blocked: Why the field cannot be written, or None if it can.
    """

    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    blocked: Optional[SkipReason] = None

    @property
    def settable(self) -> bool:
        return self.blocked is None

    def get(self, record: Any) -> Any:
        return getattr(record, self.name)

    def set(self, record: Any, value: Any) -> None:
        setattr(record, self.name, value)


class RecordLayout:
    """Ordered field index for a record class.

    Only the class name is kept so cached layouts never keep a class alive.
    """

    def __init__(self, type_name: str, slots: Dict[str, FieldSlot]):
        self.type_name = type_name
        self._slots = slots

    def __iter__(self) -> Iterator[FieldSlot]:
        return iter(self._slots.values())

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, name: str) -> bool:
        return name in self._slots

    def get(self, name: str) -> Optional[FieldSlot]:
        """Look up a slot by field identifier."""
        return self._slots.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._slots)


def check_target(target: Any) -> None:
    """Ensure ``target`` is a mutable record instance.

    Raises:
        InvalidTargetError: If the target is a class, frozen, or immutable.
        NotARecordError: If the target is not a dataclass or pydantic model.
    """
    if isinstance(target, type):
        raise InvalidTargetError(
            target, f"got the class {target.__name__}, pass an instance instead"
        )
    if isinstance(target, _IMMUTABLE_TYPES):
        raise InvalidTargetError(target, "value is immutable")

    if isinstance(target, BaseModel):
        if type(target).model_config.get("frozen"):
            raise InvalidTargetError(target, "pydantic model is frozen")
        return
    if dataclasses.is_dataclass(target):
        if type(target).__dataclass_params__.frozen:
            raise InvalidTargetError(target, "dataclass is frozen")
        return

    raise NotARecordError(target)


def layout_for(record: Any) -> RecordLayout:
    """Validate ``record`` and return the layout of its class."""
    check_target(record)
    return _build_layout(type(record))


def _build_layout(record_type: type) -> RecordLayout:
    layout = _layouts.get(record_type)
    if layout is not None:
        return layout

    if issubclass(record_type, BaseModel):
        slots = dict(_pydantic_slots(record_type))
    else:
        slots = dict(_dataclass_slots(record_type))
    logger.debug(
        "Built layout for %s: %d field(s)", record_type.__name__, len(slots)
    )
    layout = RecordLayout(record_type.__name__, slots)
    _layouts[record_type] = layout
    return layout


def _dataclass_slots(record_type: type) -> Iterator[tuple[str, FieldSlot]]:
    for dc_field in dataclasses.fields(record_type):
        metadata = dc_field.metadata or {}
        yield dc_field.name, FieldSlot(
            name=dc_field.name,
            display_name=metadata.get(NAME_TAG) or None,
            description=metadata.get(DESCRIPTION_TAG) or None,
            blocked=_name_block(dc_field.name),
        )


def _pydantic_slots(record_type: type) -> Iterator[tuple[str, FieldSlot]]:
    for name, info in record_type.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        blocked = _name_block(name)
        if blocked is None and info.frozen:
            blocked = SkipReason.FROZEN
        yield name, FieldSlot(
            name=name,
            display_name=extra.get(NAME_TAG) or info.title or None,
            description=extra.get(DESCRIPTION_TAG) or info.description or None,
            blocked=blocked,
        )


def _name_block(name: str) -> Optional[SkipReason]:
    if name.startswith("_"):
        return SkipReason.UNEXPORTED
    return None
