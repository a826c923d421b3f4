"""Filter kind definitions.

Each filter kind is a frozen dataclass. The same class serves as the static
descriptor registered for a table and as the live instance carrying the
current selection; ``with_selection`` returns a new instance that keeps the
identity fields (``field``, ``key``, ``type``) unchanged.
"""

from dataclasses import dataclass, field as dataclass_field, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Union


class FilterKind(Enum):
    """Closed set of filter behaviors."""
    BOOLEAN = "boolean"
    RANGE = "range"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    TRANSFORMER = "transformer"


class RangeType(str, Enum):
    """Value type carried by a range filter."""
    NUMBER = "number"
    DATE = "date"
    DATETIME = "datetime"


RangeValue = Union[int, float, date, datetime, str, None]


def _merge_options(defaults: Mapping[str, Any], options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    merged = dict(defaults)
    if options:
        merged.update(options)
    return merged


# =============================================================================
# BOOLEAN
# =============================================================================

BOOLEAN_DEFAULT_OPTIONS: Dict[str, Any] = {
    "label": "",
}


@dataclass(frozen=True)
class BooleanFilter:
    """Checkbox filter; active while present in the filter state.

    ``key`` is the value written into the state when the checkbox is ticked.
    """
    field: str
    key: Any
    options: Dict[str, Any] = dataclass_field(default_factory=dict)

    kind: ClassVar[FilterKind] = FilterKind.BOOLEAN

    @classmethod
    def new(cls, field: str, key: Any, options: Optional[Mapping[str, Any]] = None) -> "BooleanFilter":
        return cls(field=field, key=key, options=_merge_options(BOOLEAN_DEFAULT_OPTIONS, options))

    @property
    def is_active(self) -> bool:
        return True

    def with_selection(self) -> "BooleanFilter":
        return self


# =============================================================================
# RANGE
# =============================================================================

RANGE_DEFAULT_OPTIONS: Dict[str, Any] = {
    "label": "",
    "min": None,
    "max": None,
    "step": 1,
    "default_min": None,
    "default_max": None,
}


@dataclass(frozen=True)
class RangeFilter:
    """Min/max filter over numbers, dates or datetimes."""
    field: str
    key: Any
    type: RangeType = RangeType.NUMBER
    current_min: RangeValue = None
    current_max: RangeValue = None
    options: Dict[str, Any] = dataclass_field(default_factory=dict)

    kind: ClassVar[FilterKind] = FilterKind.RANGE

    def __post_init__(self):
        # Accept plain strings ("date") as well as RangeType members
        try:
            range_type = RangeType(self.type)
        except ValueError:
            raise ValueError(
                f"Unsupported range type {self.type!r}; "
                f"expected one of {[t.value for t in RangeType]}"
            ) from None
        object.__setattr__(self, "type", range_type)

    @classmethod
    def new(
        cls,
        field: str,
        key: Any,
        type: Union[RangeType, str] = RangeType.NUMBER,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "RangeFilter":
        """Create a range filter; current bounds start at the configured defaults."""
        complete = _merge_options(RANGE_DEFAULT_OPTIONS, options)
        return cls(
            field=field,
            key=key,
            type=type,
            current_min=complete.get("current_min", complete["default_min"]),
            current_max=complete.get("current_max", complete["default_max"]),
            options=complete,
        )

    @property
    def is_active(self) -> bool:
        return self.current_min is not None or self.current_max is not None

    def with_selection(self, current_min: RangeValue, current_max: RangeValue) -> "RangeFilter":
        return replace(self, current_min=current_min, current_max=current_max)


# =============================================================================
# SELECT
# =============================================================================

SELECT_DEFAULT_OPTIONS: Dict[str, Any] = {
    "label": "",
    "options": [],
    "prompt": "Select...",
}


@dataclass(frozen=True)
class SelectFilter:
    """Single-select filter; ``selected`` holds the chosen id list or None."""
    field: str
    key: Any
    selected: Optional[List[Any]] = None
    options: Dict[str, Any] = dataclass_field(default_factory=dict)

    kind: ClassVar[FilterKind] = FilterKind.SELECT

    @classmethod
    def new(cls, field: str, key: Any, options: Optional[Mapping[str, Any]] = None) -> "SelectFilter":
        complete = _merge_options(SELECT_DEFAULT_OPTIONS, options)
        return cls(field=field, key=key, selected=complete.pop("selected", None), options=complete)

    @property
    def is_active(self) -> bool:
        return self.selected is not None

    def with_selection(self, selected: Optional[List[Any]]) -> "SelectFilter":
        return replace(self, selected=selected)


# =============================================================================
# MULTI SELECT
# =============================================================================

MULTI_SELECT_DEFAULT_OPTIONS: Dict[str, Any] = {
    "label": "",
    "options": [],
    "selected": None,
    "tags": False,
    "prompt": "Select option...",
    "placeholder": "Select option...",
}


@dataclass(frozen=True)
class MultiSelectFilter:
    """Select filter over string values.

    Single mode holds one string value (None until something is picked); tags
    mode (``options["tags"]``) starts from an empty list.
    """
    field: str
    key: Any
    selected: Union[List[Any], str, None] = None
    options: Dict[str, Any] = dataclass_field(default_factory=dict)

    kind: ClassVar[FilterKind] = FilterKind.MULTI_SELECT

    @classmethod
    def new(cls, field: str, key: Any, options: Optional[Mapping[str, Any]] = None) -> "MultiSelectFilter":
        complete = _merge_options(MULTI_SELECT_DEFAULT_OPTIONS, options)
        selected = complete.pop("selected")
        if complete["tags"] and selected is None:
            selected = []
        return cls(field=field, key=key, selected=selected, options=complete)

    @property
    def tags(self) -> bool:
        return bool(self.options.get("tags", False))

    @property
    def is_active(self) -> bool:
        return bool(self.selected)

    def with_selection(self, selected: Union[List[Any], str, None]) -> "MultiSelectFilter":
        if isinstance(selected, (list, tuple)):
            selected = list(selected)
        return replace(self, selected=selected)


# =============================================================================
# TRANSFORMER
# =============================================================================

@dataclass(frozen=True)
class TransformerFilter:
    """Custom filter whose state is an arbitrary mapping.

    The table's query layer decides what ``applied_data`` means; this engine
    only stores and re-emits it.
    """
    key: Any
    applied_data: Dict[str, Any] = dataclass_field(default_factory=dict)
    options: Dict[str, Any] = dataclass_field(default_factory=dict)

    kind: ClassVar[FilterKind] = FilterKind.TRANSFORMER

    @classmethod
    def new(cls, key: Any, options: Optional[Mapping[str, Any]] = None) -> "TransformerFilter":
        complete = dict(options or {})
        return cls(key=key, applied_data=dict(complete.pop("applied_data", {}) or {}), options=complete)

    @property
    def field(self) -> None:
        return None

    @property
    def is_active(self) -> bool:
        return bool(self.applied_data)

    def with_selection(self, applied_data: Mapping[str, Any]) -> "TransformerFilter":
        return replace(self, applied_data=dict(applied_data))


FilterDescriptor = Union[
    BooleanFilter,
    RangeFilter,
    SelectFilter,
    MultiSelectFilter,
    TransformerFilter,
]

FILTER_CLASSES = (
    BooleanFilter,
    RangeFilter,
    SelectFilter,
    MultiSelectFilter,
    TransformerFilter,
)
