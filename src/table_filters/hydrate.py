"""Build live filter instances from a normalized filter state.

The merge step leaves selections in their raw wire shape (range bounds are
still strings). Hydration pairs each entry with its registered descriptor and
returns descriptor copies carrying the typed selection, ready for the query
layer and for ``encode``.
"""

from datetime import date, datetime
from typing import Any, Dict, Mapping

from config.constants import MULTI_SELECTED, RANGE_MAX, RANGE_MIN, SELECT_ID
from config.logging_config import get_logger

from .exceptions import MalformedFilterValueError
from .kinds import (
    BooleanFilter,
    FilterDescriptor,
    MultiSelectFilter,
    RangeFilter,
    RangeType,
    RangeValue,
    SelectFilter,
    TransformerFilter,
)
from .registry import FilterRegistry

logger = get_logger("hydrate")


def parse_range_bound(key: str, value: Any, range_type: RangeType) -> RangeValue:
    """
    Parse a raw range bound into the range's value type.

    Empty strings and None mean "unbounded". Values that are already typed
    pass through unchanged.

    Raises:
        MalformedFilterValueError: If the text does not parse as the type.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        return value

    text = value.strip()
    try:
        if range_type == RangeType.NUMBER:
            try:
                return int(text)
            except ValueError:
                return float(text)
        if range_type == RangeType.DATE:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).replace(tzinfo=None)
    except ValueError as e:
        raise MalformedFilterValueError(key, value, reason=f"not a valid {range_type.value}") from e


def _hydrate_entry(key: str, descriptor: FilterDescriptor, payload: Any) -> Any:
    """Return the live instance for one entry, or None if the payload does not fit."""
    if isinstance(descriptor, BooleanFilter):
        return descriptor

    if isinstance(descriptor, RangeFilter):
        if isinstance(payload, Mapping) and RANGE_MIN in payload and RANGE_MAX in payload:
            return descriptor.with_selection(
                parse_range_bound(key, payload[RANGE_MIN], descriptor.type),
                parse_range_bound(key, payload[RANGE_MAX], descriptor.type),
            )
        return None

    if isinstance(descriptor, SelectFilter):
        if isinstance(payload, Mapping) and SELECT_ID in payload:
            selected = payload[SELECT_ID]
            if isinstance(selected, (list, tuple)):
                selected = list(selected)
            return descriptor.with_selection(selected)
        return None

    if isinstance(descriptor, MultiSelectFilter):
        if isinstance(payload, Mapping) and isinstance(payload.get(MULTI_SELECTED), list):
            return descriptor.with_selection(payload[MULTI_SELECTED])
        return None

    if isinstance(descriptor, TransformerFilter):
        if isinstance(payload, Mapping):
            return descriptor.with_selection(payload)
        return None

    return None


def hydrate(registry: FilterRegistry, filter_state: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Turn a normalized filter state into live filter instances.

    Args:
        registry: Filter registry for the table.
        filter_state: The filter sub-map produced by ``merge``.

    Returns:
        Dict of filter key to live filter instance. Unknown keys and
        payloads that do not match their filter kind are left out.

    Raises:
        MalformedFilterValueError: If a range bound cannot be parsed.
    """
    live: Dict[str, Any] = {}
    for key, payload in filter_state.items():
        descriptor = registry.resolve(key)
        if descriptor is None:
            logger.debug(f"Skipping unknown filter '{key}'")
            continue

        instance = _hydrate_entry(key, descriptor, payload)
        if instance is None:
            logger.debug(f"Skipping filter '{key}': payload does not match {descriptor.kind.value}")
            continue
        live[key] = instance
    return live
