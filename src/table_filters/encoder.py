"""Encode live filter instances into the canonical wire map."""

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from config import config
from config.constants import MULTI_SELECTED, RANGE_MAX, RANGE_MIN, SELECT_ID
from config.logging_config import get_logger

from .kinds import (
    BooleanFilter,
    MultiSelectFilter,
    RangeFilter,
    RangeType,
    SelectFilter,
    TransformerFilter,
)
from .registry import FilterKey, normalize_key

logger = get_logger("encoder")

# Marks a filter that contributes nothing to the wire map
_OMIT = object()


def _format_bound(value: Any, range_type: RangeType) -> Any:
    """Format one range bound for the wire; numbers pass through unchanged."""
    if value is None or range_type == RangeType.NUMBER:
        return value
    if isinstance(value, datetime):
        if range_type == RangeType.DATE:
            return value.date().isoformat()
        return value.replace(tzinfo=None).isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def _encode_filter(live_filter: Any, emit_empty_select: bool) -> Any:
    """
    Encode a single live filter.

    Args:
        live_filter: Filter kind instance carrying its current selection.
        emit_empty_select: Emit select filters whose selection is None.

    Returns:
        The wire value, or _OMIT when the filter contributes nothing.
    """
    if isinstance(live_filter, RangeFilter):
        return {
            RANGE_MIN: _format_bound(live_filter.current_min, live_filter.type),
            RANGE_MAX: _format_bound(live_filter.current_max, live_filter.type),
        }

    if isinstance(live_filter, BooleanFilter):
        return live_filter.key

    if isinstance(live_filter, SelectFilter):
        if live_filter.selected is None and not emit_empty_select:
            return _OMIT
        return {SELECT_ID: live_filter.selected}

    if isinstance(live_filter, MultiSelectFilter):
        if not live_filter.selected:
            return _OMIT
        selected = live_filter.selected
        if isinstance(selected, (list, tuple)):
            selected = list(selected)
        return {MULTI_SELECTED: selected}

    if isinstance(live_filter, TransformerFilter):
        if not isinstance(live_filter.applied_data, Mapping) or not live_filter.applied_data:
            return _OMIT
        return dict(live_filter.applied_data)

    return _OMIT


def encode(
    live_filters: Mapping[FilterKey, Any],
    emit_empty_select: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Encode applied filters into a wire map for URLs and form state.

    Only active filters are emitted. Keys are normalized to strings and the
    last value written for a key wins.

    Args:
        live_filters: Mapping of filter key to live filter instance.
        emit_empty_select: Override config.filters.emit_empty_select.

    Returns:
        Flat dict of filter key to wire value.
    """
    if emit_empty_select is None:
        emit_empty_select = config.filters.emit_empty_select

    wire: Dict[str, Any] = {}
    for key, live_filter in live_filters.items():
        encoded = _encode_filter(live_filter, emit_empty_select)
        if encoded is _OMIT:
            logger.debug(f"Filter '{key}' not encoded (inactive or unknown kind)")
            continue
        wire.update({normalize_key(key): encoded})
    return wire
