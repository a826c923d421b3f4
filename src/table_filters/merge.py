"""Parameter merge engine.

Folds raw filter parameters from a request into the table's previous
normalized filter state. Each raw entry is classified once and then handled
by the first matching rule:

1. "true"                   -> boolean filter activated with its key value
2. {"min": .., "max": ..}   -> range bounds kept as raw strings
3. "false"                  -> filter removed
4. ["[<json>]"]             -> single-select id (select filters only)
5. [values, ...]            -> multi-select selection, "" dropped, empty clears
6. {...}                    -> transformer data (transformer filters only)

Everything else, including unknown keys and kind mismatches, leaves the
state for that key unchanged.
"""

import json
from typing import Any, Dict, Mapping, Optional

from config import config
from config.constants import BOOLEAN_OFF, BOOLEAN_ON, MULTI_SELECTED, RANGE_MAX, RANGE_MIN, SELECT_ID
from config.logging_config import get_logger

from .exceptions import MalformedFilterValueError
from .kinds import BooleanFilter, MultiSelectFilter, SelectFilter, TransformerFilter
from .params import (
    BracketLiteral,
    Literal,
    MapValue,
    RangeBounds,
    StringList,
    classify,
)
from .registry import FilterRegistry

logger = get_logger("merge")


def merge(
    previous_state: Mapping[str, Any],
    raw_params: Optional[Mapping[str, Any]],
    registry: FilterRegistry,
    state_key: Optional[str] = None,
) -> Mapping[str, Any]:
    """
    Merge raw filter parameters into the previous table state.

    Args:
        previous_state: Table params holding the current filter sub-map.
        raw_params: Decoded filter parameters from the request.
        registry: Filter registry for the table.
        state_key: Name of the filter sub-map (defaults to config).

    Returns:
        A new state mapping with an updated filter sub-map, or
        ``previous_state`` itself when ``raw_params`` is empty.

    Raises:
        MalformedFilterValueError: If a bracket-form value is not valid JSON.
    """
    if not raw_params:
        return previous_state

    state_key = state_key or config.filters.state_key
    filters = dict(previous_state.get(state_key) or {})

    for key, raw in raw_params.items():
        _merge_entry(filters, key, raw, registry)

    next_state = dict(previous_state)
    next_state[state_key] = filters
    return next_state


def _merge_entry(filters: Dict[str, Any], key: str, raw: Any, registry: FilterRegistry) -> None:
    """Apply one raw entry to the accumulator in place."""
    value = classify(raw)

    if isinstance(value, Literal) and value.text == BOOLEAN_ON:
        descriptor = registry.resolve(key)
        if isinstance(descriptor, BooleanFilter):
            filters[key] = descriptor.key
        else:
            _skip(key, "boolean toggle for a non-boolean filter")

    elif isinstance(value, RangeBounds):
        filters[key] = {RANGE_MIN: value.min, RANGE_MAX: value.max}

    elif isinstance(value, Literal) and value.text == BOOLEAN_OFF:
        filters.pop(key, None)

    elif isinstance(value, BracketLiteral):
        selected_id = _decode_bracket_id(key, value.text)
        if isinstance(registry.resolve(key), SelectFilter):
            filters[key] = {SELECT_ID: [selected_id]}
        else:
            _skip(key, "bracket value for a non-select filter")

    elif isinstance(value, StringList):
        if isinstance(registry.resolve(key), MultiSelectFilter):
            selected = [item for item in value.values if item != ""]
            if selected:
                filters[key] = {MULTI_SELECTED: selected}
            else:
                filters.pop(key, None)
        else:
            _skip(key, "list value for a non-multi-select filter")

    elif isinstance(value, MapValue):
        if isinstance(registry.resolve(key), TransformerFilter):
            filters[key] = value.data
        else:
            _skip(key, "mapping value for a non-transformer filter")

    else:
        _skip(key, f"unrecognized value {raw!r}")


def _decode_bracket_id(key: str, text: str) -> Any:
    """Decode "[42]" style JSON and return its first element (None if empty)."""
    try:
        decoded = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning(f"Malformed bracket value for filter '{key}': {text[:80]!r}")
        raise MalformedFilterValueError(key, text, reason=str(e)) from e

    # Text starts with "[", so a successful decode is always a list
    return decoded[0] if decoded else None


def _skip(key: str, reason: str) -> None:
    logger.debug(f"Ignoring filter param '{key}': {reason}")
