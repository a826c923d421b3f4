"""Bracket-style query strings for filter wire maps.

Converts between an encoded wire map and the nested parameter convention
used by HTML forms, e.g.::

    filters[price][min]=1&filters[price][max]=10&filters[tags][]=a

Decoded parameters have the shape ``merge`` expects as ``raw_params``.
"""

import re
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from config import config
from config.constants import BOOLEAN_OFF, BOOLEAN_ON
from config.logging_config import get_logger

logger = get_logger("url_params")

# Matches the leading name and each [segment] of a parameter name
_NAME_PATTERN = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_PATTERN = re.compile(r"\[([^\[\]]*)\]")


def _scalar_to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return BOOLEAN_ON if value else BOOLEAN_OFF
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _flatten(name: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            _flatten(f"{name}[{child_key}]", child_value, pairs)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(f"{name}[]", item, pairs)
    else:
        pairs.append((name, _scalar_to_text(value)))


def to_query_string(wire_map: Mapping[str, Any], prefix: Optional[str] = None) -> str:
    """
    Flatten a wire map into a bracket-style query string.

    Args:
        wire_map: Output of ``encode``.
        prefix: Top-level parameter name (defaults to config).

    Returns:
        URL-encoded query string without a leading "?".
    """
    prefix = prefix if prefix is not None else config.filters.query_prefix
    pairs: List[Tuple[str, str]] = []
    for key, value in wire_map.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        _flatten(name, value, pairs)
    return urlencode(pairs)


def _parse_name(name: str) -> Optional[List[str]]:
    """Split "a[b][]" into ["a", "b", ""]; None if the name is malformed."""
    match = _NAME_PATTERN.match(name)
    if not match:
        return None
    return [match.group(1)] + _SEGMENT_PATTERN.findall(match.group(2))


def _assign(target: Dict[str, Any], path: List[str], value: str) -> None:
    head, rest = path[0], path[1:]

    if not rest:
        target[head] = value
        return

    if rest == [""]:
        existing = target.get(head)
        if not isinstance(existing, list):
            existing = target[head] = []
        existing.append(value)
        return

    child = target.get(head)
    if not isinstance(child, dict):
        child = target[head] = {}
    _assign(child, rest, value)


def from_query_string(query: str, prefix: Optional[str] = None) -> Dict[str, Any]:
    """
    Parse a bracket-style query string into nested raw filter params.

    Args:
        query: Query string, with or without a leading "?".
        prefix: Top-level parameter name to extract (defaults to config);
            pass "" to return every parameter.

    Returns:
        Dict suitable as ``raw_params`` for ``merge``.
    """
    prefix = prefix if prefix is not None else config.filters.query_prefix
    params: Dict[str, Any] = {}

    for name, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        path = _parse_name(name)
        if path is None:
            logger.debug(f"Ignoring malformed query parameter name: {name!r}")
            continue
        _assign(params, path, value)

    if not prefix:
        return params
    filters = params.get(prefix)
    return filters if isinstance(filters, dict) else {}
