"""Classification of raw filter parameter values.

Form and query-string decoding hand the engine untyped values: strings,
lists of strings and nested mappings. ``classify`` turns each one into a
closed set of variants so the merge step can dispatch on type instead of
sniffing shapes. The order of checks matches merge rule precedence.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Union

from config.constants import BRACKET_PREFIX, RANGE_MAX, RANGE_MIN


@dataclass(frozen=True)
class Literal:
    """A plain string value, e.g. a boolean toggle "true"/"false"."""
    text: str


@dataclass(frozen=True)
class RangeBounds:
    """A mapping holding string "min" and "max" bounds."""
    min: str
    max: str


@dataclass(frozen=True)
class BracketLiteral:
    """Compact single-select form: a one-element list holding "[...]" JSON."""
    text: str


@dataclass(frozen=True)
class StringList:
    """A list of values, as submitted by a multi-select widget."""
    values: List[Any]


@dataclass(frozen=True)
class MapValue:
    """Any other mapping, used by custom transformer filters."""
    data: Dict[str, Any]


@dataclass(frozen=True)
class Unrecognized:
    """A value no merge rule understands."""
    raw: Any


RawValue = Union[Literal, RangeBounds, BracketLiteral, StringList, MapValue, Unrecognized]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def classify(raw: Any) -> RawValue:
    """
    Classify a raw parameter value.

    Args:
        raw: Value as produced by form/query-string decoding.

    Returns:
        The matching RawValue variant; Unrecognized when nothing matches.
    """
    if isinstance(raw, str):
        return Literal(raw)

    if isinstance(raw, Mapping):
        low, high = raw.get(RANGE_MIN), raw.get(RANGE_MAX)
        if isinstance(low, str) and isinstance(high, str):
            return RangeBounds(min=low, max=high)
        return MapValue(dict(raw))

    if _is_sequence(raw):
        if len(raw) == 1 and isinstance(raw[0], str) and raw[0].startswith(BRACKET_PREFIX):
            return BracketLiteral(raw[0])
        return StringList(list(raw))

    return Unrecognized(raw)
