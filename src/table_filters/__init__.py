"""Filter state engine for tabular UI components.

Merges raw filter parameters into a normalized filter state and encodes
applied filters back into a canonical wire map.
"""

from .exceptions import (
    FilterError,
    MalformedFilterValueError,
    DuplicateFilterKeyError,
)
from .kinds import (
    FilterKind,
    RangeType,
    BooleanFilter,
    RangeFilter,
    SelectFilter,
    MultiSelectFilter,
    TransformerFilter,
    FilterDescriptor,
)
from .registry import FilterRegistry, normalize_key
from .params import (
    Literal,
    RangeBounds,
    BracketLiteral,
    StringList,
    MapValue,
    Unrecognized,
    RawValue,
    classify,
)
from .merge import merge
from .hydrate import hydrate, parse_range_bound
from .encoder import encode
from .url_params import to_query_string, from_query_string

__all__ = [
    # Errors
    "FilterError",
    "MalformedFilterValueError",
    "DuplicateFilterKeyError",
    # Filter kinds
    "FilterKind",
    "RangeType",
    "BooleanFilter",
    "RangeFilter",
    "SelectFilter",
    "MultiSelectFilter",
    "TransformerFilter",
    "FilterDescriptor",
    # Registry
    "FilterRegistry",
    "normalize_key",
    # Raw values
    "Literal",
    "RangeBounds",
    "BracketLiteral",
    "StringList",
    "MapValue",
    "Unrecognized",
    "RawValue",
    "classify",
    # State transforms
    "merge",
    "hydrate",
    "parse_range_bound",
    "encode",
    # URL params
    "to_query_string",
    "from_query_string",
]
