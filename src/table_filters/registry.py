"""Filter registry lookup.

A table declares its filters once, as a mapping from filter key to filter
descriptor. The registry is read-only and is passed explicitly to ``merge``
and ``hydrate``.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from config.logging_config import get_logger

from .exceptions import DuplicateFilterKeyError
from .kinds import FILTER_CLASSES, FilterDescriptor

logger = get_logger("registry")

FilterKey = Union[str, Enum]


def normalize_key(key: FilterKey) -> str:
    """Normalize a text or symbolic filter key to its canonical string form.

    ``"status"`` and an enum member whose value is ``"status"`` normalize
    to the same key.
    """
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class FilterRegistry(Mapping[str, FilterDescriptor]):
    """Immutable mapping of filter key to descriptor."""

    def __init__(
        self,
        filters: Union[Mapping[FilterKey, FilterDescriptor], Iterable[Tuple[FilterKey, FilterDescriptor]], None] = None,
    ):
        pairs = filters.items() if isinstance(filters, Mapping) else (filters or ())

        entries = {}
        for key, descriptor in pairs:
            if not isinstance(descriptor, FILTER_CLASSES):
                raise TypeError(
                    f"Filter {key!r} must be a filter kind instance, got {type(descriptor).__name__}"
                )
            normalized = normalize_key(key)
            if normalized in entries:
                raise DuplicateFilterKeyError(normalized)
            entries[normalized] = descriptor

        self._filters = MappingProxyType(entries)
        logger.debug(f"Registry created with {len(entries)} filters")

    def resolve(self, key: FilterKey) -> Optional[FilterDescriptor]:
        """Return the descriptor registered under ``key``, or None if unknown."""
        return self._filters.get(normalize_key(key))

    def __getitem__(self, key: FilterKey) -> FilterDescriptor:
        return self._filters[normalize_key(key)]

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, (str, Enum)):
            return False
        return normalize_key(key) in self._filters

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterRegistry({list(self._filters)!r})"
