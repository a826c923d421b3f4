"""Exception types raised by the filter engine."""

from typing import Any, Optional


class FilterError(Exception):
    """Base class for filter engine errors."""


class MalformedFilterValueError(FilterError, ValueError):
    """A client-supplied filter value could not be parsed.

    Raised for invalid bracket-form JSON during merge and for range bounds
    that do not parse as the range's type during hydration. Callers should
    surface it as an "invalid filter value" input error.
    """

    def __init__(self, key: str, value: Any, reason: Optional[str] = None):
        self.key = key
        self.value = value
        self.reason = reason
        message = f"Invalid value for filter '{key}': {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DuplicateFilterKeyError(FilterError, KeyError):
    """The same filter key was registered twice."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Filter key registered more than once: {key!r}")

    def __str__(self) -> str:
        return self.args[0]
