"""Pytest configuration and fixtures for Table Filters tests."""

from enum import Enum

import pytest

from table_filters import (
    BooleanFilter,
    FilterRegistry,
    MultiSelectFilter,
    RangeFilter,
    SelectFilter,
    TransformerFilter,
)


class Keys(Enum):
    """Symbolic filter keys used by the sample table."""
    ACTIVE = "active"
    PRICE = "price"
    CREATED = "created"
    UPDATED = "updated"
    SUPPLIER = "supplier"
    TAGS = "tags"
    CUSTOM = "custom"


@pytest.fixture
def keys():
    """Symbolic key enum."""
    return Keys


@pytest.fixture
def registry():
    """Registry covering every filter kind."""
    return FilterRegistry([
        (Keys.ACTIVE, BooleanFilter.new("active", "only_active", {"label": "Active only"})),
        ("price", RangeFilter.new("price", "price", "number", {"min": 0, "max": 1000})),
        ("created", RangeFilter.new("inserted_at", "created", "date")),
        ("updated", RangeFilter.new("updated_at", "updated", "datetime")),
        ("supplier", SelectFilter.new("supplier_id", "supplier", {
            "options": [{"label": "Acme", "value": [42]}, {"label": "Globex", "value": [7]}],
        })),
        ("tags", MultiSelectFilter.new("tag", "tags", {
            "tags": True,
            "options": [{"label": "Red", "value": "red"}, {"label": "Blue", "value": "blue"}],
        })),
        ("custom", TransformerFilter.new("custom")),
    ])


@pytest.fixture
def table_state():
    """Table params with an existing filter sub-map."""
    return {
        "sort": {"sort_by": "name", "sort_order": "asc"},
        "page": "1",
        "filters": {
            "price": {"min": "5", "max": "50"},
            "tags": {"selected": ["red"]},
        },
    }
