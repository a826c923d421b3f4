"""Tests for query string conversion and full request round trips."""

from urllib.parse import unquote

from table_filters import (
    MultiSelectFilter,
    RangeFilter,
    encode,
    from_query_string,
    hydrate,
    merge,
    to_query_string,
)


class TestToQueryString:
    """Tests for flattening wire maps."""

    def test_nested_map(self):
        """Test range bounds become bracket parameters."""
        query = to_query_string({"price": {"min": 1, "max": 10}})
        assert unquote(query) == "filters[price][min]=1&filters[price][max]=10"

    def test_list_values(self):
        """Test that lists use the [] suffix."""
        query = to_query_string({"tags": {"selected": ["a", "b"]}})
        assert unquote(query) == "filters[tags][selected][]=a&filters[tags][selected][]=b"

    def test_scalar_and_none(self):
        """Test scalars and None values."""
        query = to_query_string({"active": "only_active", "supplier": {"id": None}})
        assert unquote(query) == "filters[active]=only_active&filters[supplier][id]="

    def test_custom_prefix(self):
        """Test the prefix argument."""
        assert unquote(to_query_string({"a": "b"}, prefix="f")) == "f[a]=b"

    def test_no_prefix(self):
        """Test flattening without a prefix."""
        assert to_query_string({"a": True}, prefix="") == "a=true"


class TestFromQueryString:
    """Tests for parsing bracket parameters."""

    def test_nested_and_list(self):
        """Test maps and appended lists."""
        params = from_query_string(
            "?filters[price][min]=1&filters[price][max]=10&filters[tags][]=a&filters[tags][]=&sort=name"
        )
        assert params == {"price": {"min": "1", "max": "10"}, "tags": ["a", ""]}

    def test_percent_encoded_brackets(self):
        """Test that encoded brackets are decoded first."""
        assert from_query_string("filters%5Bactive%5D=true") == {"active": "true"}

    def test_missing_prefix(self):
        """Test that a query without filters yields no params."""
        assert from_query_string("page=2") == {}

    def test_malformed_names_ignored(self):
        """Test that unbalanced brackets are skipped."""
        assert from_query_string("filters[a=1&filters[b]=2") == {"b": "2"}

    def test_all_params_without_prefix(self):
        """Test returning every parameter."""
        assert from_query_string("page=2&filters[a]=1", prefix="") == {
            "page": "2",
            "filters": {"a": "1"},
        }


class TestRoundTrip:
    """Tests chaining merge, hydrate, encode and the query string codec."""

    def test_boolean_round_trip(self, registry):
        """Test activate, encode, deactivate."""
        state = merge({}, {"active": "true"}, registry)
        wire = encode(hydrate(registry, state["filters"]))
        assert wire == {"active": "only_active"}

        cleared = merge(state, {"active": "false"}, registry)
        assert "active" not in cleared["filters"]

    def test_form_submission_round_trip(self, registry):
        """Test that a form query string survives encode and re-merge."""
        query = "filters[price][min]=5&filters[price][max]=50&filters[tags][]=red&filters[tags][]="
        state = merge({}, from_query_string(query), registry)
        assert state["filters"] == {
            "price": {"min": "5", "max": "50"},
            "tags": {"selected": ["red"]},
        }

        live = hydrate(registry, state["filters"])
        assert live["price"] == RangeFilter.new("price", "price", "number", {"min": 0, "max": 1000}).with_selection(5, 50)
        assert isinstance(live["tags"], MultiSelectFilter)

        wire = encode(live)
        assert wire == {"price": {"min": 5, "max": 50}, "tags": {"selected": ["red"]}}

        # Only range bounds come back in a shape merge accepts
        replayed = merge({}, from_query_string(to_query_string(wire)), registry)
        assert replayed["filters"] == {"price": {"min": "5", "max": "50"}}

    def test_encoded_boolean_and_multi_select_not_replayed(self, registry):
        """Test that encoded boolean and multi-select values are dropped on re-merge."""
        state = merge({}, {"tags": ["red", "blue"], "active": "true"}, registry)
        wire = encode(hydrate(registry, state["filters"]))
        assert wire == {"active": "only_active", "tags": {"selected": ["red", "blue"]}}

        replayed = merge({}, from_query_string(to_query_string(wire)), registry)
        assert replayed["filters"] == {}

        # Re-submitting the form shapes restores the same state
        resubmitted = merge({}, {"tags": ["red", "blue"], "active": "true"}, registry)
        assert resubmitted == state

    def test_date_range_round_trip(self, registry):
        """Test date bounds through hydrate, encode and query string."""
        state = merge({}, {"created": {"min": "2024-01-01", "max": "2024-06-30"}}, registry)
        wire = encode(hydrate(registry, state["filters"]))
        assert wire == {"created": {"min": "2024-01-01", "max": "2024-06-30"}}

        replayed = merge({}, from_query_string(to_query_string(wire)), registry)
        assert replayed["filters"] == state["filters"]
