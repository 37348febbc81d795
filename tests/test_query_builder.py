"""Tests for QueryBuilder."""
from __future__ import annotations

import pytest

from moviequery.errors import InvalidModeError, MissingCredentialError
from moviequery.models import DEFAULT_VALUES, QueryMode
from moviequery.query_builder import QueryBuilder, coerce_mode, render_params

from .conftest import API_KEY


@pytest.fixture
def builder():
    return QueryBuilder(lambda: API_KEY)


class TestModeSelection:
    """Exactly one of i/t/s is sent, matching the mode."""

    @pytest.mark.parametrize(
        "mode,key",
        [("id", "i"), ("title", "t"), ("search", "s")],
    )
    def test_single_mode_key(self, builder, mode, key):
        """Test that only the matching mode key is present."""
        params = builder.build(mode, "Batman")
        assert params[key] == "Batman"
        assert [k for k in ("i", "t", "s") if k in params] == [key]

    def test_accepts_enum(self, builder):
        """Test that QueryMode members are accepted directly."""
        params = builder.build(QueryMode.BY_ID, "tt0078346")
        assert params["i"] == "tt0078346"

    @pytest.mark.parametrize("mode", ["imdb", "", None, 3])
    def test_invalid_mode(self, builder, mode):
        """Test that unsupported modes raise InvalidModeError."""
        with pytest.raises(InvalidModeError):
            builder.build(mode, "x")

    def test_coerce_mode(self):
        """Test string-to-enum coercion."""
        assert coerce_mode("search") is QueryMode.BY_SEARCH


class TestDefaultsAndPaging:
    """Default values and page handling."""

    @pytest.mark.parametrize("mode", list(QueryMode))
    def test_default_value(self, builder, mode):
        """Test that a missing value falls back to the demo default."""
        query = builder.make_query(mode)
        assert query.value == DEFAULT_VALUES[mode]

    def test_search_defaults_to_page_one(self, builder):
        """Test that searches without a page ask for page 1."""
        params = builder.build("search", "Batman")
        assert params["page"] == "1"

    def test_search_page_is_string(self, builder):
        """Test that an explicit page is sent as a string."""
        params = builder.build("search", "Batman", page=3)
        assert params["page"] == "3"

    def test_page_ignored_outside_search(self, builder):
        """Test that lookups never carry a page parameter."""
        query = builder.make_query("id", "tt0078346", page=4)
        assert query.page is None
        assert "page" not in builder.to_params(query)

    @pytest.mark.parametrize("page", [0, -1, 1.5, "2"])
    def test_rejects_invalid_page(self, builder, page):
        """Test that pages must be positive whole numbers."""
        with pytest.raises(ValueError):
            builder.make_query("search", "Batman", page=page)


class TestFilters:
    """Extra filters pass through; reserved keys are stripped."""

    def test_filters_frozen(self, builder):
        """Test that a built query's filters cannot be changed."""
        query = builder.make_query("title", "Batman", extra_filters={"y": 1966})
        with pytest.raises(TypeError):
            query.extra_filters["y"] = 1989
        assert query.extra_filters["y"] == 1966

    def test_caller_dict_not_shared(self, builder):
        """Test that changing the caller's dict afterwards has no effect."""
        filters = {"y": 1966}
        query = builder.make_query("title", "Batman", extra_filters=filters)
        filters["y"] = 1989
        assert builder.to_params(query)["y"] == "1966"

    def test_filters_passed_through_as_strings(self, builder):
        """Test that filters reach the parameters verbatim as strings."""
        params = builder.build("title", "Batman", extra_filters={"y": 1966, "plot": "full"})
        assert params["y"] == "1966"
        assert params["plot"] == "full"

    def test_reserved_keys_cannot_be_overridden(self, builder):
        """Test that colliding filters lose to internal keys."""
        params = builder.build(
            "id",
            "tt0078346",
            extra_filters={"i": "tt9999999", "t": "Other", "r": "xml", "apikey": "stolen"},
        )
        assert params["i"] == "tt0078346"
        assert "t" not in params
        assert params["r"] == "json"
        assert params["apikey"] == API_KEY

    def test_none_filters_dropped(self, builder):
        """Test that filters with no value are not sent."""
        params = builder.build("title", "Batman", extra_filters={"y": None})
        assert "y" not in params

    def test_api_key_is_last(self, builder):
        """Test that the credential is appended after everything else."""
        params = builder.build("search", "Batman", extra_filters={"type": "movie"})
        assert list(params)[-1] == "apikey"


class TestCredentials:
    """Credential handling."""

    def test_missing_credential(self):
        """Test that provider failures propagate."""
        def provider():
            raise MissingCredentialError("no key")

        with pytest.raises(MissingCredentialError):
            QueryBuilder(provider).build("id", "tt0078346")

    def test_verbose_output_hides_key(self, capsys):
        """Test that the diagnostic rendering never shows the key."""
        QueryBuilder(lambda: API_KEY, verbose=True).build("title", "Batman")
        out = capsys.readouterr().out
        assert "t=Batman" in out
        assert API_KEY not in out

    def test_render_params(self):
        """Test parameter rendering excludes the API key."""
        assert render_params({"s": "Batman", "page": "2", "apikey": "k"}) == "s=Batman, page=2"
