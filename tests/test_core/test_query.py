"""Tests for search term resolution."""

from __future__ import annotations

import pytest

from searchdeck.core.exceptions import QueryError
from searchdeck.core.models import SearchOptions
from searchdeck.core.query import resolve_query


def test_query_is_trimmed() -> None:
    assert resolve_query("  rust lang \n", SearchOptions()) == "rust lang"


def test_query_beats_default() -> None:
    assert resolve_query("python", SearchOptions(default_search_terms="rust")) == "python"


@pytest.mark.parametrize("query", [None, "", "   "])
def test_falls_back_to_default(query: str | None) -> None:
    assert resolve_query(query, SearchOptions(default_search_terms=" rust ")) == "rust"


@pytest.mark.parametrize("default", ["", "   "])
def test_no_terms_raises(default: str) -> None:
    with pytest.raises(QueryError, match="No search terms provided"):
        resolve_query("  ", SearchOptions(default_search_terms=default))
