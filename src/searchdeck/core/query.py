"""Search term resolution — user input first, configured default second."""

from __future__ import annotations

from typing import TYPE_CHECKING

from searchdeck.core.exceptions import QueryError

if TYPE_CHECKING:
    from searchdeck.core.models import SearchOptions


def resolve_query(query: str | None, options: SearchOptions) -> str:
    """Return trimmed search terms, falling back to options.default_search_terms.

    Raises:
        QueryError: If neither source yields non-blank text.
    """
    candidate = (query or "").strip()
    if candidate:
        return candidate

    fallback = options.default_search_terms.strip()
    if fallback:
        return fallback

    msg = "No search terms provided and no default_search_terms configured"
    raise QueryError(msg)
