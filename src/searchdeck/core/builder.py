"""URL builder — (descriptor, query) -> search URL.

Two paths:
    Template path:  custom_url with every literal ``{query}`` replaced.
    Parameter path: base_url + ('&' if '?' in base_url else '?') + param=value.

The query is encoded as a query component (space -> '+', everything
reserved or non-ASCII percent-encoded). Callers trim the query first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from searchdeck.core.exceptions import BuildError
from searchdeck.core.models import (
    QUERY_PLACEHOLDER,
    BuildFailure,
    BuildOutcome,
    EngineDescriptor,
    SearchResult,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def encode_query(query: str) -> str:
    """Percent-encode a raw query for use as a query-string value.

    ``%`` in the input is itself encoded, so ``unquote_plus`` always
    returns the original text.
    """
    return quote_plus(query, safe="", encoding="utf-8")


def build_url(descriptor: EngineDescriptor, query: str) -> str:
    """Build the search URL for one engine.

    Args:
        descriptor: Engine descriptor (enabled state is ignored).
        query: Raw, already-trimmed search text.

    Returns:
        The URL string.

    Raises:
        BuildError: If the descriptor has neither custom_url nor query_param.
    """
    encoded = encode_query(query)

    if descriptor.custom_url:
        if QUERY_PLACEHOLDER not in descriptor.custom_url:
            logger.debug("Template for %s has no %s token", descriptor.name, QUERY_PLACEHOLDER)
        return descriptor.custom_url.replace(QUERY_PLACEHOLDER, encoded)

    if not descriptor.query_param or not descriptor.base_url:
        msg = "requires base_url with query_param, or custom_url"
        raise BuildError(msg, engine=descriptor.name)

    separator = "&" if "?" in descriptor.base_url else "?"
    return f"{descriptor.base_url}{separator}{descriptor.query_param}={encoded}"


def build_results(engines: Iterable[EngineDescriptor], query: str) -> BuildOutcome:
    """Apply build_url to every engine, in order.

    A failure for one engine is logged and recorded in ``failures``;
    the remaining engines are still built.
    """
    outcome = BuildOutcome()
    for descriptor in engines:
        try:
            url = build_url(descriptor, query)
        except Exception as exc:
            logger.exception("URL build failed for engine %s", descriptor.name)
            outcome.failures.append(BuildFailure(name=descriptor.name, error=str(exc)))
            continue
        outcome.results.append(
            SearchResult(
                name=descriptor.name,
                url=url,
                enabled=descriptor.enabled,
                category=descriptor.category,
            )
        )
    return outcome
