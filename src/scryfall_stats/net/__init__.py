"""Scryfall API access: search URL helpers and the paginating client."""

from .scryfall import (
    MAX_PAGES_TO_FETCH,
    REQUEST_DELAY,
    FetchOutcome,
    ScryfallClient,
    build_search_url,
    extract_query,
)

__all__ = [
    "MAX_PAGES_TO_FETCH",
    "REQUEST_DELAY",
    "FetchOutcome",
    "ScryfallClient",
    "build_search_url",
    "extract_query",
]
