"""CLI command handlers.

Each handler is a plain function that takes parameters and returns a Result.
This keeps the click command a thin dispatcher and lets tests call handlers
without a click context.
"""

from typing import Callable, Optional

from ..config.settings import StatsSettings, settings
from ..core.logging import get_logger, log_operation
from ..errors import QueryError
from ..net.scryfall import ScryfallClient, extract_query
from ..report import summary_payload
from ..result import Result, try_operation
from ..stats.aggregate import summarize

logger = get_logger(__name__)


def resolve_query(query: Optional[str] = None, url: Optional[str] = None) -> str:
    """Pick the search query from either a raw query or a search page URL."""
    if query and url:
        raise QueryError("Pass either a query or --url, not both.")
    if url:
        return extract_query(url)
    if not query or not query.strip():
        raise QueryError("No Scryfall search query given.")
    return query


def handle_search_stats(
    query: Optional[str] = None,
    url: Optional[str] = None,
    *,
    max_pages: Optional[int] = None,
    top: Optional[int] = None,
    progress_callback: Optional[Callable[[str], None]] = None,
    client: Optional[ScryfallClient] = None,
    config: Optional[StatsSettings] = None,
) -> Result:
    """Handle the search stats command.

    Args:
        query: Raw Scryfall search query
        url: Scryfall search results page URL (alternative to query)
        max_pages: Page cap override
        top: Entries per ranked section override
        progress_callback: Receives per-page status lines
        client: Pre-built client (a new one is built from settings otherwise)
        config: Settings to use instead of the global instance

    Returns:
        Result whose value holds "summary" (StatsSummary), "payload"
        (JSON-ready dict), "query", "pages" and "max_pages"
    """
    cfg = config or settings

    def run_search():
        search_query = resolve_query(query, url)
        limit = top or cfg.top_n
        owned = client is None
        active = client or ScryfallClient.from_settings(cfg, max_pages=max_pages)

        try:
            with log_operation("Fetching search results", query=search_query):
                outcome = active.search(search_query, progress_callback)
        finally:
            if owned:
                active.close()

        summary = summarize(
            outcome.cards, was_limited=outcome.was_limited, limit=limit
        )
        logger.info(
            "Summarized {} cards from {} pages (limited={})",
            summary.total,
            outcome.pages,
            outcome.was_limited,
        )
        payload = summary_payload(summary, query=search_query)
        payload["pages"] = outcome.pages
        return {
            "summary": summary,
            "payload": payload,
            "query": search_query,
            "pages": outcome.pages,
            "max_pages": active.max_pages,
        }

    return try_operation(run_search)
