"""Scryfall search client with polite, sequential pagination.

Pages are fetched one at a time with a fixed delay before every request.
There is no retry policy: the first failed request aborts the whole fetch.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional
from urllib.parse import parse_qs, quote, urlparse

import requests

from ..core.logging import get_logger
from ..errors import NetworkError, QueryError, ScryfallAPIError

logger = get_logger(__name__)

API_BASE = "https://api.scryfall.com"
SEARCH_PATH = "/cards/search"
MAX_PAGES_TO_FETCH = 10  # Each page has up to 175 cards
REQUEST_DELAY = 0.1  # seconds, be nice to the API
DEFAULT_USER_AGENT = "ScryfallSearchStats/1.0"

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

ProgressCallback = Callable[[str], None]


@dataclass
class FetchOutcome:
    """Cards collected across all fetched pages."""

    cards: list[dict[str, Any]] = field(default_factory=list)
    was_limited: bool = False
    pages: int = 0


def extract_query(page_url: str) -> str:
    """Return the search query of a scryfall.com search results page URL.

    Raises:
        QueryError: If the URL is not a search page or has no query
    """
    parsed = urlparse(page_url.strip())
    hostname = parsed.hostname or ""
    if "scryfall.com" not in hostname or "/search" not in parsed.path:
        raise QueryError("This only works on Scryfall search result pages.")

    query = (parse_qs(parsed.query).get("q") or [""])[0]
    if not query.strip():
        raise QueryError("No Scryfall search query found in the URL.")
    return query


def build_search_url(query: str, api_base: str = API_BASE) -> str:
    """Build the first-page API URL for a search query."""
    if not query or not query.strip():
        raise QueryError("Search query must not be empty.")
    encoded = quote(query, safe=_URI_COMPONENT_SAFE)
    return f"{api_base.rstrip('/')}{SEARCH_PATH}?q={encoded}"


class ScryfallClient:
    """
    Sequential Scryfall search client.

    Features:
    - Fixed delay before each request
    - Page cap with a flag telling callers the results were truncated
    - API error bodies surfaced as ScryfallAPIError messages
    """

    def __init__(
        self,
        *,
        api_base: str = API_BASE,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30,
        max_pages: int = MAX_PAGES_TO_FETCH,
        request_delay: float = REQUEST_DELAY,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Scryfall client.

        Args:
            api_base: Base URL of the API
            user_agent: User-Agent string for API requests
            timeout: Per-request timeout in seconds
            max_pages: Maximum number of pages fetched per search
            request_delay: Delay before each request in seconds
            session: Optional pre-built requests session
        """
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.max_pages = max_pages
        self.request_delay = request_delay
        self.session = session or requests.Session()
        self.session.headers.update(
            {"User-Agent": user_agent, "Accept": "application/json"}
        )

        # Track statistics
        self.stats = {
            "requests": 0,
            "pages": 0,
            "errors": 0,
        }

    @classmethod
    def from_settings(cls, settings, **overrides) -> "ScryfallClient":
        """Build a client from a StatsSettings instance."""
        options = {
            "api_base": settings.api_base,
            "user_agent": settings.user_agent,
            "timeout": settings.http_timeout,
            "max_pages": settings.max_pages,
            "request_delay": settings.request_delay,
        }
        options.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**options)

    def search_url(self, query: str) -> str:
        return build_search_url(query, self.api_base)

    def get_page(self, url: str) -> dict[str, Any]:
        """
        Fetch one page of results.

        Raises:
            ScryfallAPIError: If the API answers with a non-success status
            NetworkError: If the request fails or the body is not JSON
        """
        self.stats["requests"] += 1
        logger.debug("GET {}", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            self.stats["errors"] += 1
            raise NetworkError(f"Request to Scryfall failed: {e}") from e

        if not response.ok:
            self.stats["errors"] += 1
            raise self._api_error(response)

        try:
            return response.json()
        except ValueError as e:
            self.stats["errors"] += 1
            raise NetworkError(f"Scryfall returned invalid JSON from {url}") from e

    @staticmethod
    def _api_error(response: requests.Response) -> ScryfallAPIError:
        details = None
        code = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            details = body.get("details")
            code = body.get("code")
        return ScryfallAPIError(response.status_code, details=details, code=code)

    def fetch_all_cards(
        self,
        api_url: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> FetchOutcome:
        """
        Fetch every page of a search, up to max_pages.

        Args:
            api_url: First page URL (see build_search_url)
            progress_callback: Called with a status line after each page

        Returns:
            FetchOutcome with the collected cards and whether the cap was hit
        """
        outcome = FetchOutcome()
        next_url: Optional[str] = api_url

        while next_url:
            if outcome.pages >= self.max_pages:
                outcome.was_limited = True
                logger.info("Stopped after {} pages, results capped", outcome.pages)
                break

            time.sleep(self.request_delay)
            try:
                page = self.get_page(next_url)
            except ScryfallAPIError as e:
                # A search with no matches is answered with 404 not_found
                if outcome.pages == 0 and e.status == 404 and e.code == "not_found":
                    logger.info("Search matched no cards: {}", e)
                    return outcome
                raise

            data = page.get("data") or []
            outcome.cards.extend(data)
            outcome.pages += 1
            self.stats["pages"] += 1

            if progress_callback:
                progress_callback(
                    f"Fetching page {outcome.pages}... Found {len(outcome.cards)} cards"
                )

            next_url = page.get("next_page") if page.get("has_more") else None

        logger.debug("Scryfall client stats: {}", self.stats)
        return outcome

    def search(
        self,
        query: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> FetchOutcome:
        """Build the search URL for `query` and fetch all of its pages."""
        return self.fetch_all_cards(self.search_url(query), progress_callback)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
