"""Exception hierarchy for Scryfall Search Stats.

Provides structured error handling with specific exception types
for different failure modes.
"""

from typing import Optional


class StatsError(Exception):
    """Base exception for all Scryfall Search Stats errors.

    All custom exceptions inherit from this base class for easy catching.
    """

    pass


class NetworkError(StatsError):
    """Network-related errors (connection failures, timeouts, bad payloads)."""

    pass


class ScryfallAPIError(NetworkError):
    """The Scryfall API answered with a non-success status.

    Attributes:
        status: HTTP status code
        code: Scryfall error code (e.g. "not_found", "bad_request")
        details: Human readable explanation from the error body
    """

    def __init__(
        self,
        status: int,
        details: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.status = status
        self.code = code
        self.details = details
        super().__init__(details or f"Scryfall API error: {status}")


class ValidationError(StatsError):
    """Validation errors (invalid input, malformed data)."""

    pass


class QueryError(ValidationError):
    """The search query or search page URL could not be used."""

    pass


class CardDataError(ValidationError):
    """A card record is missing fields needed for aggregation."""

    pass


class ConfigurationError(StatsError):
    """Configuration errors (invalid settings)."""

    pass
