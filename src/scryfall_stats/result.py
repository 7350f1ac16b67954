"""Result type for structured error handling at the CLI boundary.

Handlers return a Result instead of raising so the command layer can
decide how to report failures without try/except at every call site.
"""

from typing import Any, Callable, Optional, TypedDict, TypeVar

from .errors import StatsError

T = TypeVar("T")


class Result(TypedDict):
    """Result type for operations that can succeed or fail.

    Attributes:
        ok: True if operation succeeded, False if it failed
        value: The successful result value (None if failed)
        error: Error message (None if succeeded)
        error_type: Exception class name for failures (None if succeeded)
    """

    ok: bool
    value: Optional[Any]
    error: Optional[str]
    error_type: Optional[str]


def success(value: T) -> Result:
    """Create a successful result."""
    return Result(ok=True, value=value, error=None, error_type=None)


def failure(error: str, error_type: Optional[str] = None) -> Result:
    """Create a failed result.

    Args:
        error: Error message describing the failure
        error_type: Optional name of the exception class behind the failure

    Returns:
        Result with ok=False and the error message
    """
    return Result(ok=False, value=None, error=error, error_type=error_type)


def from_exception(exc: Exception) -> Result:
    """Create a failed result from an exception.

    Our own errors already carry a user-facing message, so it is kept as is.
    Anything else is prefixed with its type name.
    """
    name = type(exc).__name__
    if isinstance(exc, StatsError):
        return failure(str(exc), name)
    return failure(f"{name}: {exc}", name)


def try_operation(operation: Callable[[], T]) -> Result:
    """Execute an operation and return a Result.

    Args:
        operation: Function to execute

    Returns:
        Result with either the return value or error
    """
    try:
        value = operation()
        return success(value)
    except Exception as exc:
        return from_exception(exc)


def unwrap(result: Result) -> Any:
    """Extract value from Result or raise error.

    Raises:
        ValueError: If ok=False
    """
    if result["ok"]:
        return result["value"]
    raise ValueError(result["error"])


def unwrap_or(result: Result, default: Any) -> Any:
    """Extract value from Result or return default."""
    if result["ok"]:
        return result["value"]
    return default
