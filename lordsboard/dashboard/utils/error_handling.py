"""
Error types and log-then-raise helpers for the dashboard.

Loaders raise ``DatasetError``, the price client raises ``ExternalApiError``
and ``RewardConfig`` raises ``ConfigError``; each helper logs through
``bt.logging`` before raising so failures show up once, with context.
"""

import functools
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

import bittensor as bt

MAX_LOGGED_DATA_CHARS = 200


class InvalidAddressError(ValueError):
    """Raised when an address string is not a valid hex felt."""


class DatasetError(ValueError):
    """A dataset file parsed as JSON but has the wrong shape."""


class ConfigError(ValueError):
    """A reward policy value is out of range."""


class ExternalApiError(RuntimeError):
    """An external API stayed unreachable or returned unusable data."""

    def __init__(self, message: str, endpoint: str):
        super().__init__(message)
        self.endpoint = endpoint


def _endpoint_label(url: str) -> str:
    # Query strings carry token lists and flags, not useful in logs
    parts = urlsplit(url)
    if not parts.netloc:
        return url
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


def log_and_raise_api_error(error: Exception, endpoint: str, context: str = "API call") -> None:
    """
    Log a failed external call and raise ``ExternalApiError`` chained to ``error``.

    Args:
        error: The exception raised by the HTTP client or response parsing
        endpoint: URL that was requested; logged without its query string
        context: What the call was for, e.g. "Token price fetch"
    """
    label = _endpoint_label(endpoint)
    bt.logging.error(f"{context} failed at {label}: {type(error).__name__}: {error}")
    raise ExternalApiError(f"{context} failed for {label}: {error}", endpoint=label) from error


def log_and_raise_validation_error(
    message: str,
    data: Optional[Any] = None,
    source: Optional[str] = None
) -> None:
    """
    Log a malformed dataset and raise ``DatasetError``.

    ``data`` is only logged, cut to ``MAX_LOGGED_DATA_CHARS``; ``source``
    (usually the file path) is appended to the raised message.
    """
    preview = repr(data)
    if len(preview) > MAX_LOGGED_DATA_CHARS:
        preview = preview[:MAX_LOGGED_DATA_CHARS] + "... (truncated)"

    full_message = f"{message} ({source})" if source else message
    bt.logging.error(f"Invalid dataset: {full_message}; got {preview}")
    raise DatasetError(full_message)


def log_and_raise_config_error(message: str, config_key: str, config_value: Any = None) -> None:
    """Log an out-of-range policy value and raise ``ConfigError`` naming the key."""
    bt.logging.error(f"Configuration error: {message} [{config_key}={config_value!r}]")
    raise ConfigError(f"{message} (config_key: {config_key})")


def safe_operation(operation_name: str, default_factory: Optional[Callable[[], Any]] = None):
    """
    Decorator that logs failures of ``operation_name``.

    With ``default_factory`` the failure is contained and a fresh default is
    returned (e.g. ``list`` for an empty result); without it the exception
    is re-raised after logging.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                bt.logging.error(f"{operation_name} failed in {func.__name__}: {type(e).__name__}: {e}")
                if default_factory is None:
                    raise
                return default_factory()
        return wrapper
    return decorator


class ErrorMessages:
    """Messages shared between raising code and tests."""

    INVALID_ADDRESS = "Address is not a valid hex string"
    PRICE_DATA_NOT_FOUND = "Price data not found in API response"
    NON_FINITE_EARNINGS = "Earnings must be a finite non-negative number"
