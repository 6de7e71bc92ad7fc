"""
Discogs error taxonomy.

Every failure surfaced by the client is a ``DiscogsError``. Services re-raise
transport failures through ``wrap`` so the message names the operation that
failed while ``__cause__`` keeps the original error.
"""

from typing import Self


class DiscogsError(Exception):
    """Base class for all Discogs client errors."""

    def __init__(self, message: str, status: int | None = None, status_text: str | None = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.status_text = status_text

    def wrap(self, prefix: str) -> Self:
        """Return a copy of this error whose message is prefixed with ``prefix``."""
        return type(self)(
            f"{prefix}: {self.message}", status=self.status, status_text=self.status_text
        )


class ConfigurationError(DiscogsError):
    """Raised when the client is constructed with invalid options."""


class UserAgentInvalidError(ConfigurationError):
    def __init__(self, message: str = "invalid user-agent", **kwargs):
        super().__init__(message, **kwargs)


class CurrencyNotSupportedError(ConfigurationError):
    def __init__(self, message: str = "currency is not supported", **kwargs):
        super().__init__(message, **kwargs)


class UnauthorizedError(DiscogsError):
    """HTTP 401 from Discogs, or an OAuth call made without credentials."""

    def __init__(self, message: str = "authentication required", **kwargs):
        kwargs.setdefault("status", 401)
        super().__init__(message, **kwargs)


class UpstreamError(DiscogsError):
    """Any non-200 status other than 401. ``status_text`` is the raw status line."""


class DecodeError(DiscogsError):
    """A 200 response whose body is not valid JSON or does not fit the expected record."""


class TransportError(DiscogsError):
    """Network, connection or timeout failure from the HTTP stack."""
