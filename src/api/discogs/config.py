"""
Discogs client configuration.

``DiscogsOptions`` is frozen: the client resolves defaults into a new instance
and every service keeps a reference to that same immutable value.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from api.discogs.errors import CurrencyNotSupportedError, UserAgentInvalidError
from utils.get_logger import get_logger

logger = get_logger(__name__)

DISCOGS_API = "https://api.discogs.com"
DEFAULT_CURRENCY = "USD"
DEFAULT_TIMEOUT = 30.0

# Marketplace currencies accepted by the curr_abbr parameter
SUPPORTED_CURRENCIES = (
    "USD",
    "GBP",
    "EUR",
    "CAD",
    "AUD",
    "JPY",
    "CHF",
    "MXN",
    "BRL",
    "NZD",
    "SEK",
    "ZAR",
)


def load_env():
    """Load environment variables from env file.

    Defaults to config/local.env for local development.
    Set ENV_FILE environment variable to override.
    """
    env = os.getenv("ENV_FILE", "config/local.env")
    load_dotenv(env)


def currency(c: str | None) -> str:
    """Validate a marketplace currency, defaulting to USD when empty.

    Raises:
        CurrencyNotSupportedError: ``c`` is not one of SUPPORTED_CURRENCIES
    """
    if not c:
        return DEFAULT_CURRENCY
    if c in SUPPORTED_CURRENCIES:
        return c
    raise CurrencyNotSupportedError()


class DiscogsOptions(BaseModel):
    """Options used to build a Discogs client."""

    model_config = ConfigDict(frozen=True)

    # Discogs API endpoint
    url: str = ""
    # Marketplace currency, USD when empty
    currency: str = ""
    # User-Agent sent with every request (required)
    user_agent: str | None = None
    # Personal access token, required by some endpoints such as search
    token: str | None = None
    # Request timeout in seconds
    timeout: float = DEFAULT_TIMEOUT

    def resolve(self) -> "DiscogsOptions":
        """Validate and return a copy with defaults filled in.

        Raises:
            UserAgentInvalidError: no user agent was given
            CurrencyNotSupportedError: unsupported currency
        """
        if not self.user_agent:
            raise UserAgentInvalidError()

        return self.model_copy(
            update={
                "url": (self.url or DISCOGS_API).rstrip("/"),
                "currency": currency(self.currency),
            }
        )

    @classmethod
    def from_env(cls) -> "DiscogsOptions":
        """Build options from DISCOGS_* environment variables."""
        load_env()
        timeout = os.getenv("DISCOGS_TIMEOUT")
        options = cls(
            url=os.getenv("DISCOGS_URL", ""),
            currency=os.getenv("DISCOGS_CURRENCY", ""),
            user_agent=os.getenv("DISCOGS_USER_AGENT", ""),
            token=os.getenv("DISCOGS_TOKEN") or None,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
        if not options.token:
            logger.info("DISCOGS_TOKEN not set, search requests will be rejected upstream")
        return options
