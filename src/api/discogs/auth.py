"""
Discogs Auth - request signing strategies.

Two modes, both immutable and injected into the services that use them:
- StaticAuth: User-Agent plus an optional ``Discogs token=...`` header
- OAuthAuth: OAuth 1.0a HMAC-SHA1 signing for per-user endpoints
"""

import os
from typing import Protocol

from oauthlib.oauth1 import Client
from pydantic import BaseModel, ConfigDict

from api.discogs.config import load_env
from utils.get_logger import get_logger

logger = get_logger(__name__)


class RequestAuth(Protocol):
    """Anything that can turn a URL into a (url, headers) pair ready to send."""

    def sign(self, url: str, user_agent: str) -> tuple[str, dict[str, str]]: ...


class StaticAuth(BaseModel):
    """Header-based auth shared by every anonymous or token request."""

    model_config = ConfigDict(frozen=True)

    token: str | None = None

    def sign(self, url: str, user_agent: str) -> tuple[str, dict[str, str]]:
        headers = {"User-Agent": user_agent}
        if self.token:
            headers["Authorization"] = f"Discogs token={self.token}"
        return url, headers


class OAuthClient(BaseModel):
    """Consumer key pair issued to the application by Discogs."""

    model_config = ConfigDict(frozen=True)

    consumer_key: str
    consumer_secret: str


class Credentials(BaseModel):
    """Access token pair obtained for one Discogs user."""

    model_config = ConfigDict(frozen=True)

    token: str
    secret: str


class OAuthAuth(BaseModel):
    """OAuth 1.0a signer combining the application client with user credentials."""

    model_config = ConfigDict(frozen=True)

    client: OAuthClient
    credentials: Credentials | None = None

    def sign(self, url: str, user_agent: str) -> tuple[str, dict[str, str]]:
        signer = Client(
            self.client.consumer_key,
            client_secret=self.client.consumer_secret,
            resource_owner_key=self.credentials.token if self.credentials else None,
            resource_owner_secret=self.credentials.secret if self.credentials else None,
        )
        signed_url, signed_headers, _ = signer.sign(url, http_method="GET")
        headers = {key: str(value) for key, value in signed_headers.items()}
        headers["User-Agent"] = user_agent
        return signed_url, headers

    @classmethod
    def from_env(cls) -> "OAuthAuth | None":
        """Build a signer from DISCOGS_CONSUMER_* and DISCOGS_OAUTH_* variables.

        Returns:
            None unless both the consumer key and secret are set
        """
        load_env()
        consumer_key = os.getenv("DISCOGS_CONSUMER_KEY")
        consumer_secret = os.getenv("DISCOGS_CONSUMER_SECRET")
        if not consumer_key or not consumer_secret:
            logger.info("Discogs OAuth consumer credentials not set")
            return None

        token = os.getenv("DISCOGS_OAUTH_TOKEN")
        token_secret = os.getenv("DISCOGS_OAUTH_TOKEN_SECRET")
        credentials = None
        if token and token_secret:
            credentials = Credentials(token=token, secret=token_secret)

        return cls(
            client=OAuthClient(consumer_key=consumer_key, consumer_secret=consumer_secret),
            credentials=credentials,
        )
