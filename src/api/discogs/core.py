"""
Discogs Core Service - Base service for Discogs API operations.
Builds URLs, signs requests, maps HTTP statuses to errors and decodes
responses into models. Every sub-service inherits from DiscogsService.
"""

from typing import Any, TypeVar
from urllib.parse import quote, urlencode

import aiohttp
from pydantic import BaseModel, ValidationError

from api.discogs.auth import RequestAuth, StaticAuth
from api.discogs.config import DiscogsOptions
from api.discogs.errors import (
    DecodeError,
    DiscogsError,
    TransportError,
    UnauthorizedError,
    UpstreamError,
)
from api.discogs.tracing import ErrorConfig, record_error, set_attributes, span_name, tracer
from utils.base_api_client import BaseAPIClient
from utils.get_logger import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def build_url(base_url: str, path: str, params: dict[str, Any] | None = None) -> str:
    """Join base URL and path and append the encoded query, dropping None values."""
    url = f"{base_url}{path}"
    query = {key: value for key, value in (params or {}).items() if value is not None}
    if query:
        url = f"{url}?{urlencode(query, quote_via=quote)}"
    return url


class DiscogsService(BaseAPIClient):
    """
    Base Discogs service for all Discogs API operations.
    Holds the resolved options and the auth used when a call does not pass its own.
    """

    service_name = "DiscogsService"
    # OAuth-only services never fall back to the static token headers
    requires_oauth = False

    def __init__(self, options: DiscogsOptions, auth: RequestAuth | None = None):
        """Initialize the service.

        Args:
            options: Resolved client options (see DiscogsOptions.resolve)
            auth: Request signer; static token headers when omitted, unless
                the service requires OAuth
        """
        self.options = options
        self.base_url = options.url
        self.timeout = options.timeout
        self.auth: RequestAuth | None = auth
        if auth is None and not self.requires_oauth:
            self.auth = StaticAuth(token=options.token)

    async def _make_request(
        self,
        path: str,
        params: dict[str, Any] | None,
        auth: RequestAuth | None,
        response_model: type[M],
    ) -> M:
        """Issue one GET and decode the JSON body into ``response_model``.

        Raises:
            UnauthorizedError: HTTP 401
            UpstreamError: any other non-200 status
            DecodeError: body is not JSON or does not fit the model
            TransportError: connection failure or timeout
        """
        if auth is None:
            raise UnauthorizedError("no OAuth credentials attached", status=None)

        url, headers = auth.sign(build_url(self.base_url, path, params), self.options.user_agent)

        try:
            response = await self._core_async_request(url, headers=headers)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise TransportError(f"request to {path} failed: {str(e) or type(e).__name__}") from e
        except ValueError as e:
            raise DecodeError(f"invalid JSON response: {e}") from e

        if response.status == 401:
            raise UnauthorizedError(
                f"unauthorized: {response.status_text}", status_text=response.status_text
            )
        if response.status != 200:
            raise UpstreamError(
                f"unknown error: {response.status_text}",
                status=response.status,
                status_text=response.status_text,
            )

        try:
            return response_model.model_validate(response.data)
        except ValidationError as e:
            raise DecodeError(f"unexpected {response_model.__name__} payload: {e}") from e

    async def _fetch(
        self,
        operation: str,
        action: str,
        path: str,
        response_model: type[M],
        params: dict[str, Any] | None = None,
        auth: RequestAuth | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> M:
        """Run one traced request, wrapping failures as ``failed to <action>: ...``."""
        attributes = {key: value for key, value in (attributes or {}).items() if value is not None}

        with tracer.start_as_current_span(
            span_name(self.service_name, operation), set_status_on_exception=False
        ):
            set_attributes(path=path, **attributes)
            try:
                if auth is None:
                    auth = self.auth
                return await self._make_request(path, params, auth, response_model)
            except DiscogsError as e:
                message = f"failed to {action}"
                logger.debug(f"{message}: {e}")
                record_error(ErrorConfig(error=e, message=message, attributes=attributes))
                raise e.wrap(message) from e
