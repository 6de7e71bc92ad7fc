"""
Base API Client - Shared single-shot GET request handling.
API services inherit from this and map the returned status to their own errors.
"""

from typing import Any, NamedTuple

import aiohttp
from yarl import URL

from utils.get_logger import get_logger

logger = get_logger(__name__)


class APIResponse(NamedTuple):
    """Outcome of one GET: status line plus the decoded JSON body (None unless 200)."""

    status: int
    reason: str
    data: Any = None

    @property
    def status_text(self) -> str:
        return f"{self.status} {self.reason}".strip()


class BaseAPIClient:
    """
    Base class for API clients with shared request handling.
    One request per call: no retries, no caching, no rate limiting.
    """

    timeout: float = 30

    async def _core_async_request(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> APIResponse:
        """
        Core async HTTP GET request.

        The URL must already carry its encoded query string; it is sent as-is so
        that signed URLs are not re-quoted.

        Args:
            url: Full URL to request, query string included
            headers: Optional HTTP headers
            timeout: Request timeout in seconds (default: class ``timeout``)

        Returns:
            APIResponse with the decoded JSON body when the status is 200

        Raises:
            aiohttp.ClientError: network or connection failure
            TimeoutError: the request exceeded ``timeout``
            ValueError: a 200 response whose body is not valid JSON
        """
        request_timeout = aiohttp.ClientTimeout(total=timeout or self.timeout)

        logger.debug(f"GET {url}")
        async with (  # noqa: SIM117
            aiohttp.ClientSession() as session,
            session.get(
                URL(url, encoded=True), headers=headers, timeout=request_timeout
            ) as response,
        ):
            status = response.status
            reason = response.reason or ""

            if status != 200:
                if status == 404:
                    logger.debug(f"API returned status {status} for {url} (resource not found)")
                else:
                    logger.warning(f"API returned status {status} for {url}")
                # Drain the body so the connection is released cleanly
                await response.read()
                return APIResponse(status, reason)

            data = await response.json(content_type=None)

        return APIResponse(status, reason, data)
