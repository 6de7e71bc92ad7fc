"""
Discogs User Service - resolves the user behind an OAuth access token.
"""

from typing import Self

from api.discogs.auth import OAuthAuth
from api.discogs.config import DiscogsOptions
from api.discogs.core import DiscogsService
from api.discogs.models import Identity

IDENTITY_URI = "/oauth/identity"


class UserService(DiscogsService):
    """OAuth identity endpoint."""

    service_name = "UserService"
    requires_oauth = True

    def __init__(self, options: DiscogsOptions, oauth: OAuthAuth | None = None):
        super().__init__(options, auth=oauth)

    def with_oauth(self, oauth: OAuthAuth) -> Self:
        """Return a copy of this service that signs with ``oauth``."""
        return type(self)(self.options, oauth=oauth)

    async def identity(self, oauth: OAuthAuth | None = None) -> Identity:
        """Get the identity of the authenticated user.

        Args:
            oauth: Signer for this call only; the service's own signer otherwise
        """
        return await self._fetch(
            "Identity",
            "fetch identity",
            IDENTITY_URI,
            Identity,
            auth=oauth,
        )
