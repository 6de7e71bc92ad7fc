"""
Discogs client - one handle over the database, search, user and collection
services, all sharing a single resolved configuration.
"""

from api.discogs.auth import OAuthAuth
from api.discogs.collection import CollectionService
from api.discogs.config import DiscogsOptions
from api.discogs.database import DatabaseService
from api.discogs.errors import UserAgentInvalidError
from api.discogs.search import SearchService
from api.discogs.user import UserService
from utils.get_logger import get_logger

logger = get_logger(__name__)


class Discogs:
    """
    Discogs API client.

    Raises:
        UserAgentInvalidError: options are missing or have no user agent
        CurrencyNotSupportedError: options name an unsupported currency
    """

    def __init__(self, options: DiscogsOptions | None, oauth: OAuthAuth | None = None):
        if options is None:
            raise UserAgentInvalidError()

        self._options = options.resolve()
        self._oauth = oauth

        self._database = DatabaseService(self._options)
        self._search = SearchService(self._options)
        self._user = UserService(self._options, oauth=oauth)
        self._collection = CollectionService(self._options, oauth=oauth)

        logger.debug(
            f"Discogs client ready for {self._options.url} "
            f"(currency={self._options.currency}, oauth={'yes' if oauth else 'no'})"
        )

    @classmethod
    def from_env(cls) -> "Discogs":
        """Build a client from DISCOGS_* environment variables."""
        return cls(DiscogsOptions.from_env(), oauth=OAuthAuth.from_env())

    def with_oauth(self, oauth: OAuthAuth) -> "Discogs":
        """Return a new client whose user and collection services sign with ``oauth``."""
        return type(self)(self._options, oauth=oauth)

    @property
    def options(self) -> DiscogsOptions:
        return self._options

    @property
    def database(self) -> DatabaseService:
        return self._database

    @property
    def search(self) -> SearchService:
        return self._search

    @property
    def user(self) -> UserService:
        return self._user

    @property
    def collection(self) -> CollectionService:
        return self._collection
