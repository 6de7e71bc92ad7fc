"""
Discogs Service Package - async client for the Discogs API.

This package provides:
- Discogs: client exposing the database, search, user and collection services
- Auth: static token headers and OAuth 1.0a signing
- Models: Pydantic models for Discogs payloads
- Errors: the DiscogsError hierarchy
"""

from api.discogs.auth import Credentials, OAuthAuth, OAuthClient, StaticAuth
from api.discogs.client import Discogs
from api.discogs.collection import CollectionService, GetFolderArgs
from api.discogs.config import DISCOGS_API, SUPPORTED_CURRENCIES, DiscogsOptions
from api.discogs.database import DatabaseService
from api.discogs.errors import (
    ConfigurationError,
    CurrencyNotSupportedError,
    DecodeError,
    DiscogsError,
    TransportError,
    UnauthorizedError,
    UpstreamError,
    UserAgentInvalidError,
)
from api.discogs.models import (
    Artist,
    ArtistReleases,
    CollectionRelease,
    CollectionResponse,
    Folder,
    FolderReleasesResponse,
    Identity,
    Label,
    LabelReleases,
    Master,
    MasterVersions,
    Release,
    ReleaseRating,
    SearchResult,
    SearchResults,
)
from api.discogs.pagination import Page, Pagination
from api.discogs.search import SearchRequest, SearchService
from api.discogs.tracing import ErrorConfig, record_error
from api.discogs.user import UserService

__all__ = [
    # Client
    "Discogs",
    "DiscogsOptions",
    "DISCOGS_API",
    "SUPPORTED_CURRENCIES",
    # Auth
    "StaticAuth",
    "OAuthAuth",
    "OAuthClient",
    "Credentials",
    # Services
    "DatabaseService",
    "SearchService",
    "SearchRequest",
    "UserService",
    "CollectionService",
    "GetFolderArgs",
    # Pagination
    "Pagination",
    "Page",
    # Models
    "Artist",
    "ArtistReleases",
    "CollectionRelease",
    "CollectionResponse",
    "Folder",
    "FolderReleasesResponse",
    "Identity",
    "Label",
    "LabelReleases",
    "Master",
    "MasterVersions",
    "Release",
    "ReleaseRating",
    "SearchResult",
    "SearchResults",
    # Errors
    "DiscogsError",
    "ConfigurationError",
    "UserAgentInvalidError",
    "CurrencyNotSupportedError",
    "UnauthorizedError",
    "UpstreamError",
    "DecodeError",
    "TransportError",
    # Tracing
    "ErrorConfig",
    "record_error",
]
