"""
Discogs Collection Service - a user's collection folders and their releases.

All calls are OAuth signed. The signer is fixed when the service is built and
can be overridden per call; it is never mutated, so concurrent calls with
different credentials do not interfere.
"""

from typing import Self
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from api.discogs.auth import OAuthAuth
from api.discogs.config import DiscogsOptions
from api.discogs.core import DiscogsService
from api.discogs.models import CollectionResponse, Folder, FolderReleasesResponse
from api.discogs.pagination import Pagination, pagination_params

FOLDERS_URI = "/users/{username}/collection/folders"
FOLDER_URI = "/users/{username}/collection/folders/{id}"
FOLDER_RELEASES_URI = "/users/{username}/collection/folders/{id}/releases"


def collection_path(template: str, username: str, folder_id: int | None = None) -> str:
    path = template.replace("{username}", quote(username, safe=""), 1)
    if folder_id is not None:
        path = path.replace("{id}", str(folder_id), 1)
    return path


class GetFolderArgs(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str

    def trace_attributes(self) -> dict[str, str | int]:
        return {"username": self.username, "id": self.id}


class CollectionService(DiscogsService):
    """Collection folder endpoints for a Discogs user."""

    service_name = "CollectionService"
    requires_oauth = True

    def __init__(self, options: DiscogsOptions, oauth: OAuthAuth | None = None):
        super().__init__(options, auth=oauth)

    def with_oauth(self, oauth: OAuthAuth) -> Self:
        """Return a copy of this service that signs with ``oauth``."""
        return type(self)(self.options, oauth=oauth)

    async def get_folders(
        self, username: str, oauth: OAuthAuth | None = None
    ) -> CollectionResponse:
        """List the collection folders of ``username``."""
        return await self._fetch(
            "GetFolders",
            "fetch collection folders",
            collection_path(FOLDERS_URI, username),
            CollectionResponse,
            auth=oauth,
            attributes={"username": username},
        )

    async def get_folder(self, args: GetFolderArgs, oauth: OAuthAuth | None = None) -> Folder:
        """Get metadata of one collection folder."""
        return await self._fetch(
            "GetFolder",
            "fetch collection folder",
            collection_path(FOLDER_URI, args.username, args.id),
            Folder,
            auth=oauth,
            attributes=args.trace_attributes(),
        )

    async def get_folder_releases(
        self,
        args: GetFolderArgs,
        pagination: Pagination | None = None,
        oauth: OAuthAuth | None = None,
    ) -> FolderReleasesResponse:
        """List the releases in one collection folder."""
        return await self._fetch(
            "GetFolderReleases",
            "fetch collection folder releases",
            collection_path(FOLDER_RELEASES_URI, args.username, args.id),
            FolderReleasesResponse,
            params=pagination_params(pagination),
            auth=oauth,
            attributes=args.trace_attributes(),
        )
