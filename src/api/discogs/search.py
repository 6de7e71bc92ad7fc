"""
Discogs Search Service - queries the Discogs database search endpoint.
Search requires a personal access token (DiscogsOptions.token).
"""

from pydantic import BaseModel, ConfigDict

from api.discogs.core import DiscogsService
from api.discogs.models import SearchResults

SEARCH_URI = "/database/search"


class SearchRequest(BaseModel):
    """Search parameters. Every field is optional and unset fields are not sent."""

    model_config = ConfigDict(frozen=True)

    # Free-text query
    q: str | None = None
    # release, master, artist or label
    type: str | None = None
    # Combined "Artist Name - Release Title" field
    title: str | None = None
    release_title: str | None = None
    credit: str | None = None
    artist: str | None = None
    # Artist name variation
    anv: str | None = None
    label: str | None = None
    genre: str | None = None
    style: str | None = None
    country: str | None = None
    year: int | str | None = None
    format: str | None = None
    catno: str | None = None
    barcode: str | None = None
    track: str | None = None
    submitter: str | None = None
    contributor: str | None = None

    page: int | None = None
    per_page: int | None = None

    def params(self) -> dict[str, str]:
        return {
            key: str(value)
            for key, value in self.model_dump(exclude_none=True).items()
            if value != ""
        }


class SearchService(DiscogsService):
    """Discogs database search."""

    service_name = "SearchService"

    async def search(self, request: SearchRequest) -> SearchResults:
        """Search releases, masters, artists and labels."""
        return await self._fetch(
            "Search",
            "search",
            SEARCH_URI,
            SearchResults,
            params=request.params(),
            attributes={"q": request.q, "type": request.type},
        )
