"""
Discogs Database Service - read-only lookups for releases, artists, labels
and masters, plus their paginated sub-resources.
"""

from api.discogs.core import DiscogsService
from api.discogs.models import (
    Artist,
    ArtistReleases,
    Label,
    LabelReleases,
    Master,
    MasterVersions,
    Release,
    ReleaseRating,
)
from api.discogs.pagination import Pagination, pagination_params

RELEASES_URI = "/releases/"
ARTISTS_URI = "/artists/"
LABELS_URI = "/labels/"
MASTERS_URI = "/masters/"


class DatabaseService(DiscogsService):
    """Discogs database endpoints. Uses the static token headers."""

    service_name = "DatabaseService"

    @property
    def currency(self) -> str:
        return self.options.currency

    async def release(self, release_id: int) -> Release:
        """Get a release by id, with marketplace prices in the configured currency."""
        return await self._fetch(
            "Release",
            "fetch release",
            f"{RELEASES_URI}{release_id}",
            Release,
            params={"curr_abbr": self.currency},
            attributes={"id": release_id, "currency": self.currency},
        )

    async def release_rating(self, release_id: int) -> ReleaseRating:
        """Get the community rating of a release."""
        return await self._fetch(
            "ReleaseRating",
            "fetch release rating",
            f"{RELEASES_URI}{release_id}/rating",
            ReleaseRating,
            attributes={"id": release_id},
        )

    async def artist(self, artist_id: int) -> Artist:
        """Get an artist by id."""
        return await self._fetch(
            "Artist",
            "fetch artist",
            f"{ARTISTS_URI}{artist_id}",
            Artist,
            attributes={"id": artist_id},
        )

    async def artist_releases(
        self, artist_id: int, pagination: Pagination | None = None
    ) -> ArtistReleases:
        """List releases and masters associated with an artist."""
        return await self._fetch(
            "ArtistReleases",
            "fetch artist releases",
            f"{ARTISTS_URI}{artist_id}/releases",
            ArtistReleases,
            params=pagination_params(pagination),
            attributes={"id": artist_id},
        )

    async def label(self, label_id: int) -> Label:
        """Get a label by id."""
        return await self._fetch(
            "Label",
            "fetch label",
            f"{LABELS_URI}{label_id}",
            Label,
            attributes={"id": label_id},
        )

    async def label_releases(
        self, label_id: int, pagination: Pagination | None = None
    ) -> LabelReleases:
        """List releases associated with a label."""
        return await self._fetch(
            "LabelReleases",
            "fetch label releases",
            f"{LABELS_URI}{label_id}/releases",
            LabelReleases,
            params=pagination_params(pagination),
            attributes={"id": label_id},
        )

    async def master(self, master_id: int) -> Master:
        """Get a master release by id."""
        return await self._fetch(
            "Master",
            "fetch master",
            f"{MASTERS_URI}{master_id}",
            Master,
            attributes={"id": master_id},
        )

    async def master_versions(
        self, master_id: int, pagination: Pagination | None = None
    ) -> MasterVersions:
        """List all releases that are versions of a master."""
        return await self._fetch(
            "MasterVersions",
            "fetch master versions",
            f"{MASTERS_URI}{master_id}/versions",
            MasterVersions,
            params=pagination_params(pagination),
            attributes={"id": master_id},
        )
