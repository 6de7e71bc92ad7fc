"""
Discogs Models - Pydantic models for Discogs database, search, user and
collection payloads.

Unknown fields are ignored and missing or null fields fall back to empty
values, so partial payloads still decode.
"""

from pydantic import ConfigDict, Field

from api.discogs.pagination import Page
from utils.pydantic_tools import BaseModelWithMethods

# ============================================================================
# Shared building blocks
# ============================================================================


class Image(BaseModelWithMethods):
    type: str = ""
    uri: str = ""
    uri150: str = ""
    resource_url: str = ""
    width: int = 0
    height: int = 0


class Video(BaseModelWithMethods):
    uri: str = ""
    title: str = ""
    description: str = ""
    duration: int = 0
    embed: bool = False


class ArtistSource(BaseModelWithMethods):
    """Artist credit as it appears on a release, master or track."""

    id: int = 0
    name: str = ""
    anv: str = ""
    join: str = ""
    role: str = ""
    tracks: str = ""
    resource_url: str = ""
    thumbnail_url: str = ""


class LabelSource(BaseModelWithMethods):
    """Label credit as it appears on a release."""

    id: int = 0
    name: str = ""
    catno: str = ""
    entity_type: str = ""
    entity_type_name: str = ""
    resource_url: str = ""


class Series(LabelSource):
    thumbnail_url: str = ""


class Company(BaseModelWithMethods):
    id: int = 0
    name: str = ""
    catno: str = ""
    entity_type: str = ""
    entity_type_name: str = ""
    resource_url: str = ""


class Format(BaseModelWithMethods):
    name: str = ""
    qty: str = ""
    text: str = ""
    descriptions: list[str] = Field(default_factory=list)


class Identifier(BaseModelWithMethods):
    type: str = ""
    value: str = ""
    description: str = ""


class Track(BaseModelWithMethods):
    position: str = ""
    # Discogs uses "type_" for track, heading or index entries
    type_: str = ""
    title: str = ""
    duration: str = ""
    artists: list[ArtistSource] = Field(default_factory=list)
    extraartists: list[ArtistSource] = Field(default_factory=list)


class Rating(BaseModelWithMethods):
    average: float = 0.0
    count: int = 0


class Contributor(BaseModelWithMethods):
    username: str = ""
    resource_url: str = ""


class Community(BaseModelWithMethods):
    have: int = 0
    want: int = 0
    rating: Rating = Field(default_factory=Rating)
    submitter: Contributor = Field(default_factory=Contributor)
    contributors: list[Contributor] = Field(default_factory=list)
    data_quality: str = ""
    status: str = ""


class Member(BaseModelWithMethods):
    id: int = 0
    name: str = ""
    active: bool = False
    resource_url: str = ""
    thumbnail_url: str = ""


class Alias(BaseModelWithMethods):
    id: int = 0
    name: str = ""
    resource_url: str = ""
    thumbnail_url: str = ""


class Sublabel(BaseModelWithMethods):
    id: int = 0
    name: str = ""
    resource_url: str = ""


# ============================================================================
# Database resources
# ============================================================================


class Release(BaseModelWithMethods):
    """A particular physical or digital object released by one or more artists."""

    id: int = 0
    title: str = ""
    status: str = ""
    year: int = 0
    country: str = ""
    released: str = ""
    released_formatted: str = ""
    notes: str = ""
    data_quality: str = ""
    thumb: str = ""
    uri: str = ""
    resource_url: str = ""
    date_added: str = ""
    date_changed: str = ""
    artists_sort: str = ""
    estimated_weight: int = 0
    format_quantity: int = 0
    lowest_price: float = 0.0
    num_for_sale: int = 0
    master_id: int = 0
    master_url: str = ""
    artists: list[ArtistSource] = Field(default_factory=list)
    extraartists: list[ArtistSource] = Field(default_factory=list)
    community: Community = Field(default_factory=Community)
    companies: list[Company] = Field(default_factory=list)
    formats: list[Format] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    identifiers: list[Identifier] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    labels: list[LabelSource] = Field(default_factory=list)
    series: list[Series] = Field(default_factory=list)
    tracklist: list[Track] = Field(default_factory=list)
    videos: list[Video] = Field(default_factory=list)


class ReleaseRating(BaseModelWithMethods):
    """Community rating for a release."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="release_id")
    rating: Rating = Field(default_factory=Rating)


class Artist(BaseModelWithMethods):
    """A person or group in the Discogs database who contributed to a release."""

    id: int = 0
    name: str = ""
    realname: str = ""
    profile: str = ""
    data_quality: str = ""
    uri: str = ""
    resource_url: str = ""
    releases_url: str = ""
    urls: list[str] = Field(default_factory=list)
    namevariations: list[str] = Field(default_factory=list)
    members: list[Member] = Field(default_factory=list)
    groups: list[Member] = Field(default_factory=list)
    aliases: list[Alias] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)


class ReleaseSource(BaseModelWithMethods):
    """A release or master listed under an artist or label."""

    id: int = 0
    title: str = ""
    type: str = ""
    main_release: int = 0
    artist: str = ""
    role: str = ""
    label: str = ""
    catno: str = ""
    format: str = ""
    status: str = ""
    year: int = 0
    thumb: str = ""
    resource_url: str = ""


class ArtistReleases(BaseModelWithMethods):
    pagination: Page = Field(default_factory=Page)
    releases: list[ReleaseSource] = Field(default_factory=list)


class Label(BaseModelWithMethods):
    """A label, company, recording studio or other entity involved with releases."""

    id: int = 0
    name: str = ""
    profile: str = ""
    contact_info: str = ""
    data_quality: str = ""
    uri: str = ""
    resource_url: str = ""
    releases_url: str = ""
    urls: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    sublabels: list[Sublabel] = Field(default_factory=list)
    parent_label: Sublabel | None = None


class LabelReleases(BaseModelWithMethods):
    pagination: Page = Field(default_factory=Page)
    releases: list[ReleaseSource] = Field(default_factory=list)


class Master(BaseModelWithMethods):
    """A set of similar releases, with a main release that is often the earliest."""

    id: int = 0
    title: str = ""
    year: int = 0
    notes: str = ""
    data_quality: str = ""
    uri: str = ""
    resource_url: str = ""
    versions_url: str = ""
    main_release: int = 0
    main_release_url: str = ""
    most_recent_release: int = 0
    most_recent_release_url: str = ""
    num_for_sale: int = 0
    lowest_price: float = 0.0
    genres: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    artists: list[ArtistSource] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    tracklist: list[Track] = Field(default_factory=list)
    videos: list[Video] = Field(default_factory=list)


class Version(BaseModelWithMethods):
    """One release that is a version of a master."""

    id: int = 0
    title: str = ""
    label: str = ""
    catno: str = ""
    country: str = ""
    format: str = ""
    released: str = ""
    status: str = ""
    thumb: str = ""
    resource_url: str = ""
    major_formats: list[str] = Field(default_factory=list)


class MasterVersions(BaseModelWithMethods):
    pagination: Page = Field(default_factory=Page)
    versions: list[Version] = Field(default_factory=list)


# ============================================================================
# Search
# ============================================================================


class SearchResult(BaseModelWithMethods):
    id: int = 0
    type: str = ""
    title: str = ""
    country: str = ""
    # Search returns the year as a string
    year: str = ""
    catno: str = ""
    thumb: str = ""
    cover_image: str = ""
    uri: str = ""
    resource_url: str = ""
    master_id: int = 0
    master_url: str = ""
    community: Community = Field(default_factory=Community)
    format: list[str] = Field(default_factory=list)
    label: list[str] = Field(default_factory=list)
    genre: list[str] = Field(default_factory=list)
    style: list[str] = Field(default_factory=list)
    barcode: list[str] = Field(default_factory=list)


class SearchResults(BaseModelWithMethods):
    pagination: Page = Field(default_factory=Page)
    results: list[SearchResult] = Field(default_factory=list)


# ============================================================================
# User identity and collection
# ============================================================================


class Identity(BaseModelWithMethods):
    """The user an OAuth access token belongs to."""

    id: int = 0
    username: str = ""
    resource_url: str = ""
    consumer_name: str = ""


class Folder(BaseModelWithMethods):
    id: int = 0
    count: int = 0
    name: str = ""
    resource_url: str = ""


class CollectionResponse(BaseModelWithMethods):
    folders: list[Folder] = Field(default_factory=list)


class BasicInformation(BaseModelWithMethods):
    """Release summary embedded in collection items."""

    id: int = 0
    title: str = ""
    year: int = 0
    thumb: str = ""
    cover_image: str = ""
    resource_url: str = ""
    master_id: int = 0
    master_url: str = ""
    artists: list[ArtistSource] = Field(default_factory=list)
    labels: list[LabelSource] = Field(default_factory=list)
    formats: list[Format] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)


class CollectionRelease(BaseModelWithMethods):
    """One release instance in a user's collection folder."""

    id: int = 0
    instance_id: int = 0
    folder_id: int = 0
    rating: int = 0
    date_added: str = ""
    basic_information: BasicInformation = Field(default_factory=BasicInformation)


class FolderReleasesResponse(BaseModelWithMethods):
    pagination: Page = Field(default_factory=Page)
    releases: list[CollectionRelease] = Field(default_factory=list)
