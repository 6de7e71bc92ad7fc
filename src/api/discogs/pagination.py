"""
Pagination helpers for Discogs list endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field

from utils.pydantic_tools import BaseModelWithMethods


class Pagination(BaseModel):
    """Page selection and ordering for list endpoints. Unset fields are not sent."""

    model_config = ConfigDict(frozen=True)

    # Sort field, e.g. year, title, format
    sort: str | None = None
    # asc or desc
    sort_order: str | None = None
    page: int | None = None
    per_page: int | None = None

    def params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.sort:
            params["sort"] = self.sort
        if self.sort_order:
            params["sort_order"] = self.sort_order
        if self.page:
            params["page"] = str(self.page)
        if self.per_page:
            params["per_page"] = str(self.per_page)
        return params


def pagination_params(pagination: Pagination | None) -> dict[str, str]:
    """Query parameters for an optional pagination."""
    if pagination is None:
        return {}
    return pagination.params()


class URLsList(BaseModelWithMethods):
    first: str = ""
    prev: str = ""
    next: str = ""
    last: str = ""


class Page(BaseModelWithMethods):
    """Pagination block returned alongside list responses."""

    page: int = 0
    pages: int = 0
    per_page: int = 0
    items: int = 0
    urls: URLsList = Field(default_factory=URLsList)
