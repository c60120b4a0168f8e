"""Pagination fields shared by paged list responses."""

from pydantic import BaseModel, ConfigDict


class PageMeta(BaseModel):
    """Current page, size, totals and navigation flags of a paged listing."""

    model_config = ConfigDict(from_attributes=True)

    page: int
    page_size: int
    total: int
    total_pages: int
    has_previous: bool
    has_next: bool
    search: str | None = None
