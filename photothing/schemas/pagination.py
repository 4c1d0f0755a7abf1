"""Paged response schema."""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from photothing.db.pagination import Page

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """One page of a keyset-paginated listing."""
    key: Optional[int] = Field(None, description="Key the page was requested with")
    next_key: Optional[int] = Field(None, description="Pass as `key` to continue; null when done")
    remaining: int = Field(0, description="Rows left after this page")
    items: List[T] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: Page) -> "PageResponse[T]":
        return cls(
            key=page.key,
            next_key=page.next_key,
            remaining=page.remaining,
            items=page.items,
        )
