"""Pagination schemas for offset-based paging."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def total_pages_for(total_count: int, page_size: int) -> int:
    """Number of pages needed to show total_count items, page_size at a time."""
    return math.ceil(total_count / page_size) if total_count else 0


class PagedResponse(BaseModel, Generic[T]):
    """Generic page of results with the totals needed to navigate.

    A page past the end of the data carries no items but the same totals.
    """

    items: list[T]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous_page: bool = Field(description="True when page > 1.")
    has_next_page: bool = Field(description="True when page < total_pages.")

    @classmethod
    def build(
        cls, items: list[T], page: int, page_size: int, total_count: int
    ) -> "PagedResponse[T]":
        total_pages = total_pages_for(total_count, page_size)
        return cls(
            items=items,
            page=page,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
            has_previous_page=page > 1,
            has_next_page=page < total_pages,
        )
