"""Response envelopes: paging and the success/message wrapper."""

from __future__ import annotations

import math
from typing import Generic, Optional, TypeVar

from pydantic import Field, computed_field

from benefitcalc.models.base import CamelModel

T = TypeVar("T")

MAX_PAGE_SIZE = 100


class PagedResult(CamelModel, Generic[T]):
    """One page of items plus paging metadata. Pages are 1-based."""

    items: list[T] = Field(default_factory=list)
    current_page: int = 1
    page_size: int = 10
    total_items: int = 0

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size) if self.page_size else 0

    @computed_field(alias="hasPreviousPage")
    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @computed_field(alias="hasNextPage")
    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages


def clamp_paging(page: int, page_size: int) -> tuple[int, int]:
    """Normalize page to >= 1 and page size to 1..MAX_PAGE_SIZE."""
    return max(1, page), min(max(1, page_size), MAX_PAGE_SIZE)


class ApiResponse(CamelModel, Generic[T]):
    """Envelope for every /api/v1 response."""

    data: Optional[T] = None
    success: bool = True
    message: str = ""
