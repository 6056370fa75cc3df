"""Pagination result model."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field


class Page(BaseModel):
    """One page of search results, aware of the total number of matches."""

    items: list[Any] = Field(default_factory=list, description="Models on this page, in result order")
    total: int = Field(default=0, ge=0, description="Total matches across all pages")
    per_page: int = Field(ge=1, description="Page size")
    current_page: int = Field(default=1, ge=1, description="1-based page number")

    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total / self.per_page), 1)

    @property
    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page
