"""
Page request and page container shared by listing and search.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number and page size."""

    page: int = 0
    size: int = 20

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching elements."""

    content: List[T] = field(default_factory=list)
    total_elements: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @classmethod
    def of(cls, content: List[T], pageable: PageRequest, total: int) -> "Page[T]":
        return cls(
            content=list(content),
            total_elements=total,
            page=pageable.page,
            size=pageable.size,
        )
