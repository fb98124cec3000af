"""Paging primitives shared by every member query.

``build_page`` decides whether the count query has to run at all: when the
content already proves the page is the last one, the total is inferred from
the offset and the content size.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from member_search.domain.errors import ValidationError

T = TypeVar("T")
U = TypeVar("U")

MAX_PAGE_SIZE = 200
SORTABLE_FIELDS = frozenset({"id", "username", "age", "team_name"})


class InvalidPageRequest(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortOrder:
    """Single sort criterion. Nulls always sort last."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20
    sort: tuple[SortOrder, ...] = ()

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            InvalidPageRequest: If paging parameters are invalid
        """
        if self.offset < 0:
            raise InvalidPageRequest("offset must be >= 0")
        if self.limit <= 0:
            raise InvalidPageRequest("limit must be > 0")
        if self.limit > MAX_PAGE_SIZE:
            raise InvalidPageRequest(f"limit must be <= {MAX_PAGE_SIZE}")
        for order in self.sort:
            if order.field not in SORTABLE_FIELDS:
                raise InvalidPageRequest(
                    f"cannot sort by '{order.field}'",
                    errors=[
                        {
                            "field": "sort",
                            "message": f"Must be one of {sorted(SORTABLE_FIELDS)}",
                            "code": "INVALID_SORT_FIELD",
                        }
                    ],
                )


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of a filtered result set plus the size of the whole set."""

    content: list[T]
    total: int
    offset: int
    limit: int

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.content) < self.total

    def map(self, func: Callable[[T], U]) -> Page[U]:
        """Transform content, keeping the pagination metadata."""
        return Page(
            content=[func(item) for item in self.content],
            total=self.total,
            offset=self.offset,
            limit=self.limit,
        )


def build_page(content: list[T], paging: Paging, count: Callable[[], int]) -> Page[T]:
    """
    Bundle page content with its total, running ``count`` only when needed.

    Rules:
    - first page shorter than ``limit``: total is the content size
    - later page, non-empty and shorter than ``limit``: total is offset + content size
    - anything else (full page, or empty page past the first): ``count()`` runs

    A full page that happens to be the last one still triggers the count.

    Args:
        content: Rows returned by the content query
        paging: The paging used to fetch ``content``
        count: Callable executing the count query

    Returns:
        Page with content and total
    """
    if paging.offset == 0:
        if len(content) < paging.limit:
            total = len(content)
        else:
            total = count()
    elif content and len(content) < paging.limit:
        total = paging.offset + len(content)
    else:
        total = count()

    return Page(content=content, total=total, offset=paging.offset, limit=paging.limit)

