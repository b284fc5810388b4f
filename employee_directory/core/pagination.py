"""Slicing an ordered collection into pages."""
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of items plus navigation metadata."""

    items: List[T]
    total_pages: int
    current_page: int
    has_next: bool
    has_prev: bool
    total_items: int


def paginate(items: Sequence[T], page: int, per_page: int) -> PageResult[T]:
    """Return page ``page`` (1-based) of ``items``.

    ``page`` is clamped to a minimum of 1 but never to the last page: asking
    past the end yields an empty slice with correct totals.
    """

    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    page = max(int(page), 1)

    start = (page - 1) * per_page
    end = start + per_page
    total = len(items)

    return PageResult(
        items=list(items[start:end]),
        total_pages=math.ceil(total / per_page),
        current_page=page,
        has_next=end < total,
        has_prev=start > 0,
        total_items=total,
    )
