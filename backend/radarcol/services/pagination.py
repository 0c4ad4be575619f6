"""
Pagination engine for in-memory contract collections.

Stateless: every call rebuilds the result from its inputs. Resetting the
page after a page-size or filter change is the caller's job (see
DashboardSession).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of a collection plus navigation metadata."""
    data: list[T] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total_items: int = 0
    total_pages: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False


def paginate_data(items: Sequence[T], page: int, page_size: int) -> PaginatedResult[T]:
    """
    Slice items[(page - 1) * page_size : page * page_size].

    Args:
        items: Full, already-filtered collection
        page: Page number (1-indexed). Not clamped: a page past the end
              yields an empty slice.
        page_size: Items per page, any positive integer

    Returns:
        PaginatedResult with the slice and navigation metadata

    Raises:
        ValueError: page or page_size below 1
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)
    start_index = (page - 1) * page_size
    end_index = start_index + page_size

    return PaginatedResult(
        data=list(items[start_index:end_index]),
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )
