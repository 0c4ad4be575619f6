"""Common Pydantic models for pagination and responses."""
from pydantic import BaseModel, Field
from typing import TypeVar, Generic, List

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses."""

    page: int = Field(..., description="Current page number (1-indexed)")
    page_size: int = Field(..., description="Items per page")
    total_items: int = Field(..., description="Items in the sliced collection")
    total_pages: int = Field(..., description="Total number of pages (0 when empty)")
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_result(cls, result) -> "PaginationMeta":
        """Create pagination metadata from a PaginatedResult."""
        return cls(
            page=result.page,
            page_size=result.page_size,
            total_items=result.total_items,
            total_pages=result.total_pages,
            has_next_page=result.has_next_page,
            has_prev_page=result.has_prev_page,
        )


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    data: List[T]
    pagination: PaginationMeta
