from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ItemT = TypeVar("ItemT")


class PaginatedResponse(BaseModel, Generic[ItemT]):
    """One page of a listing plus the total row count."""

    items: list[ItemT]
    total: int = Field(..., ge=0, description="Rows across all pages")
    page: int = Field(..., ge=1, description="Page number (1-indexed)")
    page_size: int = Field(..., ge=1)
