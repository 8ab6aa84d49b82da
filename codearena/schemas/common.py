"""
Response envelope and pagination schemas shared by every router.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope for every response: ``{statusCode, data?, message?}``."""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    data: Optional[T] = None
    message: Optional[str] = None


class Pagination(BaseModel):
    """Pagination block returned with paged lists."""
    total_items: int
    current_page: int
    items_per_page: int
    total_pages: int

    @classmethod
    def build(cls, total_items: int, page: int, page_size: int) -> "Pagination":
        """Compute the page count (ceil division) for a total."""
        return cls(
            total_items=total_items,
            current_page=page,
            items_per_page=page_size,
            total_pages=-(-total_items // page_size),
        )
