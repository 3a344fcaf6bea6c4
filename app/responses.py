from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")

    class Config:
        populate_by_name = True


class Envelope(BaseModel, Generic[T]):
    """
    Uniform response body. Routes serialise it with
    response_model_exclude_unset=True so data/meta only appear when set.
    """
    status: bool
    message: str
    data: Optional[T] = None
    meta: Optional[PaginationMeta] = None
