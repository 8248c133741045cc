"""Response envelope shared by every endpoint."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Pagination(BaseModel):
    """Page metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)


class ApiResponse(BaseModel, Generic[T]):
    """``{success, data, message, error, pagination}`` envelope."""

    success: bool = True
    data: T | None = None
    message: str | None = None
    error: str | None = None
    pagination: Pagination | None = None
