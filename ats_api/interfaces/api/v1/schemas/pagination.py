from math import ceil
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ats_api.config import settings
from ats_api.domain.sort_order import SortOrder

ItemT = TypeVar("ItemT")

# Either an attribute name of the queried entity or a SQLAlchemy column expression.
FieldRef = Any


def clamp_page(page: int | None) -> int:
    return max(1, page if page is not None else 1)


def clamp_limit(limit: int | None) -> int:
    requested = limit if limit is not None else settings.pagination_default_limit
    return min(settings.pagination_max_limit, max(1, requested))


class PageRequest(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    page: int = 1
    limit: int = Field(default_factory=lambda: settings.pagination_default_limit)
    sort_by: FieldRef = None
    sort_order: SortOrder = SortOrder.asc
    search: str | None = None
    search_fields: list[FieldRef] = Field(default_factory=list)

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value: int | None) -> int:
        return clamp_page(value)

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: int | None) -> int:
        return clamp_limit(value)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PageMeta(BaseModel):
    """Offset pagination metadata; navigation fields are always derived from total, page and limit."""

    model_config = ConfigDict(frozen=True)

    total: int
    page: int
    limit: int

    @computed_field
    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit) if self.total > 0 else 0

    @computed_field
    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @computed_field
    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


class PageResult(BaseModel, Generic[ItemT]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: list[ItemT]
    meta: PageMeta


class CursorRequest(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    cursor: str | None = None
    limit: int = Field(default_factory=lambda: settings.pagination_default_limit)
    sort_by: FieldRef = "id"
    sort_order: SortOrder = SortOrder.asc

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: int | None) -> int:
        return clamp_limit(value)


class CursorMeta(BaseModel):
    has_next_page: bool
    has_previous_page: bool
    next_cursor: str | None = None
    previous_cursor: str | None = None
    limit: int


class CursorResult(BaseModel, Generic[ItemT]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: list[ItemT]
    meta: CursorMeta


class PaginationLinks(BaseModel):
    first: str | None = None
    previous: str | None = None
    next: str | None = None
    last: str | None = None
