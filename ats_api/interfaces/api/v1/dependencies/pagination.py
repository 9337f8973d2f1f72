from collections.abc import Callable

from fastapi import HTTPException, Query, status

from ats_api.domain.sort_order import SortOrder
from ats_api.interfaces.api.v1.schemas.pagination import CursorRequest, PageRequest


def normalize_search(search: str | None) -> str | None:
    normalized_search = search.strip() if search is not None else None
    if normalized_search == "":
        normalized_search = None
    return normalized_search


def parse_sort_order(sort_order: str | None, default: SortOrder) -> SortOrder:
    if sort_order is None:
        return default
    if sort_order.strip().upper() not in {SortOrder.asc.value, SortOrder.desc.value}:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="sort_order must be ASC or DESC")
    return SortOrder.coerce(sort_order)


def parse_sort_by(sort_by: str | None, sortable_fields: list[str], default: str | None) -> str | None:
    if sort_by is None:
        return default
    if sort_by not in sortable_fields:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"sort_by must be one of: {', '.join(sortable_fields)}",
        )
    return sort_by


def get_page_request(
    sortable_fields: list[str],
    default_sort_by: str | None = None,
    default_sort_order: SortOrder = SortOrder.asc,
) -> Callable:
    # Bounds are not enforced here; out-of-range page and limit values are clamped downstream.
    def dependency(
        page: int | None = Query(default=None),
        limit: int | None = Query(default=None),
        sort_by: str | None = Query(default=None),
        sort_order: str | None = Query(default=None),
        search: str | None = Query(default=None),
    ) -> PageRequest:
        values = {
            "sort_by": parse_sort_by(sort_by, sortable_fields, default_sort_by),
            "sort_order": parse_sort_order(sort_order, default_sort_order),
            "search": normalize_search(search),
        }
        if page is not None:
            values["page"] = page
        if limit is not None:
            values["limit"] = limit
        return PageRequest(**values)

    return dependency


def get_cursor_request(
    sortable_fields: list[str],
    default_sort_by: str = "id",
    default_sort_order: SortOrder = SortOrder.asc,
) -> Callable:
    def dependency(
        cursor: str | None = Query(default=None),
        limit: int | None = Query(default=None),
        sort_by: str | None = Query(default=None),
        sort_order: str | None = Query(default=None),
    ) -> CursorRequest:
        values = {
            "cursor": cursor or None,
            "sort_by": parse_sort_by(sort_by, sortable_fields, default_sort_by),
            "sort_order": parse_sort_order(sort_order, default_sort_order),
        }
        if limit is not None:
            values["limit"] = limit
        return CursorRequest(**values)

    return dependency
