from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel
from sqlalchemy import func, inspect, literal_column, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from ats_api.domain.sort_order import SortOrder
from ats_api.infrastructure.logging import get_logger
from ats_api.interfaces.api.v1.schemas.pagination import (
    CursorMeta,
    CursorRequest,
    CursorResult,
    FieldRef,
    PageMeta,
    PageRequest,
    PageResult,
    PaginationLinks,
    clamp_limit,
    clamp_page,
)

logger = get_logger(__name__)

PaginationOptions = PageRequest | CursorRequest | Mapping[str, Any] | None


def _as_mapping(options: PaginationOptions) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, BaseModel):
        return {name: getattr(options, name) for name in type(options).model_fields}
    return dict(options)


def normalize_page_request(options: PaginationOptions = None) -> PageRequest:
    raw = _as_mapping(options)
    return PageRequest(
        page=clamp_page(raw.get("page")),
        limit=clamp_limit(raw.get("limit")),
        sort_by=raw.get("sort_by"),
        sort_order=SortOrder.coerce(raw.get("sort_order")),
        search=raw.get("search"),
        search_fields=list(raw.get("search_fields") or []),
    )


def normalize_cursor_request(options: PaginationOptions = None) -> CursorRequest:
    raw = _as_mapping(options)
    return CursorRequest(
        cursor=raw.get("cursor"),
        limit=clamp_limit(raw.get("limit")),
        sort_by=raw.get("sort_by") or "id",
        sort_order=SortOrder.coerce(raw.get("sort_order")),
    )


def validate_pagination_options(options: PaginationOptions) -> PageRequest:
    """Return offset pagination options clamped the same way `paginate` clamps them, without querying."""
    return normalize_page_request(options)


def validate_cursor_pagination_options(options: PaginationOptions) -> CursorRequest:
    """Return cursor pagination options clamped the same way `cursor_paginate` clamps them, without querying."""
    return normalize_cursor_request(options)


def _field_key(field: FieldRef) -> str:
    if isinstance(field, str):
        return field.rsplit(".", 1)[-1]
    return field.key


def resolve_field(query: Select, field: FieldRef) -> Any:
    """
    Resolve a field reference against the primary entity selected by `query`.

    Column expressions are returned untouched. Strings naming a mapped attribute of the entity
    (optionally prefixed with an alias, e.g. `candidate.created_at`) resolve to that attribute.
    Anything else is handed to the database verbatim, which reports unknown columns on execution.
    """
    if not isinstance(field, str):
        return field
    entity = query.column_descriptions[0].get("entity") if query.column_descriptions else None
    attribute_name = _field_key(field)
    if entity is not None and attribute_name in inspect(entity).mapper.columns:
        return getattr(entity, attribute_name)
    return literal_column(field)


def cursor_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _ordered(column: Any, sort_order: SortOrder) -> Any:
    return column.desc() if sort_order == SortOrder.desc else column.asc()


def apply_search_filter(query: Select, search: str | None, search_fields: list[FieldRef]) -> Select:
    if not search or not search_fields:
        return query
    pattern = f"%{search}%"
    conditions = [resolve_field(query, field).ilike(pattern) for field in search_fields]
    return query.where(or_(*conditions))


def apply_sort(query: Select, sort_by: FieldRef, sort_order: SortOrder) -> Select:
    if sort_by is None:
        return query
    return query.order_by(None).order_by(_ordered(resolve_field(query, sort_by), sort_order))


def count_query(query: Select) -> Select:
    return select(func.count()).select_from(query.order_by(None).subquery())


def paginate(db: Session, query: Select, options: PaginationOptions = None) -> PageResult:
    request = normalize_page_request(options)

    filtered_query = apply_search_filter(query, request.search, request.search_fields)
    filtered_query = apply_sort(filtered_query, request.sort_by, request.sort_order)

    total = db.execute(count_query(filtered_query)).scalar_one()
    items = list(db.execute(filtered_query.offset(request.offset).limit(request.limit)).scalars().all())

    meta = create_pagination_meta(total=total, page=request.page, limit=request.limit)
    logger.debug(
        "pagination_page_loaded",
        page=meta.page,
        limit=meta.limit,
        total=meta.total,
        returned=len(items),
        searched=bool(request.search and request.search_fields),
    )
    return PageResult(data=items, meta=meta)


def cursor_paginate(db: Session, query: Select, options: PaginationOptions = None) -> CursorResult:
    request = normalize_cursor_request(options)
    sort_column = resolve_field(query, request.sort_by)

    windowed_query = query
    if request.cursor:
        if request.sort_order == SortOrder.asc:
            windowed_query = windowed_query.where(sort_column > request.cursor)
        else:
            windowed_query = windowed_query.where(sort_column < request.cursor)
    windowed_query = windowed_query.order_by(None).order_by(_ordered(sort_column, request.sort_order))

    items = list(db.execute(windowed_query.limit(request.limit + 1)).scalars().all())
    has_next_page = len(items) > request.limit
    if has_next_page:
        items = items[: request.limit]

    sort_key = _field_key(request.sort_by)
    next_cursor = None
    previous_cursor = None
    if items:
        if has_next_page:
            next_cursor = cursor_value(getattr(items[-1], sort_key))
        if request.cursor:
            previous_cursor = cursor_value(getattr(items[0], sort_key))

    meta = CursorMeta(
        has_next_page=has_next_page,
        has_previous_page=bool(request.cursor),
        next_cursor=next_cursor,
        previous_cursor=previous_cursor,
        limit=request.limit,
    )
    logger.debug(
        "pagination_cursor_page_loaded",
        limit=meta.limit,
        returned=len(items),
        has_next_page=meta.has_next_page,
        has_cursor=meta.has_previous_page,
    )
    return CursorResult(data=items, meta=meta)


def create_pagination_meta(total: int, page: int, limit: int) -> PageMeta:
    return PageMeta(total=total, page=page, limit=limit)


def create_pagination_links(
    base_url: str,
    meta: PageMeta,
    query_params: Mapping[str, Any] | None = None,
) -> PaginationLinks:
    passthrough = {key: value for key, value in (query_params or {}).items() if value is not None}

    def build_url(page: int) -> str:
        params = {**passthrough, "page": page, "limit": meta.limit}
        return f"{base_url}?{urlencode(params)}"

    links = PaginationLinks()
    if meta.page > 1:
        links.first = build_url(1)
        links.previous = build_url(meta.page - 1)
    if meta.has_next_page:
        links.next = build_url(meta.page + 1)
        links.last = build_url(meta.total_pages)
    return links
