import json
from datetime import datetime, timezone
from hashlib import sha256

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from ats_api.application.errors import ConflictError, NotFoundError
from ats_api.application.services.pagination_service import (
    create_pagination_links,
    cursor_paginate,
    normalize_page_request,
    paginate,
)
from ats_api.config import settings
from ats_api.infrastructure.cache.cache_service import delete_pattern, get_json, set_json
from ats_api.infrastructure.db.models import Candidate
from ats_api.infrastructure.logging import get_logger
from ats_api.interfaces.api.v1.schemas.candidate import CandidateCreate, CandidateResponse
from ats_api.interfaces.api.v1.schemas.pagination import CursorRequest, PageRequest

logger = get_logger(__name__)

CANDIDATE_LIST_CACHE_PREFIX = "candidates:list"
CANDIDATE_SEARCH_FIELDS = ["first_name", "last_name", "email"]
CANDIDATE_SORT_FIELDS = ["id", "created_at", "updated_at", "first_name", "last_name", "email", "years_of_experience"]


def active_candidates_query() -> Select:
    return select(Candidate).where(Candidate.deleted_at.is_(None))


def candidate_list_cache_key(request: PageRequest, base_url: str) -> str:
    fingerprint = json.dumps(
        {
            "base_url": base_url,
            "page": request.page,
            "limit": request.limit,
            "sort_by": request.sort_by,
            "sort_order": request.sort_order.value,
            "search": request.search,
        },
        sort_keys=True,
    )
    return f"{CANDIDATE_LIST_CACHE_PREFIX}:{sha256(fingerprint.encode('utf-8')).hexdigest()}"


def invalidate_candidate_list_cache() -> None:
    removed = delete_pattern(f"{CANDIDATE_LIST_CACHE_PREFIX}:*")
    logger.info("candidate_list_cache_invalidated", removed_keys=removed)


def serialize_candidate_response(candidate: Candidate) -> dict:
    return CandidateResponse.model_validate(candidate).model_dump(mode="json")


def list_candidates_page(db: Session, request: PageRequest, base_url: str) -> dict:
    request = normalize_page_request(request.model_copy(update={"search_fields": CANDIDATE_SEARCH_FIELDS}))
    cache_key = candidate_list_cache_key(request, base_url)
    cached = get_json(cache_key)
    if cached is not None:
        logger.debug("candidate_list_cache_hit", cache_key=cache_key)
        return cached

    result = paginate(db, active_candidates_query(), request)
    links = create_pagination_links(
        base_url,
        result.meta,
        {"search": request.search, "sort_by": request.sort_by, "sort_order": request.sort_order.value},
    )
    payload = {
        "data": [serialize_candidate_response(candidate) for candidate in result.data],
        "meta": result.meta.model_dump(),
        "links": links.model_dump(exclude_none=True),
    }
    set_json(cache_key, payload, settings.candidate_list_cache_ttl_seconds)
    return payload


def list_candidates_by_cursor(db: Session, request: CursorRequest) -> dict:
    result = cursor_paginate(db, active_candidates_query(), request)
    return {
        "data": [serialize_candidate_response(candidate) for candidate in result.data],
        "meta": result.meta,
    }


def get_candidate_by_id(db: Session, candidate_id: int) -> Candidate | None:
    return db.execute(
        select(Candidate).where(Candidate.id == candidate_id, Candidate.deleted_at.is_(None))
    ).scalar_one_or_none()


def require_candidate(db: Session, candidate_id: int) -> Candidate:
    candidate = get_candidate_by_id(db=db, candidate_id=candidate_id)
    if candidate is None:
        raise NotFoundError("Candidate not found")
    return candidate


def create_candidate(db: Session, payload: CandidateCreate) -> Candidate:
    normalized_email = payload.email.lower()
    existing = db.execute(select(Candidate).where(Candidate.email == normalized_email)).scalar_one_or_none()
    if existing is not None:
        raise ConflictError("Candidate email already exists")

    candidate = Candidate(**payload.model_dump(exclude={"email"}), email=normalized_email)
    db.add(candidate)
    db.commit()
    db.refresh(candidate)
    logger.info("candidate_created", candidate_id=candidate.id, source=candidate.source)
    invalidate_candidate_list_cache()
    return candidate


def delete_candidate(db: Session, candidate_id: int) -> None:
    candidate = require_candidate(db=db, candidate_id=candidate_id)
    candidate.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info("candidate_deleted", candidate_id=candidate_id)
    invalidate_candidate_list_cache()
