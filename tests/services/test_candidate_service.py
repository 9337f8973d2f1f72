import json

import pytest

from ats_api.application.errors import ConflictError, NotFoundError
from ats_api.application.services.candidate_service import (
    CANDIDATE_LIST_CACHE_PREFIX,
    candidate_list_cache_key,
    create_candidate,
    delete_candidate,
    list_candidates_by_cursor,
    list_candidates_page,
    require_candidate,
)
from ats_api.application.services.pagination_service import normalize_page_request
from ats_api.config import settings
from ats_api.domain.sort_order import SortOrder
from ats_api.interfaces.api.v1.schemas.candidate import CandidateCreate
from ats_api.interfaces.api.v1.schemas.pagination import CursorRequest, PageRequest
from tests.helpers.factories import create_candidate as seed_candidate
from tests.helpers.factories import create_candidates

BASE_URL = "http://testserver/api/v1/candidates"


def test_list_candidates_page_builds_envelope_and_caches_it(db_session, fake_redis):
    """
    Validate candidate listing payload and cache write.

    1. Seed twenty five candidates.
    2. List the first page with limit ten sorted by id.
    3. Validate data, meta and links in the payload.
    4. Validate the payload was cached with the configured ttl.
    """
    create_candidates(db_session, 25)
    request = PageRequest(limit=10, sort_by="id")
    payload = list_candidates_page(db=db_session, request=request, base_url=BASE_URL)

    assert len(payload["data"]) == 10
    assert payload["meta"]["total"] == 25
    assert payload["meta"]["total_pages"] == 3
    assert "first" not in payload["links"]
    assert payload["links"]["next"] == f"{BASE_URL}?sort_by=id&sort_order=ASC&page=2&limit=10"

    cache_key = candidate_list_cache_key(normalize_page_request(request), BASE_URL)
    assert json.loads(fake_redis.store[cache_key])["meta"]["total"] == 25
    assert fake_redis.ttls[cache_key] == settings.candidate_list_cache_ttl_seconds


def test_list_candidates_page_returns_cached_payload(db_session, fake_redis):
    """
    Validate cached listings are served without querying.

    1. Store a crafted payload under the listing cache key.
    2. List candidates with the same options.
    3. Validate the crafted payload is returned as is.
    """
    request = PageRequest(page=1, limit=20, sort_by="created_at", sort_order=SortOrder.desc)
    cache_key = candidate_list_cache_key(normalize_page_request(request), BASE_URL)
    cached = {"data": [], "meta": {"total": 99, "page": 1, "limit": 20}, "links": {}}
    fake_redis.setex(cache_key, 60, json.dumps(cached))

    assert list_candidates_page(db=db_session, request=request, base_url=BASE_URL) == cached


def test_list_candidates_page_searches_name_and_email(db_session):
    """
    Validate default candidate search fields.

    1. Seed candidates matching by first name, last name and email.
    2. Seed one non-matching candidate.
    3. List candidates searching for the shared term.
    4. Validate only the three matches are returned.
    """
    seed_candidate(db_session, "Acme", "One", email="one@example.com")
    seed_candidate(db_session, "Two", "Acmeson", email="two@example.com")
    seed_candidate(db_session, "Three", "Three", email="three@acme.io")
    seed_candidate(db_session, "Four", "Four", email="four@example.com", location="Acme City")
    payload = list_candidates_page(db=db_session, request=PageRequest(search="ACME"), base_url=BASE_URL)
    assert payload["meta"]["total"] == 3
    assert {item["email"] for item in payload["data"]} == {"one@example.com", "two@example.com", "three@acme.io"}


def test_create_candidate_invalidates_cached_listings(db_session, fake_redis):
    """
    Validate writes clear cached listing pages.

    1. Store listing and unrelated cache entries.
    2. Create a candidate.
    3. Validate listing entries are gone and unrelated entries remain.
    """
    fake_redis.setex(f"{CANDIDATE_LIST_CACHE_PREFIX}:abc", 60, "{}")
    fake_redis.setex(f"{CANDIDATE_LIST_CACHE_PREFIX}:def", 60, "{}")
    fake_redis.setex("unrelated:key", 60, "{}")

    candidate = create_candidate(
        db=db_session,
        payload=CandidateCreate(email="New.Person@Example.com", first_name="New", last_name="Person"),
    )
    assert candidate.email == "new.person@example.com"
    assert list(fake_redis.store) == ["unrelated:key"]


def test_create_candidate_rejects_duplicate_email(db_session):
    """
    Validate duplicate candidate emails are rejected.

    1. Seed a candidate.
    2. Create another candidate with the same email in different case.
    3. Validate a conflict error is raised.
    """
    seed_candidate(db_session, "Jane", "Doe", email="jane@example.com")
    with pytest.raises(ConflictError):
        create_candidate(
            db=db_session,
            payload=CandidateCreate(email="JANE@example.com", first_name="Jane", last_name="Again"),
        )


def test_delete_candidate_hides_candidate(db_session, fake_redis):
    """
    Validate soft delete removes the candidate from reads.

    1. Seed two candidates and cache a listing page.
    2. Delete one candidate.
    3. Validate reads raise not found and listings exclude it.
    """
    kept, removed = create_candidates(db_session, 2)
    fake_redis.setex(f"{CANDIDATE_LIST_CACHE_PREFIX}:abc", 60, "{}")

    delete_candidate(db=db_session, candidate_id=removed.id)

    with pytest.raises(NotFoundError):
        require_candidate(db=db_session, candidate_id=removed.id)
    assert fake_redis.store == {}
    payload = list_candidates_page(db=db_session, request=PageRequest(), base_url=BASE_URL)
    assert [item["id"] for item in payload["data"]] == [kept.id]


def test_list_candidates_by_cursor_skips_deleted(db_session):
    """
    Validate cursor listing only walks active candidates.

    1. Seed three candidates and soft delete the middle one.
    2. Cursor list with limit five.
    3. Validate the deleted candidate is absent.
    """
    first, middle, last = create_candidates(db_session, 3)
    delete_candidate(db=db_session, candidate_id=middle.id)
    payload = list_candidates_by_cursor(db=db_session, request=CursorRequest(limit=5))
    assert [item["id"] for item in payload["data"]] == [first.id, last.id]
    assert payload["meta"].has_next_page is False
