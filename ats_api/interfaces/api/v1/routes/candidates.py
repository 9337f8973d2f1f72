from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from ats_api.application.services.candidate_service import (
    CANDIDATE_SORT_FIELDS,
    create_candidate,
    delete_candidate,
    list_candidates_by_cursor,
    list_candidates_page,
    require_candidate,
    serialize_candidate_response,
)
from ats_api.domain.sort_order import SortOrder
from ats_api.infrastructure.db.session import get_db
from ats_api.interfaces.api.v1.dependencies.pagination import get_cursor_request, get_page_request
from ats_api.interfaces.api.v1.schemas.candidate import (
    CandidateCreate,
    CandidateCursorListResponse,
    CandidateListResponse,
    CandidateResponse,
)
from ats_api.interfaces.api.v1.schemas.pagination import CursorRequest, PageRequest

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get(
    "",
    response_model=CandidateListResponse,
    summary="List candidates",
    description="Offset-paginated candidate list, searchable by name and email. Newest candidates first by default.",
    responses={400: {"description": "Unsupported sort field or order"}},
)
def get_candidates(
    request: Request,
    pagination: PageRequest = Depends(
        get_page_request(CANDIDATE_SORT_FIELDS, default_sort_by="created_at", default_sort_order=SortOrder.desc)
    ),
    db: Session = Depends(get_db),
):
    return list_candidates_page(db=db, request=pagination, base_url=str(request.url.replace(query="")))


@router.get(
    "/cursor",
    response_model=CandidateCursorListResponse,
    summary="List candidates by cursor",
    description=(
        "Cursor-paginated candidate list. Pass `next_cursor` from the previous response as `cursor`, "
        "URL-encoded: timestamp cursors contain `+` and spaces."
    ),
    responses={400: {"description": "Unsupported sort field or order"}},
)
def get_candidates_by_cursor(
    pagination: CursorRequest = Depends(get_cursor_request(CANDIDATE_SORT_FIELDS)),
    db: Session = Depends(get_db),
):
    return list_candidates_by_cursor(db=db, request=pagination)


@router.get(
    "/{candidate_id}",
    response_model=CandidateResponse,
    summary="Get candidate by id",
    responses={404: {"description": "Candidate not found"}},
)
def get_candidate(candidate_id: int, db: Session = Depends(get_db)):
    return serialize_candidate_response(require_candidate(db=db, candidate_id=candidate_id))


@router.post(
    "",
    response_model=CandidateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create candidate",
    responses={409: {"description": "Candidate email already exists"}},
)
def create_candidate_endpoint(payload: CandidateCreate, db: Session = Depends(get_db)):
    return serialize_candidate_response(create_candidate(db=db, payload=payload))


@router.delete(
    "/{candidate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete candidate",
    description="Soft-delete a candidate; it disappears from list and read endpoints.",
    responses={404: {"description": "Candidate not found"}},
)
def delete_candidate_endpoint(candidate_id: int, db: Session = Depends(get_db)):
    delete_candidate(db=db, candidate_id=candidate_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
