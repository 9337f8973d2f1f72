from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from ats_api.application.services.job_service import (
    JOB_SORT_FIELDS,
    create_job,
    list_jobs_by_cursor,
    list_jobs_page,
    require_job,
    update_job_status,
)
from ats_api.domain.job_enums import JobStatus
from ats_api.domain.sort_order import SortOrder
from ats_api.infrastructure.db.session import get_db
from ats_api.interfaces.api.v1.dependencies.pagination import get_cursor_request, get_page_request
from ats_api.interfaces.api.v1.schemas.job import (
    JobPostingCreate,
    JobPostingCursorListResponse,
    JobPostingListResponse,
    JobPostingResponse,
    JobPostingStatusUpdate,
)
from ats_api.interfaces.api.v1.schemas.pagination import CursorRequest, PageRequest

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "",
    response_model=JobPostingListResponse,
    summary="List job postings",
    description="Offset-paginated job postings, searchable by title, department and location.",
    responses={400: {"description": "Unsupported sort field or order"}},
)
def get_jobs(
    request: Request,
    job_status: JobStatus | None = Query(default=None, alias="status"),
    pagination: PageRequest = Depends(
        get_page_request(JOB_SORT_FIELDS, default_sort_by="created_at", default_sort_order=SortOrder.desc)
    ),
    db: Session = Depends(get_db),
):
    return list_jobs_page(db=db, request=pagination, base_url=str(request.url.replace(query="")), status=job_status)


@router.get(
    "/cursor",
    response_model=JobPostingCursorListResponse,
    summary="List job postings by cursor",
    description=(
        "Cursor-paginated job postings. Pass `next_cursor` from the previous response as `cursor`, "
        "URL-encoded: timestamp cursors contain `+` and spaces."
    ),
    responses={400: {"description": "Unsupported sort field or order"}},
)
def get_jobs_by_cursor(
    job_status: JobStatus | None = Query(default=None, alias="status"),
    pagination: CursorRequest = Depends(get_cursor_request(JOB_SORT_FIELDS)),
    db: Session = Depends(get_db),
):
    return list_jobs_by_cursor(db=db, request=pagination, status=job_status)


@router.get(
    "/{job_id}",
    response_model=JobPostingResponse,
    summary="Get job posting by id",
    responses={404: {"description": "Job posting not found"}},
)
def get_job(job_id: int, db: Session = Depends(get_db)):
    return require_job(db=db, job_id=job_id)


@router.post("", response_model=JobPostingResponse, status_code=status.HTTP_201_CREATED, summary="Create job posting")
def create_job_endpoint(payload: JobPostingCreate, db: Session = Depends(get_db)):
    return create_job(db=db, payload=payload)


@router.patch(
    "/{job_id}/status",
    response_model=JobPostingResponse,
    summary="Change job posting status",
    description="Publish, close, or reopen a job posting as a draft.",
    responses={404: {"description": "Job posting not found"}, 400: {"description": "Transition not allowed"}},
)
def update_job_status_endpoint(job_id: int, payload: JobPostingStatusUpdate, db: Session = Depends(get_db)):
    return update_job_status(db=db, job_id=job_id, status=payload.status)
