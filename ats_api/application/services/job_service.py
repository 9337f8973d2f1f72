from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from ats_api.application.errors import NotFoundError, ValidationError
from ats_api.application.services.pagination_service import (
    create_pagination_links,
    cursor_paginate,
    normalize_page_request,
    paginate,
)
from ats_api.domain.job_enums import JobStatus
from ats_api.infrastructure.db.models import JobPosting
from ats_api.infrastructure.logging import get_logger
from ats_api.interfaces.api.v1.schemas.job import JobPostingCreate
from ats_api.interfaces.api.v1.schemas.pagination import CursorRequest, PageRequest

logger = get_logger(__name__)

JOB_SEARCH_FIELDS = ["title", "department", "location"]
JOB_SORT_FIELDS = ["id", "created_at", "updated_at", "title", "department", "status"]

# Allowed status transitions; closed postings can be reopened as drafts only.
JOB_STATUS_TRANSITIONS: dict[JobStatus, set[JobStatus]] = {
    JobStatus.draft: {JobStatus.published, JobStatus.closed},
    JobStatus.published: {JobStatus.closed},
    JobStatus.closed: {JobStatus.draft},
}


def active_jobs_query(status: JobStatus | None = None) -> Select:
    query = select(JobPosting).where(JobPosting.deleted_at.is_(None))
    if status is not None:
        query = query.where(JobPosting.status == status)
    return query


def list_jobs_page(db: Session, request: PageRequest, base_url: str, status: JobStatus | None = None) -> dict:
    request = normalize_page_request(request.model_copy(update={"search_fields": JOB_SEARCH_FIELDS}))
    result = paginate(db, active_jobs_query(status), request)
    links = create_pagination_links(
        base_url,
        result.meta,
        {
            "status": status.value if status is not None else None,
            "search": request.search,
            "sort_by": request.sort_by,
            "sort_order": request.sort_order.value,
        },
    )
    return {"data": result.data, "meta": result.meta, "links": links}


def list_jobs_by_cursor(db: Session, request: CursorRequest, status: JobStatus | None = None) -> dict:
    result = cursor_paginate(db, active_jobs_query(status), request)
    return {"data": result.data, "meta": result.meta}


def get_job_by_id(db: Session, job_id: int) -> JobPosting | None:
    return db.execute(
        select(JobPosting).where(JobPosting.id == job_id, JobPosting.deleted_at.is_(None))
    ).scalar_one_or_none()


def require_job(db: Session, job_id: int) -> JobPosting:
    job = get_job_by_id(db=db, job_id=job_id)
    if job is None:
        raise NotFoundError("Job posting not found")
    return job


def create_job(db: Session, payload: JobPostingCreate) -> JobPosting:
    job = JobPosting(**payload.model_dump())
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("job_posting_created", job_id=job.id, status=job.status.value)
    return job


def update_job_status(db: Session, job_id: int, status: JobStatus) -> JobPosting:
    job = require_job(db=db, job_id=job_id)
    if status == job.status:
        return job
    if status not in JOB_STATUS_TRANSITIONS[job.status]:
        raise ValidationError(f"Cannot move job posting from {job.status.value} to {status.value}")
    previous_status = job.status
    job.status = status
    db.commit()
    db.refresh(job)
    logger.info("job_posting_status_changed", job_id=job.id, from_status=previous_status.value, to_status=status.value)
    return job
