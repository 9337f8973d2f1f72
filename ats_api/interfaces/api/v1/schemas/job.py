from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ats_api.domain.job_enums import EmploymentType, JobStatus
from ats_api.interfaces.api.v1.schemas.pagination import CursorMeta, PageMeta, PaginationLinks


class JobPostingBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    department: str | None = None
    location: str | None = None
    employment_type: EmploymentType = EmploymentType.full_time
    description: str | None = None


class JobPostingCreate(JobPostingBase):
    status: JobStatus = JobStatus.draft


class JobPostingStatusUpdate(BaseModel):
    status: JobStatus


class JobPostingResponse(JobPostingBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: JobStatus
    created_at: datetime
    updated_at: datetime


class JobPostingListResponse(BaseModel):
    data: list[JobPostingResponse]
    meta: PageMeta
    links: PaginationLinks


class JobPostingCursorListResponse(BaseModel):
    data: list[JobPostingResponse]
    meta: CursorMeta
