from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ats_api.interfaces.api.v1.schemas.pagination import CursorMeta, PageMeta, PaginationLinks


class CandidateBase(BaseModel):
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: str | None = None
    location: str | None = None
    linkedin_url: str | None = None
    portfolio_url: str | None = None
    resume_url: str | None = None
    source: str | None = None
    years_of_experience: int | None = Field(default=None, ge=0)


class CandidateCreate(CandidateBase):
    pass


class CandidateResponse(CandidateBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class CandidateListResponse(BaseModel):
    data: list[CandidateResponse]
    meta: PageMeta
    links: PaginationLinks


class CandidateCursorListResponse(BaseModel):
    data: list[CandidateResponse]
    meta: CursorMeta
