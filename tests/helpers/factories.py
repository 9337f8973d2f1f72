from sqlalchemy.orm import Session

from ats_api.domain.job_enums import EmploymentType, JobStatus
from ats_api.infrastructure.db.models import Candidate, JobPosting


def create_candidate(
    db: Session,
    first_name: str,
    last_name: str,
    email: str | None = None,
    **fields,
) -> Candidate:
    candidate = Candidate(
        first_name=first_name,
        last_name=last_name,
        email=email or f"{first_name}.{last_name}@example.com".lower(),
        **fields,
    )
    db.add(candidate)
    db.commit()
    db.refresh(candidate)
    return candidate


def create_candidates(db: Session, count: int, prefix: str = "Candidate") -> list[Candidate]:
    candidates = [
        Candidate(
            first_name=prefix,
            last_name=f"Number{index:03d}",
            email=f"{prefix.lower()}.{index:03d}@example.com",
        )
        for index in range(1, count + 1)
    ]
    db.add_all(candidates)
    db.commit()
    for candidate in candidates:
        db.refresh(candidate)
    return candidates


def create_job(
    db: Session,
    title: str,
    department: str | None = None,
    location: str | None = None,
    status: JobStatus = JobStatus.draft,
    employment_type: EmploymentType = EmploymentType.full_time,
) -> JobPosting:
    job = JobPosting(
        title=title,
        department=department,
        location=location,
        status=status,
        employment_type=employment_type,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job
