from sqlalchemy import select
from sqlalchemy.orm import Session

from ats_api.domain.job_enums import EmploymentType, JobStatus
from ats_api.infrastructure.db.models import Candidate, JobPosting
from ats_api.infrastructure.db.session import SessionLocal
from ats_api.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)

FIRST_NAMES = ["Ada", "Grace", "Linus", "Margaret", "Alan", "Barbara", "Dennis", "Frances", "Ken", "Radia"]
LAST_NAMES = ["Lovelace", "Hopper", "Torvalds", "Hamilton", "Turing", "Liskov", "Ritchie", "Allen", "Thompson", "Perlman"]
SOURCES = ["linkedin", "referral", "company_website", "indeed"]
LOCATIONS = ["Berlin", "Lisbon", "Toronto", "Remote"]

JOB_POSTINGS = [
    ("Backend Engineer", "Engineering", "Berlin", EmploymentType.full_time, JobStatus.published),
    ("Frontend Engineer", "Engineering", "Remote", EmploymentType.full_time, JobStatus.published),
    ("Data Analyst", "Analytics", "Lisbon", EmploymentType.contract, JobStatus.draft),
    ("Technical Recruiter", "People", "Toronto", EmploymentType.full_time, JobStatus.published),
    ("Engineering Intern", "Engineering", "Berlin", EmploymentType.internship, JobStatus.closed),
]


def create_candidate_if_missing(db: Session, first_name: str, last_name: str, index: int) -> Candidate:
    email = f"{first_name}.{last_name}.{index}@example.com".lower()
    existing = db.execute(select(Candidate).where(Candidate.email == email)).scalar_one_or_none()
    if existing is not None:
        return existing

    candidate = Candidate(
        email=email,
        first_name=first_name,
        last_name=last_name,
        location=LOCATIONS[index % len(LOCATIONS)],
        source=SOURCES[index % len(SOURCES)],
        years_of_experience=index % 15,
    )
    db.add(candidate)
    db.flush()
    return candidate


def create_job_if_missing(
    db: Session,
    title: str,
    department: str,
    location: str,
    employment_type: EmploymentType,
    status: JobStatus,
) -> JobPosting:
    existing = db.execute(select(JobPosting).where(JobPosting.title == title)).scalar_one_or_none()
    if existing is not None:
        return existing

    job = JobPosting(
        title=title,
        department=department,
        location=location,
        employment_type=employment_type,
        status=status,
    )
    db.add(job)
    db.flush()
    return job


def main() -> None:
    configure_logging()
    db = SessionLocal()
    try:
        candidate_count = 0
        for index in range(45):
            first_name = FIRST_NAMES[index % len(FIRST_NAMES)]
            last_name = LAST_NAMES[(index * 3) % len(LAST_NAMES)]
            create_candidate_if_missing(db=db, first_name=first_name, last_name=last_name, index=index)
            candidate_count += 1

        for title, department, location, employment_type, status in JOB_POSTINGS:
            create_job_if_missing(
                db=db,
                title=title,
                department=department,
                location=location,
                employment_type=employment_type,
                status=status,
            )

        db.commit()
        logger.info("seed_completed", candidates=candidate_count, job_postings=len(JOB_POSTINGS))
    finally:
        db.close()


if __name__ == "__main__":
    main()
