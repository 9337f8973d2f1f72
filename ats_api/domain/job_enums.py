from enum import Enum


class JobStatus(str, Enum):
    draft = "draft"
    published = "published"
    closed = "closed"


class EmploymentType(str, Enum):
    full_time = "full_time"
    part_time = "part_time"
    contract = "contract"
    internship = "internship"
