"""Enums shared across the domain layer."""

from enum import Enum


class JobType(str, Enum):
    FULL_TIME = "Full-Time"
    PART_TIME = "Part-Time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"
    TEMPORARY = "Temporary"


class SalaryBand(str, Enum):
    UNDER_50K = "Under $50K"
    FROM_50K_TO_100K = "$50K - $100K"
    FROM_100K_TO_150K = "$100K - $150K"
    ABOVE_150K = "Above $150K"
    NEGOTIABLE = "Negotiable"


class JobStatus(str, Enum):
    PENDING = "pending"
    # approved is only ever set by moderation outside this service
    APPROVED = "approved"


class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    SALARY_HIGH_LOW = "salary-high-low"
    SALARY_LOW_HIGH = "salary-low-high"
    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"
