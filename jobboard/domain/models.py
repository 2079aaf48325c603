"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.

Attributes are snake_case; the wire format is camelCase (jobTitle, createdAt, ...).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobboard.domain.enums import JobStatus, JobType, SalaryBand, SortKey


class CamelModel(BaseModel):
    """Base model serialised with camelCase aliases, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Job ───────────────────────────────────────────────────────


class JobSubmission(CamelModel):
    """Request body for POST /jobs.

    Every field is optional here so that missing values reach the validator
    and come back as a 400, not a framework-level 422.
    """

    job_title: str | None = None
    company_name: str | None = None
    description: str | None = None
    job_type: str | None = None
    salary: str | None = None
    location: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    company_description: str | None = None


class JobPosting(JobSubmission):
    """A stored job posting."""

    id: str
    status: JobStatus = JobStatus.PENDING
    is_featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class JobListResponse(CamelModel):
    """Response for GET /jobs."""

    success: bool = True
    data: list[JobPosting]


class JobDetailResponse(CamelModel):
    """Response for GET /jobs/{id}."""

    success: bool = True
    data: JobPosting


class JobCreatedResponse(CamelModel):
    """Response after job creation."""

    success: bool = True
    message: str = "Job posted successfully and awaiting approval"
    data: JobPosting


class ErrorResponse(CamelModel):
    success: bool = False
    message: str


# ── Listing ───────────────────────────────────────────────────


class ListingQuery(CamelModel):
    """Search, facet and sort state of the public listing page."""

    search_text: str = ""
    selected_job_types: frozenset[str] = frozenset()
    selected_locations: frozenset[str] = frozenset()
    sort_key: SortKey = SortKey.NEWEST


# Location chips offered on the listing page
LISTING_LOCATIONS = ["Remote", "New York", "San Francisco", "London"]


class ListingOptions(CamelModel):
    """Facet and sort choices for GET /jobs/options."""

    job_types: list[str] = Field(default_factory=lambda: [t.value for t in JobType])
    locations: list[str] = Field(default_factory=lambda: list(LISTING_LOCATIONS))
    salary_bands: list[str] = Field(default_factory=lambda: [b.value for b in SalaryBand])
    sort_keys: list[str] = Field(default_factory=lambda: [k.value for k in SortKey])


# ── Draft form ────────────────────────────────────────────────


class JobDraft(CamelModel):
    """In-progress "post a job" form fields."""

    job_type: str = JobType.FULL_TIME.value
    job_title: str = ""
    description: str = ""
    salary: str = SalaryBand.UNDER_50K.value
    location: str = ""
    company_name: str = ""
    company_description: str = ""
    contact_email: str = ""
    contact_phone: str = ""


class DraftFormState(CamelModel):
    """Everything the company form persists between page loads."""

    dark_mode: bool = False
    form_data: JobDraft = Field(default_factory=JobDraft)
    submit_success: bool = False
    is_submitting: bool = False
