"""
Listing pipeline — search, facet filter and sort over an in-memory list of postings.
Single Responsibility: pure transformation, the store is never touched here.
"""

import re
from datetime import datetime
from typing import Callable, Iterable

from jobboard.domain.enums import SortKey
from jobboard.domain.models import JobPosting, ListingQuery

_FIRST_NUMBER_RE = re.compile(r"\d+")


def _matches_search(job: JobPosting, needle: str) -> bool:
    if not needle:
        return True
    return any(
        needle in (field or "").lower()
        for field in (job.job_title, job.company_name, job.description)
    )


def _matches_facets(job: JobPosting, query: ListingQuery) -> bool:
    if query.selected_job_types and job.job_type not in query.selected_job_types:
        return False
    if query.selected_locations and job.location not in query.selected_locations:
        return False
    return True


def salary_sort_value(salary: str | None) -> int:
    """First run of digits in the salary text ("$80K - $120K" -> 80), else 0."""
    match = _FIRST_NUMBER_RE.search(salary or "")
    return int(match.group()) if match else 0


def _created_timestamp(job: JobPosting) -> float:
    created: datetime | None = job.created_at
    return created.timestamp() if created else 0.0


def _title_key(job: JobPosting) -> tuple[str, str]:
    # Case-insensitive first, original text breaks ties ("analyst" < "Backend")
    title = job.job_title or ""
    return title.casefold(), title


# sort key -> (key function, descending)
_SORTS: dict[SortKey, tuple[Callable[[JobPosting], object], bool]] = {
    SortKey.NEWEST: (_created_timestamp, True),
    SortKey.OLDEST: (_created_timestamp, False),
    SortKey.SALARY_HIGH_LOW: (lambda job: salary_sort_value(job.salary), True),
    SortKey.SALARY_LOW_HIGH: (lambda job: salary_sort_value(job.salary), False),
    SortKey.TITLE_ASC: (_title_key, False),
    SortKey.TITLE_DESC: (_title_key, True),
}


def apply_listing_query(jobs: Iterable[JobPosting], query: ListingQuery) -> list[JobPosting]:
    """
    Filter and sort postings for the listing page.

    1. keep jobs whose title, company or description contains the search text
       (case-insensitive; empty search keeps everything)
    2. keep jobs whose type and location are in the selected facets
       (an empty facet does not filter)
    3. stable sort by the selected key, so ties keep their input order

    Returns a new list; the input is not modified.
    """
    needle = query.search_text.lower()
    selected = [
        job for job in jobs
        if _matches_search(job, needle) and _matches_facets(job, query)
    ]

    key, descending = _SORTS.get(query.sort_key, _SORTS[SortKey.NEWEST])
    return sorted(selected, key=key, reverse=descending)
