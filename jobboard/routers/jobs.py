"""
Job endpoints — public listing, detail lookup and submission.
All logic delegated to JobService.
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from jobboard.dependencies import get_job_service
from jobboard.domain.enums import SortKey
from jobboard.domain.errors import JobValidationError, StoreUnavailable
from jobboard.domain.models import (
    ErrorResponse,
    JobCreatedResponse,
    JobDetailResponse,
    JobListResponse,
    JobSubmission,
    ListingOptions,
    ListingQuery,
)
from jobboard.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(by_alias=True),
    )


@router.get(
    "",
    response_model=JobListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_jobs(
    search: str = "",
    job_type: list[str] = Query(default=[], alias="jobType"),
    location: list[str] = Query(default=[]),
    sort: SortKey | None = None,
    job_svc: JobService = Depends(get_job_service),
):
    """
    Approved job postings, newest first.
    Optional search / facet / sort parameters re-filter the list server-side.
    """
    query = None
    if search or job_type or location or sort is not None:
        query = ListingQuery(
            search_text=search,
            selected_job_types=frozenset(job_type),
            selected_locations=frozenset(location),
            sort_key=sort or SortKey.NEWEST,
        )

    try:
        jobs = await job_svc.list_jobs(query)
    except StoreUnavailable as exc:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    return JobListResponse(data=jobs)


@router.post(
    "",
    response_model=JobCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_job(
    body: JobSubmission,
    job_svc: JobService = Depends(get_job_service),
):
    """
    Submit a new job posting.
    It is stored as pending and only appears in the listing once approved.
    """
    try:
        posting = await job_svc.submit(body)
    except JobValidationError as exc:
        logger.info(f"Rejected job submission: {exc}")
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except StoreUnavailable as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    return JobCreatedResponse(data=posting)


@router.get("/options", response_model=ListingOptions)
async def get_listing_options():
    """Facet and sort choices for the listing page and the post-a-job form."""
    return ListingOptions()


@router.get(
    "/{job_id}",
    response_model=JobDetailResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_job(
    job_id: str,
    job_svc: JobService = Depends(get_job_service),
):
    """Full details of one approved posting."""
    try:
        job = await job_svc.get_job(job_id)
    except StoreUnavailable as exc:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    if not job:
        return _error(status.HTTP_404_NOT_FOUND, "Job not found")

    return JobDetailResponse(data=job)
