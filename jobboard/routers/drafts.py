"""
Draft endpoints — the persisted "post a job" form.

One draft per deployment, the server-side counterpart of the browser's
local storage: edits are merged and kept until the draft is submitted or reset.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from jobboard.dependencies import get_draft_store, get_job_service
from jobboard.domain.errors import JobValidationError, StoreUnavailable
from jobboard.domain.models import DraftFormState, ErrorResponse, JobCreatedResponse
from jobboard.services.draft_store import DraftFormStore
from jobboard.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/draft", tags=["Draft"])


@router.get("", response_model=DraftFormState)
async def get_draft(drafts: DraftFormStore = Depends(get_draft_store)):
    """Current draft fields and UI flags."""
    return drafts.get()


@router.patch(
    "",
    response_model=DraftFormState,
    responses={400: {"model": ErrorResponse}},
)
async def update_draft(
    partial: dict[str, Any] = Body(...),
    drafts: DraftFormStore = Depends(get_draft_store),
):
    """Merge the given fields into the draft."""
    try:
        return drafts.set(partial)
    except ValueError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=str(exc)).model_dump(by_alias=True),
        )


@router.delete("", response_model=DraftFormState)
async def reset_draft(drafts: DraftFormStore = Depends(get_draft_store)):
    """Restore the default draft."""
    drafts.reset()
    return drafts.get()


@router.post("/dark-mode", response_model=DraftFormState)
async def toggle_dark_mode(drafts: DraftFormStore = Depends(get_draft_store)):
    drafts.toggle_dark_mode()
    return drafts.get()


@router.post(
    "/submit",
    response_model=JobCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def submit_draft(
    drafts: DraftFormStore = Depends(get_draft_store),
    job_svc: JobService = Depends(get_job_service),
):
    """Validate and post the draft; on success the draft is reset."""
    try:
        posting = await job_svc.submit_draft(drafts)
    except (JobValidationError, StoreUnavailable) as exc:
        logger.info(f"Draft submission failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=str(exc)).model_dump(by_alias=True),
        )

    return JobCreatedResponse(data=posting)
