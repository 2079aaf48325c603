"""
Job service — listing, lookup and submission of job postings.
Depends on ports only (Dependency Inversion).
"""

import logging

from jobboard.domain.models import JobPosting, JobSubmission, ListingQuery
from jobboard.ports.job_store_port import JobStorePort
from jobboard.services.draft_store import DraftFormStore
from jobboard.services.listing_service import apply_listing_query
from jobboard.services.validation import validate_job

logger = logging.getLogger(__name__)


class JobService:
    """Orchestrates the validator, the listing pipeline and the job store."""

    def __init__(self, store: JobStorePort) -> None:
        self._store = store

    async def list_jobs(self, query: ListingQuery | None = None) -> list[JobPosting]:
        """Approved postings, newest first, optionally filtered and re-sorted."""
        jobs = await self._store.list_approved()
        if query is None:
            return jobs
        return apply_listing_query(jobs, query)

    async def get_job(self, job_id: str) -> JobPosting | None:
        return await self._store.get_approved(job_id)

    async def submit(self, submission: JobSubmission) -> JobPosting:
        """Validate and persist a new posting. It stays pending until moderated."""
        validate_job(submission)
        posting = await self._store.create_pending(submission)
        logger.info(f"Job '{posting.job_title}' submitted by {posting.company_name} ({posting.id})")
        return posting

    async def submit_draft(self, drafts: DraftFormStore) -> JobPosting:
        """
        Submit the persisted draft form.

        On success the draft is reset and flagged as submitted. On any error
        the draft is left as it was so the user can fix and retry. The
        submitting flag is cleared on every exit path.
        """
        drafts.set_is_submitting(True)
        try:
            draft = drafts.get().form_data
            posting = await self.submit(JobSubmission.model_validate(draft.model_dump()))
            drafts.reset()
            drafts.set_submit_success(True)
            return posting
        finally:
            drafts.set_is_submitting(False)
