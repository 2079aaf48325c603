"""
Abstract interface for the job posting store.
"""

from abc import ABC, abstractmethod

from jobboard.domain.models import JobPosting, JobSubmission


class JobStorePort(ABC):
    """
    Port for reading and writing job postings.

    Implementations raise StoreUnavailable when the store cannot be reached
    or a query fails. Each call owns its connection for its whole duration.
    """

    @abstractmethod
    async def list_approved(self) -> list[JobPosting]:
        """All approved postings, newest first."""
        ...

    @abstractmethod
    async def get_approved(self, job_id: str) -> JobPosting | None:
        """A single approved posting, or None if unknown or not yet approved."""
        ...

    @abstractmethod
    async def create_pending(self, submission: JobSubmission) -> JobPosting:
        """
        Persist a validated submission as a new pending posting.

        Args:
            submission: Input that has already passed validate_job()

        Returns:
            The stored record, including its generated id.
        """
        ...
