"""
Concrete implementation of JobStorePort using the Supabase Python client.

Each call opens its own client from the factory and closes its HTTP session
before returning, whether the call succeeded or not.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Iterator

from supabase import Client

from jobboard.domain.enums import JobStatus
from jobboard.domain.errors import StoreUnavailable
from jobboard.domain.models import JobPosting, JobSubmission
from jobboard.ports.job_store_port import JobStorePort

logger = logging.getLogger(__name__)


class SupabaseJobStore(JobStorePort):
    """All job posting I/O goes through the Supabase REST client."""

    def __init__(self, client_factory: Callable[[], Client], table: str = "jobs") -> None:
        self._client_factory = client_factory
        self._table = table

    # ── Connection scope ──────────────────────────────────────

    @contextmanager
    def _connection(self) -> Iterator[Client]:
        try:
            client = self._client_factory()
        except Exception as exc:
            logger.error(f"Could not connect to job store: {type(exc).__name__}: {exc}")
            raise StoreUnavailable(f"Could not connect to job store: {exc}") from exc

        try:
            yield client
        except Exception as exc:
            logger.error(f"Job store query failed: {type(exc).__name__}: {exc}")
            raise StoreUnavailable(f"Job store query failed: {exc}") from exc
        finally:
            self._release(client)

    @staticmethod
    def _release(client: Client) -> None:
        """
        Close the HTTP sessions a client owns: PostgREST for queries and
        GoTrue (auth), which create_client() builds even though it is unused here.
        """
        closers = [("postgrest", lambda: client.postgrest.aclose()), ("auth", lambda: client.auth.close())]
        for name, close in closers:
            try:
                close()
            except Exception as exc:
                logger.warning(f"Failed to close job store {name} session: {exc}")

    @staticmethod
    def _to_posting(row: dict[str, Any]) -> JobPosting:
        return JobPosting.model_validate({**row, "id": str(row["id"])})

    # ── Jobs ──────────────────────────────────────────────────

    async def list_approved(self) -> list[JobPosting]:
        with self._connection() as client:
            result = (
                client.table(self._table)
                .select("*")
                .eq("status", JobStatus.APPROVED.value)
                .order("created_at", desc=True)
                .execute()
            )
            return [self._to_posting(row) for row in result.data or []]

    async def get_approved(self, job_id: str) -> JobPosting | None:
        with self._connection() as client:
            result = (
                client.table(self._table)
                .select("*")
                .eq("id", job_id)
                .eq("status", JobStatus.APPROVED.value)
                .maybe_single()
                .execute()
            )
            if not result or not result.data:
                return None
            return self._to_posting(result.data)

    async def create_pending(self, submission: JobSubmission) -> JobPosting:
        now = datetime.now(timezone.utc).isoformat()
        data = submission.model_dump(mode="json", exclude_none=True)
        data.update(
            status=JobStatus.PENDING.value,
            is_featured=False,
            created_at=now,
            updated_at=now,
        )

        with self._connection() as client:
            result = client.table(self._table).insert(data).execute()
            posting = self._to_posting(result.data[0])

        logger.info(f"Stored pending job {posting.id}: {posting.job_title!r}")
        return posting
