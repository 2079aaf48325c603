"""Shared test fixtures for the job board test suite."""

import os

# Settings are read at import time, so the environment must be in place
# before anything from jobboard is imported.
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from jobboard.adapters.draft_storage import InMemoryDraftStorage
from jobboard.domain.enums import JobStatus
from jobboard.domain.errors import StoreUnavailable
from jobboard.domain.models import JobPosting, JobSubmission
from jobboard.ports.job_store_port import JobStorePort
from jobboard.services.draft_store import DraftFormStore


class FakeJobStore(JobStorePort):
    """In-memory job store with the same ordering and status rules as the real one."""

    def __init__(self, jobs=None):
        self.jobs: list[JobPosting] = list(jobs or [])
        self.fail = False

    def _check(self):
        if self.fail:
            raise StoreUnavailable("Job store query failed: connection refused")

    async def list_approved(self):
        self._check()
        approved = [j for j in self.jobs if j.status == JobStatus.APPROVED]
        return sorted(approved, key=lambda j: j.created_at, reverse=True)

    async def get_approved(self, job_id):
        self._check()
        for job in self.jobs:
            if job.id == job_id and job.status == JobStatus.APPROVED:
                return job
        return None

    async def create_pending(self, submission: JobSubmission):
        self._check()
        now = datetime.now(timezone.utc)
        posting = JobPosting(
            **submission.model_dump(),
            id=uuid.uuid4().hex,
            status=JobStatus.PENDING,
            is_featured=False,
            created_at=now,
            updated_at=now,
        )
        self.jobs.append(posting)
        return posting


@pytest.fixture
def valid_submission_data():
    """Wire-format (camelCase) body that passes validation."""
    return {
        "jobTitle": "Frontend Developer",
        "companyName": "TechCorp",
        "description": "Build modern web applications with React and Next.js.",
        "jobType": "Full-Time",
        "salary": "$80K - $120K",
        "location": "San Francisco",
        "contactEmail": "jobs@techcorp.com",
    }


@pytest.fixture
def valid_submission(valid_submission_data):
    return JobSubmission.model_validate(valid_submission_data)


@pytest.fixture
def make_job():
    """Factory fixture for creating JobPosting instances with defaults."""
    counter = iter(range(1, 10_000))

    def _make(**overrides):
        defaults = {
            "id": str(next(counter)),
            "job_title": "Frontend Developer",
            "company_name": "TechCorp",
            "description": "Build modern web applications.",
            "job_type": "Full-Time",
            "salary": "$80K - $120K",
            "location": "San Francisco",
            "contact_email": "jobs@techcorp.com",
            "status": JobStatus.APPROVED,
            "created_at": datetime(2026, 3, 1, 10, 0, 0, tzinfo=timezone.utc),
        }
        defaults.update(overrides)
        return JobPosting(**defaults)

    return _make


@pytest.fixture
def fake_store():
    return FakeJobStore()


@pytest.fixture
def draft_storage():
    return InMemoryDraftStorage()


@pytest.fixture
def draft_store(draft_storage):
    return DraftFormStore(draft_storage)


@pytest.fixture
def client(fake_store, draft_storage):
    """FastAPI test client wired to the in-memory store and draft storage."""
    from jobboard.dependencies import get_draft_storage, get_job_store
    from main import app

    app.dependency_overrides[get_job_store] = lambda: fake_store
    app.dependency_overrides[get_draft_storage] = lambda: draft_storage
    yield TestClient(app)
    app.dependency_overrides.clear()
