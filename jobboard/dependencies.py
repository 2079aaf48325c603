"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To swap the job store
(e.g., Supabase → an in-memory fake in tests), override the provider here
or through app.dependency_overrides. Nothing else in the codebase changes.
"""

from functools import lru_cache

from fastapi import Depends
from supabase import Client, create_client

from jobboard.adapters.draft_storage import JsonFileDraftStorage
from jobboard.adapters.supabase_job_store import SupabaseJobStore
from jobboard.config import settings
from jobboard.ports.draft_storage_port import DraftStoragePort
from jobboard.ports.job_store_port import JobStorePort
from jobboard.services.draft_store import DraftFormStore
from jobboard.services.job_service import JobService


def _create_supabase_client() -> Client:
    # A fresh client per store call; the adapter closes it afterwards
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_job_store() -> SupabaseJobStore:
    return SupabaseJobStore(client_factory=_create_supabase_client, table=settings.jobs_table)


@lru_cache(maxsize=1)
def _get_draft_storage() -> JsonFileDraftStorage:
    return JsonFileDraftStorage(settings.draft_store_path)


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_job_store() -> JobStorePort:
    """Inject the job store adapter."""
    return _get_job_store()


def get_draft_storage() -> DraftStoragePort:
    """Inject the draft persistence adapter."""
    return _get_draft_storage()


def get_draft_store(storage: DraftStoragePort = Depends(get_draft_storage)) -> DraftFormStore:
    """Build a draft form store on top of the injected persistence."""
    return DraftFormStore(storage)


# ── Domain Services ───────────────────────────────────────────


def get_job_service(store: JobStorePort = Depends(get_job_store)) -> JobService:
    """Injects the job store into the job domain service."""
    return JobService(store=store)
