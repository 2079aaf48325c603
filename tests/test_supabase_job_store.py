"""Tests for adapters/supabase_job_store.py against a mocked Supabase client."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from jobboard.adapters.supabase_job_store import SupabaseJobStore
from jobboard.domain.enums import JobStatus
from jobboard.domain.errors import StoreUnavailable


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def mock_client():
    """Supabase client whose query builder chains back to itself."""
    client = MagicMock()
    query = MagicMock()
    client.table.return_value = query
    for method in ("select", "eq", "order", "insert", "maybe_single"):
        getattr(query, method).return_value = query
    client.query = query
    return client


@pytest.fixture
def store(mock_client):
    return SupabaseJobStore(client_factory=lambda: mock_client, table="jobs")


def _row(**overrides):
    row = {
        "id": "6f1c8a52-3c1e-4a8e-9a40-0c7d6b0f2a11",
        "job_title": "UX Designer",
        "company_name": "DesignHub",
        "description": "Design things.",
        "job_type": "Full-Time",
        "salary": "$70K - $100K",
        "location": "Remote",
        "contact_email": "hr@designhub.io",
        "status": "approved",
        "is_featured": False,
        "created_at": "2026-03-01T10:00:00+00:00",
        "updated_at": "2026-03-01T10:00:00+00:00",
    }
    row.update(overrides)
    return row


# =============================================================================
# list_approved
# =============================================================================


@pytest.mark.asyncio
async def test_list_approved_filters_and_orders(store, mock_client):
    mock_client.query.execute.return_value = MagicMock(data=[_row(), _row(id=42)])

    jobs = await store.list_approved()

    mock_client.table.assert_called_once_with("jobs")
    mock_client.query.eq.assert_called_once_with("status", "approved")
    mock_client.query.order.assert_called_once_with("created_at", desc=True)
    assert [j.id for j in jobs] == ["6f1c8a52-3c1e-4a8e-9a40-0c7d6b0f2a11", "42"]
    assert jobs[0].job_title == "UX Designer"
    assert jobs[0].status == JobStatus.APPROVED


@pytest.mark.asyncio
async def test_list_approved_empty(store, mock_client):
    mock_client.query.execute.return_value = MagicMock(data=None)
    assert await store.list_approved() == []


@pytest.mark.asyncio
async def test_query_error_becomes_store_unavailable(store, mock_client):
    mock_client.query.execute.side_effect = RuntimeError("connection reset")

    with pytest.raises(StoreUnavailable, match="connection reset") as excinfo:
        await store.list_approved()

    assert isinstance(excinfo.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_connect_error_becomes_store_unavailable():
    def broken_factory():
        raise ConnectionError("no route to host")

    store = SupabaseJobStore(client_factory=broken_factory)
    with pytest.raises(StoreUnavailable, match="no route to host"):
        await store.list_approved()


# =============================================================================
# connection lifecycle
# =============================================================================


@pytest.mark.asyncio
async def test_each_call_gets_its_own_client_and_releases_it(mock_client):
    mock_client.query.execute.return_value = MagicMock(data=[])
    factory = MagicMock(return_value=mock_client)
    store = SupabaseJobStore(client_factory=factory)

    await store.list_approved()
    await store.list_approved()

    assert factory.call_count == 2
    assert mock_client.postgrest.aclose.call_count == 2
    assert mock_client.auth.close.call_count == 2


@pytest.mark.asyncio
async def test_client_released_on_failure(store, mock_client):
    mock_client.query.execute.side_effect = RuntimeError("boom")

    with pytest.raises(StoreUnavailable):
        await store.list_approved()

    mock_client.postgrest.aclose.assert_called_once()


@pytest.mark.asyncio
async def test_auth_session_closed_even_if_postgrest_close_fails(store, mock_client):
    mock_client.query.execute.return_value = MagicMock(data=[])
    mock_client.postgrest.aclose.side_effect = RuntimeError("already closed")

    await store.list_approved()

    mock_client.auth.close.assert_called_once()


@pytest.mark.asyncio
async def test_release_failure_does_not_mask_result(store, mock_client):
    mock_client.query.execute.return_value = MagicMock(data=[_row()])
    mock_client.postgrest.aclose.side_effect = RuntimeError("already closed")

    jobs = await store.list_approved()
    assert len(jobs) == 1


# =============================================================================
# get_approved
# =============================================================================


@pytest.mark.asyncio
async def test_get_approved_found(store, mock_client):
    mock_client.query.execute.return_value = MagicMock(data=_row())

    job = await store.get_approved("6f1c8a52-3c1e-4a8e-9a40-0c7d6b0f2a11")

    assert job is not None
    assert job.company_name == "DesignHub"
    mock_client.query.eq.assert_any_call("id", "6f1c8a52-3c1e-4a8e-9a40-0c7d6b0f2a11")
    mock_client.query.eq.assert_any_call("status", "approved")


@pytest.mark.asyncio
async def test_get_approved_missing(store, mock_client):
    mock_client.query.execute.return_value = None
    assert await store.get_approved("nope") is None


# =============================================================================
# create_pending
# =============================================================================


@pytest.mark.asyncio
async def test_create_pending_attaches_metadata(store, mock_client, valid_submission):
    mock_client.query.execute.side_effect = lambda: MagicMock(
        data=[{**mock_client.query.insert.call_args.args[0], "id": "new-id"}]
    )

    posting = await store.create_pending(valid_submission)

    inserted = mock_client.query.insert.call_args.args[0]
    assert inserted["job_title"] == "Frontend Developer"
    assert inserted["status"] == "pending"
    assert inserted["is_featured"] is False
    assert inserted["created_at"] == inserted["updated_at"]
    assert "contact_phone" not in inserted

    assert posting.id == "new-id"
    assert posting.status == JobStatus.PENDING
    assert posting.is_featured is False
    assert isinstance(posting.created_at, datetime)
    assert posting.created_at == posting.updated_at


@pytest.mark.asyncio
async def test_create_pending_write_failure(store, mock_client, valid_submission):
    mock_client.query.execute.side_effect = RuntimeError("insert failed")

    with pytest.raises(StoreUnavailable):
        await store.create_pending(valid_submission)

    mock_client.postgrest.aclose.assert_called_once()
