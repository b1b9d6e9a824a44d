"""
Tests for bounded detail loading
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from codemurf.core.errors import BackendAPIError, BackendUnavailableError, ItemNotFoundError
from codemurf.models.catalog import CatalogItem
from codemurf.services.detail_loader import LoadOutcome, load_item_detail

ITEM = CatalogItem(id="1", title="SaaS Landing Page")


@pytest.mark.asyncio
async def test_found():
    async def fetch(item_id):
        return ITEM

    result = await load_item_detail(fetch, "1")

    assert result.found
    assert result.outcome is LoadOutcome.FOUND
    assert result.item.title == "SaaS Landing Page"
    assert result.error is None


@pytest.mark.asyncio
async def test_timeout_cancels_fetch():
    cancelled = asyncio.Event()

    async def fetch(item_id):
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return ITEM

    result = await load_item_detail(fetch, "1", timeout=0.05)

    assert result.outcome is LoadOutcome.TIMED_OUT
    assert result.item is None
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_missing_item():
    async def fetch(item_id):
        raise ItemNotFoundError(f"Template {item_id} not found")

    result = await load_item_detail(fetch, "99")

    assert result.outcome is LoadOutcome.NOT_FOUND
    assert not result.found
    assert result.error == "Template 99 not found"


@pytest.mark.asyncio
async def test_backend_404_is_not_found():
    async def fetch(item_id):
        raise BackendAPIError("Template not found", status_code=404)

    result = await load_item_detail(fetch, "99")

    assert result.outcome is LoadOutcome.NOT_FOUND


@pytest.mark.asyncio
async def test_backend_500_is_failure():
    async def fetch(item_id):
        raise BackendAPIError("boom", status_code=500)

    result = await load_item_detail(fetch, "1")

    assert result.outcome is LoadOutcome.FAILED
    assert result.error == "boom"


@pytest.mark.asyncio
async def test_unreachable_backend_is_failure():
    async def fetch(item_id):
        raise BackendUnavailableError("Backend API is not reachable")

    result = await load_item_detail(fetch, "1", kind="components")

    assert result.outcome is LoadOutcome.FAILED


@pytest.mark.asyncio
async def test_unexpected_exception_does_not_escape():
    async def fetch(item_id):
        raise RuntimeError("bad payload")

    result = await load_item_detail(fetch, "1")

    assert result.outcome is LoadOutcome.FAILED
    assert result.error == "bad payload"


@pytest.mark.asyncio
async def test_none_is_not_found():
    async def fetch(item_id):
        return None

    result = await load_item_detail(fetch, "1")

    assert result.outcome is LoadOutcome.NOT_FOUND


@pytest.mark.asyncio
async def test_fetch_called_with_item_id():
    fetch = AsyncMock(return_value=ITEM)

    result = await load_item_detail(fetch, "1", kind="templates")

    assert result.found
    fetch.assert_awaited_once_with("1")
