"""
Tests for the backend API client
"""
import httpx
import pytest

from codemurf.core.backend_client import BackendClient, _endpoint_label
from codemurf.core.errors import AuthenticationRequiredError, BackendAPIError, BackendUnavailableError


@pytest.mark.asyncio
async def test_get_returns_json(fake_backend):
    fake_backend.routes["GET /templates"] = [{"id": "1"}]
    client = fake_backend.client()

    result = await client.get("/templates", params={"limit": "5"})

    assert result == [{"id": "1"}]
    request = fake_backend.calls[0]
    assert request.url.params["limit"] == "5"
    assert "authorization" not in request.headers


@pytest.mark.asyncio
async def test_token_sent_as_bearer(fake_backend):
    fake_backend.routes["GET /api/users/me"] = {"email": "dev@example.com"}
    client = fake_backend.client()

    await client.get("/api/users/me", token="session-token")

    assert fake_backend.calls[0].headers["authorization"] == "Bearer session-token"


@pytest.mark.asyncio
async def test_require_auth_without_token_never_sends(fake_backend):
    client = fake_backend.client()

    with pytest.raises(AuthenticationRequiredError) as exc_info:
        await client.post("/templates", json={}, require_auth=True)

    assert exc_info.value.status_code == 401
    assert "not authenticated" in exc_info.value.message
    assert fake_backend.calls == []


@pytest.mark.asyncio
async def test_error_detail_becomes_message(fake_backend):
    fake_backend.routes["DELETE /templates/5"] = (403, {"detail": "Not your template"})
    client = fake_backend.client()

    with pytest.raises(BackendAPIError) as exc_info:
        await client.delete("/templates/5", token="t", require_auth=True)

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Not your template"
    assert exc_info.value.details == {"detail": "Not your template"}


@pytest.mark.asyncio
async def test_error_message_field_and_plain_text(fake_backend):
    fake_backend.routes["GET /a"] = (400, {"message": "Bad filter"})
    fake_backend.routes["GET /b"] = lambda request: httpx.Response(500, text="upstream exploded")
    fake_backend.routes["GET /c"] = lambda request: httpx.Response(502)
    client = fake_backend.client()

    with pytest.raises(BackendAPIError) as a:
        await client.get("/a")
    with pytest.raises(BackendAPIError) as b:
        await client.get("/b")
    with pytest.raises(BackendAPIError) as c:
        await client.get("/c")

    assert a.value.message == "Bad filter"
    assert b.value.message == "upstream exploded"
    assert c.value.message == "HTTP 502"


@pytest.mark.asyncio
async def test_empty_body_returns_none(fake_backend):
    fake_backend.routes["DELETE /components/1"] = lambda request: httpx.Response(204)
    client = fake_backend.client()

    assert await client.delete("/components/1", token="t") is None


@pytest.mark.asyncio
async def test_connection_error_is_unavailable():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = BackendClient(base_url="http://backend.test", transport=httpx.MockTransport(refuse))

    with pytest.raises(BackendUnavailableError) as exc_info:
        await client.get("/health")

    assert exc_info.value.status_code == 503
    assert "http://backend.test" in exc_info.value.message


@pytest.mark.asyncio
async def test_timeout_is_unavailable():
    def slow(request):
        raise httpx.ReadTimeout("too slow", request=request)

    client = BackendClient(base_url="http://backend.test", timeout=2, transport=httpx.MockTransport(slow))

    with pytest.raises(BackendUnavailableError) as exc_info:
        await client.get("/templates")

    assert "timed out" in exc_info.value.message


@pytest.mark.asyncio
async def test_close_allows_reuse(fake_backend):
    fake_backend.routes["GET /health"] = {"status": "ok"}
    client = fake_backend.client()

    await client.get("/health")
    await client.close()
    assert await client.get("/health") == {"status": "ok"}
    await client.close()


def test_base_url_trailing_slash_removed():
    assert BackendClient(base_url="http://backend.test/").base_url == "http://backend.test"


def test_endpoint_label_collapses_ids():
    assert _endpoint_label("/templates/42") == "/templates/{id}"
    assert _endpoint_label("/components/65a1b2c3d4e5f60718293a4b/like") == "/components/{id}/like"
    assert _endpoint_label("/api/users/me") == "/api/users/me"


@pytest.mark.asyncio
async def test_non_json_success_body_is_backend_error(fake_backend):
    fake_backend.routes["GET /templates"] = lambda request: httpx.Response(
        200, text="<html>Down for maintenance</html>", headers={"content-type": "text/html"}
    )
    client = fake_backend.client()

    with pytest.raises(BackendAPIError) as exc_info:
        await client.get("/templates")

    assert exc_info.value.status_code == 502
    assert "invalid response" in exc_info.value.message
