"""
Pytest configuration and fixtures
"""
import json
import os
import sys
from pathlib import Path

import httpx
import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Settings are cached on first import; pin the ones tests rely on
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("CATALOG_SOURCE", "sample")
os.environ.setdefault("ENABLE_METRICS", "true")
os.environ.setdefault("BACKEND_API_URL", "http://backend.test")

from codemurf.core.backend_client import BackendClient, get_backend_client  # noqa: E402

BACKEND_URL = "http://backend.test"


class RecordingBackend:
    """
    In-process stand-in for the backend API.

    Routes map "METHOD /path" to a response: a JSON-able value (200), a
    `(status, body)` tuple, or a callable taking the request. Every request
    is recorded in `calls`.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        key = f"{request.method} {request.url.path}"
        if key not in self.routes:
            return httpx.Response(404, json={"detail": "Not Found"})
        answer = self.routes[key]
        if callable(answer):
            answer = answer(request)
        if isinstance(answer, httpx.Response):
            return answer
        if isinstance(answer, tuple):
            status_code, body = answer
            return httpx.Response(status_code, json=body)
        return httpx.Response(200, json=answer)

    def client(self) -> BackendClient:
        return BackendClient(base_url=BACKEND_URL, transport=httpx.MockTransport(self))

    def last_json(self):
        return json.loads(self.calls[-1].content)


@pytest.fixture(scope="function")
def fake_backend():
    """Empty RecordingBackend; tests fill in `routes`"""
    return RecordingBackend()


@pytest.fixture(scope="function")
def backend_client(fake_backend) -> BackendClient:
    return fake_backend.client()


@pytest.fixture(scope="function")
def client(backend_client):
    """Create test client with the backend client dependency pointed at the fake backend"""
    from fastapi.testclient import TestClient

    from codemurf.main import app

    app.dependency_overrides[get_backend_client] = lambda: backend_client
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def app():
    from codemurf.main import app as fastapi_app
    return fastapi_app
