"""
HTTP client for the external backend REST API
"""
import re
import time
from typing import Any, Dict, Optional

import httpx

from codemurf.core.config import get_settings
from codemurf.core.errors import AuthenticationRequiredError, BackendAPIError, BackendUnavailableError
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.metrics import backend_request_duration_seconds, backend_requests_total

logger = LoggingConfig.get_logger(__name__)

_ID_SEGMENT = re.compile(r"^(\d+|[0-9a-fA-F]{24}|[0-9a-fA-F-]{36})$")


def _endpoint_label(path: str) -> str:
    """Path with ids collapsed, for metrics labels"""
    return "/".join("{id}" if _ID_SEGMENT.match(part) else part for part in path.split("/"))


class BackendClient:
    """
    Thin async wrapper over the backend API.

    One `httpx.AsyncClient` is shared per instance. Non-2xx answers raise
    `BackendAPIError`; connection failures and timeouts raise
    `BackendUnavailableError`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.backend_api_url).rstrip("/")
        self.timeout = timeout or settings.backend_timeout_seconds
        self._max_connections = settings.backend_max_connections
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                limits=httpx.Limits(
                    max_keepalive_connections=5,
                    max_connections=self._max_connections,
                ),
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        require_auth: bool = False,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the backend base URL, or an absolute URL
            token: Bearer token forwarded from the browser session
            require_auth: Fail before sending when no token is available
            params: Query parameters
            json: JSON body

        Returns:
            Decoded JSON, or None for empty bodies
        """
        if require_auth and not token:
            raise AuthenticationRequiredError("Missing session token - user not authenticated")

        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        endpoint = _endpoint_label(path)
        start_time = time.time()
        try:
            response = await self._get_client().request(
                method,
                path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.TimeoutException:
            backend_requests_total.labels(method=method, endpoint=endpoint, outcome="unavailable").inc()
            logger.warning(f"Backend request timed out: {method} {endpoint}")
            raise BackendUnavailableError(f"Request to {path} timed out after {self.timeout}s")
        except httpx.TransportError as e:
            backend_requests_total.labels(method=method, endpoint=endpoint, outcome="unavailable").inc()
            logger.warning(f"Backend unreachable: {method} {endpoint}: {e}")
            raise BackendUnavailableError(f"Backend API is not reachable at {self.base_url}")
        finally:
            backend_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
                time.time() - start_time
            )

        if response.is_error:
            backend_requests_total.labels(method=method, endpoint=endpoint, outcome="http_error").inc()
            try:
                payload = response.json()
            except ValueError:
                payload = None
            error = BackendAPIError.from_payload(response.status_code, payload, response.text)
            logger.info(
                "Backend returned an error",
                extra={
                    "backend_method": method,
                    "backend_endpoint": endpoint,
                    "backend_status": response.status_code,
                    "error": error.message,
                },
            )
            raise error

        if not response.content:
            backend_requests_total.labels(method=method, endpoint=endpoint, outcome="success").inc()
            return None
        try:
            payload = response.json()
        except ValueError:
            # e.g. a proxy maintenance page served with 200
            backend_requests_total.labels(method=method, endpoint=endpoint, outcome="invalid_body").inc()
            logger.warning(
                f"Backend returned a non-JSON body: {method} {endpoint}",
                extra={"backend_status": response.status_code,
                       "content_type": response.headers.get("content-type", "")},
            )
            raise BackendAPIError(
                f"Backend returned an invalid response for {path}",
                status_code=502,
            )
        backend_requests_total.labels(method=method, endpoint=endpoint, outcome="success").inc()
        return payload

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def close(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None


_backend_client: Optional[BackendClient] = None


def get_backend_client() -> BackendClient:
    """Process-wide client (FastAPI dependency)"""
    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient()
    return _backend_client


async def close_backend_client():
    global _backend_client
    if _backend_client is not None:
        await _backend_client.close()
        _backend_client = None
