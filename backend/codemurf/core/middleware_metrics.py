"""
Middleware for collecting HTTP request metrics
"""
import re
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from codemurf.core.metrics import (
    http_errors_total,
    http_request_duration_seconds,
    http_requests_total,
)

# Item ids in /templates/<id>, /components/<id> and their API twins
_ITEM_PATH = re.compile(r"^(/(?:api/catalog/)?(?:templates|components))/[^/]+")


def normalize_endpoint(path: str) -> str:
    """Collapse item ids so metrics aggregate per route"""
    if path.endswith("/create"):
        return path
    return _ITEM_PATH.sub(r"\1/{id}", path)


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect HTTP request metrics for Prometheus
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        # Skip metrics endpoint itself
        if request.url.path == "/metrics":
            return await call_next(request)

        error_type = None
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            error_type = type(e).__name__
            raise
        finally:
            duration = time.time() - start_time
            endpoint = normalize_endpoint(request.url.path)
            method = request.method
            status_code_str = str(status_code)

            http_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status_code=status_code_str
            ).inc()

            http_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint,
                status_code=status_code_str
            ).observe(duration)

            if status_code >= 400:
                http_errors_total.labels(
                    method=method,
                    endpoint=endpoint,
                    status_code=status_code_str,
                    error_type=error_type or f"http_{status_code}"
                ).inc()

        return response
