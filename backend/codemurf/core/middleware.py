"""
Request context and access logging for site pages and API calls
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from codemurf.core.config import get_settings
from codemurf.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

# Polled or asset paths; their access lines are logged at debug
QUIET_PREFIXES = ("/static/", "/health", "/metrics", "/favicon.ico")


def _has_session(request: Request) -> bool:
    """Whether the browser sent a session, without reading the token itself"""
    if request.headers.get("authorization", "").lower().startswith("bearer "):
        return True
    return get_settings().auth_cookie_name in request.cookies


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """
    Tag every log line of a request with its id, route and session flag.

    An incoming X-Request-ID (set by the proxy) is reused and echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        path = request.url.path
        quiet = path.startswith(QUIET_PREFIXES)

        LoggingConfig.set_context(
            request_id=request_id,
            method=request.method,
            path=path,
            client_host=request.client.host if request.client else None,
            authenticated=_has_session(request),
        )

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                exc_info=True,
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": int((time.time() - start_time) * 1000),
                }
            )
            raise
        else:
            extra = {
                "status_code": response.status_code,
                "duration_ms": int((time.time() - start_time) * 1000),
            }
            if quiet and response.status_code < 400:
                logger.debug("Request completed", extra=extra)
            else:
                logger.info("Request completed", extra=extra)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            LoggingConfig.clear_context()
