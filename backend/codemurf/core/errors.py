"""
Error types shared by the backend client, services and routes
"""
from typing import Any, Dict, Optional


class CodemurfError(Exception):
    """Base error for the site"""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a JSON-serializable payload"""
        return {
            "detail": self.message,
            "type": type(self).__name__,
            "status_code": self.status_code,
        }


class BackendAPIError(CodemurfError):
    """The backend answered with a non-2xx status"""

    status_code = 502

    @classmethod
    def from_payload(cls, status_code: int, payload: Any, text: str = "") -> "BackendAPIError":
        """
        Build an error from a backend error body.

        The message is the first of `detail`, `message`, the raw body text,
        or `HTTP <status>`.
        """
        message = None
        if isinstance(payload, dict):
            message = payload.get("detail") or payload.get("message")
            if message is not None and not isinstance(message, str):
                message = str(message)
        if not message:
            message = text.strip() or f"HTTP {status_code}"
        return cls(message, status_code=status_code, details=payload)


class BackendUnavailableError(CodemurfError):
    """The backend could not be reached or did not answer in time"""

    status_code = 503


class AuthenticationRequiredError(CodemurfError):
    """No session token was sent with the request"""

    status_code = 401

    def __init__(self, message: str = "Authentication required", **kwargs):
        super().__init__(message, **kwargs)


class ItemNotFoundError(CodemurfError):
    """Requested catalog item does not exist"""

    status_code = 404
