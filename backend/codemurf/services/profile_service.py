"""
Current-user profile and the API-key panel actions
"""
import asyncio
import hashlib
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, TypeVar

from codemurf.core.backend_client import BackendClient, get_backend_client
from codemurf.core.errors import CodemurfError
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.metrics import api_key_actions_total
from codemurf.models.profile import ApiKeyKind, UserProfile

logger = LoggingConfig.get_logger(__name__)

T = TypeVar("T")

PROFILE_PATH = "/api/users/me"


class SingleFlight:
    """
    Collapse concurrent calls with the same key into one execution.

    Callers arriving while a call is running await the same task and get
    its result (or exception). The key is forgotten once the call finishes,
    so a later call runs again.
    """

    def __init__(self):
        self._inflight: Dict[Hashable, asyncio.Task] = {}

    def __len__(self) -> int:
        return len(self._inflight)

    async def do(self, key: Hashable, func: Callable[[], Awaitable[T]]) -> T:
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(func())
            self._inflight[key] = task
            task.add_done_callback(lambda _: self._inflight.pop(key, None))
        else:
            logger.debug(f"Joining in-flight call {key!r}")
        return await asyncio.shield(task)


def _fingerprint(value: str) -> str:
    """Stable, non-reversible identifier for a token or key"""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:16]


def _extract_key(payload: Any, kind: ApiKeyKind) -> Optional[str]:
    """The backend answers with the key under its field name or as `api_key`"""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        for name in (kind.field_name, "api_key", "key"):
            value = payload.get(name)
            if value:
                return value
    return None


class ProfileService:
    """Profile reads and API-key updates for the signed-in user"""

    _single_flight = SingleFlight()

    def __init__(self, client: Optional[BackendClient] = None):
        self.client = client or get_backend_client()

    async def load_profile(self, token: Optional[str]) -> UserProfile:
        payload = await self.client.get(PROFILE_PATH, token=token, require_auth=True)
        return UserProfile.model_validate(payload or {})

    async def update_profile(self, token: Optional[str], data: Dict[str, Any]) -> UserProfile:
        """
        Update editable profile fields (role, name) with PUT /api/users/me.

        Backends that answer with a bare acknowledgement instead of the
        user are re-read so the caller always gets the stored profile.
        """
        if not data:
            raise ValueError("Nothing to update")
        payload = await self.client.put(PROFILE_PATH, json=data, token=token, require_auth=True)
        logger.info("Profile updated", extra={"fields": sorted(data)})
        if isinstance(payload, dict) and (payload.get("id") or payload.get("email")):
            return UserProfile.model_validate(payload)
        return await self.load_profile(token)

    async def get_managed_api_key(self, token: Optional[str]) -> Optional[str]:
        payload = await self.client.get(f"{PROFILE_PATH}/managed-api-key", token=token, require_auth=True)
        return _extract_key(payload, ApiKeyKind.MANAGED)

    async def refresh_managed_api_key(self, token: Optional[str]) -> Optional[str]:
        return await self._key_action(
            "refresh_managed",
            token,
            ApiKeyKind.MANAGED,
            lambda: self.client.post(f"{PROFILE_PATH}/managed-api-key/refresh", token=token, require_auth=True),
        )

    async def refresh_openrouter_api_key(self, token: Optional[str]) -> Optional[str]:
        return await self._key_action(
            "refresh_openrouter",
            token,
            ApiKeyKind.OPENROUTER,
            lambda: self.client.post(f"{PROFILE_PATH}/openrouter-api-key/refresh", token=token, require_auth=True),
        )

    async def save_glm_api_key(self, token: Optional[str], api_key: str) -> Optional[str]:
        """
        Store the user's own GLM key.

        The key travels as the `api_key` query parameter; httpx URL-encodes it.
        """
        api_key = (api_key or "").strip()
        if not api_key:
            raise ValueError("API key must not be empty")

        async def send():
            payload = await self.client.post(
                f"{PROFILE_PATH}/glm-api-key",
                params={"api_key": api_key},
                token=token,
                require_auth=True,
            )
            return _extract_key(payload, ApiKeyKind.GLM) or api_key

        # Saves of different keys must not be merged
        return await self._key_action(
            "save_glm", token, ApiKeyKind.GLM, send, variant=_fingerprint(api_key)
        )

    async def _key_action(
        self,
        action: str,
        token: Optional[str],
        kind: ApiKeyKind,
        call: Callable[[], Awaitable[Any]],
        variant: Optional[str] = None,
    ) -> Optional[str]:
        async def run():
            payload = await call()
            if kind is ApiKeyKind.GLM:
                return payload
            return _extract_key(payload, kind)

        if not token:
            # Let the client raise AuthenticationRequiredError
            return await run()

        try:
            key = await self._single_flight.do((_fingerprint(token), action, variant), run)
        except CodemurfError as e:
            api_key_actions_total.labels(action=action, status="failed").inc()
            logger.warning(f"API key action {action} failed: {e.message}", extra={"action": action})
            raise
        api_key_actions_total.labels(action=action, status="success").inc()
        logger.info(f"API key action {action} succeeded", extra={"action": action})
        return key


def get_profile_service() -> ProfileService:
    """FastAPI dependency"""
    return ProfileService()
