"""
Health check endpoints
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from codemurf.core.backend_client import BackendClient, get_backend_client
from codemurf.core.config import get_settings
from codemurf.core.errors import CodemurfError
from codemurf.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)
router = APIRouter(tags=["health"])

VERSION = "0.1.0"


@router.get("/health")
async def health_check():
    """
    Basic health check endpoint

    Returns:
        dict: Health status
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": get_settings().app_name,
    }


@router.get("/health/detailed")
async def detailed_health_check(client: BackendClient = Depends(get_backend_client)):
    """
    Detailed health check including backend API reachability

    The site keeps serving pages when the backend is down, so an
    unreachable backend marks the status as degraded rather than unhealthy.
    """
    settings = get_settings()
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.app_name,
        "version": VERSION,
        "environment": settings.app_env,
        "catalog_source": settings.catalog_source,
        "components": {},
    }

    try:
        await client.get("/health")
        health_status["components"]["backend"] = {"status": "healthy", "url": client.base_url}
    except CodemurfError as e:
        logger.warning(f"Backend health check failed: {e.message}")
        health_status["components"]["backend"] = {
            "status": "unhealthy",
            "url": client.base_url,
            "error": e.message,
        }
        health_status["status"] = "degraded"

    return health_status
