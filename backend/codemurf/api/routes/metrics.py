"""
Prometheus scrape endpoint for the marketplace site
"""
from fastapi import APIRouter
from fastapi.responses import Response

from codemurf.core.config import get_settings
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.metrics import get_metrics, get_metrics_content_type, record_site_info

logger = LoggingConfig.get_logger(__name__)

router = APIRouter(tags=["metrics"])


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """
    Page, backend, gallery and API-key counters in Prometheus text format.

    `codemurf_site_info` carries the catalog source so dashboards can tell
    sample-backed deployments from API-backed ones.
    """
    settings = get_settings()
    try:
        record_site_info(settings.catalog_source, settings.backend_api_url, settings.catalog_page_size)
        return Response(content=get_metrics(), media_type=get_metrics_content_type())
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return Response(content="# Error generating metrics\n", media_type="text/plain", status_code=500)
