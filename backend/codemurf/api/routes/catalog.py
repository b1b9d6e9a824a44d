"""
JSON API for the template and component catalogs
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from codemurf.api.dependencies import catalog_query, http_exception_for
from codemurf.core.auth import require_session_token
from codemurf.core.backend_client import BackendClient, get_backend_client
from codemurf.core.config import get_settings
from codemurf.core.errors import CodemurfError
from codemurf.core.logging_config import LoggingConfig
from codemurf.data.reference import reference_data
from codemurf.models.catalog import ItemKind
from codemurf.services.catalog_filter import CatalogQuery
from codemurf.services.catalog_service import CatalogService, get_catalog_service
from codemurf.services.detail_loader import LoadOutcome, load_item_detail
from codemurf.services.marketplace_api import api_for

logger = LoggingConfig.get_logger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])

_DETAIL_STATUS = {
    LoadOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LoadOutcome.TIMED_OUT: status.HTTP_504_GATEWAY_TIMEOUT,
    LoadOutcome.FAILED: status.HTTP_502_BAD_GATEWAY,
}


@router.get("/reference")
async def get_reference():
    """Categories, types, difficulty levels, currencies and sort options"""
    return reference_data()


@router.get("/{kind}")
async def list_items(
    kind: ItemKind,
    query: CatalogQuery = Depends(catalog_query),
    offset: int = Query(0, ge=0, description="Number of matching items to skip"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Page size (default from settings)"),
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Filtered, sorted page of a catalog.

    A failing source answers 200 with an empty page and an `error` message,
    the same way the gallery page renders it.
    """
    try:
        page = await service.get_page(kind, query, offset=offset, limit=limit)
        return page.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error listing {kind.value}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to list {kind.value}: {str(e)}")


@router.get("/{kind}/{item_id}")
async def get_item(
    kind: ItemKind,
    item_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """
    One catalog item.

    404 when it does not exist, 504 when the source does not answer within
    `detail_load_timeout_seconds`.
    """
    result = await load_item_detail(
        lambda id_: service.get_item(kind, id_),
        item_id,
        timeout=get_settings().detail_load_timeout_seconds,
        kind=kind.value,
    )
    if result.found:
        return result.item.to_dict()
    detail = f"{kind.label} {item_id} not found" if result.outcome is LoadOutcome.NOT_FOUND else result.error
    raise HTTPException(status_code=_DETAIL_STATUS[result.outcome], detail=detail)


@router.post("/{kind}", status_code=status.HTTP_201_CREATED)
async def create_item(
    kind: ItemKind,
    payload: Dict[str, Any] = Body(...),
    token: str = Depends(require_session_token),
    client: BackendClient = Depends(get_backend_client),
):
    """Create an item from the form payload (camelCase or snake_case)"""
    try:
        item = await api_for(kind, client).create(payload, token)
        return item.to_dict()
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error creating {kind.singular}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create {kind.singular}: {str(e)}")


@router.put("/{kind}/{item_id}")
async def update_item(
    kind: ItemKind,
    item_id: str,
    payload: Dict[str, Any] = Body(...),
    token: str = Depends(require_session_token),
    client: BackendClient = Depends(get_backend_client),
):
    """Replace an item's editable fields"""
    try:
        item = await api_for(kind, client).update(item_id, payload, token)
        return item.to_dict()
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error updating {kind.singular} {item_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update {kind.singular}: {str(e)}")


@router.delete("/{kind}/{item_id}")
async def delete_item(
    kind: ItemKind,
    item_id: str,
    token: str = Depends(require_session_token),
    client: BackendClient = Depends(get_backend_client),
):
    """Delete an item owned by the caller"""
    try:
        await api_for(kind, client).delete(item_id, token)
        return {"deleted": True, "id": item_id}
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error deleting {kind.singular} {item_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete {kind.singular}: {str(e)}")
