"""
Page routes for the template and component galleries
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from codemurf.api.dependencies import catalog_query
from codemurf.core.auth import get_session_token
from codemurf.core.config import get_settings
from codemurf.core.templates import templates
from codemurf.data.reference import reference_data
from codemurf.models.catalog import ItemKind
from codemurf.services.catalog_filter import CatalogQuery
from codemurf.services.catalog_service import CatalogService, component_highlights, get_catalog_service
from codemurf.services.detail_loader import load_item_detail

router = APIRouter(tags=["catalog-pages"])


async def _gallery(request: Request, kind: ItemKind, query: CatalogQuery, count: int, view: str,
                   service: CatalogService):
    limit = max(count, service.page_size)
    items, error = await service.fetch_all_or_error(kind)
    page = service.build_page(items, error, query, offset=0, limit=limit)
    highlights = {"featured": [], "popular": []}
    if kind is ItemKind.COMPONENT:
        highlights = component_highlights(items, query)
    return templates.TemplateResponse(
        "catalog/gallery.html",
        {
            "request": request,
            "kind": kind,
            "page": page,
            "query": query,
            "view": "list" if view == "list" else "grid",
            "next_count": page.next_offset + service.page_size,
            "highlights": highlights,
            "reference": reference_data(),
        }
    )


async def _detail(request: Request, kind: ItemKind, item_id: str, service: CatalogService,
                  template_name: str = "catalog/detail.html", extra: Optional[dict] = None):
    result = await load_item_detail(
        lambda id_: service.get_item(kind, id_),
        item_id,
        timeout=get_settings().detail_load_timeout_seconds,
        kind=kind.value,
    )
    if not result.found:
        return templates.TemplateResponse(
            "catalog/not_found.html",
            {"request": request, "kind": kind, "item_id": item_id},
            status_code=404,
        )
    return templates.TemplateResponse(
        template_name,
        {"request": request, "kind": kind, "item": result.item, **(extra or {})},
    )


def _auth_required(request: Request, next_path: str):
    return templates.TemplateResponse(
        "auth_required.html",
        {"request": request, "next_path": next_path},
        status_code=401,
    )


async def _create_form(request: Request, kind: ItemKind, token: Optional[str]):
    if not token:
        return _auth_required(request, f"/{kind.value}/create")
    return templates.TemplateResponse(
        "catalog/form.html",
        {"request": request, "kind": kind, "item": None, "reference": reference_data(), "mode": "create"},
    )


async def _edit_form(request: Request, kind: ItemKind, item_id: str, token: Optional[str],
                     service: CatalogService):
    if not token:
        return _auth_required(request, f"/{kind.value}/{item_id}/edit")
    extra = {"reference": reference_data(), "mode": "edit"}
    return await _detail(request, kind, item_id, service, "catalog/form.html", extra)


@router.get("/templates", response_class=HTMLResponse)
async def templates_gallery(
    request: Request,
    query: CatalogQuery = Depends(catalog_query),
    count: int = Query(0, ge=0, description="Templates already shown"),
    view: str = Query("grid", description="grid or list"),
    service: CatalogService = Depends(get_catalog_service),
):
    """Template gallery with filters and load-more"""
    return await _gallery(request, ItemKind.TEMPLATE, query, count, view, service)


@router.get("/templates/create", response_class=HTMLResponse)
async def create_template_page(request: Request, token: Optional[str] = Depends(get_session_token)):
    return await _create_form(request, ItemKind.TEMPLATE, token)


@router.get("/templates/{item_id}", response_class=HTMLResponse)
async def template_detail(
    request: Request,
    item_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Template detail; any load failure renders 'Template Not Found'"""
    return await _detail(request, ItemKind.TEMPLATE, item_id, service)


@router.get("/templates/{item_id}/edit", response_class=HTMLResponse)
async def edit_template_page(
    request: Request,
    item_id: str,
    token: Optional[str] = Depends(get_session_token),
    service: CatalogService = Depends(get_catalog_service),
):
    return await _edit_form(request, ItemKind.TEMPLATE, item_id, token, service)


@router.get("/components", response_class=HTMLResponse)
async def components_gallery(
    request: Request,
    query: CatalogQuery = Depends(catalog_query),
    count: int = Query(0, ge=0, description="Components already shown"),
    view: str = Query("grid", description="grid or list"),
    service: CatalogService = Depends(get_catalog_service),
):
    """Component gallery with filters and load-more"""
    return await _gallery(request, ItemKind.COMPONENT, query, count, view, service)


@router.get("/components/create", response_class=HTMLResponse)
async def create_component_page(request: Request, token: Optional[str] = Depends(get_session_token)):
    return await _create_form(request, ItemKind.COMPONENT, token)


@router.get("/components/{item_id}", response_class=HTMLResponse)
async def component_detail(
    request: Request,
    item_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    return await _detail(request, ItemKind.COMPONENT, item_id, service)


@router.get("/components/{item_id}/edit", response_class=HTMLResponse)
async def edit_component_page(
    request: Request,
    item_id: str,
    token: Optional[str] = Depends(get_session_token),
    service: CatalogService = Depends(get_catalog_service),
):
    return await _edit_form(request, ItemKind.COMPONENT, item_id, token, service)
