"""
Page routes for the landing page and the informational pages
"""
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from codemurf.api.dependencies import catalog_query
from codemurf.content import about, changelog, community, events, feature_requests
from codemurf.core.templates import templates
from codemurf.data.reference import SORT_OPTIONS, TEMPLATE_CATEGORIES
from codemurf.models.catalog import ItemKind
from codemurf.services.catalog_filter import CatalogQuery, SortKey, apply_query
from codemurf.services.catalog_service import (CatalogService, get_catalog_service,
                                               get_initial_templates, get_load_more_templates,
                                               has_more)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    query: CatalogQuery = Depends(catalog_query),
    count: int = Query(0, ge=0, description="Templates already shown"),
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Landing page with the hero template gallery.

    Templates are revealed in batches; `count` replays the "load more"
    clicks so far. Filters apply to what has been revealed.
    """
    items, error = await service.fetch_all_or_error(ItemKind.TEMPLATE)
    page_size = service.page_size

    shown = get_initial_templates(items, page_size)
    batch = shown
    while len(shown) < count and batch:
        batch = get_load_more_templates(len(shown), items, page_size)
        shown.extend(batch)

    updates = {"search_developer": True}
    if not request.query_params.get("sort"):
        # The hero gallery leads with the best-rated templates
        updates["sort_by"] = SortKey.RATING
    query = query.model_copy(update=updates)
    return templates.TemplateResponse(
        "index.html",
        {
            "request": request,
            "kind": ItemKind.TEMPLATE,
            "templates": apply_query(shown, query),
            "page_size": page_size,
            "shown_count": len(shown),
            "has_more": has_more(batch, page_size),
            "query": query,
            "categories": TEMPLATE_CATEGORIES,
            "sort_options": SORT_OPTIONS,
            "error": error,
        }
    )


@router.get("/about", response_class=HTMLResponse)
async def about_page(request: Request):
    return templates.TemplateResponse(
        "about.html",
        {
            "request": request,
            "stats": about.ABOUT_STATS,
            "team": about.TEAM_MEMBERS,
            "milestones": about.MILESTONES,
            "values": about.VALUES,
            "testimonials": about.TESTIMONIALS,
        }
    )


@router.get("/changelog", response_class=HTMLResponse)
async def changelog_page(request: Request, type: str = Query("all", description="major, minor, patch or all")):
    return templates.TemplateResponse(
        "changelog.html",
        {
            "request": request,
            "stats": changelog.CHANGELOG_STATS,
            "release_types": changelog.RELEASE_TYPES,
            "selected": type,
            "releases": changelog.filter_releases(type),
        }
    )


@router.get("/community", response_class=HTMLResponse)
async def community_page(request: Request):
    return templates.TemplateResponse(
        "community.html",
        {
            "request": request,
            "stats": community.COMMUNITY_STATS,
            "channels": community.COMMUNITY_CHANNELS,
            "programs": community.COMMUNITY_PROGRAMS,
            "events": community.COMMUNITY_EVENTS,
            "members": community.FEATURED_MEMBERS,
            "resources": community.COMMUNITY_RESOURCES,
        }
    )


@router.get("/events", response_class=HTMLResponse)
async def events_page(request: Request, category: str = Query("all", description="Event category or all")):
    return templates.TemplateResponse(
        "events.html",
        {
            "request": request,
            "stats": events.EVENT_STATS,
            "categories": events.EVENT_CATEGORIES,
            "selected": category,
            "events": events.filter_events(category),
            "past_events": events.PAST_EVENTS,
            "type_classes": events.EVENT_TYPE_CLASSES,
            "status_classes": events.EVENT_STATUS_CLASSES,
        }
    )


@router.get("/feature-requests", response_class=HTMLResponse)
async def feature_requests_page(
    request: Request,
    filter: str = Query("all", description="Filter option"),
    search: str = Query("", description="Text search"),
):
    return templates.TemplateResponse(
        "feature_requests.html",
        {
            "request": request,
            "stats": feature_requests.REQUEST_STATS,
            "filter_options": feature_requests.FILTER_OPTIONS,
            "selected": filter,
            "search": search,
            "requests": feature_requests.filter_feature_requests(filter, search),
            "process": feature_requests.DEVELOPMENT_PROCESS,
            "top_categories": feature_requests.TOP_CATEGORIES,
            "status_classes": feature_requests.STATUS_CLASSES,
            "priority_classes": feature_requests.PRIORITY_CLASSES,
        }
    )
