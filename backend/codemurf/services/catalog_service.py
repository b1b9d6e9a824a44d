"""
Gallery data: item source, "load more" slicing and pages of filtered items
"""
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ValidationError

from codemurf.core.backend_client import BackendClient, get_backend_client
from codemurf.core.config import get_settings
from codemurf.core.errors import CodemurfError, ItemNotFoundError
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.metrics import catalog_source_failures_total
from codemurf.data.reference import ALL
from codemurf.data.samples import (SAMPLE_COMPONENTS, SAMPLE_TEMPLATES, get_components_by_category,
                                   get_featured_components, get_popular_components)
from codemurf.models.catalog import CatalogItem, ItemKind
from codemurf.services.catalog_filter import CatalogQuery, apply_query
from codemurf.services.marketplace_api import api_for

logger = LoggingConfig.get_logger(__name__)

PAGE_SIZE = 12


def get_initial_templates(
    items: Sequence[CatalogItem] = SAMPLE_TEMPLATES,
    page_size: int = PAGE_SIZE,
) -> List[CatalogItem]:
    """First batch shown by the hero gallery"""
    return list(items[:page_size])


def get_load_more_templates(
    offset: int,
    items: Sequence[CatalogItem] = SAMPLE_TEMPLATES,
    page_size: int = PAGE_SIZE,
) -> List[CatalogItem]:
    """Next batch after `offset`; empty once the list is exhausted"""
    offset = max(offset, 0)
    if offset >= len(items):
        return []
    return list(items[offset:offset + page_size])


def has_more(batch: Sequence[CatalogItem], page_size: int = PAGE_SIZE) -> bool:
    """A full batch means there may be another one"""
    return len(batch) == page_size


class CatalogPage(BaseModel):
    """One rendered slice of a gallery"""

    items: List[CatalogItem]
    total: int
    offset: int = 0
    next_offset: int
    has_more: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class CatalogService:
    """
    Reads catalog items from the bundled samples or the backend API,
    depending on `catalog_source`.
    """

    def __init__(
        self,
        source: Optional[str] = None,
        client: Optional[BackendClient] = None,
        page_size: Optional[int] = None,
        fetch_limit: Optional[int] = None,
    ):
        settings = get_settings()
        self.source = source or settings.catalog_source
        self.client = client
        self.page_size = page_size or settings.catalog_page_size
        self.fetch_limit = fetch_limit or settings.catalog_fetch_limit

    def _client(self) -> BackendClient:
        if self.client is None:
            self.client = get_backend_client()
        return self.client

    async def fetch_all(self, kind: ItemKind) -> List[CatalogItem]:
        """Every item of a kind, in source order"""
        if self.source == "sample":
            return list(SAMPLE_TEMPLATES if kind is ItemKind.TEMPLATE else SAMPLE_COMPONENTS)
        return await api_for(kind, self._client()).list(limit=self.fetch_limit)

    async def fetch_all_or_error(self, kind: ItemKind) -> Tuple[List[CatalogItem], Optional[str]]:
        """fetch_all, with a failing source reported as ([], message)"""
        try:
            return await self.fetch_all(kind), None
        except (CodemurfError, ValidationError) as e:
            catalog_source_failures_total.labels(kind=kind.value).inc()
            message = getattr(e, "message", None) or str(e)
            logger.error(
                f"Failed to load {kind.value}: {message}",
                extra={"catalog_kind": kind.value, "catalog_source": self.source},
            )
            return [], message

    async def get_item(self, kind: ItemKind, item_id: str) -> CatalogItem:
        """
        One item by id.

        Raises:
            ItemNotFoundError: No sample item has this id
            BackendAPIError: The backend rejected the request (404 included)
        """
        if self.source == "sample":
            for item in await self.fetch_all(kind):
                if item.id == str(item_id):
                    return item
            raise ItemNotFoundError(f"{kind.label} {item_id} not found")
        return await api_for(kind, self._client()).get(item_id)

    async def get_page(
        self,
        kind: ItemKind,
        query: Optional[CatalogQuery] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> CatalogPage:
        """
        Filtered, sorted slice of a gallery.

        A failing source yields an empty page carrying the error message
        instead of raising.
        """
        items, error = await self.fetch_all_or_error(kind)
        return self.build_page(items, error, query, offset, limit)

    def build_page(
        self,
        items: Sequence[CatalogItem],
        error: Optional[str] = None,
        query: Optional[CatalogQuery] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> CatalogPage:
        """Page over items already fetched with fetch_all_or_error"""
        query = query or CatalogQuery()
        limit = limit or self.page_size
        offset = max(offset, 0)

        if error:
            return CatalogPage(items=[], total=0, offset=offset, next_offset=offset, has_more=False, error=error)

        matched = apply_query(items, query)
        batch = matched[offset:offset + limit]
        next_offset = offset + len(batch)
        return CatalogPage(
            items=batch,
            total=len(matched),
            offset=offset,
            next_offset=next_offset,
            has_more=next_offset < len(matched),
        )


def component_highlights(
    components: Sequence[CatalogItem],
    query: CatalogQuery,
) -> Dict[str, List[CatalogItem]]:
    """
    Featured and popular strips for the component gallery.

    Shown only while browsing, i.e. with at most a category selected;
    any search or other filter hides them.
    """
    browsing = (
        not query.search
        and query.difficulty == ALL
        and query.item_type == ALL
        and query.plan_type == ALL
    )
    if not browsing:
        return {"featured": [], "popular": []}
    scoped = get_components_by_category(query.category, components)
    return {
        "featured": get_featured_components(scoped),
        "popular": get_popular_components(scoped),
    }


def get_catalog_service() -> CatalogService:
    """FastAPI dependency"""
    return CatalogService()
