"""
Template and component CRUD against the backend API
"""
from typing import Any, Dict, List, Optional

from codemurf.core.backend_client import BackendClient
from codemurf.core.logging_config import LoggingConfig
from codemurf.data.reference import ALL, COMPONENT_CATEGORIES
from codemurf.models.catalog import CatalogItem, ItemKind, default_preview_image

logger = LoggingConfig.get_logger(__name__)

MAX_PREVIEW_IMAGES = 5


def _parse_int(value: Any) -> int:
    """Integer prefix of a form value, like parseInt; invalid input gives 0"""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    text = str(value).strip()
    digits = ""
    for i, char in enumerate(text):
        if char.isdigit() or (i == 0 and char in "+-"):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return 0


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part) for part in value if part]


def form_to_backend(form: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert a create/edit form payload (camelCase, as the pages post it)
    into the backend's snake_case payload.

    Prices are parsed as integers, at most five preview images are kept,
    and a category image is used when none is given.
    """
    def pick(camel: str, snake: str, default: Any = None) -> Any:
        if camel in form:
            return form[camel]
        return form.get(snake, default)

    preview_images = [img for img in _as_list(pick("previewImages", "preview_images")) if isinstance(img, str)]
    preview_images = preview_images[:MAX_PREVIEW_IMAGES]
    if not preview_images:
        preview_images = [default_preview_image(form.get("category"))]

    is_available = pick("isAvailableForDev", "is_available_for_dev")

    return {
        "title": form.get("title"),
        "category": form.get("category"),
        "type": form.get("type"),
        "language": form.get("language"),
        "difficulty_level": pick("difficultyLevel", "difficulty_level"),
        "plan_type": pick("planType", "plan_type"),
        "pricing_inr": _parse_int(pick("pricingINR", "pricing_inr")),
        "pricing_usd": _parse_int(pick("pricingUSD", "pricing_usd")),
        "short_description": pick("shortDescription", "short_description"),
        "full_description": pick("fullDescription", "full_description"),
        "preview_images": preview_images,
        "git_repo_url": pick("gitRepoUrl", "git_repo_url") or None,
        "live_demo_url": pick("liveDemoUrl", "live_demo_url") or None,
        "dependencies": _as_list(form.get("dependencies")),
        "tags": _as_list(form.get("tags")),
        "developer_name": pick("developerName", "developer_name"),
        "developer_experience": pick("developerExperience", "developer_experience"),
        "is_available_for_dev": True if is_available is None else bool(is_available),
        "featured": bool(form.get("featured") or False),
        "code": form.get("code") or None,
        "readme_content": pick("readmeContent", "readme_content") or None,
    }


def _items_from_listing(payload: Any, kind: ItemKind) -> List[CatalogItem]:
    """Listings come back as a bare list or wrapped under the kind's name"""
    if isinstance(payload, dict):
        payload = payload.get(kind.value) or payload.get("items") or []
    return [CatalogItem.model_validate(entry) for entry in payload or []]


class MarketplaceApi:
    """
    CRUD for one marketplace resource.

    Listing and reading are anonymous; writes forward the caller's token.
    """

    kind: ItemKind

    def __init__(self, client: BackendClient):
        self.client = client

    @property
    def base_path(self) -> str:
        return f"/{self.kind.value}"

    @staticmethod
    def build_list_params(
        skip: Optional[int] = None,
        limit: Optional[int] = None,
        category: Optional[str] = None,
        type: Optional[str] = None,
        plan_type: Optional[str] = None,
        featured: Optional[bool] = None,
        popular: Optional[bool] = None,
        search: Optional[str] = None,
    ) -> Dict[str, str]:
        """Query parameters for a listing; 'All' and empty filters are dropped"""
        params: Dict[str, str] = {}
        if skip is not None:
            params["skip"] = str(skip)
        if limit is not None:
            params["limit"] = str(limit)
        for name, value in (("category", category), ("type", type), ("plan_type", plan_type)):
            if value and value != ALL:
                params[name] = value
        if featured is not None:
            params["featured"] = "true" if featured else "false"
        if popular is not None:
            params["popular"] = "true" if popular else "false"
        if search and search.strip():
            params["search"] = search.strip()
        return params

    async def list(self, **filters) -> List[CatalogItem]:
        params = self.build_list_params(**filters)
        payload = await self.client.get(self.base_path, params=params)
        return _items_from_listing(payload, self.kind)

    async def get(self, item_id: str) -> CatalogItem:
        payload = await self.client.get(f"{self.base_path}/{item_id}")
        return CatalogItem.model_validate(payload)

    async def create(self, form: Dict[str, Any], token: Optional[str]) -> CatalogItem:
        payload = await self.client.post(
            self.base_path, json=form_to_backend(form), token=token, require_auth=True
        )
        item = CatalogItem.model_validate(payload)
        logger.info(f"Created {self.kind.singular} {item.id}", extra={"item_id": item.id})
        return item

    async def update(self, item_id: str, form: Dict[str, Any], token: Optional[str]) -> CatalogItem:
        payload = await self.client.put(
            f"{self.base_path}/{item_id}", json=form_to_backend(form), token=token, require_auth=True
        )
        return CatalogItem.model_validate(payload)

    async def delete(self, item_id: str, token: Optional[str]) -> Any:
        result = await self.client.delete(f"{self.base_path}/{item_id}", token=token, require_auth=True)
        logger.info(f"Deleted {self.kind.singular} {item_id}", extra={"item_id": item_id})
        return result

    async def list_mine(self, token: Optional[str], skip: int = 0, limit: int = 100) -> List[CatalogItem]:
        payload = await self.client.get(
            f"{self.base_path}/user/my-{self.kind.value}",
            params={"skip": str(skip), "limit": str(limit)},
            token=token,
            require_auth=True,
        )
        return _items_from_listing(payload, self.kind)


class TemplateApi(MarketplaceApi):
    kind = ItemKind.TEMPLATE

    async def toggle_like(self, item_id: str, token: Optional[str]) -> Any:
        return await self.client.post(f"{self.base_path}/{item_id}/like", token=token, require_auth=True)

    async def record_download(self, item_id: str, token: Optional[str]) -> Any:
        return await self.client.post(f"{self.base_path}/{item_id}/download", token=token, require_auth=True)

    async def categories(self) -> Any:
        return await self.client.get(f"{self.base_path}/categories")

    async def stats(self) -> Any:
        return await self.client.get(f"{self.base_path}/stats")

    async def featured(self, limit: int = 10) -> List[CatalogItem]:
        return await self.list(featured=True, limit=limit)

    async def popular(self, limit: int = 10) -> List[CatalogItem]:
        return await self.list(popular=True, limit=limit)

    async def free(self, **filters) -> List[CatalogItem]:
        return await self.list(**{**filters, "plan_type": "Free"})

    async def paid(self, **filters) -> List[CatalogItem]:
        return await self.list(**{**filters, "plan_type": "Paid"})

    async def search_templates(self, query: str, **filters) -> List[CatalogItem]:
        return await self.list(**{**filters, "search": query})

    async def by_category(self, category: str, **filters) -> List[CatalogItem]:
        return await self.list(**{**filters, "category": category})

    async def by_type(self, template_type: str, **filters) -> List[CatalogItem]:
        return await self.list(**{**filters, "type": template_type})


class ComponentApi(MarketplaceApi):
    kind = ItemKind.COMPONENT

    async def categories(self) -> Dict[str, List[str]]:
        # Static; the backend has no endpoint for component categories
        return {"categories": list(COMPONENT_CATEGORIES)}


def api_for(kind: ItemKind, client: BackendClient) -> MarketplaceApi:
    return TemplateApi(client) if kind is ItemKind.TEMPLATE else ComponentApi(client)
