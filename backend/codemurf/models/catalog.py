"""
Catalog item model shared by templates and components
"""
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class ItemKind(str, Enum):
    """Marketplace catalog kinds"""
    TEMPLATE = "templates"
    COMPONENT = "components"

    @property
    def singular(self) -> str:
        return "template" if self is ItemKind.TEMPLATE else "component"

    @property
    def label(self) -> str:
        return self.singular.capitalize()


# Fallback preview image per category when an item ships none
CATEGORY_PREVIEW_IMAGES = {
    "Navigation": "/static/components/navbar-preview.svg",
    "Layout": "/static/components/sidebar-preview.svg",
    "Forms": "/static/components/contact-form-preview.svg",
    "Data Display": "/static/components/data-table-preview.svg",
    "User Interface": "/static/components/modal-dialog-preview.svg",
    "Content": "/static/components/pricing-cards-preview.svg",
    "Media": "/static/components/image-gallery-preview.svg",
    "Interactive": "/static/components/hero-section-preview.svg",
    "Widgets": "/static/components/sidebar-preview.svg",
    "Sections": "/static/components/hero-section-preview.svg",
}
DEFAULT_PREVIEW_IMAGE = "/static/components/navbar-preview.svg"


def default_preview_image(category: Optional[str]) -> str:
    return CATEGORY_PREVIEW_IMAGES.get(category or "", DEFAULT_PREVIEW_IMAGE)


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


def _to_number(value: Any) -> float:
    """Coerce a loosely-typed numeric field; missing or malformed values become 0"""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse ISO dates/datetimes; naive values are taken as UTC"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class CatalogItem(BaseModel):
    """
    A marketplace template or component.

    Accepts both the backend's snake_case payloads and the camelCase shape
    used by sample data and forms; always dumps snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=_alias("id", "_id"))
    title: str
    category: Optional[str] = None
    type: Optional[str] = None
    language: Optional[str] = None
    difficulty_level: Optional[str] = Field(
        default=None, validation_alias=_alias("difficulty_level", "difficultyLevel")
    )
    plan_type: Optional[str] = Field(default=None, validation_alias=_alias("plan_type", "planType"))
    pricing_inr: float = Field(default=0, validation_alias=_alias("pricing_inr", "pricingINR", "pricingInr"))
    pricing_usd: float = Field(default=0, validation_alias=_alias("pricing_usd", "pricingUSD", "pricingUsd"))
    rating: float = 0.0
    downloads: int = 0
    views: int = 0
    likes: int = 0
    short_description: str = Field(
        default="", validation_alias=_alias("short_description", "shortDescription")
    )
    full_description: str = Field(
        default="", validation_alias=_alias("full_description", "fullDescription")
    )
    preview_images: List[str] = Field(
        default_factory=list, validation_alias=_alias("preview_images", "previewImages")
    )
    git_repo_url: Optional[str] = Field(default=None, validation_alias=_alias("git_repo_url", "gitRepoUrl"))
    live_demo_url: Optional[str] = Field(default=None, validation_alias=_alias("live_demo_url", "liveDemoUrl"))
    dependencies: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    developer_name: Optional[str] = Field(
        default=None, validation_alias=_alias("developer_name", "developerName")
    )
    developer_experience: Optional[str] = Field(
        default=None, validation_alias=_alias("developer_experience", "developerExperience")
    )
    is_available_for_dev: bool = Field(
        default=True, validation_alias=_alias("is_available_for_dev", "isAvailableForDev")
    )
    featured: bool = False
    popular: bool = False
    code: Optional[str] = None
    readme_content: Optional[str] = Field(
        default=None, validation_alias=_alias("readme_content", "readmeContent")
    )
    user_id: Optional[str] = Field(default=None, validation_alias=_alias("user_id", "userId"))
    created_at: Optional[datetime] = Field(default=None, validation_alias=_alias("created_at", "createdAt"))
    updated_at: Optional[datetime] = Field(default=None, validation_alias=_alias("updated_at", "updatedAt"))

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        if v is None:
            return v
        return str(v)

    @field_validator("pricing_inr", "pricing_usd", "rating", mode="before")
    @classmethod
    def coerce_float(cls, v):
        return _to_number(v)

    @field_validator("downloads", "views", "likes", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return int(_to_number(v))

    @field_validator("short_description", "full_description", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v or ""

    @field_validator("preview_images", "dependencies", "tags", mode="before")
    @classmethod
    def coerce_list(cls, v):
        """Accept None, a comma-separated string, or a list"""
        if v is None:
            return []
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return [item for item in v if item]

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def coerce_timestamp(cls, v):
        return parse_timestamp(v)

    @field_validator("is_available_for_dev", "featured", "popular", mode="before")
    @classmethod
    def none_to_default(cls, v, info):
        if v is None:
            return info.field_name == "is_available_for_dev"
        return v

    @model_validator(mode="after")
    def ensure_preview_image(self):
        if not self.preview_images:
            self.preview_images = [default_preview_image(self.category)]
        return self

    @property
    def is_free(self) -> bool:
        return (self.plan_type or "Free") == "Free"

    @property
    def primary_image(self) -> str:
        return self.preview_images[0]

    def price_for(self, currency: str = "usd") -> float:
        """Price in the given currency ('usd' or 'inr')"""
        return self.pricing_inr if currency.lower() == "inr" else self.pricing_usd

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary"""
        return self.model_dump(mode="json")
