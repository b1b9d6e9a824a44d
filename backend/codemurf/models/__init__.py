"""
Pydantic models for catalog items and user profiles
"""
from codemurf.models.catalog import CatalogItem, ItemKind  # noqa: F401
from codemurf.models.profile import ApiKeyKind, UserProfile, UserRole, mask_key  # noqa: F401

__all__ = ["CatalogItem", "ItemKind", "ApiKeyKind", "UserProfile", "UserRole", "mask_key"]
