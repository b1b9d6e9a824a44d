"""
Tests for catalog item and profile normalization
"""
from datetime import datetime, timezone

from codemurf.models.catalog import (DEFAULT_PREVIEW_IMAGE, CatalogItem, ItemKind, default_preview_image,
                                     parse_timestamp)
from codemurf.models.profile import NOT_ASSIGNED, ApiKeyKind, UserProfile, UserRole, mask_key


class TestCatalogItem:

    def test_accepts_camel_case(self):
        item = CatalogItem.model_validate({
            "id": 3,
            "title": "Form",
            "difficultyLevel": "Easy",
            "planType": "Paid",
            "pricingINR": "499",
            "pricingUSD": 6,
            "developerName": "Emma",
            "createdAt": "2024-01-25",
        })
        assert item.id == "3"
        assert item.difficulty_level == "Easy"
        assert item.pricing_inr == 499
        assert item.pricing_usd == 6
        assert item.developer_name == "Emma"
        assert item.created_at == datetime(2024, 1, 25, tzinfo=timezone.utc)

    def test_accepts_snake_case_and_mongo_id(self):
        item = CatalogItem.model_validate({
            "_id": "65a1b2c3d4e5f60718293a4b",
            "title": "API item",
            "plan_type": "Free",
            "short_description": "From the backend",
        })
        assert item.id == "65a1b2c3d4e5f60718293a4b"
        assert item.is_free
        assert item.short_description == "From the backend"

    def test_missing_numbers_become_zero(self):
        item = CatalogItem.model_validate({
            "id": "1", "title": "x", "rating": None, "downloads": "lots", "pricingUSD": "",
        })
        assert item.rating == 0
        assert item.downloads == 0
        assert item.pricing_usd == 0

    def test_lists_from_strings_and_none(self):
        item = CatalogItem.model_validate({
            "id": "1", "title": "x", "tags": "react, forms ,", "dependencies": None,
        })
        assert item.tags == ["react", "forms"]
        assert item.dependencies == []

    def test_missing_preview_image_uses_category_default(self):
        item = CatalogItem.model_validate({"id": "1", "title": "x", "category": "Forms"})
        assert item.primary_image == "/static/components/contact-form-preview.svg"

        other = CatalogItem.model_validate({"id": "2", "title": "y", "previewImages": []})
        assert other.primary_image == DEFAULT_PREVIEW_IMAGE

    def test_null_flags_take_defaults(self):
        item = CatalogItem.model_validate({
            "id": "1", "title": "x", "isAvailableForDev": None, "featured": None,
        })
        assert item.is_available_for_dev is True
        assert item.featured is False

    def test_missing_plan_counts_as_free(self):
        assert CatalogItem(id="1", title="x").is_free

    def test_price_for_currency(self):
        item = CatalogItem(id="1", title="x", pricing_inr=499, pricing_usd=6)
        assert item.price_for("usd") == 6
        assert item.price_for("INR") == 499

    def test_to_dict_is_snake_case(self):
        data = CatalogItem.model_validate({"id": 1, "title": "x", "planType": "Free"}).to_dict()
        assert data["plan_type"] == "Free"
        assert "planType" not in data


def test_item_kind_labels():
    assert ItemKind.TEMPLATE.singular == "template"
    assert ItemKind.COMPONENT.label == "Component"
    assert ItemKind("templates") is ItemKind.TEMPLATE


def test_default_preview_image_for_unknown_category():
    assert default_preview_image(None) == DEFAULT_PREVIEW_IMAGE
    assert default_preview_image("Navigation") == "/static/components/navbar-preview.svg"


def test_parse_timestamp():
    assert parse_timestamp("2024-03-01T10:00:00Z") == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)
    assert parse_timestamp("") is None
    assert parse_timestamp("not a date") is None


class TestMaskKey:

    def test_missing_key(self):
        assert mask_key(None) == NOT_ASSIGNED
        assert mask_key("") == NOT_ASSIGNED

    def test_short_key_fully_masked(self):
        assert mask_key("abcd1234") == "••••••••"

    def test_long_key_shows_ends(self):
        masked = mask_key("sk-or-v1-0123456789abcdef")
        assert masked.startswith("sk-o")
        assert masked.endswith("cdef")
        assert len(masked) == len("sk-or-v1-0123456789abcdef")
        assert "0123456789" not in masked


class TestUserProfile:

    def test_from_backend_payload(self):
        profile = UserProfile.model_validate({
            "id": 42,
            "email": "dev@example.com",
            "firstName": "Ada",
            "role": "DEVELOPER",
            "managed_api_key": "mk-1234567890abcd",
        })
        assert profile.id == "42"
        assert profile.role is UserRole.DEVELOPER
        assert profile.display_name == "Ada"
        assert profile.initial == "A"
        assert profile.key_for(ApiKeyKind.MANAGED) == "mk-1234567890abcd"

    def test_unknown_role_is_user(self):
        assert UserProfile.model_validate({"role": "superuser"}).role is UserRole.USER

    def test_display_name_falls_back_to_email(self):
        profile = UserProfile(email="someone@example.com")
        assert profile.display_name == "someone@example.com"
        assert profile.initial == "S"

    def test_public_dict_masks_keys(self):
        profile = UserProfile.model_validate({
            "email": "dev@example.com",
            "openrouterApiKey": "sk-or-v1-0123456789abcdef",
        })
        data = profile.to_public_dict()

        assert "openrouter_api_key" not in data
        assert data["api_keys"]["openrouter"] == mask_key("sk-or-v1-0123456789abcdef")
        assert data["api_keys"]["managed"] == NOT_ASSIGNED
        assert data["api_keys"]["glm"] == NOT_ASSIGNED


def test_api_key_kind_field_names():
    assert ApiKeyKind.GLM.field_name == "glm_api_key"
    assert ApiKeyKind.OPENROUTER.label == "OpenRouter API Key"
