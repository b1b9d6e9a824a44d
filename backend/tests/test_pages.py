"""
Tests for the rendered HTML pages
"""
import asyncio

import pytest

from codemurf.core.config import get_settings
from codemurf.services.catalog_service import CatalogService, get_catalog_service
from codemurf.services.profile_service import ProfileService, get_profile_service

AUTH = {"Authorization": "Bearer session-token"}


class TestLanding:

    def test_first_batch(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "SaaS Landing Page" in response.text
        assert "Game Leaderboard" not in response.text
        assert "Load more" in response.text

    def test_load_more_reveals_next_batch(self, client):
        response = client.get("/", params={"count": 12})

        assert "Game Leaderboard" in response.text
        assert "SaaS Landing Page" in response.text

    def test_search_matches_developer(self, client):
        response = client.get("/", params={"search": "Mike Chen"})

        assert "Admin Dashboard Pro" in response.text
        assert "SaaS Landing Page" not in response.text

    def test_default_sort_is_rating(self, client):
        text = client.get("/").text

        assert text.index("Admin Dashboard Pro") < text.index("SaaS Landing Page")
        assert '<option value="rating" selected>' in text

    def test_explicit_sort_is_kept(self, client):
        text = client.get("/", params={"sort": "popular"}).text

        assert text.index("SaaS Landing Page") < text.index("Admin Dashboard Pro")

    def test_no_match_message(self, client):
        response = client.get("/", params={"search": "zzzz"})

        assert "No templates match your filters." in response.text

    def test_source_failure_shows_error(self, client, app, fake_backend):
        fake_backend.routes["GET /templates"] = (503, {"detail": "maintenance window"})
        app.dependency_overrides[get_catalog_service] = lambda: CatalogService(
            source="backend", client=fake_backend.client()
        )

        response = client.get("/")

        assert response.status_code == 200
        assert "Could not load templates: maintenance window" in response.text


class TestGalleries:

    def test_templates_gallery(self, client):
        response = client.get("/templates")

        assert response.status_code == 200
        assert "24 templates available" in response.text
        assert "count=24" in response.text

    def test_gallery_count_shows_everything(self, client):
        response = client.get("/templates", params={"count": 24})

        assert "Game Leaderboard" in response.text
        assert "Load more" not in response.text

    def test_components_gallery_list_view(self, client):
        response = client.get("/components", params={"view": "list", "difficulty": "Tough"})

        assert response.status_code == 200
        assert "card-list" in response.text
        assert "Data Table" in response.text
        assert "Hero Section" not in response.text

    def test_component_highlights(self, client):
        text = client.get("/components").text

        assert "Featured components" in text
        assert "Popular components" in text

    def test_component_highlights_follow_category(self, client):
        text = client.get("/components", params={"category": "Forms"}).text

        assert "Popular components" in text
        assert "Featured components" not in text

    def test_templates_have_no_highlights(self, client):
        assert "highlight-strip" not in client.get("/templates").text

    def test_bad_sort_is_rejected(self, client):
        assert client.get("/templates", params={"sort": "cheapest"}).status_code == 422


class TestDetail:

    def test_template_detail(self, client):
        response = client.get("/templates/1")

        assert response.status_code == 200
        assert "SaaS Landing Page" in response.text

    def test_component_detail(self, client):
        response = client.get("/components/4")

        assert response.status_code == 200
        assert "Data Table" in response.text

    def test_missing_template(self, client):
        response = client.get("/templates/999")

        assert response.status_code == 404
        assert "Template Not Found" in response.text

    def test_missing_component(self, client):
        response = client.get("/components/abc")

        assert response.status_code == 404
        assert "Component Not Found" in response.text

    def test_slow_load_shows_not_found(self, client, app, monkeypatch):
        class SlowCatalog(CatalogService):
            async def get_item(self, kind, item_id):
                await asyncio.sleep(5)

        app.dependency_overrides[get_catalog_service] = lambda: SlowCatalog(source="sample")
        monkeypatch.setattr(get_settings(), "detail_load_timeout_seconds", 0.05)

        response = client.get("/templates/1")

        assert response.status_code == 404
        assert "Template Not Found" in response.text


class TestForms:

    def test_create_requires_sign_in(self, client):
        response = client.get("/templates/create")

        assert response.status_code == 401
        assert "Sign in required" in response.text
        assert "redirect_url=/templates/create" in response.text

    def test_create_form(self, client):
        response = client.get("/components/create", headers=AUTH)

        assert response.status_code == 200
        assert 'data-mode="create"' in response.text

    def test_edit_form(self, client):
        response = client.get("/templates/2/edit", headers=AUTH)

        assert response.status_code == 200
        assert 'data-item-id="2"' in response.text
        assert 'data-mode="edit"' in response.text

    def test_edit_missing_item(self, client):
        response = client.get("/templates/999/edit", headers=AUTH)

        assert response.status_code == 404


class TestProfilePage:

    @pytest.fixture
    def profile_backend(self, app, fake_backend, backend_client):
        app.dependency_overrides[get_profile_service] = lambda: ProfileService(backend_client)
        return fake_backend

    def test_requires_sign_in(self, client, profile_backend):
        response = client.get("/profile")

        assert response.status_code == 401
        assert "Sign in required" in response.text

    def test_shows_masked_keys(self, client, profile_backend):
        profile_backend.routes["GET /api/users/me"] = {
            "email": "dev@example.com",
            "name": "Dev Person",
            "openrouter_api_key": "sk-or-v1-0123456789abcdef",
        }

        response = client.get("/profile", headers=AUTH)

        assert response.status_code == 200
        assert "Dev Person" in response.text
        assert "OpenRouter API Key" in response.text
        assert "0123456789" not in response.text
        assert "Not assigned" in response.text
        assert "profile-form" in response.text
        assert '<option value="user" selected>' in response.text

    def test_rejected_session(self, client, profile_backend):
        profile_backend.routes["GET /api/users/me"] = (401, {"detail": "Invalid token"})

        assert client.get("/profile", headers=AUTH).status_code == 401

    def test_backend_error_shown(self, client, profile_backend):
        profile_backend.routes["GET /api/users/me"] = (500, {"detail": "profile store offline"})

        response = client.get("/profile", headers=AUTH)

        assert response.status_code == 200
        assert "Could not load your profile: profile store offline" in response.text


class TestInfoPages:

    @pytest.mark.parametrize("path,text", [
        ("/about", "Alex Chen"),
        ("/changelog", "v2.8.0"),
        ("/community", "Community"),
        ("/events", "Events"),
        ("/feature-requests", "Visual Workflow Designer"),
    ])
    def test_renders(self, client, path, text):
        response = client.get(path)

        assert response.status_code == 200
        assert text in response.text

    def test_changelog_filter(self, client):
        response = client.get("/changelog", params={"type": "patch"})

        assert "v2.6.8" in response.text
        assert "v2.8.0" not in response.text

    def test_feature_request_filter(self, client):
        response = client.get("/feature-requests", params={"filter": "completed"})

        assert "Visual Workflow Designer" in response.text
        assert "Real-time Collaborative Coding" not in response.text


def test_static_assets_served(client):
    response = client.get("/static/css/site.css")
    assert response.status_code == 200
