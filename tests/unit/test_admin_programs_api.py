"""
Tests for the Admin Programs API.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sasi_site.api.deps import get_program_repo, get_rules
from sasi_site.api.routes.admin_programs import router

FORM: dict[str, Any] = {
    "title": "Education Support",
    "description": "Full description",
    "short_description": "Short description",
    "category": "education",
    "icon": "fas fa-book",
}


@pytest.fixture
def admin_client(program_repo, site_rules) -> TestClient:
    """Test client with only the admin router mounted."""
    app = FastAPI()
    app.include_router(router, prefix="/api/admin/programs")

    app.dependency_overrides[get_program_repo] = lambda: program_repo
    app.dependency_overrides[get_rules] = lambda: site_rules

    return TestClient(app)


def _create(client: TestClient, **overrides: Any) -> dict[str, Any]:
    response = client.post("/api/admin/programs", json={**FORM, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProgram:
    """Test program creation."""

    def test_create_success(self, admin_client: TestClient) -> None:
        data = _create(admin_client)

        assert data["slug"] == "education-support"
        assert data["page_url"] == "/programs/education"
        assert data["is_active"] is True
        assert data["order"] == 1
        assert data["highlights"] == []
        assert data["stats"] == []
        assert data["image_alt"] == "Education Support"
        assert data["image_url"].startswith("https://ik.imagekit.io/")

    def test_create_uses_default_icon(self, admin_client: TestClient) -> None:
        data = _create(admin_client, icon=None)
        assert data["icon"] == "fas fa-heart"

    def test_create_with_order(self, admin_client: TestClient) -> None:
        data = _create(admin_client, order=5)
        assert data["order"] == 5

    def test_create_validation_errors(self, admin_client: TestClient) -> None:
        response = admin_client.post(
            "/api/admin/programs",
            json={"title": "", "category": "astronomy"},
        )

        assert response.status_code == 400
        codes = {e["code"] for e in response.json()["detail"]["errors"]}
        assert codes == {
            "title_required",
            "description_required",
            "short_description_required",
            "invalid_category",
        }

    def test_create_short_description_too_long(self, admin_client: TestClient) -> None:
        response = admin_client.post(
            "/api/admin/programs", json={**FORM, "short_description": "x" * 251}
        )

        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert errors[0]["code"] == "short_description_too_long"
        assert errors[0]["field"] == "short_description"

    def test_create_duplicate_slug(self, admin_client: TestClient) -> None:
        _create(admin_client)
        response = admin_client.post(
            "/api/admin/programs", json={**FORM, "title": "Education  Support!"}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["code"] == "slug_taken"


class TestReadPrograms:
    """Test listing and fetching programs."""

    def test_list_includes_inactive(self, admin_client: TestClient, program_repo) -> None:
        first = _create(admin_client, order=2)
        second = _create(admin_client, title="Health Camp", category="health", order=1)
        stored = program_repo.get_by_slug("health-camp")
        program_repo.save(stored.model_copy(update={"is_active": False}))

        response = admin_client.get("/api/admin/programs")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [p["id"] for p in data["programs"]] == [second["id"], first["id"]]

    def test_get(self, admin_client: TestClient) -> None:
        created = _create(admin_client)
        response = admin_client.get(f"/api/admin/programs/{created['id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Education Support"

    def test_get_missing(self, admin_client: TestClient) -> None:
        response = admin_client.get(f"/api/admin/programs/{uuid4()}")
        assert response.status_code == 404

    def test_get_invalid_id(self, admin_client: TestClient) -> None:
        response = admin_client.get("/api/admin/programs/not-a-uuid")
        assert response.status_code == 422


class TestUpdateProgram:
    """Test program updates."""

    def test_update_keeps_slug_when_title_unchanged(self, admin_client: TestClient) -> None:
        created = _create(admin_client)
        response = admin_client.put(
            f"/api/admin/programs/{created['id']}",
            json={**FORM, "description": "New description"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["slug"] == created["slug"]
        assert data["full_description"] == "New description"

    def test_update_new_title_and_category(self, admin_client: TestClient) -> None:
        created = _create(admin_client)
        response = admin_client.put(
            f"/api/admin/programs/{created['id']}",
            json={**FORM, "title": "Mobile Clinic", "category": "health"},
        )

        data = response.json()
        assert data["slug"] == "mobile-clinic"
        assert data["page_url"] == "/programs/health"

    def test_update_without_order_resets(self, admin_client: TestClient) -> None:
        created = _create(admin_client, order=7)
        response = admin_client.put(f"/api/admin/programs/{created['id']}", json=FORM)
        assert response.json()["order"] == 1

    def test_update_requires_all_fields(self, admin_client: TestClient) -> None:
        created = _create(admin_client)
        response = admin_client.put(
            f"/api/admin/programs/{created['id']}",
            json={"title": "Education Support", "category": "education"},
        )

        assert response.status_code == 400
        codes = {e["code"] for e in response.json()["detail"]["errors"]}
        assert codes == {"description_required", "short_description_required", "icon_required"}

    def test_update_missing(self, admin_client: TestClient) -> None:
        response = admin_client.put(f"/api/admin/programs/{uuid4()}", json=FORM)
        assert response.status_code == 404


class TestDeleteProgram:
    """Test program deletion."""

    def test_delete(self, admin_client: TestClient) -> None:
        created = _create(admin_client)

        response = admin_client.delete(f"/api/admin/programs/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"status": "deleted"}

        assert admin_client.get(f"/api/admin/programs/{created['id']}").status_code == 404

    def test_delete_missing(self, admin_client: TestClient) -> None:
        response = admin_client.delete(f"/api/admin/programs/{uuid4()}")
        assert response.status_code == 404
