"""
Tests for presentation endpoints.

Covers CRUD, listing, duplication, generation and export.
"""

import pytest
from pptx import Presentation

from deckstudio.api.dependencies import get_policy
from deckstudio.infra.auth.access_policy import OwnerAccessPolicy


async def create(client, headers=None, **body):
    body.setdefault("content", {"slides": []})
    response = await client.post("/api/v1/presentations", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["presentation"]


class TestPresentationCrud:
    @pytest.mark.asyncio
    async def test_create_and_get(self, client, owner_headers, sample_content):
        created = await create(
            client, owner_headers, content=sample_content, title="Roadmap", outline=["Intro"]
        )

        assert created["title"] == "Roadmap"
        assert created["theme"] == "default"
        assert created["owner_id"] == "owner-1"
        assert created["is_public"] is False

        response = await client.get(f"/api/v1/presentations/{created['id']}")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["presentation"]["content"] == sample_content

    @pytest.mark.asyncio
    async def test_create_empty_without_body(self, client):
        response = await client.post("/api/v1/presentations/empty")

        assert response.status_code == 201
        presentation = response.json()["presentation"]
        assert presentation["title"] == "Untitled Presentation"
        assert presentation["content"] == {"slides": []}

    @pytest.mark.asyncio
    async def test_malformed_content_is_bad_request(self, client):
        response = await client.post(
            "/api/v1/presentations", json={"content": {"slides": [{"content": [1]}]}}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, client):
        response = await client.get("/api/v1/presentations/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "NOT_FOUND"
        assert body["detail"] == "Presentation not found"

    @pytest.mark.asyncio
    async def test_get_content(self, client):
        created = await create(client, theme="dark", outline=["A"])

        response = await client.get(f"/api/v1/presentations/{created['id']}/content")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["theme"] == "dark"
        assert data["outline"] == ["A"]

    @pytest.mark.asyncio
    async def test_patch_updates_given_fields(self, client):
        created = await create(client, title="Before", theme="dark")

        response = await client.patch(
            f"/api/v1/presentations/{created['id']}",
            json={"title": "After", "is_public": True},
        )

        assert response.status_code == 200
        presentation = response.json()["presentation"]
        assert presentation["title"] == "After"
        assert presentation["is_public"] is True
        assert presentation["theme"] == "dark"

    @pytest.mark.asyncio
    async def test_delete_batch_partial(self, client):
        created = await create(client)

        response = await client.post(
            "/api/v1/presentations/delete", json={"ids": [created["id"], "missing"]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["partial_success"] is True
        assert data["deleted_count"] == 1
        assert data["failed_count"] == 1

    @pytest.mark.asyncio
    async def test_delete_single(self, client):
        created = await create(client)

        response = await client.delete(f"/api/v1/presentations/{created['id']}")

        assert response.status_code == 200
        assert response.json()["message"] == "Presentation deleted successfully"
        missing = await client.get(f"/api/v1/presentations/{created['id']}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate(self, client, owner_headers):
        created = await create(client, title="Roadmap", theme="dark")

        response = await client.post(
            f"/api/v1/presentations/{created['id']}/duplicate", headers=owner_headers
        )

        assert response.status_code == 201
        copy = response.json()["presentation"]
        assert copy["id"] != created["id"]
        assert copy["title"] == "Roadmap (Copy)"
        assert copy["theme"] == "dark"
        assert copy["owner_id"] == "owner-1"


class TestPresentationListing:
    @pytest.mark.asyncio
    async def test_lists_own_presentations(self, client, owner_headers):
        await create(client, owner_headers, title="Mine")
        await create(client, {"X-Owner-Id": "someone-else"}, title="Theirs")

        response = await client.get("/api/v1/presentations", headers=owner_headers)

        assert response.status_code == 200
        data = response.json()
        assert [p["title"] for p in data["presentations"]] == ["Mine"]
        assert data["has_more"] is False
        assert data["page"] == 0

    @pytest.mark.asyncio
    async def test_public_scope_pages(self, client):
        for index in range(12):
            await create(client, title=f"Deck {index}", is_public=True)

        first = await client.get("/api/v1/presentations?scope=public&page=0")
        second = await client.get("/api/v1/presentations?scope=public&page=1")

        assert len(first.json()["presentations"]) == 10
        assert first.json()["has_more"] is True
        assert len(second.json()["presentations"]) == 2
        assert second.json()["has_more"] is False

    @pytest.mark.asyncio
    async def test_owner_policy_hides_other_owners_private_decks(self, app, client):
        app.dependency_overrides[get_policy] = OwnerAccessPolicy
        await create(client, {"X-Owner-Id": "bob"}, title="bob secret")
        public = await create(
            client, {"X-Owner-Id": "bob"}, title="bob public", is_public=True
        )
        eve = {"X-Owner-Id": "eve"}

        snooping = await client.get("/api/v1/presentations?owner_id=bob", headers=eve)
        anonymous = await client.get("/api/v1/presentations")
        shared = await client.get(
            "/api/v1/presentations?scope=by_owner&owner_id=bob", headers=eve
        )
        own = await client.get("/api/v1/presentations", headers={"X-Owner-Id": "bob"})

        assert snooping.status_code == 403
        assert snooping.json()["error"] == "ACCESS_DENIED"
        assert anonymous.status_code == 403
        assert [p["id"] for p in shared.json()["presentations"]] == [public["id"]]
        assert {p["title"] for p in own.json()["presentations"]} == {
            "bob secret",
            "bob public",
        }

    @pytest.mark.asyncio
    async def test_invalid_scope_is_rejected(self, client):
        response = await client.get("/api/v1/presentations?scope=everyone")

        assert response.status_code == 422


class TestGenerateAndExport:
    @pytest.mark.asyncio
    async def test_generate_then_export(self, client, png_data_uri, file_store):
        response = await client.post(
            "/api/v1/presentations/generate",
            json={
                "slides_data": [
                    {"master_name": "TITLE_MASTER", "data": {"titlePlaceholder": "Hi"}},
                    {
                        "master_name": "IMAGE_MASTER",
                        "data": {"imagePlaceholder": png_data_uri},
                    },
                ],
                "new_presentation_title": "Generated",
            },
        )

        assert response.status_code == 201, response.text
        data = response.json()
        assert data["success"] is True
        assert Presentation(data["file_path"]).slides[0].shapes[0].text_frame.text == "Hi"

        stored = await client.get(f"/api/v1/presentations/{data['presentation_id']}")
        assert stored.json()["presentation"]["theme"] == "DefaultMasters"

        export = await client.get(f"/presentation/{data['presentation_id']}/export")
        assert export.status_code == 200
        assert export.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.presentationml.presentation"
        )
        assert 'filename="presentation.pptx"' in export.headers["content-disposition"]
        assert export.content[:2] == b"PK"

    @pytest.mark.asyncio
    async def test_generate_unknown_master(self, client):
        response = await client.post(
            "/api/v1/presentations/generate",
            json={
                "slides_data": [{"master_name": "NOPE", "data": {}}],
                "new_presentation_title": "Generated",
            },
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_export_removes_temp_file(self, client, sample_content, file_store):
        created = await create(client, content=sample_content)

        response = await client.get(f"/presentation/{created['id']}/export")

        assert response.status_code == 200
        assert list(file_store.generated_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_export_missing_is_404(self, client):
        response = await client.get("/presentation/missing/export")

        assert response.status_code == 404
        assert response.json()["detail"] == "Presentation not found"

    @pytest.mark.asyncio
    async def test_export_failure_is_500(self, client):
        created = await create(
            client,
            content={
                "slides": [
                    {"content": [{"type": "img", "url": "data:image/png;base64,AAAA"}]}
                ]
            },
        )

        response = await client.get(f"/presentation/{created['id']}/export")

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to export presentation")

    @pytest.mark.asyncio
    async def test_unreadable_inline_image_is_export_failure(self, client):
        created = await create(
            client,
            content={
                "slides": [
                    {"content": [{"type": "img", "url": "data:image/png,not-base64"}]}
                ]
            },
        )

        response = await client.get(f"/presentation/{created['id']}/export")

        assert response.status_code == 500
        assert response.json()["detail"] == (
            "Failed to export presentation: Inline image data must be base64 encoded"
        )

    @pytest.mark.asyncio
    async def test_unsupported_image_scheme_is_rejected_on_create(self, client):
        response = await client.post(
            "/api/v1/presentations",
            json={
                "content": {
                    "slides": [{"content": [{"type": "img", "url": "ftp://x/a.png"}]}]
                }
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
