"""HTTP tests for the service content routes."""

import base64

from consult_admin.services import content_service

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")
HOSTED = "https://res.cloudinary.com/demo/image/upload/v1/services/img1.png"


def payload(**overrides):
    data = {
        "title": "Student Visa",
        "content": "<p>Study abroad</p>",
        "category": "Visas",
        "subcategory": "Student",
        "seoKeywords": ["visa", "study abroad"],
        "shortDescription": "Visa help",
    }
    data.update(overrides)
    return data


def create(client, **overrides):
    response = client.post("/api/create/service", json=payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateService:

    def test_create_returns_aliased_fields(self, client):
        response = client.post("/api/create/service", json=payload())
        body = response.json()

        assert response.status_code == 201
        assert body["message"] == "Service added successfully"
        assert body["data"]["seoKeywords"] == ["visa", "study abroad"]
        assert body["data"]["shortDescription"] == "Visa help"
        assert body["data"]["isDeleted"] is False
        assert "createdAt" in body["data"]

    def test_inline_image_is_uploaded_and_replaced(self, client, asset_host):
        content = f'<p>Hi</p><img src="data:image/png;base64,{PNG_B64}">'

        data = create(client, content=content)

        assert data["content"] == f'<p>Hi</p><img src="{HOSTED}">'
        assert asset_host.uploaded == [(PNG_BYTES, "image/png", "services")]

    def test_oversized_image_uploads_nothing(self, client, asset_host, monkeypatch):
        monkeypatch.setattr(content_service, "MAX_IMAGE_BYTES", 16)
        small = base64.b64encode(b"tiny").decode("ascii")
        content = (
            f'<img src="data:image/png;base64,{small}">'
            f'<img src="data:image/png;base64,{PNG_B64}">'
        )

        response = client.post("/api/create/service", json=payload(content=content))

        assert response.status_code == 400
        assert response.json()["detail"] == "An image in content exceeds 5MB. Please use a smaller image."
        assert asset_host.uploaded == []

    def test_blank_category_rejected(self, client):
        response = client.post("/api/create/service", json=payload(category="   "))

        assert response.status_code == 400
        assert response.json()["detail"] == "Category must be a non-empty string"

    def test_empty_title_rejected(self, client):
        response = client.post("/api/create/service", json=payload(title=""))

        assert response.status_code == 400
        assert response.json()["detail"] == "Title, content, and category are required"

    def test_missing_field_is_validation_error(self, client):
        body = payload()
        del body["title"]

        assert client.post("/api/create/service", json=body).status_code == 422

    def test_update_replaces_fields(self, client):
        created = create(client)

        response = client.put(
            f"/api/create/update/service/{created['id']}",
            json=payload(title="Work Visa", subcategory=None, seoKeywords=[]),
        )
        data = response.json()["data"]

        assert response.json()["message"] == "Service updated successfully"
        assert data["title"] == "Work Visa"
        assert data["subcategory"] == ""
        assert data["seoKeywords"] == []

    def test_update_missing_service(self, client):
        response = client.put("/api/create/update/service/9999", json=payload())

        assert response.status_code == 404
        assert response.json() == {"detail": "Service not found"}


class TestServiceLifecycle:

    def test_soft_delete_and_restore(self, client):
        created = create(client)
        service_id = created["id"]

        not_deleted = client.put(f"/api/restore/service/{service_id}")
        deleted = client.delete(f"/api/mark/delete/{service_id}")
        hidden = client.get(f"/api/single/service/{service_id}")
        listed = client.get("/api/mark/delete/service").json()
        restored = client.put(f"/api/restore/service/{service_id}")

        assert not_deleted.status_code == 400
        assert not_deleted.json()["detail"] == "Service is not deleted"
        assert deleted.json() == {"message": "Service soft-deleted successfully"}
        assert hidden.status_code == 404
        assert [s["id"] for s in listed["data"]] == [service_id]
        assert listed["pagination"] == {"total": 1, "page": 1, "pages": 1, "limit": 10}
        assert restored.json()["data"]["isDeleted"] is False
        assert client.get(f"/api/single/service/{service_id}").status_code == 200

    def test_permanent_delete_removes_hosted_images(self, client, asset_host):
        content = f'<img src="data:image/png;base64,{PNG_B64}">'
        created = create(client, content=content)

        response = client.delete(f"/api/permanent/delete/{created['id']}")
        again = client.delete(f"/api/permanent/delete/{created['id']}")

        assert response.json() == {"message": "Service permanently deleted successfully"}
        assert asset_host.destroyed == ["services/img1"]
        assert again.status_code == 404

    def test_list_active_services(self, client):
        first = create(client)
        second = create(client, title="Work Visa")
        client.delete(f"/api/mark/delete/{first['id']}")

        body = client.get("/api/all/service").json()

        assert body["total"] == 1
        assert [s["id"] for s in body["data"]] == [second["id"]]

    def test_deleted_pagination_rejects_zero(self, client):
        response = client.get("/api/mark/delete/service", params={"page": 0})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid pagination parameters"}


class TestServiceQueries:

    def test_by_category_includes_image_metadata(self, client):
        create(client, content=f'<img src="data:image/png;base64,{PNG_B64}">')
        create(client, title="Other", category="Education")

        body = client.get("/api/category/visas").json()

        assert len(body["data"]) == 1
        image = body["data"][0]["images"][0]
        assert image["public_id"] == "services/img1"
        assert image["width"] == 640

    def test_by_category_reports_unavailable_image(self, client, asset_host):
        create(client, content=f'<img src="data:image/png;base64,{PNG_B64}">')
        asset_host.missing.add("services/img1")

        body = client.get("/api/category/Visas").json()

        assert body["data"][0]["images"] == [
            {"url": HOSTED, "error": "Failed to fetch image metadata"}
        ]

    def test_by_category_without_matches(self, client):
        response = client.get("/api/category/Unknown")

        assert response.status_code == 404
        assert response.json() == {"detail": "No services found for this category"}

    def test_by_subcategory(self, client):
        create(client)
        create(client, title="Work Visa", subcategory="Work")

        body = client.get("/api/subcategory/Work").json()
        missing = client.get("/api/subcategory/Tourist")

        assert [s["title"] for s in body["data"]] == ["Work Visa"]
        assert missing.status_code == 404

    def test_keyword_search_paginates(self, client):
        create(client, seoKeywords=["Visa", "study abroad"])
        create(client, title="Work Visa", seoKeywords=["work permit"])
        create(client, title="Degrees", seoKeywords=["university"])

        first = client.get("/api/keyword/search", params={"keywords": "visa, permit", "limit": 1}).json()
        second = client.get(
            "/api/keyword/search", params={"keywords": "visa, permit", "limit": 1, "page": 2}
        ).json()

        assert first["pagination"] == {"total": 2, "page": 1, "pages": 2, "limit": 1}
        assert [s["title"] for s in first["data"]] == ["Student Visa"]
        assert [s["title"] for s in second["data"]] == ["Work Visa"]

    def test_keyword_search_requires_keywords(self, client):
        response = client.get("/api/keyword/search")

        assert response.status_code == 400
        assert response.json() == {"detail": "Keywords are required"}
