"""HTTP tests for the category and catalog routes."""

from sqlalchemy.orm.exc import StaleDataError

from consult_admin.crud import category_crud


def create(client, name="Visas", subcategories=None):
    response = client.post(
        "/api/categories",
        json={"name": name, "subcategories": subcategories or []},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCategoryRoutes:

    def test_create_category(self, client):
        body = create(client, "Visas", [{"name": "Student"}, "Work"])

        assert body["name"] == "Visas"
        assert body["token"] == "session-token"
        assert body["isDeleted"] is False
        assert [sub["name"] for sub in body["subcategories"]] == ["Student", "Work"]
        assert all(sub["isDeleted"] is False for sub in body["subcategories"])

    def test_create_category_without_cookie(self, client):
        client.cookies.clear()

        response = client.post("/api/categories", json={"name": "Visas"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Token not found in cookies"}

    def test_add_subcategory_and_global_duplicate(self, client):
        visas = create(client, "Visas", ["Student"])
        education = create(client, "Education")

        ok = client.post(f"/api/categories/{visas['id']}/subcategories", json={"subcategory": "Work"})
        clash = client.post(
            f"/api/categories/{education['id']}/subcategories", json={"subcategory": "student"}
        )
        missing = client.post("/api/categories/9999/subcategories", json={"subcategory": "Tourist"})

        assert ok.status_code == 200
        assert [sub["name"] for sub in ok.json()["subcategories"]] == ["Student", "Work"]
        assert clash.status_code == 400
        assert clash.json()["detail"] == "Subcategory with this name already exists globally"
        assert missing.status_code == 404

    def test_rename_category_and_subcategory(self, client):
        visas = create(client, "Visas", ["Student", "Work"])
        student, work = visas["subcategories"]

        renamed = client.put(f"/api/categories/{visas['id']}", json={"name": "Visa Services"})
        sub_ok = client.put(
            f"/api/categories/{visas['id']}/subcategories/{student['id']}",
            json={"subcategory": "Study"},
        )
        sub_clash = client.put(
            f"/api/categories/{visas['id']}/subcategories/{work['id']}",
            json={"subcategory": "STUDY"},
        )

        assert renamed.json()["name"] == "Visa Services"
        assert sub_ok.json() == {"message": "Subcategory updated successfully"}
        assert sub_clash.status_code == 400
        assert sub_clash.json()["detail"] == "Subcategory name must be unique within the category"

    def test_rename_missing_category(self, client):
        response = client.put("/api/categories/9999", json={"name": "Nope"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Category not found"}

    def test_soft_delete_and_restore_category(self, client):
        visas = create(client, "Visas")

        not_deleted = client.put(f"/api/categories/{visas['id']}/restore")
        deleted = client.delete(f"/api/categories/{visas['id']}")
        listed = client.get("/api/bilvani/get/delete-category")
        restored = client.put(f"/api/categories/{visas['id']}/restore")

        assert not_deleted.status_code == 400
        assert not_deleted.json()["detail"] == "Category is not marked as deleted"
        assert deleted.json() == {"message": "Category marked as deleted"}
        assert [c["id"] for c in listed.json()] == [visas["id"]]
        assert restored.json() == {"message": "Category restored successfully"}
        assert client.get("/api/bilvani/get/delete-category").json() == []

    def test_soft_delete_and_restore_subcategory(self, client):
        visas = create(client, "Visas", ["Student", "Work"])
        student = visas["subcategories"][0]
        path = f"/api/categories/{visas['id']}/subcategories/{student['id']}"

        deleted = client.delete(path)
        deleted_list = client.get(f"/api/bilvani/get/{visas['id']}/delete-subcategory")
        active_list = client.get(f"/api/bilvani/get/{visas['id']}/subcategories")
        restored = client.put(f"{path}/restore")

        assert deleted.status_code == 200
        assert deleted.json()["subcategories"][0]["isDeleted"] is True
        assert [s["name"] for s in deleted_list.json()] == ["Student"]
        assert [s["name"] for s in active_list.json()] == ["Work"]
        assert restored.json()["subcategories"][0]["isDeleted"] is False

    def test_subcategory_routes_missing_ids(self, client):
        visas = create(client, "Visas", ["Student"])

        assert client.delete(f"/api/categories/{visas['id']}/subcategories/9999").status_code == 404
        assert client.put("/api/categories/9999/subcategories/1/restore").status_code == 404
        assert client.get("/api/bilvani/get/9999/subcategories").status_code == 404
        assert client.get("/api/bilvani/get/9999/delete-subcategory").status_code == 404

    def test_hard_delete_category(self, client):
        visas = create(client, "Visas", ["Student"])

        first = client.delete(f"/api/categories/delete/category/{visas['id']}")
        second = client.delete(f"/api/categories/delete/category/{visas['id']}")
        restore = client.put(f"/api/categories/{visas['id']}/restore")

        assert first.json() == {"message": "Category deleted completely"}
        assert second.status_code == 404
        assert restore.status_code == 404

    def test_hard_delete_subcategory(self, client):
        visas = create(client, "Visas", ["Student", "Work"])
        student = visas["subcategories"][0]

        response = client.delete(f"/api/categories/delete/{visas['id']}/subcategory/{student['id']}")
        again = client.delete(f"/api/categories/delete/{visas['id']}/subcategory/{student['id']}")

        assert response.json() == {"message": "Subcategory deleted completely"}
        assert again.status_code == 404
        remaining = client.get(f"/api/bilvani/get/{visas['id']}/subcategories").json()
        assert [s["name"] for s in remaining] == ["Work"]

    def test_flattened_subcategories(self, client):
        visas = create(client, "Visas", ["Student", "Work"])
        hidden = create(client, "Hidden", ["Secret"])
        create(client, "Education", ["Degree"])
        client.delete(f"/api/categories/{hidden['id']}")
        client.delete(f"/api/categories/{visas['id']}/subcategories/{visas['subcategories'][1]['id']}")

        categories = client.get("/api/bilvani/get/category").json()
        flattened = client.get("/api/bilvani/get/subcategory").json()

        assert [c["name"] for c in categories] == ["Visas", "Education"]
        assert [s["name"] for s in flattened] == ["Student", "Degree"]


class TestLogRoutes:

    def test_logs_record_category_actions(self, client):
        visas = create(client, "Visas", ["Student"])
        client.delete(f"/api/categories/{visas['id']}")

        logs = client.get("/api/logs").json()
        category_logs = client.get("/api/logs", params={"target_type": "category"}).json()

        assert len(logs) == 2
        assert all(log["target_name"] == "Visas" for log in category_logs)
        assert {log["actor"] for log in logs} == {"session-token"}


class TestConflictRoutes:

    def test_version_conflict_returns_409(self, client, monkeypatch):
        visas = create(client, "Visas", ["Student"])

        def stale_save(db, category):
            raise StaleDataError("UPDATE statement on table 'category' expected to update 1 row(s); 0 were matched.")

        monkeypatch.setattr(category_crud, "save_category", stale_save)
        response = client.put(f"/api/categories/{visas['id']}", json={"name": "Visa Services"})

        assert response.status_code == 409
        assert response.json() == {"detail": "Category was modified by another request, please retry"}
        monkeypatch.undo()
        assert client.get("/api/bilvani/get/category").json()[0]["name"] == "Visas"


class TestLogFilterRoutes:

    def test_logs_filtered_by_target_type(self, client):
        visas = create(client, "Visas", ["Student"])
        client.post(f"/api/categories/{visas['id']}/subcategories", json={"subcategory": "Work"})

        subcategory_logs = client.get("/api/logs", params={"target_type": "subcategory"}).json()

        assert [log["target_name"] for log in subcategory_logs] == ["Visas/Work"]
        assert client.get("/api/logs", params={"target_type": "service"}).json() == []
