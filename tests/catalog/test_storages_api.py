"""存储管理接口的集成测试。"""

from fastapi.testclient import TestClient

from animedb.packages.catalog.core.constants import PATH_REQUIRED_MESSAGE, STORAGE_NAME_MAX_LENGTH
from animedb.packages.catalog.models.item import Item
from animedb.packages.catalog.models.storage import Storage


def _create_storage(client: TestClient, **fields) -> dict:
    response = client.post("/api/v1/storages", json=fields)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_add_external_storage_without_path_is_rejected(client: TestClient, db_session_fixture):
    before = db_session_fixture.query(Storage).count()

    response = client.post(
        "/api/v1/storages",
        json={"name": "Portable HDD", "description": "USB 3.0", "type": "external", "path": ""},
    )

    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == 422
    assert payload["data"]["violations"] == [{"field": "path", "message": PATH_REQUIRED_MESSAGE}]
    # 其它字段原样带回，便于重新展示表单
    assert payload["data"]["form"]["name"] == "Portable HDD"
    assert payload["data"]["form"]["description"] == "USB 3.0"
    assert db_session_fixture.query(Storage).count() == before


def test_add_video_storage_without_path_is_accepted(client: TestClient, db_session_fixture):
    data = _create_storage(client, name="DVD shelf", type="video")

    assert isinstance(data["id"], int)
    assert data["path"] is None
    assert data["type_title"] == "Video storage (DVD/BD/VHS)"
    assert data["path_required"] is False
    assert data["readable"] is False
    assert db_session_fixture.get(Storage, data["id"]) is not None


def test_storage_round_trip_by_id(client: TestClient):
    created = _create_storage(
        client, name="Anime folder", description="NAS share", type="folder", path="/mnt/nas/anime"
    )

    response = client.get(f"/api/v1/storages/{created['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == created
    assert created["writable"] is True
    assert created["item_count"] == 0


def test_name_and_type_are_validated_together(client: TestClient):
    response = client.post("/api/v1/storages", json={"name": "  ", "type": "floppy"})

    assert response.status_code == 422
    fields = [v["field"] for v in response.json()["data"]["violations"]]
    assert fields == ["name", "type"]


def test_list_storages_newest_first(client: TestClient):
    first = _create_storage(client, name="Old CD box", type="external-readonly")
    second = _create_storage(client, name="New flash", type="external", path="/media/flash")

    response = client.get("/api/v1/storages")

    assert response.status_code == 200
    ids = [item["id"] for item in response.json()["data"]]
    assert ids == sorted(ids, reverse=True)
    assert ids.index(second["id"]) < ids.index(first["id"])


def test_edit_storage_revalidates_merged_record(client: TestClient):
    created = _create_storage(client, name="Blu-ray rack", type="video")

    rejected = client.put(f"/api/v1/storages/{created['id']}", json={"type": "folder"})
    assert rejected.status_code == 422
    assert rejected.json()["data"]["violations"][0]["field"] == "path"
    assert client.get(f"/api/v1/storages/{created['id']}").json()["data"]["type"] == "video"

    accepted = client.put(
        f"/api/v1/storages/{created['id']}", json={"type": "folder", "path": "/srv/anime"}
    )
    assert accepted.status_code == 200
    data = accepted.json()["data"]
    assert data["id"] == created["id"]
    assert data["name"] == "Blu-ray rack"
    assert data["type"] == "folder"
    assert data["path"] == "/srv/anime"


def test_missing_storage_returns_not_found(client: TestClient):
    for response in (
        client.get("/api/v1/storages/999999"),
        client.put("/api/v1/storages/999999", json={"name": "x"}),
        client.delete("/api/v1/storages/999999"),
    ):
        assert response.status_code == 404
        assert response.json()["msg"] == "Storage not found"


def test_delete_storage_detaches_items(client: TestClient, db_session_fixture):
    storage = _create_storage(client, name="Old drive", type="external", path="/media/old")
    item_ids = []
    for name in ("Cowboy Bebop", "Mushishi"):
        resp = client.post("/api/v1/items", json={"name": name, "storage_id": storage["id"]})
        assert resp.status_code == 200
        item_ids.append(resp.json()["data"]["id"])
    assert client.get(f"/api/v1/storages/{storage['id']}").json()["data"]["item_count"] == 2

    response = client.delete(f"/api/v1/storages/{storage['id']}")

    assert response.status_code == 200
    assert client.get(f"/api/v1/storages/{storage['id']}").status_code == 404
    for item_id in item_ids:
        item = db_session_fixture.get(Item, item_id)
        assert item is not None
        assert item.storage_id is None


def test_list_storage_types(client: TestClient):
    response = client.get("/api/v1/storages/types")

    assert response.status_code == 200
    types = {t["value"]: t for t in response.json()["data"]}
    assert set(types) == {"folder", "external", "external-readonly", "video"}
    assert types["external"]["path_required"] is True
    assert types["external-readonly"]["readable"] is True
    assert types["external-readonly"]["writable"] is False
    assert types["folder"]["title"] == "Folder on computer (local/network)"


def test_add_external_readonly_storage_without_path(client: TestClient, db_session_fixture):
    created = _create_storage(client, name="CD box", type="external-readonly", path="")

    assert created["type"] == "external-readonly"
    assert created["type_title"] == "External storage read-only (CD/DVD)"
    assert created["path"] is None
    assert created["path_required"] is False
    assert created["readable"] is True
    assert created["writable"] is False
    assert db_session_fixture.get(Storage, created["id"]).type == "external-readonly"

    response = client.get(f"/api/v1/storages/{created['id']}")
    assert response.status_code == 200
    assert response.json()["data"] == created


def test_edit_storage_into_external_readonly(client: TestClient):
    created = _create_storage(client, name="Backup disk", type="external", path="/media/backup")

    response = client.put(f"/api/v1/storages/{created['id']}", json={"type": "external-readonly"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["type"] == "external-readonly"
    # 原路径保留，只读类型不要求也不禁止路径
    assert data["path"] == "/media/backup"
    assert data["writable"] is False


def test_name_too_long_is_merged_with_other_violations(client: TestClient, db_session_fixture):
    before = db_session_fixture.query(Storage).count()
    long_name = "n" * (STORAGE_NAME_MAX_LENGTH + 1)

    response = client.post("/api/v1/storages", json={"name": long_name, "type": "folder", "path": ""})

    assert response.status_code == 422
    payload = response.json()
    assert "meta" not in payload
    data = payload["data"]
    assert data["form"]["name"] == long_name
    assert [v["field"] for v in data["violations"]] == ["name", "path"]
    assert str(STORAGE_NAME_MAX_LENGTH) in data["violations"][0]["message"]
    assert db_session_fixture.query(Storage).count() == before


def test_name_at_length_limit_is_accepted(client: TestClient):
    name = "n" * STORAGE_NAME_MAX_LENGTH

    assert _create_storage(client, name=name, type="video")["name"] == name


def test_storage_type_must_match_exactly(client: TestClient):
    response = client.post("/api/v1/storages", json={"name": "Shelf", "type": "VIDEO"})

    assert response.status_code == 422
    violations = response.json()["data"]["violations"]
    assert [v["field"] for v in violations] == ["type"]
    assert violations[0]["message"] == "The value you selected is not a valid choice."
