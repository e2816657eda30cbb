"""
Integration tests for the HTTP surface.

The app is driven through FastAPI's TestClient with every service bound to
the in-memory test database.
"""
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.api.v1.follows import get_follow_service
from app.api.v1.persons import get_person_service
from app.api.v1.system import get_engine
from app.models.instance import InstanceModel
from app.services import PersonService, PersonFollowService


@pytest.fixture
def client(engine, session_factory):
    app.dependency_overrides[get_person_service] = lambda: PersonService(session_factory)
    app.dependency_overrides[get_follow_service] = lambda: PersonFollowService(session_factory)
    app.dependency_overrides[get_engine] = lambda: engine

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def instance_id(session_factory):
    with session_factory() as db:
        instance = InstanceModel(domain="my_domain.tld")
        db.add(instance)
        db.commit()
        return instance.instance_id


def create_person(client, instance_id, name, **kwargs):
    payload = {"name": name, "public_key": "pubkey", "instance_id": instance_id, **kwargs}
    response = client.post("/api/v1/persons/", json=payload)
    assert response.status_code == 201
    return response.json()


class TestPersonEndpoints:

    def test_create_and_read(self, client, instance_id):
        created = create_person(client, instance_id, "holly")

        response = client.get(f"/api/v1/persons/{created['person_id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "holly"
        assert data["state"] == "active"
        assert data["post_count"] == 0

    def test_duplicate_ap_id_conflicts(self, client, instance_id):
        ap_id = "https://remote.example/u/holly"
        create_person(client, instance_id, "holly", ap_id=ap_id)

        response = client.post(
            "/api/v1/persons/",
            json={"name": "other", "public_key": "pubkey", "instance_id": instance_id, "ap_id": ap_id},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "unique_violation"

    def test_upsert_keeps_one_row(self, client, instance_id):
        payload = {
            "name": "remote",
            "public_key": "pubkey",
            "instance_id": instance_id,
            "ap_id": "https://remote.example/u/remote",
            "local": False,
        }
        first = client.put("/api/v1/persons/upsert", json=payload).json()
        second = client.put(
            "/api/v1/persons/upsert", json={**payload, "display_name": "Remote"}
        ).json()

        assert second["person_id"] == first["person_id"]
        assert second["display_name"] == "Remote"

    def test_delete_account(self, client, instance_id):
        created = create_person(client, instance_id, "holly", bio="about me")

        response = client.delete(f"/api/v1/persons/{created['person_id']}")
        assert response.status_code == 200
        assert response.json()["state"] == "deleted"
        assert response.json()["bio"] is None

        response = client.get(f"/api/v1/persons/{created['person_id']}")
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

        response = client.get("/api/v1/persons/by-name/holly", params={"include_deleted": "true"})
        assert response.status_code == 200

    def test_patch_person(self, client, instance_id):
        created = create_person(client, instance_id, "holly", display_name="Holly")

        response = client.patch(
            f"/api/v1/persons/{created['person_id']}", json={"bio": "new bio"}
        )

        assert response.status_code == 200
        assert response.json()["bio"] == "new bio"
        assert response.json()["display_name"] == "Holly"

    def test_name_availability(self, client, instance_id):
        response = client.get("/api/v1/persons/availability/Alice")
        assert response.status_code == 200
        assert response.json() == {"name": "Alice", "available": True}

        create_person(client, instance_id, "alice")

        response = client.get("/api/v1/persons/availability/ALICE")
        assert response.status_code == 409
        assert response.json()["code"] == "username_already_exists"

    def test_lookups(self, client, instance_id):
        create_person(client, instance_id, "Holly")

        assert client.get("/api/v1/persons/by-name/holly").status_code == 200
        assert client.get("/api/v1/persons/by-name/nobody").status_code == 404

        response = client.get(
            "/api/v1/persons/resolve", params={"name": "holly", "domain": "MY_DOMAIN.tld"}
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Holly"

    def test_patch_rejects_null_name(self, client, instance_id):
        created = create_person(client, instance_id, "holly")

        response = client.patch(f"/api/v1/persons/{created['person_id']}", json={"name": None})

        assert response.status_code == 422

    def test_patch_assigned_ap_id_conflicts(self, client, instance_id):
        created = create_person(
            client, instance_id, "holly", ap_id="https://remote.example/u/holly"
        )

        response = client.patch(
            f"/api/v1/persons/{created['person_id']}",
            json={"ap_id": "https://evil.example/u/x"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "immutable_field"

    def test_missing_lookups_use_error_body(self, client, instance_id):
        by_name = client.get("/api/v1/persons/by-name/nobody")
        resolved = client.get(
            "/api/v1/persons/resolve", params={"name": "nobody", "domain": "my_domain.tld"}
        )

        for response in (by_name, resolved):
            assert response.status_code == 404
            assert response.json()["code"] == "not_found"

    def test_communities_of_new_person(self, client, instance_id):
        created = create_person(client, instance_id, "holly")

        response = client.get(f"/api/v1/persons/{created['person_id']}/communities")

        assert response.status_code == 200
        assert response.json() == []


class TestFollowEndpoints:

    def test_follow_lifecycle(self, client, instance_id):
        erich = create_person(client, instance_id, "erich")
        michele = create_person(client, instance_id, "michele")
        form = {"follower_id": michele["person_id"], "target_id": erich["person_id"]}

        response = client.post("/api/v1/follows/", json=form)
        assert response.status_code == 200
        assert response.json()["state"] == "accepted"

        followers = client.get(f"/api/v1/follows/{erich['person_id']}/followers").json()
        assert [f["person_id"] for f in followers] == [michele["person_id"]]

        following = client.get(f"/api/v1/follows/{michele['person_id']}/following").json()
        assert [f["person_id"] for f in following] == [erich["person_id"]]

        url = f"/api/v1/follows/{michele['person_id']}/{erich['person_id']}"
        assert client.delete(url).json() == {"count": 1}
        assert client.delete(url).json() == {"count": 0}

    def test_pending_follow(self, client, instance_id):
        erich = create_person(client, instance_id, "erich")
        michele = create_person(client, instance_id, "michele")

        response = client.post(
            "/api/v1/follows/",
            json={
                "follower_id": michele["person_id"],
                "target_id": erich["person_id"],
                "pending": True,
            },
        )

        assert response.json()["state"] == "pending"
        assert response.json()["follow_pending"] is True

    def test_follow_unknown_person(self, client, instance_id):
        michele = create_person(client, instance_id, "michele")

        response = client.post(
            "/api/v1/follows/", json={"follower_id": michele["person_id"], "target_id": 999}
        )

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_accept_is_not_found(self, client, instance_id):
        erich = create_person(client, instance_id, "erich")
        michele = create_person(client, instance_id, "michele")

        response = client.post(
            f"/api/v1/follows/{michele['person_id']}/{erich['person_id']}/accept"
        )

        assert response.status_code == 404


class TestSystemEndpoints:

    def test_health(self, client):
        response = client.get("/api/v1/system/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_db_check(self, client):
        response = client.get("/api/v1/system/db-check")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "result": 1}
