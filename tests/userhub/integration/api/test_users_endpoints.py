"""Tests for the users endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from userhub.domain.user import USER_ID_MAX, User, UserId


class TestCreateUser:
    """Tests for POST /users."""

    def test_create_returns_id(self, test_client: TestClient):
        response = test_client.post("/users", json={"username": "mario"})

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id"}
        assert isinstance(data["id"], int)
        assert data["id"] >= 0

    @pytest.mark.parametrize("username", ["", "   ", "\t\n"])
    def test_create_blank_username_returns_400(
        self,
        test_client: TestClient,
        username: str,
    ):
        response = test_client.post("/users", json={"username": username})

        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_USERNAME"
        assert test_client.get("/users").json() == {"users": []}

    def test_create_keeps_whitespace(self, test_client: TestClient, create_user):
        user_id = create_user("  mario  ")

        response = test_client.get(f"/users/{user_id}")

        assert response.json()["username"] == "  mario  "

    def test_create_assigns_distinct_ids(self, create_user):
        ids = {create_user(f"user-{i}") for i in range(50)}
        assert len(ids) == 50

    @pytest.mark.parametrize(
        "body",
        [{}, {"username": None}, {"username": 42}, {"name": "mario"}],
    )
    def test_create_wrong_shape_is_rejected(self, test_client: TestClient, body):
        response = test_client.post("/users", json=body)
        assert response.status_code == 422

    def test_create_malformed_json_is_rejected(self, test_client: TestClient):
        response = test_client.post(
            "/users",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422


class TestGetUser:
    """Tests for GET /users/{id}."""

    def test_add_and_get_user(self, test_client: TestClient):
        created = test_client.post("/users", json={"username": "mario"})
        assert created.status_code == 201
        user_id = created.json()["id"]

        response = test_client.get(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"id": user_id, "username": "mario"}

    def test_get_unknown_user_returns_404(self, test_client: TestClient):
        response = test_client.get("/users/12345")

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_get_largest_id_returns_404(self, test_client: TestClient):
        response = test_client.get(f"/users/{USER_ID_MAX}")
        assert response.status_code == 404

    @pytest.mark.parametrize("bad_id", ["abc", "-1", "1.5", str(USER_ID_MAX + 1)])
    def test_get_invalid_id_is_rejected(self, test_client: TestClient, bad_id):
        response = test_client.get(f"/users/{bad_id}")
        assert response.status_code == 422


class TestListUsers:
    """Tests for GET /users."""

    def test_list_empty(self, test_client: TestClient):
        response = test_client.get("/users")

        assert response.status_code == 200
        assert response.json() == {"users": []}

    def test_list_returns_all_users(self, test_client: TestClient, create_user):
        expected = {create_user(name): name for name in ["mario", "luigi", "peach"]}

        response = test_client.get("/users")

        assert response.status_code == 200
        users = response.json()["users"]
        assert {u["id"]: u["username"] for u in users} == expected
        assert len(users) == 3


class TestUpdateUser:
    """Tests for PUT /users/{id}."""

    def test_update_username(self, test_client: TestClient, create_user):
        user_id = create_user("mario")

        response = test_client.put(f"/users/{user_id}", json={"username": "luigi"})

        assert response.status_code == 200
        assert response.json() == {"id": user_id, "username": "luigi"}

        fetched = test_client.get(f"/users/{user_id}")
        assert fetched.json() == {"id": user_id, "username": "luigi"}

    def test_update_unknown_user_returns_404(self, test_client: TestClient):
        response = test_client.put("/users/12345", json={"username": "luigi"})

        assert response.status_code == 404
        assert test_client.get("/users").json() == {"users": []}

    def test_update_blank_username_returns_400(
        self,
        test_client: TestClient,
        create_user,
    ):
        user_id = create_user("mario")

        response = test_client.put(f"/users/{user_id}", json={"username": "  "})

        assert response.status_code == 400
        assert test_client.get(f"/users/{user_id}").json()["username"] == "mario"

    def test_update_unknown_user_with_blank_username_returns_404(
        self,
        test_client: TestClient,
    ):
        response = test_client.put("/users/12345", json={"username": ""})
        assert response.status_code == 404

    def test_update_wrong_shape_is_rejected(
        self,
        test_client: TestClient,
        create_user,
    ):
        user_id = create_user("mario")

        response = test_client.put(f"/users/{user_id}", json={})

        assert response.status_code == 422


class TestDeleteUser:
    """Tests for DELETE /users/{id}."""

    def test_delete_then_get_returns_404(self, test_client: TestClient, create_user):
        user_id = create_user("mario")

        response = test_client.delete(f"/users/{user_id}")
        assert response.status_code == 200

        assert test_client.get(f"/users/{user_id}").status_code == 404

    def test_delete_unknown_user_returns_404(self, test_client: TestClient):
        response = test_client.delete("/users/12345")
        assert response.status_code == 404

    def test_delete_twice(self, test_client: TestClient, create_user):
        user_id = create_user("mario")

        assert test_client.delete(f"/users/{user_id}").status_code == 200
        assert test_client.delete(f"/users/{user_id}").status_code == 404

    def test_delete_only_removes_target(self, test_client: TestClient, create_user):
        mario = create_user("mario")
        luigi = create_user("luigi")

        test_client.delete(f"/users/{mario}")

        users = test_client.get("/users").json()["users"]
        assert users == [{"id": luigi, "username": "luigi"}]


class TestRepositoryInjection:
    """The application uses the repository it was created with."""

    def test_preloaded_repository_is_served(
        self,
        test_client: TestClient,
        user_repository,
    ):
        asyncio.run(user_repository.save(User.reconstitute(id=7, username="toad")))

        response = test_client.get("/users/7")

        assert response.json() == {"id": 7, "username": "toad"}

    def test_created_user_lands_in_injected_repository(
        self,
        test_client: TestClient,
        user_repository,
        create_user,
    ):
        user_id = create_user("mario")

        stored = asyncio.run(user_repository.get(UserId(user_id)))
        assert str(stored.username) == "mario"
