"""Tests for the FastAPI web API.

Uses TestClient against an app built with a fresh SQLite database file
per test. The lifespan runs, so the schema is created the same way it is
at process start.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from todo_store.config import Settings
from web.app import create_app
from web.problems import PROBLEM_MEDIA_TYPE, SERVER_ERROR_DETAIL, SERVER_ERROR_TITLE


def make_settings(tmp_path, **overrides) -> Settings:
    """Settings pointing at a unique database file under tmp_path."""
    db_file = tmp_path / f"test_{uuid.uuid4().hex[:8]}.db"
    values = {"db_url": f"sqlite:///{db_file}", "environment": "production"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def client(tmp_path):
    """Create a test client with a fresh SQLite database in tmp_path."""
    app = create_app(make_settings(tmp_path))
    with TestClient(app) as test_client:
        yield test_client


class TestHomeEndpoints:
    """Tests for the root and error endpoints."""

    def test_root(self, client):
        """Root should answer with a plain-text greeting."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Hello World!"
        assert response.headers["content-type"].startswith("text/plain")

    def test_error_endpoint(self, client):
        """/error should return a generic 500 problem document."""
        response = client.get("/error")
        assert response.status_code == 500
        assert response.headers["content-type"] == PROBLEM_MEDIA_TYPE
        data = response.json()
        assert data["status"] == 500
        assert data["title"] == "An error occurred while processing your request."
        assert data["detail"] == "An error occurred."

    def test_health(self, client):
        """Health should report ok once the store is reachable."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestOpenApi:
    """Tests for the generated API description."""

    def test_error_route_hidden(self, client):
        """/error should not be part of the API description."""
        paths = client.get("/openapi.json").json()["paths"]
        assert "/error" not in paths
        assert "/api/todos" in paths
        assert "/api/todos/{todo_id}" in paths
        assert "delete" in paths["/todos/{todo_id}"]


class TestListTodos:
    """Tests for GET /api/todos."""

    def test_list_empty(self, client):
        """Listing an empty store should return an empty array."""
        response = client.get("/api/todos")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_created(self, client):
        """Created todos should appear in the list."""
        client.post("/api/todos", json={"title": "A"})
        client.post("/api/todos", json={"title": "B", "isComplete": True})

        data = client.get("/api/todos").json()
        assert sorted(t["title"] for t in data) == ["A", "B"]
        assert all(set(t) == {"id", "title", "isComplete"} for t in data)


class TestCreateTodo:
    """Tests for POST /api/todos."""

    def test_create(self, client):
        """Creating should return 201, the stored todo, and a Location."""
        response = client.post("/api/todos", json={"title": "A"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "title": "A", "isComplete": False}
        assert response.headers["location"] == "/todos/1"

    def test_create_defaults_is_complete(self, client):
        """isComplete should default to false."""
        response = client.post("/api/todos", json={"title": "Buy milk"})
        todo_id = response.json()["id"]

        fetched = client.get(f"/api/todos/{todo_id}").json()
        assert fetched["title"] == "Buy milk"
        assert fetched["isComplete"] is False

    def test_create_ignores_client_id(self, client):
        """The store assigns ids regardless of the payload."""
        response = client.post("/api/todos", json={"id": 99, "title": "A"})
        assert response.status_code == 201
        assert response.json()["id"] == 1

    def test_ids_are_unique_and_stable(self, client):
        """Each create gets a new id that keeps resolving to its todo."""
        created = [
            client.post("/api/todos", json={"title": f"t{i}"}).json() for i in range(3)
        ]
        ids = [t["id"] for t in created]
        assert len(set(ids)) == 3
        assert ids == sorted(ids)
        for todo in created:
            assert client.get(f"/api/todos/{todo['id']}").json() == todo

    @pytest.mark.parametrize(
        "payload",
        [{}, {"title": None}, {"title": ""}, {"isComplete": True}],
    )
    def test_create_without_title(self, client, payload):
        """A missing title should be a 400 validation problem."""
        response = client.post("/api/todos", json=payload)
        assert response.status_code == 400
        assert response.headers["content-type"] == PROBLEM_MEDIA_TYPE
        data = response.json()
        assert data["status"] == 400
        assert data["title"] == "One or more validation errors occurred."
        assert data["errors"] == {"title": ["The Title field is required."]}

    def test_create_without_title_persists_nothing(self, client):
        """A rejected create should leave the list unchanged."""
        client.post("/api/todos", json={"title": "kept"})
        before = len(client.get("/api/todos").json())

        client.post("/api/todos", json={})

        assert len(client.get("/api/todos").json()) == before

    @pytest.mark.parametrize("flag", ["yes", "true", 1])
    def test_create_rejects_non_boolean_flag(self, client, flag):
        """isComplete must be a JSON boolean."""
        response = client.post("/api/todos", json={"title": "A", "isComplete": flag})
        assert response.status_code == 400
        assert "isComplete" in response.json()["errors"]
        assert client.get("/api/todos").json() == []

    def test_create_malformed_json(self, client):
        """A body that is not JSON should be a 400 validation problem."""
        response = client.post(
            "/api/todos",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert "$" in response.json()["errors"]


class TestGetTodo:
    """Tests for GET /api/todos/{id}."""

    def test_get_unknown(self, client):
        """An id never returned by create should be 404."""
        response = client.get("/api/todos/12345")
        assert response.status_code == 404
        assert response.headers["content-type"] == PROBLEM_MEDIA_TYPE
        assert response.json()["status"] == 404
        assert response.json()["title"] == "Not Found"

    def test_get_non_integer_id(self, client):
        """A non-integer id should be a 400 validation problem."""
        response = client.get("/api/todos/abc")
        assert response.status_code == 400
        assert "todo_id" in response.json()["errors"]

    @pytest.mark.parametrize("todo_id", [-1, 0, 2**63 - 1])
    def test_get_unknown_in_range(self, client, todo_id):
        """Ids the store can hold but never assigned should be 404."""
        response = client.get(f"/api/todos/{todo_id}")
        assert response.status_code == 404

    @pytest.mark.parametrize("todo_id", [2**63, 10**20, -(2**63) - 1])
    def test_get_id_out_of_store_range(self, client, todo_id):
        """Ids beyond the store's integer range should be 400, not 500."""
        response = client.get(f"/api/todos/{todo_id}")
        assert response.status_code == 400
        assert "todo_id" in response.json()["errors"]


class TestDeleteTodo:
    """Tests for DELETE /todos/{id}."""

    def test_delete(self, client):
        """Deleting should return the deleted todo."""
        created = client.post("/api/todos", json={"title": "A"}).json()

        response = client.delete(f"/todos/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_delete_unknown(self, client):
        """Deleting an id that never existed should be 404."""
        response = client.delete("/todos/1")
        assert response.status_code == 404

    @pytest.mark.parametrize("todo_id", [-1, 0, 2**63 - 1])
    def test_delete_unknown_in_range(self, client, todo_id):
        """Deleting an id the store never assigned should be 404."""
        response = client.delete(f"/todos/{todo_id}")
        assert response.status_code == 404

    @pytest.mark.parametrize("todo_id", [2**63, 10**20, -(2**63) - 1])
    def test_delete_id_out_of_store_range(self, client, todo_id):
        """Ids beyond the store's integer range should be 400, not 500."""
        response = client.delete(f"/todos/{todo_id}")
        assert response.status_code == 400
        assert "todo_id" in response.json()["errors"]

    def test_delete_not_under_api_prefix(self, client):
        """Delete is only routed at /todos/{id}."""
        created = client.post("/api/todos", json={"title": "A"}).json()
        response = client.delete(f"/api/todos/{created['id']}")
        assert response.status_code == 405
        assert client.get(f"/api/todos/{created['id']}").status_code == 200

    def test_deleted_ids_are_not_reused(self, client):
        """A create after a delete should get a fresh id."""
        first = client.post("/api/todos", json={"title": "A"}).json()
        client.delete(f"/todos/{first['id']}")

        second = client.post("/api/todos", json={"title": "B"}).json()
        assert second["id"] > first["id"]


class TestTodoScenario:
    """End-to-end create/list/delete/get/delete flow."""

    def test_full_lifecycle(self, client):
        """Walk one todo through its whole lifecycle."""
        response = client.post("/api/todos", json={"title": "A"})
        assert response.status_code == 201
        todo = response.json()
        assert todo == {"id": 1, "title": "A", "isComplete": False}

        assert todo in client.get("/api/todos").json()

        response = client.delete("/todos/1")
        assert response.status_code == 200
        assert response.json() == todo

        assert client.get("/api/todos/1").status_code == 404
        assert client.delete("/todos/1").status_code == 404


class TestServerErrors:
    """Tests for unhandled store failures."""

    def _failing_client(self, tmp_path, monkeypatch, **overrides):
        def boom(session):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr("web.routers.todos.list_todos", boom)
        app = create_app(make_settings(tmp_path, **overrides))
        return TestClient(app, raise_server_exceptions=False)

    def test_production_hides_detail(self, tmp_path, monkeypatch):
        """Outside development the 500 should be generic."""
        with self._failing_client(tmp_path, monkeypatch) as client:
            response = client.get("/api/todos")

        assert response.status_code == 500
        assert response.headers["content-type"] == PROBLEM_MEDIA_TYPE
        data = response.json()
        assert data["title"] == SERVER_ERROR_TITLE
        assert data["detail"] == SERVER_ERROR_DETAIL

    def test_development_shows_detail(self, tmp_path, monkeypatch):
        """In development the 500 should name the exception."""
        with self._failing_client(
            tmp_path, monkeypatch, environment="development"
        ) as client:
            response = client.get("/api/todos")

        assert response.status_code == 500
        assert response.json()["detail"] == "RuntimeError: store unavailable"
