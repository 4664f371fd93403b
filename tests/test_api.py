import pytest
from fastapi.testclient import TestClient

from prolink.core.config import settings
from prolink.core.security import create_access_token
from prolink.deps import get_store
from prolink.main import app

from conftest import make_post


@pytest.fixture
def client(feed_store):
    app.dependency_overrides[get_store] = lambda: feed_store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _auth(user_id="viewer"):
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def test_feed_requires_token(client):
    response = client.get("/api/v1/feed", params={"market_ids": [5]})

    assert response.status_code == 401


def test_feed_for_selected_markets(client, feed_store):
    feed_store.seed("post_likes", {"post_id": "p2", "user_id": "viewer"})

    response = client.get("/api/v1/feed", params={"market_ids": [5]}, headers=_auth())

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body] == ["p1", "p2"]
    assert body[1]["is_liked"] is True
    assert body[0]["profile"]["full_name"] == "Ana Autora"


def test_feed_defaults_to_viewer_markets(client, feed_store):
    feed_store.seed("user_markets", {"user_id": "viewer", "market_id": 7})

    response = client.get("/api/v1/feed", headers=_auth())

    assert [item["id"] for item in response.json()] == ["p3"]


def test_feed_store_failure_maps_to_bad_gateway(client, feed_store):
    feed_store.fail_on.add(("select", "posts"))

    response = client.get("/api/v1/feed", params={"market_ids": [5]}, headers=_auth())

    assert response.status_code == 502
    assert response.json() == {"detail": "Could not load posts"}


def test_like_takes_author_from_post(client, feed_store):
    response = client.post("/api/v1/posts/p1/like", json={"is_liked": False}, headers=_auth())

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    [notification] = feed_store.rows("notifications")
    assert notification["user_id"] == "author"


def test_duplicate_like_maps_to_conflict(client, feed_store):
    feed_store.seed("post_likes", {"post_id": "p1", "user_id": "viewer"})

    response = client.post("/api/v1/posts/p1/like", json={"is_liked": False}, headers=_auth())

    assert response.status_code == 409


def test_like_unknown_post_is_not_found(client):
    response = client.post("/api/v1/posts/nope/like", json={"is_liked": False}, headers=_auth())

    assert response.status_code == 404


def test_save_toggle(client, feed_store):
    response = client.post("/api/v1/posts/p2/save", json={"is_saved": False}, headers=_auth())

    assert response.status_code == 200
    assert [(r["post_id"], r["user_id"]) for r in feed_store.rows("saved_posts")] == [("p2", "viewer")]


def test_create_post_rejects_blank_content(client, feed_store):
    response = client.post("/api/v1/posts", json={"content": "   ", "market_id": 5}, headers=_auth())
    assert response.status_code == 422

    response = client.post("/api/v1/posts", json={"content": " hola ", "market_id": 5}, headers=_auth())
    assert response.status_code == 201
    assert response.json()["content"] == "hola"
    assert response.json()["user_id"] == "viewer"


def test_unread_count_and_mark_all(client, feed_store):
    client.post("/api/v1/posts/p1/like", json={"is_liked": False}, headers=_auth())

    response = client.get("/api/v1/notifications/unread-count", headers=_auth("author"))
    assert response.json() == {"count": 1}

    response = client.put("/api/v1/notifications/mark-all-read", headers=_auth("author"))
    assert response.json()["count"] == 1
    assert client.get("/api/v1/notifications/unread-count", headers=_auth("author")).json() == {"count": 0}


def test_notification_of_someone_else_is_forbidden(client, feed_store):
    client.post("/api/v1/posts/p1/like", json={"is_liked": False}, headers=_auth())
    [notification] = feed_store.rows("notifications")

    response = client.delete(f"/api/v1/notifications/{notification['id']}", headers=_auth())

    assert response.status_code == 403
    assert len(feed_store.rows("notifications")) == 1


def test_profile_setup_flow(client, feed_store):
    response = client.get("/api/v1/profiles/me", headers=_auth("newcomer"))
    assert response.status_code == 404

    response = client.put("/api/v1/profiles/me", json={"full_name": "Nora Nueva"}, headers=_auth("newcomer"))
    assert response.status_code == 200

    response = client.get("/api/v1/profiles/me", headers=_auth("newcomer"))
    assert response.json()["full_name"] == "Nora Nueva"


def test_connection_request_endpoint(client, feed_store):
    response = client.post("/api/v1/connections", json={"following_id": "author"}, headers=_auth())
    assert response.status_code == 201
    assert response.json()["status"] == "pending"

    overview = client.get("/api/v1/connections", headers=_auth("author")).json()
    assert [c["follower_id"] for c in overview["pending"]] == ["viewer"]

    response = client.post("/api/v1/connections", json={"following_id": "viewer"}, headers=_auth())
    assert response.status_code == 400


def test_feed_page_size_defaults_to_setting(client, feed_store):
    feed_store.seed("posts", *[make_post(f"bulk{i}", "author", 9, minutes=30 + i) for i in range(settings.FEED_PAGE_SIZE + 5)])

    response = client.get("/api/v1/feed", params={"market_ids": [9]}, headers=_auth())

    assert len(response.json()) == settings.FEED_PAGE_SIZE
    assert response.json()[0]["id"] == f"bulk{settings.FEED_PAGE_SIZE + 4}"


def test_markets_routes(client, feed_store):
    feed_store.seed("markets", {"id": 2, "name": "Salud"}, {"id": 1, "name": "Finanzas"})
    feed_store.seed("professions", {"id": 10, "name": "Enfermería", "market_id": 2})
    feed_store.seed("user_professions", {"user_id": "viewer", "profession_id": 10})

    markets = client.get("/api/v1/markets", headers=_auth()).json()
    assert [m["name"] for m in markets] == ["Finanzas", "Salud"]

    professions = client.get("/api/v1/markets/mine/professions", headers=_auth()).json()
    assert [(p["id"], p["name"]) for p in professions] == [(10, "Enfermería")]
    assert client.get("/api/v1/markets/mine/professions", headers=_auth("author")).json() == []
