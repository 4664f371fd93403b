import asyncio

import pytest

from prolink.core.errors import StoreError
from prolink.modules.home_feed.services.feed import fetch_feed
from prolink.modules.posts.interactions.services.interaction import toggle_like
from prolink.modules.notifications.services.notification import unread_notification_count
from prolink.store.filters import AnyOf, Eq, In, Neq, Order

from conftest import make_post, make_profile


def _seed(sql_store):
    async def seed():
        await sql_store.insert("markets", [{"id": 5, "name": "Tecnología"}, {"id": 7, "name": "Salud"}])
        await sql_store.insert("posts", [
            make_post("p1", "author", 5, minutes=10),
            make_post("p2", "author", 5, minutes=5),
            make_post("p3", "other", 7, minutes=20),
        ])
        await sql_store.insert("profiles", [make_profile("author", "Ana Autora"), make_profile("viewer", "Victor")])
    asyncio.run(seed())


def test_insert_generates_string_ids(sql_store):
    [row] = asyncio.run(sql_store.insert("profiles", [{"user_id": "u1", "full_name": "Uno"}]))

    assert isinstance(row["id"], str) and len(row["id"]) == 36
    assert row["created_at"] is not None


def test_insert_lets_database_number_integer_ids(sql_store):
    [row] = asyncio.run(sql_store.insert("markets", [{"name": "Finanzas"}]))

    assert isinstance(row["id"], int)


def test_select_filters_order_and_limit(sql_store):
    _seed(sql_store)

    rows = asyncio.run(sql_store.select(
        "posts", [In("market_id", [5, 7])], order=Order("created_at", descending=True), limit=2
    ))
    assert [r["id"] for r in rows] == ["p3", "p1"]

    rows = asyncio.run(sql_store.select("posts", [Neq("user_id", "author")]))
    assert [r["id"] for r in rows] == ["p3"]

    rows = asyncio.run(sql_store.select(
        "posts", [AnyOf(("id", "p1"), ("id", "p3"))], order=Order("id")
    ))
    assert [r["id"] for r in rows] == ["p1", "p3"]


def test_update_delete_and_count(sql_store):
    _seed(sql_store)

    changed = asyncio.run(sql_store.update("posts", {"content": "editado"}, [Eq("market_id", 5)]))
    assert changed == 2
    assert asyncio.run(sql_store.count("posts", [Eq("content", "editado")])) == 2

    assert asyncio.run(sql_store.delete("posts", [Eq("id", "missing")])) == 0
    assert asyncio.run(sql_store.delete("posts", [Eq("id", "p3")])) == 1
    assert asyncio.run(sql_store.count("posts")) == 2


def test_duplicate_like_violates_unique_constraint(sql_store):
    _seed(sql_store)
    asyncio.run(sql_store.insert("post_likes", [{"post_id": "p1", "user_id": "viewer"}]))

    with pytest.raises(StoreError):
        asyncio.run(sql_store.insert("post_likes", [{"post_id": "p1", "user_id": "viewer"}]))

    assert asyncio.run(sql_store.count("post_likes")) == 1


def test_unknown_table_is_a_store_error(sql_store):
    with pytest.raises(StoreError):
        asyncio.run(sql_store.select("jobs"))


def test_feed_round_trip_against_database(sql_store):
    _seed(sql_store)

    items = asyncio.run(fetch_feed(sql_store, [5], "viewer"))
    assert [(i.id, i.is_liked, i.likes_count) for i in items] == [("p1", False, 0), ("p2", False, 0)]
    assert items[0].profile.full_name == "Ana Autora"

    asyncio.run(toggle_like(sql_store, "p1", "viewer", "author", items[0].is_liked))
    items = asyncio.run(fetch_feed(sql_store, [5], "viewer"))
    assert [(i.id, i.is_liked, i.likes_count) for i in items] == [("p1", True, 1), ("p2", False, 0)]
    assert asyncio.run(unread_notification_count(sql_store, "author")) == 1

    asyncio.run(toggle_like(sql_store, "p1", "viewer", "author", items[0].is_liked))
    items = asyncio.run(fetch_feed(sql_store, [5], "viewer"))
    assert (items[0].is_liked, items[0].likes_count) == (False, 0)
    assert asyncio.run(unread_notification_count(sql_store, "author")) == 1


def test_comment_without_content_is_rejected(sql_store):
    _seed(sql_store)

    with pytest.raises(StoreError):
        asyncio.run(sql_store.insert("post_comments", [{"post_id": "p1", "user_id": "viewer", "content": None}]))

    assert asyncio.run(sql_store.count("post_comments")) == 0
