from datetime import datetime

from prolink.modules.home_feed.services.feed import reconcile_feed
from prolink.modules.posts.schemas.post import Post, PostComment, PostLike, SavedPost
from prolink.modules.profiles.schemas.profile import Profile

NOW = datetime(2025, 3, 1, 12, 0, 0)


def _post(post_id, author_id):
    return Post(id=post_id, user_id=author_id, market_id=1, content="x", created_at=NOW)


def _like(post_id, user_id, like_id=None):
    return PostLike(id=like_id or f"{post_id}-{user_id}", post_id=post_id, user_id=user_id)


def test_reconcile_keeps_post_order_and_counts():
    posts = [_post("b", "u1"), _post("a", "u2")]
    likes = [_like("a", "u1"), _like("a", "viewer"), _like("b", "u2")]
    comments = [
        PostComment(id="c1", post_id="a", user_id="u1", content="bien"),
        PostComment(id="c2", post_id="a", user_id="u3", content="genial"),
    ]

    items = reconcile_feed(posts, [], likes, comments, [], "viewer")

    assert [item.id for item in items] == ["b", "a"]
    assert [item.likes_count for item in items] == [1, 2]
    assert [item.comments_count for item in items] == [0, 2]
    assert [item.is_liked for item in items] == [False, True]


def test_reconcile_counts_distinct_likers():
    likes = [_like("a", "u1", "l1"), _like("a", "u1", "l2"), _like("a", "u2", "l3")]

    [item] = reconcile_feed([_post("a", "u9")], [], likes, [], [], "viewer")

    assert item.likes_count == 2


def test_reconcile_missing_profile_is_none():
    profiles = [Profile(id="p", user_id="u1", full_name="Uno")]

    items = reconcile_feed([_post("a", "u1"), _post("b", "ghost")], profiles, [], [], [], "viewer")

    assert items[0].profile.full_name == "Uno"
    assert items[1].profile is None


def test_reconcile_uses_first_profile_for_user():
    profiles = [
        Profile(id="first", user_id="u1", full_name="Primero"),
        Profile(id="second", user_id="u1", full_name="Segundo"),
    ]

    [item] = reconcile_feed([_post("a", "u1")], profiles, [], [], [], "viewer")

    assert item.profile.id == "first"


def test_reconcile_saved_and_liked_are_viewer_relative():
    saved = [SavedPost(id="s1", post_id="a", user_id="someone-else")]
    likes = [_like("a", "someone-else")]

    [item] = reconcile_feed([_post("a", "u1")], [], likes, [], saved, "viewer")

    assert item.is_saved is False
    assert item.is_liked is False
    assert item.likes_count == 1

    [item] = reconcile_feed(
        [_post("a", "u1")], [], likes, [], saved + [SavedPost(id="s2", post_id="a", user_id="viewer")], "viewer"
    )
    assert item.is_saved is True


def test_reconcile_does_not_mutate_inputs():
    posts = [_post("a", "u1")]
    likes = [_like("a", "viewer")]

    reconcile_feed(posts, [], likes, [], [], "viewer")

    assert posts[0].model_dump().get("likes_count") is None
    assert len(likes) == 1
