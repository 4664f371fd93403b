from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional, Set
import asyncio
import logging

from prolink.core.config import settings
from prolink.modules.home_feed.schemas.feed import FeedItem
from prolink.modules.posts.schemas.post import Post, PostComment, PostLike, SavedPost
from prolink.modules.profiles.schemas.profile import Profile
from prolink.store.base import ObjectStore
from prolink.store.filters import Eq, In, Order
from prolink.store.guard import guarded_read

logger = logging.getLogger(__name__)

async def fetch_feed(
    store: ObjectStore,
    market_ids: Iterable[int],
    viewer_id: str,
    limit: Optional[int] = None,
) -> List[FeedItem]:
    """
    Most recent posts in the given markets, personalised for the viewer.

    An empty market selection never shows an unfiltered feed: it returns
    an empty list without reading anything. Any failed or timed-out read
    raises QueryFailure and no partial feed is returned.
    """
    market_ids = list(dict.fromkeys(market_ids))
    if not market_ids:
        logger.debug(f"No markets selected for viewer {viewer_id}, skipping feed query")
        return []

    limit = limit or settings.FEED_PAGE_SIZE
    post_rows = await guarded_read(
        store.select(
            "posts",
            [In("market_id", market_ids)],
            order=Order("created_at", descending=True),
            limit=limit,
        ),
        "load posts",
    )
    if not post_rows:
        return []

    posts = [Post.model_validate(row) for row in post_rows]
    post_ids = [post.id for post in posts]
    author_ids = [post.user_id for post in posts]

    # The dependent reads only need the primary read, not each other
    profile_rows, like_rows, comment_rows, saved_rows = await asyncio.gather(
        guarded_read(store.select("profiles", [In("user_id", author_ids)]), "load profiles"),
        guarded_read(store.select("post_likes", [In("post_id", post_ids)]), "load likes"),
        guarded_read(store.select("post_comments", [In("post_id", post_ids)]), "load comments"),
        guarded_read(
            store.select("saved_posts", [In("post_id", post_ids), Eq("user_id", viewer_id)]),
            "load saved posts",
        ),
    )

    logger.info(
        f"Loaded {len(posts)} posts for viewer {viewer_id} "
        f"({len(like_rows)} likes, {len(comment_rows)} comments)"
    )

    return reconcile_feed(
        posts,
        [Profile.model_validate(row) for row in profile_rows],
        [PostLike.model_validate(row) for row in like_rows],
        [PostComment.model_validate(row) for row in comment_rows],
        [SavedPost.model_validate(row) for row in saved_rows],
        viewer_id,
    )

def reconcile_feed(
    posts: List[Post],
    profiles: List[Profile],
    likes: List[PostLike],
    comments: List[PostComment],
    saved: List[SavedPost],
    viewer_id: str,
) -> List[FeedItem]:
    """Join posts with their author profile and interaction counts, keeping post order"""
    profiles_by_user = _index_profiles(profiles)
    likers = _index_likers(likes)
    comment_counts = Counter(comment.post_id for comment in comments)
    saved_by_viewer = {mark.post_id for mark in saved if mark.user_id == viewer_id}

    return [
        _create_feed_item(post, profiles_by_user, likers, comment_counts, saved_by_viewer, viewer_id)
        for post in posts
    ]

def _index_profiles(profiles: List[Profile]) -> Dict[str, Profile]:
    """First profile seen per user id"""
    index: Dict[str, Profile] = {}
    for profile in profiles:
        index.setdefault(profile.user_id, profile)
    return index

def _index_likers(likes: List[PostLike]) -> Dict[str, Set[str]]:
    """Distinct liker ids per post id"""
    index: Dict[str, Set[str]] = defaultdict(set)
    for like in likes:
        index[like.post_id].add(like.user_id)
    return index

def _create_feed_item(
    post: Post,
    profiles_by_user: Dict[str, Profile],
    likers: Dict[str, Set[str]],
    comment_counts: Counter,
    saved_by_viewer: Set[str],
    viewer_id: str,
) -> FeedItem:
    post_likers = likers.get(post.id, set())
    return FeedItem(
        **post.model_dump(),
        # None when the author has not set up a profile yet
        profile=profiles_by_user.get(post.user_id),
        likes_count=len(post_likers),
        comments_count=comment_counts.get(post.id, 0),
        is_liked=viewer_id in post_likers,
        is_saved=post.id in saved_by_viewer,
    )
