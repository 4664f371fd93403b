"""
Like and save toggles.

Both toggles decide from the snapshot the caller last rendered
(`is_liked` / `is_saved`) rather than re-reading first. The store's
unique constraints on (post_id, user_id) turn a racing duplicate insert
into a MutationFailure, and deleting an already-removed row is a no-op.
Callers refetch the feed afterwards whatever the outcome.
"""
import logging

from prolink.modules.notifications.services.notification_events import create_post_like_notification
from prolink.store.base import ObjectStore
from prolink.store.filters import Eq
from prolink.store.guard import guarded_write

logger = logging.getLogger(__name__)

async def toggle_like(
    store: ObjectStore, post_id: str, viewer_id: str, author_id: str, is_liked: bool
) -> bool:
    """Like or unlike a post, returning whether the viewer now likes it"""
    if is_liked:
        removed = await guarded_write(
            store.delete("post_likes", [Eq("post_id", post_id), Eq("user_id", viewer_id)]),
            "unlike post",
        )
        logger.info(f"User {viewer_id} unliked post {post_id} ({removed} rows removed)")
        return False

    await guarded_write(
        store.insert("post_likes", [{"post_id": post_id, "user_id": viewer_id}]),
        "like post",
    )
    logger.info(f"User {viewer_id} liked post {post_id}")

    # Only a new like notifies, and never for the author's own post
    await create_post_like_notification(store, post_id, author_id, viewer_id)
    return True

async def toggle_save(store: ObjectStore, post_id: str, viewer_id: str, is_saved: bool) -> bool:
    """Save or unsave a post, returning whether it is now saved"""
    if is_saved:
        await guarded_write(
            store.delete("saved_posts", [Eq("post_id", post_id), Eq("user_id", viewer_id)]),
            "unsave post",
        )
        logger.info(f"User {viewer_id} unsaved post {post_id}")
        return False

    await guarded_write(
        store.insert("saved_posts", [{"post_id": post_id, "user_id": viewer_id}]),
        "save post",
    )
    logger.info(f"User {viewer_id} saved post {post_id}")
    return True
