from typing import Optional
import logging

from prolink.modules.posts.schemas.post import Post, PostCreate
from prolink.store.base import ObjectStore
from prolink.store.filters import Eq
from prolink.store.guard import guarded_read, guarded_write

logger = logging.getLogger(__name__)

async def get_post(store: ObjectStore, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    rows = await guarded_read(store.select("posts", [Eq("id", post_id)], limit=1), "load post")
    if not rows:
        return None
    return Post.model_validate(rows[0])

async def create_post(store: ObjectStore, post_in: PostCreate, author_id: str) -> Post:
    """Create new post in one market"""
    logger.info(f"Creating post for author ID: {author_id} in market {post_in.market_id}")
    rows = await guarded_write(
        store.insert("posts", [{"user_id": author_id, **post_in.model_dump()}]),
        "create post",
    )
    return Post.model_validate(rows[0])
