from typing import Optional

from prolink.modules.posts.schemas.post import Post
from prolink.modules.profiles.schemas.profile import Profile

class FeedItem(Post):
    """A post enriched for one viewer; rebuilt on every fetch, never stored"""
    profile: Optional[Profile] = None
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False
    is_saved: bool = False
