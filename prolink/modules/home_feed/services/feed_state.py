from typing import Iterable, List, Optional
import logging

from prolink.core.errors import MutationFailure, QueryFailure
from prolink.modules.home_feed.schemas.feed import FeedItem
from prolink.modules.home_feed.services.feed import fetch_feed
from prolink.modules.notifications.services.notification import unread_notification_count
from prolink.modules.posts.interactions.services.interaction import toggle_like, toggle_save
from prolink.store.base import ObjectStore

logger = logging.getLogger(__name__)


class ViewerFeed:
    """The feed one viewer is looking at, kept in sync by full refetches.

    `items` is only ever replaced wholesale by a completed refresh. When
    a refresh fails the previous items stay and `error` holds the
    message. A refresh started after another one supersedes it: the
    older result is dropped when it arrives.
    """

    def __init__(self, store: ObjectStore, viewer_id: str):
        self.store = store
        self.viewer_id = viewer_id
        self.market_ids: List[int] = []
        self.items: List[FeedItem] = []
        self.error: Optional[str] = None
        self.unread_notifications = 0
        self._generation = 0

    def get_item(self, post_id: str) -> Optional[FeedItem]:
        return next((item for item in self.items if item.id == post_id), None)

    async def select_markets(self, market_ids: Iterable[int]) -> List[FeedItem]:
        self.market_ids = list(market_ids)
        return await self.refresh()

    async def refresh(self) -> List[FeedItem]:
        self._generation += 1
        generation = self._generation
        try:
            items = await fetch_feed(self.store, self.market_ids, self.viewer_id)
        except QueryFailure as e:
            if generation == self._generation:
                logger.error(f"Error loading posts: {e.message}")
                self.error = e.message
            return self.items

        if generation != self._generation:
            logger.debug(f"Dropping superseded feed refresh for viewer {self.viewer_id}")
            return self.items

        self.items = items
        self.error = None
        return self.items

    async def refresh_unread(self) -> int:
        try:
            self.unread_notifications = await unread_notification_count(self.store, self.viewer_id)
        except QueryFailure as e:
            logger.error(f"Error loading unread notifications: {e.message}")
        return self.unread_notifications

    async def toggle_like(self, post_id: str) -> None:
        item = self.get_item(post_id)
        if item is None:
            logger.warning(f"Post {post_id} is not in the current feed, ignoring like")
            return
        try:
            await toggle_like(self.store, item.id, self.viewer_id, item.user_id, item.is_liked)
        except MutationFailure as e:
            logger.error(f"Error toggling like: {e.message}")
        await self._after_mutation()

    async def toggle_save(self, post_id: str) -> None:
        item = self.get_item(post_id)
        if item is None:
            logger.warning(f"Post {post_id} is not in the current feed, ignoring save")
            return
        try:
            await toggle_save(self.store, item.id, self.viewer_id, item.is_saved)
        except MutationFailure as e:
            logger.error(f"Error toggling save: {e.message}")
        await self._after_mutation()

    async def _after_mutation(self) -> None:
        await self.refresh()
        await self.refresh_unread()
