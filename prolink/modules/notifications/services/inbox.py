from typing import List, Optional
import logging

from prolink.core.errors import FeedError
from prolink.modules.notifications.schemas.notification import Notification
from prolink.modules.notifications.services.notification import (
    delete_notification,
    list_notifications,
    mark_all_as_read,
    mark_as_read,
)
from prolink.store.base import ObjectStore

logger = logging.getLogger(__name__)


class NotificationInbox:
    """A viewer's loaded notifications.

    Unlike the feed, the inbox is patched locally after a successful
    write: marking one notification read replaces that single record by
    id instead of reloading the list.
    """

    def __init__(self, store: ObjectStore, viewer_id: str):
        self.store = store
        self.viewer_id = viewer_id
        self.notifications: List[Notification] = []
        self.error: Optional[str] = None

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n.read)

    async def load(self) -> List[Notification]:
        try:
            self.notifications = await list_notifications(self.store, self.viewer_id)
            self.error = None
        except FeedError as e:
            logger.error(f"Error loading notifications: {e.message}")
            self.error = e.message
        return self.notifications

    async def mark_as_read(self, notification_id: str) -> None:
        try:
            await mark_as_read(self.store, notification_id)
        except FeedError as e:
            logger.error(f"Error marking notification as read: {e.message}")
            return
        self.notifications = [
            n.model_copy(update={"read": True}) if n.id == notification_id else n
            for n in self.notifications
        ]

    async def mark_all_as_read(self) -> None:
        try:
            await mark_all_as_read(self.store, self.viewer_id)
        except FeedError as e:
            logger.error(f"Error marking all notifications as read: {e.message}")
            return
        self.notifications = [n.model_copy(update={"read": True}) for n in self.notifications]

    async def delete(self, notification_id: str) -> None:
        try:
            await delete_notification(self.store, notification_id)
        except FeedError as e:
            logger.error(f"Error deleting notification: {e.message}")
            return
        self.notifications = [n for n in self.notifications if n.id != notification_id]
