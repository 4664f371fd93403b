from typing import List, Optional
import logging

from prolink.core.config import settings
from prolink.modules.notifications.schemas.notification import Notification, NotificationCreate
from prolink.modules.profiles.services.profile import get_profiles_by_user_ids
from prolink.store.base import ObjectStore
from prolink.store.filters import Eq, Order
from prolink.store.guard import guarded_read, guarded_write

logger = logging.getLogger(__name__)

async def get_notification(store: ObjectStore, notification_id: str) -> Optional[Notification]:
    """Get notification by ID"""
    rows = await guarded_read(
        store.select("notifications", [Eq("id", notification_id)], limit=1), "load notification"
    )
    if not rows:
        return None
    return Notification.model_validate(rows[0])

async def list_notifications(
    store: ObjectStore,
    user_id: str,
    limit: Optional[int] = None,
    unread_only: bool = False,
) -> List[Notification]:
    """Newest notifications for a user, with the profile of whoever triggered each one"""
    filters = [Eq("user_id", user_id)]
    if unread_only:
        filters.append(Eq("read", False))

    rows = await guarded_read(
        store.select(
            "notifications",
            filters,
            order=Order("created_at", descending=True),
            limit=limit or settings.NOTIFICATIONS_PAGE_SIZE,
        ),
        "load notifications",
    )
    notifications = [Notification.model_validate(row) for row in rows]

    related_ids = list({n.related_user_id for n in notifications if n.related_user_id})
    profiles = {p.user_id: p for p in await get_profiles_by_user_ids(store, related_ids)}

    return [
        n.model_copy(update={"related_user_profile": profiles.get(n.related_user_id)})
        for n in notifications
    ]

async def unread_notification_count(store: ObjectStore, user_id: str) -> int:
    """How many notifications the user has not read yet"""
    return await guarded_read(
        store.count("notifications", [Eq("user_id", user_id), Eq("read", False)]),
        "count unread notifications",
    )

async def create_notification(store: ObjectStore, notification_in: NotificationCreate) -> Notification:
    """Create a new notification"""
    row = notification_in.model_dump(mode="json")
    rows = await guarded_write(store.insert("notifications", [{**row, "read": False}]), "create notification")
    return Notification.model_validate(rows[0])

async def mark_as_read(store: ObjectStore, notification_id: str) -> int:
    return await guarded_write(
        store.update("notifications", {"read": True}, [Eq("id", notification_id)]),
        "mark notification as read",
    )

async def mark_all_as_read(store: ObjectStore, user_id: str) -> int:
    """Mark all notifications as read for a user"""
    return await guarded_write(
        store.update("notifications", {"read": True}, [Eq("user_id", user_id), Eq("read", False)]),
        "mark notifications as read",
    )

async def delete_notification(store: ObjectStore, notification_id: str) -> int:
    return await guarded_write(
        store.delete("notifications", [Eq("id", notification_id)]), "delete notification"
    )
