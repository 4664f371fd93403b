"""
Notification events service.
This module creates the notifications emitted by likes and connection changes.
Titles and messages are the user-facing (Spanish) copy shown in the inbox.
"""
from typing import Optional
import logging

from prolink.core.errors import QueryFailure
from prolink.modules.notifications.schemas.notification import (
    Notification,
    NotificationCreate,
    NotificationType,
)
from prolink.modules.notifications.services.notification import create_notification
from prolink.modules.profiles.services.profile import get_profile_by_user_id
from prolink.store.base import ObjectStore

logger = logging.getLogger(__name__)

async def _display_name(store: ObjectStore, user_id: str) -> str:
    try:
        profile = await get_profile_by_user_id(store, user_id)
    except QueryFailure as e:
        logger.warning(f"Could not load profile {user_id} for notification text: {e.message}")
        return "alguien"
    if profile is None or not profile.full_name:
        return "alguien"
    return profile.full_name

async def create_post_like_notification(
    store: ObjectStore, post_id: str, author_id: str, liker_id: str
) -> Optional[Notification]:
    """
    Create a notification when a post is liked.

    Args:
        store: Object store
        post_id: ID of the post that was liked
        author_id: ID of the post author (the recipient)
        liker_id: ID of the user who liked the post

    Returns:
        The notification, or None when the author liked their own post
    """
    if author_id == liker_id:
        logger.debug(f"User {liker_id} liked their own post, no notification created")
        return None

    liker_name = await _display_name(store, liker_id)
    notification = await create_notification(
        store,
        NotificationCreate(
            user_id=author_id,
            type=NotificationType.LIKE,
            title="Nueva reacción",
            message=f"A {liker_name} le gustó tu publicación",
            related_user_id=liker_id,
            related_post_id=post_id,
        ),
    )
    logger.info(f"Created post like notification for user {author_id} from user {liker_id}")
    return notification

async def create_connection_request_notification(
    store: ObjectStore, sender_id: str, receiver_id: str, connection_id: str
) -> Notification:
    """Create a notification when a connection request is sent."""
    notification = await create_notification(
        store,
        NotificationCreate(
            user_id=receiver_id,
            type=NotificationType.CONNECTION_REQUEST,
            title="Nueva solicitud de conexión",
            message="Tienes una nueva solicitud de conexión",
            related_user_id=sender_id,
            related_connection_id=connection_id,
        ),
    )
    logger.info(f"Created connection request notification for user {receiver_id} from user {sender_id}")
    return notification

async def create_connection_accepted_notification(
    store: ObjectStore, accepter_id: str, requester_id: str, connection_id: str
) -> Notification:
    """Create a notification when a connection request is accepted."""
    notification = await create_notification(
        store,
        NotificationCreate(
            user_id=requester_id,
            type=NotificationType.CONNECTION_ACCEPTED,
            title="Conexión aceptada",
            message="Tu solicitud de conexión fue aceptada",
            related_user_id=accepter_id,
            related_connection_id=connection_id,
        ),
    )
    logger.info(f"Created connection accepted notification for user {requester_id} from user {accepter_id}")
    return notification
