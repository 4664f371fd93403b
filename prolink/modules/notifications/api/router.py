from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status, Query

from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.notifications.schemas.notification import (
    Notification as NotificationSchema,
    NotificationUpdate,
)
from prolink.modules.notifications.services.notification import (
    delete_notification,
    get_notification,
    list_notifications,
    mark_all_as_read,
    mark_as_read,
    unread_notification_count,
)
from prolink.store.base import ObjectStore

router = APIRouter()

async def _validate_notification(store: ObjectStore, notification_id: str, viewer_id: str) -> NotificationSchema:
    """Validate notification exists and belongs to the viewer"""
    notification = await get_notification(store, notification_id=notification_id)
    if not notification:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found"
        )

    if notification.user_id != viewer_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return notification

@router.get("", response_model=List[NotificationSchema])
@router.get("/", response_model=List[NotificationSchema])
async def read_notifications(
    store: ObjectStore = Depends(get_store),
    limit: int = Query(50, ge=1, le=200),
    unread_only: bool = False,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Get the viewer's newest notifications"""
    return await list_notifications(store, identity.id, limit, unread_only)

@router.get("/unread-count", response_model=dict)
async def read_unread_count(
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    return {"count": await unread_notification_count(store, identity.id)}

@router.put("/mark-all-read", response_model=dict)
async def mark_all_notifications_as_read(
    *,
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Mark all of the viewer's notifications as read"""
    count = await mark_all_as_read(store, identity.id)

    return {
        "message": f"Marked {count} notifications as read",
        "count": count
    }

@router.put("/{notification_id}", response_model=NotificationSchema)
async def mark_notification_as_read(
    *,
    store: ObjectStore = Depends(get_store),
    notification_id: str,
    notification_in: NotificationUpdate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Mark a specific notification as read"""
    notification = await _validate_notification(store, notification_id, identity.id)
    if notification_in.read:
        await mark_as_read(store, notification_id)
    return notification.model_copy(update={"read": notification.read or notification_in.read})

@router.delete("/{notification_id}", response_model=NotificationSchema)
async def delete_notification_by_id(
    *,
    store: ObjectStore = Depends(get_store),
    notification_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Delete a specific notification"""
    notification = await _validate_notification(store, notification_id, identity.id)
    await delete_notification(store, notification_id)
    return notification
