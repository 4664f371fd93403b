from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from prolink.modules.profiles.schemas.profile import Profile

class NotificationType(str, Enum):
    LIKE = "like"
    COMMENT = "comment"
    CONNECTION_REQUEST = "connection_request"
    CONNECTION_ACCEPTED = "connection_accepted"
    NEW_POST = "new_post"

class NotificationCreate(BaseModel):
    user_id: str  # Recipient
    type: NotificationType
    title: str
    message: str
    related_user_id: Optional[str] = None
    related_post_id: Optional[str] = None
    related_connection_id: Optional[str] = None

class NotificationUpdate(BaseModel):
    read: bool = True

class Notification(NotificationCreate):
    """Notification model returned to client"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    read: bool = False
    created_at: Optional[datetime] = None
    related_user_profile: Optional[Profile] = None
