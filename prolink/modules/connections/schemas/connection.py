from enum import Enum
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from prolink.modules.profiles.schemas.profile import Profile

class ConnectionStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

class ConnectionCreate(BaseModel):
    following_id: str

class ConnectionUpdate(BaseModel):
    status: ConnectionStatus

class Connection(BaseModel):
    """Connection model returned to client"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    follower_id: str
    following_id: str
    status: ConnectionStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    follower_profile: Optional[Profile] = None
    following_profile: Optional[Profile] = None

class ConnectionOverview(BaseModel):
    pending: List[Connection]
    sent: List[Connection]
    accepted: List[Connection]
