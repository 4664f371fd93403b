from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class ProfileBase(BaseModel):
    username: Optional[str] = None
    full_name: Optional[str] = None
    country: Optional[str] = None
    about_me: Optional[str] = None
    avatar_url: Optional[str] = None

class ProfileUpdate(ProfileBase):
    pass

class Profile(ProfileBase):
    """Profile record returned to client"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
