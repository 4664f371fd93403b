from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator

class PostBase(BaseModel):
    content: str
    market_id: int
    image_url: Optional[str] = None

class PostCreate(PostBase):
    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Post content cannot be empty")
        return v

class Post(PostBase):
    """Post record as stored"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

class PostLike(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    post_id: str
    user_id: str
    created_at: Optional[datetime] = None

class PostComment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    post_id: str
    user_id: str
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class SavedPost(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    post_id: str
    user_id: str
    created_at: Optional[datetime] = None
