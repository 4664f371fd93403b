from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from prolink.db.session import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, index=True)  # Author identity id
    market_id = Column(Integer, ForeignKey("markets.id"), index=True)
    content = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=func.now(), index=True)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

class PostLike(Base):
    __tablename__ = "post_likes"

    id = Column(String, primary_key=True, index=True)
    post_id = Column(String, ForeignKey("posts.id"), index=True)
    user_id = Column(String)
    created_at = Column(DateTime, default=func.now())

    # One like per (post, user); a racing duplicate insert fails here
    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="unique_post_like"),
    )

class PostComment(Base):
    __tablename__ = "post_comments"

    id = Column(String, primary_key=True, index=True)
    post_id = Column(String, ForeignKey("posts.id"), index=True)
    user_id = Column(String)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

class SavedPost(Base):
    __tablename__ = "saved_posts"

    id = Column(String, primary_key=True, index=True)
    post_id = Column(String, ForeignKey("posts.id"), index=True)
    user_id = Column(String)
    created_at = Column(DateTime, default=func.now())

    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="unique_saved_post"),
    )
