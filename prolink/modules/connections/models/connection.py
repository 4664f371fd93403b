from sqlalchemy import Column, String, DateTime, UniqueConstraint, CheckConstraint
from sqlalchemy.sql import func

from prolink.db.session import Base

class Connection(Base):
    __tablename__ = "connections"

    id = Column(String, primary_key=True, index=True)
    follower_id = Column(String, index=True)  # Who sent the request
    following_id = Column(String, index=True)  # Who received it
    status = Column(String, default="pending")  # pending, accepted, rejected
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="unique_connection"),
        CheckConstraint("follower_id != following_id", name="no_self_connection"),
    )
