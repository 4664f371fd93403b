from sqlalchemy import Column, String, DateTime, Boolean, Text
from sqlalchemy.sql import func

from prolink.db.session import Base

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, index=True)  # Recipient
    type = Column(String)  # like, comment, connection_request, connection_accepted, new_post
    title = Column(String)
    message = Column(Text)
    read = Column(Boolean, default=False)
    related_user_id = Column(String, nullable=True)  # The user who triggered the notification
    related_post_id = Column(String, nullable=True)
    related_connection_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=func.now())
