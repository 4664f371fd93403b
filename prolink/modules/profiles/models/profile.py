from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.sql import func

from prolink.db.session import Base

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, unique=True, index=True)  # External identity id
    username = Column(String, nullable=True)
    full_name = Column(String, nullable=True)
    country = Column(String, nullable=True)
    about_me = Column(Text, nullable=True)
    avatar_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
