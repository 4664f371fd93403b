from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from prolink.db.session import Base

class Market(Base):
    __tablename__ = "markets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=func.now())

class Profession(Base):
    __tablename__ = "professions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    market_id = Column(Integer, ForeignKey("markets.id"))
    created_at = Column(DateTime, default=func.now())

class UserMarket(Base):
    __tablename__ = "user_markets"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, index=True)
    market_id = Column(Integer, ForeignKey("markets.id"))
    created_at = Column(DateTime, default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "market_id", name="unique_user_market"),
    )

class UserProfession(Base):
    __tablename__ = "user_professions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, index=True)
    profession_id = Column(Integer, ForeignKey("professions.id"))
    created_at = Column(DateTime, default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "profession_id", name="unique_user_profession"),
    )
