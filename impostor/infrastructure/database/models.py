"""SQLAlchemy ORM models -- used-word ledger schema."""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import DeclarativeBase


def _utcnow():
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class UsedWordModel(Base):
    __tablename__ = "used_words"

    word_id = Column(String(100), primary_key=True)
    used_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
