# core/sa/models/base.py
from datetime import datetime, UTC
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped
from sqlalchemy import DateTime

def utcnow() -> datetime:
    return datetime.now(UTC)

class Base(DeclarativeBase):
    """Declarative base for the BookTracker tables"""
    pass

class TimestampMixin:
    """created_at set on insert, updated_at refreshed on every update"""
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
