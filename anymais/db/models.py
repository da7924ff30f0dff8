"""SQLAlchemy models for the SQL storage backend."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, JSON, String, func

from .session import Base


class StorageItem(Base):
    """One local-storage key and its JSON value."""

    __tablename__ = "storage_items"

    key = Column(String(128), primary_key=True)
    value = Column(JSON, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
