"""
Columns shared by every store-scoped table
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoreScopedMixin:
    """Primary key, owning store and timestamps"""

    id = Column(String(32), primary_key=True, default=new_id)
    store_id = Column(String(64), nullable=False, index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
