"""
Declarative base and shared columns for the document tables.

Dependencies: sqlalchemy
System role: ORM metadata root (Base.metadata.create_all builds the schema)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """
    created_at / updated_at columns, stored timezone-aware in UTC.

    Batch lookups never read these; they exist for operators inspecting
    when a document body last changed.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )
