"""Post ORM — the single persisted entity.

Invariants:
    - id is a UUID primary key assigned on insert, never reused
    - is_deleted rows stay in the table (soft delete), never physically removed
    - created_at set once; updated_at refreshed on every update

Design Decisions:
    - JSON column for tags: ordered list stored as-is, no join table (single-entity service)
    - Generic Uuid type: same mapping on PostgreSQL (native uuid) and SQLite (char)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from blogpost.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Blog post row."""
    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    published_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )


def as_utc(value: datetime) -> datetime:
    """Normalize to aware UTC. Naive values are taken as UTC (SQLite returns naive)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
