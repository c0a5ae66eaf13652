"""Upload model for photo submissions."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from hunt.db.base import Base


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (SQLite stores no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Upload(Base):
    """Upload database model - a photo submitted for a task."""

    __tablename__ = "uploads"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Declared only; existence of the task is checked by the service, not SQLite
    task_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("tasks.id"), nullable=True
    )

    user_name: Mapped[str] = mapped_column(Text, nullable=False)

    # Full data URI, e.g. "data:image/jpeg;base64,..."
    photo_url: Mapped[str] = mapped_column(Text, nullable=False)

    caption: Mapped[str | None] = mapped_column(Text, nullable=True)

    votes: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        server_default=func.current_timestamp(),
    )

    __table_args__ = (
        Index("ix_uploads_created_at_id", "created_at", "id"),
    )
