"""Task model for hunt challenges."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hunt.db.base import Base


class Task(Base):
    """Task database model - one hunt challenge with a point value."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    points: Mapped[int] = mapped_column(Integer, default=10, server_default="10")
