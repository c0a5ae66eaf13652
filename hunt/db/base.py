"""Declarative base for all ORM models."""

from sqlalchemy.orm import DeclarativeBase

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class Base(DeclarativeBase):
    """Base class for database models."""


def fits_integer_column(value: int) -> bool:
    """Check that a Python int can be bound to an INTEGER column."""
    return SQLITE_INT_MIN <= value <= SQLITE_INT_MAX
