"""Database models."""

from hunt.models.task import Task
from hunt.models.upload import Upload

__all__ = [
    "Task",
    "Upload",
]
