"""
Model registry.

Import all models here to ensure they are registered with SQLAlchemy metadata
before ``Base.metadata.create_all`` runs.
"""

from hunt.db.base import Base
from hunt.models.task import Task
from hunt.models.upload import Upload

__all__ = [
    "Base",
    "Task",
    "Upload",
]
