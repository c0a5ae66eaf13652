"""Service layer for business logic."""

from hunt.services.task_service import TaskService
from hunt.services.upload_service import UploadRejected, UploadService

__all__ = [
    "TaskService",
    "UploadRejected",
    "UploadService",
]
