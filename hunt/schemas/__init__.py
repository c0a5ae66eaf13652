"""Pydantic schemas for API request/response validation."""

from hunt.schemas.system import HealthResponse
from hunt.schemas.task import TaskDTO
from hunt.schemas.upload import FeedItem, UploadCreate, UploadCreated, VoteResult

__all__ = [
    # System
    "HealthResponse",
    # Task
    "TaskDTO",
    # Upload
    "FeedItem",
    "UploadCreate",
    "UploadCreated",
    "VoteResult",
]
