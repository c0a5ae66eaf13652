"""Upload, feed and vote schemas for API request/response."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class UploadCreate(BaseModel):
    """Upload submission schema.

    Every field is optional at the schema level so that missing values reach
    the service, which rejects or accepts them according to the configured
    validation mode.
    """

    task_id: int | None = Field(None, alias="taskId")
    user_name: str | None = Field(None, alias="userName")
    photo_data: str | None = Field(None, alias="photoData")
    caption: str | None = None

    model_config = {"populate_by_name": True}


class UploadCreated(BaseModel):
    """Upload submission response."""

    id: int


class FeedItem(BaseModel):
    """One feed row: upload fields plus the title of its task."""

    id: int
    task_id: int
    task_title: str
    user_name: str
    photo_url: str
    caption: str | None = None
    votes: int
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Stored timestamps are naive UTC; mark them as such for clients."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class VoteResult(BaseModel):
    """Vote response. Always successful, even for unknown uploads."""

    success: bool = True
