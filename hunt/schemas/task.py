"""Task schemas for API responses."""

from pydantic import BaseModel


class TaskDTO(BaseModel):
    """Task response schema."""

    id: int
    title: str
    description: str
    points: int

    model_config = {"from_attributes": True}
