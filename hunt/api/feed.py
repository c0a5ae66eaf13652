"""Feed API endpoints."""

from fastapi import APIRouter

from hunt.core.deps import DBSession
from hunt.schemas.upload import FeedItem
from hunt.services.upload_service import UploadService

router = APIRouter()


@router.get("", response_model=list[FeedItem])
async def get_feed(db: DBSession) -> list[FeedItem]:
    """Get all uploads with their task title, newest first."""
    upload_service = UploadService(db)
    return await upload_service.list_feed()
