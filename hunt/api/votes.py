"""Vote API endpoints."""

from fastapi import APIRouter

from hunt.core.deps import DBSession
from hunt.schemas.upload import VoteResult
from hunt.services.upload_service import UploadService

router = APIRouter()


@router.post("/{upload_id}", response_model=VoteResult)
async def vote(upload_id: int, db: DBSession) -> VoteResult:
    """
    Add one vote to an upload.

    Voting for an id that does not exist changes nothing and still reports
    success.
    """
    upload_service = UploadService(db)
    await upload_service.vote(upload_id)
    return VoteResult(success=True)
