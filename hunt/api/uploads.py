"""Photo upload API endpoints."""

from fastapi import APIRouter, HTTPException, status

from hunt.core.deps import AppSettings, DBSession
from hunt.schemas.upload import UploadCreate, UploadCreated
from hunt.services.upload_service import UploadRejected, UploadService

router = APIRouter()


@router.post("", response_model=UploadCreated)
async def create_upload(
    data: UploadCreate,
    db: DBSession,
    settings: AppSettings,
) -> UploadCreated:
    """
    Submit a photo for a task.

    - **taskId**: Task the photo answers
    - **userName**: Display name of the submitter
    - **photoData**: Photo as a base64 data URI
    - **caption**: Optional caption
    """
    upload_service = UploadService(db)
    try:
        upload = await upload_service.submit(data, validation=settings.upload_validation)
    except UploadRejected as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.problems,
        )

    return UploadCreated(id=upload.id)
