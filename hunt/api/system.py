"""System API endpoints."""

from fastapi import APIRouter

from hunt.core.deps import AppSettings, DBSession
from hunt.schemas.system import HealthResponse
from hunt.services.task_service import TaskService
from hunt.services.upload_service import UploadService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(db: DBSession, settings: AppSettings) -> HealthResponse:
    """Report that the API and its database answer."""
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        tasks=await TaskService(db).count(),
        uploads=await UploadService(db).count(),
    )
