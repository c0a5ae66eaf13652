"""API router initialization."""

from fastapi import APIRouter

from hunt.api.feed import router as feed_router
from hunt.api.system import router as system_router
from hunt.api.tasks import router as tasks_router
from hunt.api.uploads import router as uploads_router
from hunt.api.votes import router as votes_router

router = APIRouter(prefix="/api")

router.include_router(tasks_router, prefix="/tasks", tags=["Tasks"])
router.include_router(feed_router, prefix="/feed", tags=["Feed"])
router.include_router(uploads_router, prefix="/upload", tags=["Uploads"])
router.include_router(votes_router, prefix="/vote", tags=["Votes"])
router.include_router(system_router, tags=["System"])
