"""Task catalog API endpoints."""

from fastapi import APIRouter, HTTPException, status

from hunt.core.deps import DBSession
from hunt.schemas.task import TaskDTO
from hunt.services.task_service import TaskService

router = APIRouter()


@router.get("", response_model=list[TaskDTO])
async def get_tasks(db: DBSession) -> list[TaskDTO]:
    """Get all hunt tasks."""
    task_service = TaskService(db)
    tasks = await task_service.list_tasks()
    return [TaskDTO.model_validate(t) for t in tasks]


@router.get("/default", response_model=TaskDTO)
async def get_default_task(db: DBSession) -> TaskDTO:
    """Get the task preselected for quick uploads."""
    task_service = TaskService(db)
    task = await task_service.get_default_task()

    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No tasks available",
        )

    return TaskDTO.model_validate(task)
