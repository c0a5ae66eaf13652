"""Task service for the hunt catalog."""

from collections.abc import Iterable

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.db.base import fits_integer_column
from hunt.models.task import Task
from hunt.services.base_service import BaseService

DEFAULT_TASK_TITLE = "General Discovery"


class TaskService(BaseService[Task]):
    """Task service. The catalog is read-only once seeded."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Task)

    async def list_tasks(self) -> list[Task]:
        """Get all tasks in insertion order."""
        return await self.get_all()

    async def find_by_title(self, title: str) -> Task | None:
        """Get the first task with an exact title."""
        result = await self.db.execute(
            select(Task).where(Task.title == title).order_by(Task.id).limit(1)
        )
        return result.scalar_one_or_none()

    async def get_default_task(self) -> Task | None:
        """Task used for quick uploads: "General Discovery", else the first task."""
        task = await self.find_by_title(DEFAULT_TASK_TITLE)
        if task:
            return task
        result = await self.db.execute(select(Task).order_by(Task.id).limit(1))
        return result.scalar_one_or_none()

    async def exists(self, task_id: int) -> bool:
        """Check whether a task id is in the catalog."""
        if not fits_integer_column(task_id):
            return False
        return await self.get_by_id(task_id) is not None

    async def seed_if_empty(self, seed: Iterable[tuple[str, str, int]]) -> int:
        """
        Insert the seed tasks when the catalog is empty.

        Entries are inserted in order, so a fresh table assigns ids 1..n.
        Returns the number of inserted tasks; 0 when the catalog already
        had rows.
        """
        if await self.count() > 0:
            logger.debug("Task catalog already populated, skipping seed")
            return 0

        tasks = [
            Task(title=title, description=description, points=points)
            for title, description, points in seed
        ]
        # add() one at a time keeps the INSERT order equal to the seed order
        for task in tasks:
            self.db.add(task)
            await self.db.flush()
        await self.db.commit()

        logger.info(f"Seeded {len(tasks)} tasks")
        return len(tasks)
