"""Upload service for photo submissions, the feed and voting."""

from typing import Literal

from loguru import logger
from sqlalchemy import desc, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.core.imaging import is_image_data_uri
from hunt.db.base import fits_integer_column
from hunt.models.task import Task
from hunt.models.upload import Upload
from hunt.schemas.upload import FeedItem, UploadCreate
from hunt.services.base_service import BaseService
from hunt.services.task_service import TaskService

ValidationMode = Literal["reject", "accept"]


class UploadRejected(Exception):
    """Raised when a submission fails validation in reject mode."""

    def __init__(self, problems: list[str]):
        super().__init__("; ".join(problems))
        self.problems = problems


class UploadService(BaseService[Upload]):
    """Upload service for submission, feed and vote operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Upload)

    async def find_problems(self, data: UploadCreate) -> list[str]:
        """List everything wrong with a submission. Empty when it is valid."""
        problems = []

        if data.task_id is None:
            problems.append("taskId is required")
        elif not await TaskService(self.db).exists(data.task_id):
            problems.append(f"Task {data.task_id} does not exist")

        if not data.user_name or not data.user_name.strip():
            problems.append("userName is required")

        if not data.photo_data:
            problems.append("photoData is required")
        elif not is_image_data_uri(data.photo_data):
            problems.append("photoData must be a base64 image data URI")

        return problems

    async def submit(
        self,
        data: UploadCreate,
        validation: ValidationMode = "reject",
    ) -> Upload:
        """
        Store a new submission with zero votes.

        In "reject" mode an invalid submission raises UploadRejected and
        nothing is stored. In "accept" mode problems are only logged and the
        values are stored as given; missing required columns then fail at
        the storage layer.
        """
        if data.task_id is not None and not fits_integer_column(data.task_id):
            # Cannot be stored in either mode
            logger.info(f"Upload rejected: taskId {data.task_id} out of range")
            raise UploadRejected([f"Task {data.task_id} does not exist"])

        problems = await self.find_problems(data)
        if problems:
            if validation == "reject":
                logger.info(f"Upload rejected: {'; '.join(problems)}")
                raise UploadRejected(problems)
            logger.warning(f"Storing upload despite problems: {'; '.join(problems)}")

        upload = Upload(
            task_id=data.task_id,
            user_name=data.user_name,
            photo_url=data.photo_data,
            caption=data.caption,
            votes=0,
        )
        try:
            upload = await self.create(upload)
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        logger.info(
            f"Upload {upload.id} stored for task {upload.task_id} by {upload.user_name!r}"
        )
        return upload

    async def list_feed(self) -> list[FeedItem]:
        """
        Get uploads joined with their task title, newest first.

        Inner join: uploads whose task_id matches no task are left out.
        Ties on created_at fall back to the higher id first.
        """
        result = await self.db.execute(
            select(
                Upload.id,
                Upload.task_id,
                Task.title.label("task_title"),
                Upload.user_name,
                Upload.photo_url,
                Upload.caption,
                Upload.votes,
                Upload.created_at,
            )
            .join(Task, Upload.task_id == Task.id)
            .order_by(desc(Upload.created_at), desc(Upload.id))
        )
        return [FeedItem.model_validate(dict(row._mapping)) for row in result.all()]

    async def vote(self, upload_id: int) -> int:
        """
        Add one vote to an upload.

        The increment runs in SQL so concurrent votes are not lost. Returns
        the number of rows changed: 0 for an unknown id, which is not an
        error. Ids outside the INTEGER range cannot match a row and are
        ignored without a query.
        """
        if not fits_integer_column(upload_id):
            logger.debug(f"Vote for out-of-range upload id {upload_id} ignored")
            return 0

        result = await self.db.execute(
            update(Upload)
            .where(Upload.id == upload_id)
            .values(votes=Upload.votes + 1)
        )
        await self.db.commit()

        if result.rowcount == 0:
            logger.debug(f"Vote for unknown upload {upload_id} ignored")
        return result.rowcount
