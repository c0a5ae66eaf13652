"""FastAPI dependencies for dependency injection."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.core.config import Settings, get_settings
from hunt.db.session import Database


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_database(request: Request) -> Database:
    """Database owned by the running application."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database has not been opened by the application lifespan")
    return database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with database.session() as session:
        yield session


# Type aliases for cleaner dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
