"""
Photo Hunt API - FastAPI Application

Main entry point: task catalog, photo uploads, the public feed and votes.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from hunt.api import router as api_router
from hunt.core.config import Settings, get_settings
from hunt.core.middleware import BodySizeLimitMiddleware
from hunt.db.seed import seed_tasks
from hunt.db.session import Database


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one settings object."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database, create tables and seed before serving."""
        logger.info(f"Starting {settings.app_name}...")

        if settings.database_url.startswith("sqlite") and not settings.database_url_override:
            Path(settings.data_dir).mkdir(parents=True, exist_ok=True)

        database = Database(settings.database_url, echo=settings.debug)
        database.connect()
        await database.create_tables()
        if settings.seed_on_startup:
            await seed_tasks(database)
        app.state.database = database

        logger.info(f"{settings.app_name} started on port {settings.port}")

        yield

        logger.info(f"Shutting down {settings.app_name}...")
        await database.dispose()
        app.state.database = None
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Community photo scavenger hunt: tasks, uploads, feed and votes",
        lifespan=lifespan,
        docs_url="/swagger" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.database = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(
        BodySizeLimitMiddleware,
        max_bytes=settings.max_upload_bytes,
        paths=("/api/upload",),
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"Code": 500, "Message": str(exc)},
        )

    app.include_router(api_router)

    # Anything else under /api is a JSON 404, whatever the method
    @app.api_route(
        "/api/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    async def api_not_found(path: str) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"Code": 404, "Message": "Not found"},
        )

    # Built client assets
    static_path = Path(settings.static_dir)
    assets_path = static_path / "assets"
    if assets_path.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_path)), name="assets")

    # SPA fallback (serve index.html for non-API routes)
    @app.get("/{path:path}", response_model=None, include_in_schema=False)
    async def spa_fallback(path: str):
        """Serve SPA index.html for non-API routes."""
        if path == "api" or path.startswith("api/"):
            return JSONResponse(
                status_code=404,
                content={"Code": 404, "Message": "Not found"},
            )

        file_path = static_path / path
        if path and file_path.is_file() and static_path.resolve() in file_path.resolve().parents:
            return FileResponse(file_path)

        index_path = static_path / "index.html"
        if index_path.exists():
            return FileResponse(index_path)

        return JSONResponse(
            status_code=404,
            content={"Code": 404, "Message": "Not found"},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hunt.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
