"""ASGI middleware."""

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class BodySizeLimitMiddleware:
    """Refuse request bodies above a byte limit on selected paths.

    A declared Content-Length over the limit is answered with 413 before any
    body is read. Bodies without one (chunked) are counted while the
    endpoint reads them and cut off with 413 once they pass the limit.
    """

    def __init__(self, app: ASGIApp, max_bytes: int, paths: tuple[str, ...]):
        self.app = app
        self.max_bytes = max_bytes
        self.paths = paths

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"].rstrip("/") not in self.paths:
            await self.app(scope, receive, send)
            return

        detail = f"Upload exceeds {self.max_bytes} bytes"

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit():
            if int(content_length) > self.max_bytes:
                logger.info(f"Refused {content_length}-byte body on {scope['path']}")
                response = JSONResponse(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    content={"detail": detail},
                )
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    logger.info(f"Cut off streamed body on {scope['path']} at {received} bytes")
                    # FastAPI re-raises HTTPException from body reading as-is
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=detail,
                    )
            return message

        await self.app(scope, limited_receive, send)
