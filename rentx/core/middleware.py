from fastapi import FastAPI, Request, Response, status
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from typing import Callable, Dict
import logging

from rentx.core.config import Settings

logger = logging.getLogger(__name__)

class CrossOriginMiddleware(BaseHTTPMiddleware):
    """
    Permissive cross-origin policy for every API path.

    All API responses carry the allow-origin/methods/headers trio. Pre-flight
    OPTIONS requests are answered here with 204 and never reach routing.

    Starlette's CORSMiddleware is not used: it only answers OPTIONS requests
    that carry Origin and Access-Control-Request-Method, and only adds headers
    when the request has an Origin.
    """

    def __init__(self, app, api_prefix: str, headers: Dict[str, str]):
        super().__init__(app)
        self.api_prefix = api_prefix
        self.cors_headers = headers

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(self.api_prefix):
            return await call_next(request)

        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=self.cors_headers)

        response = await call_next(request)
        response.headers.update(self.cors_headers)
        return response


class UploadSizeLimitMiddleware:
    """
    Bound POST bodies to the upload limit.

    A declared Content-Length over the limit is rejected before any body is
    read. Otherwise the body is counted as it is received, and the read that
    crosses the limit raises a 400, so chunked bodies and extra file parts
    are bounded too. This needs the raw ASGI receive channel, which
    BaseHTTPMiddleware does not expose.
    """

    def __init__(self, app: ASGIApp, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    @property
    def too_large(self) -> str:
        return f"request body too large (limit {self.max_bytes} bytes)"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_bytes:
            logger.warning(f"Rejected {scope['path']}: body of {content_length} bytes")
            response = PlainTextResponse(
                f"Could not parse form: {self.too_large}",
                status_code=status.HTTP_400_BAD_REQUEST,
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
                    logger.warning(f"Rejected {scope['path']}: body passed {self.max_bytes} bytes")
                    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.too_large)
            return message

        await self.app(scope, limited_receive, send)


def add_middleware(app: FastAPI, settings: Settings) -> None:
    """Add all middleware to the FastAPI application."""
    # Starlette runs the last middleware added first, so CORS headers land on
    # size-limit rejections too.
    app.add_middleware(UploadSizeLimitMiddleware, max_bytes=settings.max_upload_size_bytes)
    app.add_middleware(
        CrossOriginMiddleware,
        api_prefix=settings.API_PREFIX,
        headers={
            "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": settings.CORS_ALLOW_METHODS,
            "Access-Control-Allow-Headers": settings.CORS_ALLOW_HEADERS,
        },
    )
