"""
Request body size cap (2 MB by default, MAX_BODY_BYTES).

Declared Content-Length is checked before the app runs. Bodies without one
are counted while the route reads them; going over the cap raises
PayloadTooLargeError from inside the route so the normal error handler
renders it.
"""
import logging

from fastapi.responses import JSONResponse

from domain.errors import PayloadTooLargeError

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """Pure ASGI middleware; only touches http requests."""

    def __init__(self, app, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = None
        for name, value in scope.get("headers", []):
            if name == b"content-length":
                try:
                    declared = int(value)
                except ValueError:
                    declared = None
                break

        if declared is not None and declared > self.max_body_bytes:
            logger.warning(f"Rejected {declared}-byte body on {scope.get('path')}")
            exc = PayloadTooLargeError(self.max_body_bytes)
            response = JSONResponse(status_code=exc.status_code, content=exc.to_body())
            await response(scope, receive, send)
            return

        received = 0
        limit = self.max_body_bytes

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    logger.warning(f"Streamed body over {limit} bytes on {scope.get('path')}")
                    raise PayloadTooLargeError(limit)
            return message

        await self.app(scope, limited_receive, send)
