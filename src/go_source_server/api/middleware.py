"""ASGI middleware for request ids and access logging."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "Request-Id"


class RequestLogMiddleware:
    """Tags each request with an id and logs one access line per response.

    An incoming ``Request-Id`` header is reused, otherwise a new id is
    generated. The id is echoed back in the response and kept on
    ``request.state.request_id`` for handlers that log errors.

    Written against raw ASGI so that ``receive`` reaches the route untouched
    and ``Request.is_disconnected`` sees the client going away.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        scope.setdefault("state", {})["request_id"] = request_id

        status = 500
        size = 0
        content_length: str | None = None

        async def send_with_request_id(message: Message) -> None:
            nonlocal status, size, content_length
            if message["type"] == "http.response.start":
                status = message["status"]
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                headers[REQUEST_ID_HEADER] = request_id
                content_length = headers.get("content-length")
            elif message["type"] == "http.response.body":
                size += len(message.get("body", b""))
            await send(message)

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "method=%s url=%s status=%d size=%s duration=%.1fms ip=%s user_agent=%r referer=%r req_id=%s",
                request.method,
                request.url,
                status,
                content_length or size,
                duration_ms,
                request.client.host if request.client else "-",
                request.headers.get("user-agent", ""),
                request.headers.get("referer", ""),
                request_id,
            )
