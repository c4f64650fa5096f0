"""
Custom middleware for the Word Substitution Proxy application.

This module contains ASGI middleware for request logging and for turning
unhandled exceptions into the API's JSON error envelope.
"""

import time
import uuid
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.models.response import ErrorResponse


class LoggingMiddleware:
    """
    Request/response logging middleware.

    Logs every HTTP request with a short request id, the response
    status and the time taken.
    """

    def __init__(self, app: Any) -> None:
        """
        Initialize the logging middleware.

        Args:
            app: ASGI application to wrap
        """
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())[:8]
        scope["request_id"] = request_id
        start_time = time.time()

        request = Request(scope, receive)
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} - "
            f"Client: {request.client.host if request.client else 'unknown'}"
        )

        status_code = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            process_time = time.time() - start_time
            logger.info(f"[{request_id}] {status_code} in {process_time:.3f}s")


class ErrorHandlingMiddleware:
    """
    Error handling middleware for consistent error responses.

    Catches exceptions that escaped the route handlers and answers
    with a 500 JSON error body.
    """

    def __init__(self, app: Any) -> None:
        """
        Initialize the error handling middleware.

        Args:
            app: ASGI application to wrap
        """
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            request_id = scope.get("request_id", "unknown")
            logger.opt(exception=exc).error(f"[{request_id}] Unhandled exception: {exc}")

            error_response = JSONResponse(
                status_code=500,
                content=ErrorResponse(error="Internal Server Error", request_id=request_id).model_dump(
                    exclude_none=True
                ),
            )
            await error_response(scope, receive, send)
