"""
Catch-all exception middleware.
Challenge: Never leak internals to clients, but keep full detail in server logs.
Design: Correlation id returned to the client and written next to the traceback.
"""

import logging
import uuid
from typing import Awaitable, Callable

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. We are looking into this."


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Turns any unhandled exception into a 500 with an opaque error id."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            error_id = uuid.uuid4()
            logger.exception("%s : %s", error_id, exc)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"id": str(error_id), "message": GENERIC_ERROR_MESSAGE},
            )
