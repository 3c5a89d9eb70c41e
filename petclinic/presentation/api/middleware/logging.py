"""HTTP access logging middleware."""

import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from petclinic.infrastructure.logging.config import get_logger


logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one ``request_completed`` event per request with its duration.

    Health probes are logged at debug level so orchestrator polling does not
    drown the access log.
    """

    def __init__(self, app: ASGIApp, quiet_paths: frozenset[str] = frozenset({"/health"})) -> None:
        super().__init__(app)
        self._quiet_paths = quiet_paths

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        log = logger.debug if request.url.path in self._quiet_paths else logger.info
        log(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response
