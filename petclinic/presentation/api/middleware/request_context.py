"""Request context middleware.

Binds a per-request ``trace_id`` and the client address into the structlog
context so that every event logged while handling the request (including the
gateway's upstream calls and breaker transitions) can be correlated. The
trace id is echoed back in the ``X-Trace-ID`` response header.
"""

from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from opentelemetry import trace
from starlette.middleware.base import BaseHTTPMiddleware
from uuid_extension import uuid7


TRACE_HEADER = "X-Trace-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to each request and binds it for logging.

    Trace id source, first match wins:
    1. the active OpenTelemetry span (when tracing is enabled)
    2. an incoming ``X-Trace-ID`` header set by an upstream hop
    3. a freshly generated UUIDv7
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        span = trace.get_current_span()
        trace_id = self._extract_trace_id(request, span.get_span_context())
        client_ip = self._extract_client_ip(request)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            trace_id=trace_id,
            client_ip=client_ip,
            method=request.method,
            path=request.url.path,
        )

        request.state.trace_id = trace_id
        request.state.client_ip = client_ip

        if span.is_recording():
            span.set_attribute("trace_id", trace_id)
            span.set_attribute("http.client_ip", client_ip)

        response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response

    def _extract_trace_id(self, request: Request, span_context: trace.SpanContext) -> str:
        if span_context.is_valid:
            # 128-bit W3C trace id as 32 hex chars
            return format(span_context.trace_id, "032x")
        if incoming := request.headers.get(TRACE_HEADER):
            return incoming
        return str(uuid7())

    def _extract_client_ip(self, request: Request) -> str:
        """Leftmost X-Forwarded-For entry, else the socket peer."""
        if forwarded_for := request.headers.get("X-Forwarded-For"):
            return forwarded_for.split(",")[0].strip()
        if request.client and request.client.host:
            return request.client.host
        return "unknown"
