"""
FastAPI middleware for request tracing.

CorrelationMiddleware must be registered last (outermost) so the id it
stores on request.state is visible to RequestLoggingMiddleware.

Dependencies: fastapi, starlette
System role: Per-request correlation id and access logging
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Echo the caller's X-Correlation-ID, or mint one, and expose it on request.state."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id

        response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log line per request, tagged with the correlation id."""

    async def dispatch(self, request: Request, call_next):
        """
        Time the request and log its outcome.

        Args:
            request: Incoming request
            call_next: Next handler in the chain

        Returns:
            Response: Downstream response, unchanged
        """
        started = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "correlation_id": getattr(request.state, "correlation_id", None),
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{context['method']} {context['path']} - unhandled {type(e).__name__}",
                extra={**context, "duration_ms": _elapsed_ms(started)},
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{context['method']} {context['path']} - {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return response
