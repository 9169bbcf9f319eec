"""
HTTP middleware: request id propagation and one access-log line per request.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger(__name__)


async def request_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    Reuse an inbound X-Request-ID (or generate one), log the request and echo
    the id back on the response.
    """
    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        duration_ms = (time.perf_counter() - start) * 1000.0
        logger.exception(
            "http_request method=%s path=%s status=500 duration_ms=%.3f request_id=%s",
            request.method,
            request.url.path,
            duration_ms,
            rid,
        )
        raise

    duration_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        "http_request method=%s path=%s status=%s duration_ms=%.3f request_id=%s",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        rid,
    )
    response.headers[REQUEST_ID_HEADER] = rid
    return response
