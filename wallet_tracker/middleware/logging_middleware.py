"""
Per-request wallet query logging.

Every request is logged once with its status and duration. Wallet queries
also carry the network and a shortened address, and both are bound into the
structlog context so adapter warnings raised while serving the request can
be traced back to it.
"""

import time
import uuid
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.stdlib.get_logger("wallet_tracker.http")


def mask_address(address: Optional[str]) -> Optional[str]:
    """Keep only the head and tail of a wallet address for the logs."""

    if not address:
        return None
    if len(address) <= 12:
        return address
    return f"{address[:6]}...{address[-4:]}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log the wallet query it served."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        query = {
            "network": request.query_params.get("network"),
            "address": mask_address(request.query_params.get("address")),
        }

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            **{key: value for key, value in query.items() if value},
        )

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["x-request-id"] = request_id
            return response
        finally:
            if status_code >= 500:
                emit = logger.error
            elif status_code >= 400:
                emit = logger.warning
            else:
                emit = logger.info
            emit(
                "wallet_request",
                method=request.method,
                path=request.url.path,
                status=status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
            )
