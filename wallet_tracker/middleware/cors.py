"""
Cross-origin access for the browser front end.

Every response is readable from any origin, and any ``OPTIONS`` request is
answered as a preflight with ``204 No Content`` before routing.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

_PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Max-Age": "600",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Allow every origin; short-circuit preflight requests."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            headers = dict(_PREFLIGHT_HEADERS)
            requested = request.headers.get("access-control-request-headers")
            if requested:
                headers["Access-Control-Allow-Headers"] = requested
            return Response(status_code=204, headers=headers)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
