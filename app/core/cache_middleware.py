"""
Response cache suppression.

Every request is forwarded fresh, so responses carry no entity tag and
are marked as not storable.
"""
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Strips ETag headers and sets Cache-Control: no-store."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if "etag" in response.headers:
            del response.headers["etag"]
        response.headers["Cache-Control"] = "no-store"
        return response
