"""
Cross-origin headers on every response.

CORSMiddleware answers preflights and only decorates requests that carry
an Origin header; this adds the same permissive headers to all responses.
"""
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class AllowAnyOriginMiddleware(BaseHTTPMiddleware):
    """Sets Access-Control-Allow-Origin/-Headers unless already present."""

    def __init__(self, app, allow_headers):
        super().__init__(app)
        self.allow_headers = ", ".join(allow_headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if "access-control-allow-origin" not in response.headers:
            response.headers["Access-Control-Allow-Origin"] = "*"
        if "access-control-allow-headers" not in response.headers:
            response.headers["Access-Control-Allow-Headers"] = self.allow_headers
        return response
