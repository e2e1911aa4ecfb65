"""HTTP Middleware — cross-origin header policy and per-request access logging.

Invariants:
    - Every response carries the CORS headers; 500s from the catch-all handler
      (outside this middleware) stamp them via cors_headers()
    - OPTIONS short-circuits with 204 and an empty body, routed path or not
    - Exactly one access log line per request, including short-circuited ones

Design Decisions:
    - Custom middleware over starlette CORSMiddleware: the policy answers every
      OPTIONS request (not only CORS preflights carrying Origin and
      Access-Control-Request-Method) and stamps headers on all responses
    - Access logging registered outermost so OPTIONS and error responses are logged
"""

import logging
import time

from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger("echostore.access")

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = (
    "Origin, Content-Type, Content-Length, Accept-Encoding, "
    "X-CSRF-Token, Authorization"
)


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp cross-origin headers on every response; answer OPTIONS with 204."""

    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self.headers = cors_headers(allow_origin)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(
                status_code=status.HTTP_204_NO_CONTENT, headers=self.headers,
            )
        response = await call_next(request)
        response.headers.update(self.headers)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One structured log line per request: method, path, status, latency."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - started) * 1000, 3)
            logger.info(
                f"{request.method} {request.url.path} {status_code} "
                f"{duration_ms}ms",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                    "client": request.client.host if request.client else None,
                },
            )


def register_middleware(app: FastAPI, allow_origin: str = "*") -> None:
    """Install CORS policy, then access logging as the outermost layer."""
    app.add_middleware(CORSHeadersMiddleware, allow_origin=allow_origin)
    app.add_middleware(RequestLoggingMiddleware)
