"""
Secure HTTP headers middleware.

Stamps the configured security headers (``Settings.security_headers``)
onto every response the service produces, routing and error envelopes
included. A header already set by a handler wins over the configured
value. An empty value in the configuration suppresses that header.
"""

from typing import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds a fixed set of security headers to each response."""

    def __init__(self, app: ASGIApp, headers: Mapping[str, str]) -> None:
        super().__init__(app)
        self._headers = {name: value for name, value in headers.items() if value}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
