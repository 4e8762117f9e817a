"""CORS + request size middleware."""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from kjnotify.response import CORS_HEADERS, error_response

logger = logging.getLogger(__name__)


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """
    Permissive CORS for browser and app clients.

    - OPTIONS is answered here with the CORS headers and an empty body
    - every other response gets the same headers added
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        for header, value in CORS_HEADERS.items():
            response.headers[header] = value
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests with bodies larger than ``max_body_bytes``."""

    def __init__(self, app, max_body_bytes: int):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            logger.warning("Rejected %s byte body on %s", content_length, request.url.path)
            return error_response(
                413,
                f"Request body too large. Max size is {self.max_body_bytes} bytes.",
            )

        return await call_next(request)
