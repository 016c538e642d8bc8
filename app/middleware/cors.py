"""
Uploader Backend — CORS & Cache Headers Middleware
==================================================

What:  Answers preflight requests and stamps CORS/cache headers on responses.
Why:   The upload widget runs on another origin and calls the API with
       fetch(); browsers send an OPTIONS preflight before each JSON POST.
How:   Any OPTIONS request is answered here without reaching the router.
       Every other response gets the allow-origin header plus a
       Cache-Control header chosen by status.

Headers:
    Preflight (OPTIONS, empty 200 body):
        Access-Control-Allow-Origin:  <ALLOWED_ORIGIN, default *>
        Access-Control-Allow-Methods: GET, POST, OPTIONS
        Access-Control-Allow-Headers: Content-Type, Authorization
        Access-Control-Max-Age:       86400
        Cache-Control:                public, max-age=86400

    Other responses:
        Access-Control-Allow-Origin:  <ALLOWED_ORIGIN>
        Cache-Control:                private, no-cache   (200)
                                      no-store            (anything else)

Starlette's CORSMiddleware only short-circuits OPTIONS requests that carry
Origin and Access-Control-Request-Method; here every OPTIONS request is a
preflight, with or without those headers.
"""

import logging
from typing import Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger(__name__)

PREFLIGHT_MAX_AGE = 86400


def cors_headers(allowed_origin: Optional[str] = None) -> Dict[str, str]:
    """Headers added to every non-preflight response."""
    return {"Access-Control-Allow-Origin": allowed_origin or settings.allowed_origin}


def preflight_headers(allowed_origin: Optional[str] = None) -> Dict[str, str]:
    headers = cors_headers(allowed_origin)
    headers.update(
        {
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type, Authorization",
            "Access-Control-Max-Age": str(PREFLIGHT_MAX_AGE),
            "Cache-Control": f"public, max-age={PREFLIGHT_MAX_AGE}",
        }
    )
    return headers


def cache_control_for(status_code: int) -> str:
    # Success may be kept by the browser but not shared caches; errors never stored
    return "private, no-cache" if status_code == 200 else "no-store"


class PreflightCORSMiddleware(BaseHTTPMiddleware):
    """
    Permissive, single-origin CORS for the upload API.

    Args:
        allowed_origin: Override for settings.allowed_origin (used in tests).
    """

    def __init__(self, app, allowed_origin: Optional[str] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.allowed_origin = allowed_origin

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            logger.debug("Preflight for %s", request.url.path)
            return Response(status_code=200, headers=preflight_headers(self.allowed_origin))

        response = await call_next(request)

        response.headers.update(cors_headers(self.allowed_origin))
        response.headers["Cache-Control"] = cache_control_for(response.status_code)
        return response
