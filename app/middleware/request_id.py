"""
Uploader Backend — Request ID Middleware
========================================

What:  Tags each request with a short ID, echoed in X-Request-ID.
How:   A well-formed client X-Request-ID is kept so the upload widget can
       match its own logs to ours. Anything else (blank, too long, or with
       characters outside [A-Za-z0-9._:-]) is replaced by a fresh 8-char
       ID, so a header can never forge or split an access-log line.

The ID lives in `request_id_var` for the rest of the request; the
exception handlers in main.py read it from there.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

_CLIENT_REQUEST_ID = re.compile(r"[A-Za-z0-9._:\-]{1,%d}" % MAX_REQUEST_ID_LENGTH)

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(header_value: Optional[str]) -> str:
    """Return the client's ID if it is safe to log, else a new one."""
    candidate = (header_value or "").strip()
    if _CLIENT_REQUEST_ID.fullmatch(candidate):
        return candidate
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
