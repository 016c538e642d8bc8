"""
Uploader Backend — Demo Routes
==============================

What:  Minimal routing examples: a text root, a JSON listing route, and a
       POST guarded by an Authorization header check.
Why:   Smoke-test targets for a fresh deployment and a reference for how a
       protected route is wired with a dependency.

The header check only tests for presence; it does not validate a token.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query
from fastapi.responses import PlainTextResponse

from app.schemas.upload import DemoEchoResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Demo"])


def require_authorization(
    authorization: Optional[str] = Header(default=None),
) -> str:
    """Dependency: reject the request unless an Authorization header is present."""
    if not authorization:
        raise HTTPException(status_code=401, detail="You don't have access")
    logger.debug("Authorized request")
    return authorization


@router.get("/", response_class=PlainTextResponse, summary="Plain-text greeting")
async def index() -> str:
    return "Hello from the upload service!"


@router.get("/users", summary="Example JSON route")
async def list_users() -> Dict[str, str]:
    return {"message": "Response for GET request on /users"}


@router.post(
    "/",
    response_model=DemoEchoResponse,
    responses={401: {"description": "Authorization header missing", "model": ErrorResponse}},
    summary="Echo an authorized POST",
)
async def echo(
    body: Optional[Dict[str, Any]] = Body(default=None),
    param: Optional[str] = Query(default=None),
    _authorization: str = Depends(require_authorization),
) -> DemoEchoResponse:
    logger.info("Echo request: param=%s, body_keys=%s", param, sorted(body or {}))
    return DemoEchoResponse(message="Authorized POST received", body=body, query=param)
