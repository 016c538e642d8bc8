"""
Uploader Backend — Upload Route Handlers
========================================

What:  POST /get-upload-url and POST /confirm-upload.
Why:   Entry points for the browser upload widget.
How:   Parse the JSON body, delegate to UploadService, return its result.
       Errors are raised as UploaderError subclasses and formatted by the
       global exception handlers in main.py.

The body is read as JSON whatever Content-Type the client sends: the widget
posts with fetch() and some callers label the body text/plain to skip the
preflight. An empty body counts as an empty object.

Both handlers are plain `def`: boto3 signing is synchronous, so FastAPI
runs them in its threadpool instead of blocking the event loop.
"""

import json
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError
from app.schemas.upload import (
    ConfirmUploadRequest,
    ConfirmUploadResponse,
    ErrorResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)
from app.services.upload_service import UploadService, get_upload_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])

RequestModel = TypeVar("RequestModel", bound=BaseModel)


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Decode the request body as a JSON object, ignoring Content-Type.

    Raises:
        ValidationError: body is not valid UTF-8 JSON, or not an object.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ValidationError(message="Invalid request body", context={"reason": str(e)}) from e

    if not isinstance(data, dict):
        raise ValidationError(
            message="Invalid request body",
            context={"reason": f"expected a JSON object, got {type(data).__name__}"},
        )
    return data


def _parse(model: Type[RequestModel], data: Dict[str, Any]) -> RequestModel:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(message="Invalid request body", context={"errors": e.errors()}) from e


async def upload_url_payload(request: Request) -> UploadUrlRequest:
    return _parse(UploadUrlRequest, await read_json_object(request))


async def confirm_upload_payload(request: Request) -> ConfirmUploadRequest:
    return _parse(ConfirmUploadRequest, await read_json_object(request))


def _json_body_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    # The body is read by hand, so describe it for the OpenAPI docs explicitly
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.post(
    "/get-upload-url",
    response_model=UploadUrlResponse,
    responses={
        400: {"description": "filename or filetype missing", "model": ErrorResponse},
        500: {"description": "S3 misconfigured or signing failed", "model": ErrorResponse},
    },
    summary="Issue a presigned S3 upload URL",
    description=(
        "Returns a presigned PUT URL, valid for one hour, for a new uniquely named "
        "object under uploads/. Upload the file bytes directly to that URL with the "
        "same Content-Type."
    ),
    openapi_extra=_json_body_schema(UploadUrlRequest),
)
def get_upload_url(
    payload: UploadUrlRequest = Depends(upload_url_payload),
    service: UploadService = Depends(get_upload_service),
) -> UploadUrlResponse:
    logger.debug("Upload URL requested: filename=%s, filetype=%s", payload.filename, payload.filetype)
    return service.issue_upload_url(payload.filename, payload.filetype)


@router.post(
    "/confirm-upload",
    response_model=ConfirmUploadResponse,
    responses={
        400: {"description": "key missing or malformed", "model": ErrorResponse},
        500: {"description": "Unexpected failure", "model": ErrorResponse},
    },
    summary="Confirm an upload and get its public URL",
    description=(
        "Checks that the key has the shape issued by /get-upload-url and returns "
        "the object's public URL. Does not check that the object exists."
    ),
    openapi_extra=_json_body_schema(ConfirmUploadRequest),
)
def confirm_upload(
    payload: ConfirmUploadRequest = Depends(confirm_upload_payload),
    service: UploadService = Depends(get_upload_service),
) -> ConfirmUploadResponse:
    return service.confirm_upload(payload.key)
