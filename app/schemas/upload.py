"""
Uploader Backend — Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the API contract with the upload widget.
Why:   Automatic serialization and OpenAPI doc generation.
How:   The upload routes validate decoded JSON bodies against these models;
       FastAPI serializes the response models (by alias, so `image_url` goes
       out as `imageUrl`).

Request fields are Optional on purpose: a missing `filename` must produce
our own 400 message, not FastAPI's generic 422.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class UploadUrlRequest(BaseModel):
    """Body of POST /get-upload-url."""
    filename: Optional[str] = Field(default=None, description="Original client filename")
    filetype: Optional[str] = Field(default=None, description="MIME type, e.g. image/png")


class ConfirmUploadRequest(BaseModel):
    """Body of POST /confirm-upload."""
    key: Optional[str] = Field(default=None, description="Object key returned by /get-upload-url")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UploadUrlResponse(BaseModel):
    """
    What:  A signed upload credential.
    Who:   Returned by POST /get-upload-url.

    The client PUTs the file bytes to `url` with the same Content-Type it
    requested; the URL expires after the configured lifetime (default 1h).
    """
    url: str = Field(description="Presigned S3 PUT URL")
    key: str = Field(description="Object key the upload will be stored under")
    bucket: str = Field(description="Destination bucket")


class ConfirmUploadResponse(BaseModel):
    """
    What:  Result of confirming a key.
    Who:   Returned by POST /confirm-upload.
    """
    success: bool = Field(default=True)
    message: str = Field(default="Upload confirmed!")
    image_url: str = Field(alias="imageUrl", description="Public URL of the uploaded object")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body.

    `details` is only present on 5xx responses.
    """
    error: str = Field(description="Human-readable error description")
    details: Optional[str] = Field(default=None, description="Diagnostic detail for 5xx errors")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy or degraded")
    version: str = Field(description="Application version")
    storage: str = Field(description="S3 presigning: configured or not_configured")
    uptime_seconds: float = Field(description="Seconds since service started")


class DemoEchoResponse(BaseModel):
    message: str
    body: Optional[Dict[str, Any]] = None
    query: Optional[str] = None
