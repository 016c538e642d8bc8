"""
Uploader Backend — Upload Service
=================================

What:  Issues presigned upload URLs and confirms uploaded object keys.
Why:   Keeps route handlers thin; the two operations can be tested
       without HTTP.
How:   `issue_upload_url` validates input, builds a unique key, and asks
       the S3 client to sign a PUT. `confirm_upload` checks the key's shape
       and returns the public URL.
Who:   Called by the /get-upload-url and /confirm-upload routes.

Upload Flow:
    1. Client → POST /get-upload-url {filename, filetype}
       ← {url, key, bucket}
    2. Client → PUT <url> (file bytes, straight to S3; not seen here)
    3. Client → POST /confirm-upload {key}
       ← {success, message, imageUrl}

The two steps share no server-side state. Confirmation trusts the key's
shape and never asks S3 whether the object exists, so a key for an
upload that never completed is still "confirmed".
"""

import logging
from typing import Optional

from app.config import Settings, settings as app_settings
from app.exceptions import (
    BackendUnavailableError,
    MalformedKeyError,
    ValidationError,
)
from app.schemas.upload import ConfirmUploadResponse, UploadUrlResponse
from app.services.object_keys import (
    build_object_key,
    build_public_url,
    is_valid_object_key,
)
from app.services.storage_client import S3ClientProvider

logger = logging.getLogger(__name__)


class UploadService:
    """
    Stateless upload operations bound to one configuration and one S3 client.

    Both collaborators are passed in explicitly so tests can swap either.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_provider: Optional[S3ClientProvider] = None,
    ):
        self.settings = settings or app_settings
        self.client_provider = client_provider or S3ClientProvider.from_settings(self.settings)

    def issue_upload_url(
        self,
        filename: Optional[str],
        filetype: Optional[str],
    ) -> UploadUrlResponse:
        """
        Issue a presigned PUT URL for a new, uniquely named object.

        Raises:
            ValidationError: filename or filetype missing/empty (checked
                before the S3 client is touched).
            BackendUnavailableError: bucket or credentials not configured,
                or signing failed.
        """
        if not filename or not filetype:
            raise ValidationError(
                message="Missing required parameters: filename and filetype",
                context={"filename": filename, "filetype": filetype},
            )

        bucket = self.settings.aws_s3_bucket
        if not bucket:
            raise BackendUnavailableError(details="S3 bucket is not configured (AWS_S3_BUCKET).")

        key = build_object_key(filename)
        url = self.client_provider.presign_put(
            bucket=bucket,
            key=key,
            content_type=filetype,
            expires_in=self.settings.upload_url_expires_in,
        )

        logger.info(
            "Issued upload URL: key=%s, content_type=%s, expires_in=%ds",
            key,
            filetype,
            self.settings.upload_url_expires_in,
        )
        return UploadUrlResponse(url=url, key=key, bucket=bucket)

    def confirm_upload(self, key: Optional[str]) -> ConfirmUploadResponse:
        """
        Confirm an uploaded key and return its public URL.

        Raises:
            ValidationError: key missing/empty.
            MalformedKeyError: key does not look like an issued key.
        """
        if not key:
            raise ValidationError(message="Missing required parameter: key", field="key")

        if not is_valid_object_key(key):
            raise MalformedKeyError(key)

        image_url = build_public_url(
            self.settings.aws_s3_bucket,
            key,
            self.settings.storage_domain,
        )

        logger.info("Upload confirmed: key=%s", key)
        return ConfirmUploadResponse(image_url=image_url)


# ── Singleton Instance ────────────────────────────────────────────────────
# Holds the process-wide S3 client; the client itself is built on first use
upload_service = UploadService()


def get_upload_service() -> UploadService:
    """FastAPI dependency returning the shared service (overridable in tests)."""
    return upload_service
