"""
Uploader Backend — S3 Storage Client
====================================

What:  Owns the process-wide boto3 S3 client and presigns PUT requests.
Why:   Clients upload bytes straight to S3; this service only hands out
       short-lived write credentials, so signing is all it needs from S3.
How:   The client is built lazily from static settings on first use and
       reused for the life of the process.
Who:   Used by UploadService when issuing upload URLs.

Concurrency:
    Route handlers may run in parallel (threadpool or event loop), so the
    first construction is guarded by a lock. The client is never mutated
    after construction; boto3 clients are safe to share across threads.

Presigning is a local HMAC computation: no request reaches S3 until the
client performs the PUT with the returned URL.
"""

import logging
import threading
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import Settings
from app.exceptions import BackendUnavailableError

logger = logging.getLogger(__name__)

CLIENT_UNAVAILABLE_MESSAGE = "S3 client could not be initialized. Check AWS credentials."


class S3ClientProvider:
    """
    Lazily constructed, shared S3 client handle.

    Usage:
        provider = S3ClientProvider.from_settings(settings)
        url = provider.presign_put("bucket", "uploads/...", "image/png", 3600)
    """

    def __init__(
        self,
        access_key_id: str,
        secret_access_key: str,
        region: str,
    ):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.region = region
        self._client: Optional[Any] = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ClientProvider":
        return cls(
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
            region=settings.aws_region,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key and self.region)

    def get(self) -> Any:
        """
        Return the shared boto3 S3 client, building it on first call.

        Raises:
            BackendUnavailableError: credentials or region are missing, or
                boto3 refused to build the client.
        """
        if self._client is not None:
            return self._client

        if not self.is_configured:
            raise BackendUnavailableError(details=CLIENT_UNAVAILABLE_MESSAGE)

        with self._lock:
            if self._client is None:
                try:
                    self._client = boto3.client(
                        "s3",
                        region_name=self.region,
                        aws_access_key_id=self.access_key_id,
                        aws_secret_access_key=self.secret_access_key,
                        config=Config(signature_version="s3v4"),
                    )
                except BotoCoreError as e:
                    logger.error("Failed to build S3 client: %s", str(e))
                    raise BackendUnavailableError(
                        details=CLIENT_UNAVAILABLE_MESSAGE,
                        context={"error": str(e)},
                    ) from e
                logger.info("S3 client initialized for region %s", self.region)
        return self._client

    def presign_put(
        self,
        bucket: str,
        key: str,
        content_type: str,
        expires_in: int,
    ) -> str:
        """
        Presign a PUT for exactly this bucket, key and Content-Type.

        The uploader must send the same Content-Type header or S3 rejects
        the signature.

        Raises:
            BackendUnavailableError: client unavailable or signing failed.
        """
        client = self.get()
        try:
            return client.generate_presigned_url(
                ClientMethod="put_object",
                Params={"Bucket": bucket, "Key": key, "ContentType": content_type},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Presigning failed for key %s: %s", key, str(e))
            raise BackendUnavailableError(
                details=str(e),
                context={"bucket": bucket, "key": key},
            ) from e
