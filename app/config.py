"""
Uploader Backend — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; checked again during app startup.

Storage credentials are optional at load time. When any of them is missing
the upload-URL endpoint is disabled (it answers 500) while the rest of the
service keeps working, so a misconfigured deployment still serves health
checks and confirmations.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development except the AWS
    credentials, which must be supplied for presigning to work.
    """

    # ── Object Storage (S3) ───────────────────────────────────────────────
    # Read from the standard AWS variable names (AWS_ACCESS_KEY_ID, ...)
    aws_access_key_id: str = Field(default="", description="S3 access key")
    aws_secret_access_key: str = Field(default="", description="S3 secret key")
    aws_region: str = Field(default="", description="S3 region, e.g. us-east-1")
    aws_s3_bucket: str = Field(default="", description="Bucket receiving uploads")

    # What: Host suffix used to build public object URLs
    # Format: https://<bucket>.<storage_domain>/<key>
    storage_domain: str = Field(default="s3.amazonaws.com")

    # What: Lifetime of a presigned PUT URL in seconds
    # Valid range: 1 minute to 7 days (SigV4 maximum)
    upload_url_expires_in: int = Field(default=3600, ge=60, le=604800)

    # ── CORS ──────────────────────────────────────────────────────────────
    # What: Value of Access-Control-Allow-Origin on every response
    # Why "*" default: The upload widget may be served from any origin in dev
    allowed_origin: str = Field(default="*")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("allowed_origin")
    @classmethod
    def default_blank_origin(cls, v: str) -> str:
        # An empty ALLOWED_ORIGIN means "not set"
        return v.strip() or "*"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def missing_storage_settings(self) -> List[str]:
        """Names of the S3 settings that are required for presigning but unset."""
        required = {
            "AWS_ACCESS_KEY_ID": self.aws_access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.aws_secret_access_key,
            "AWS_REGION": self.aws_region,
            "AWS_S3_BUCKET": self.aws_s3_bucket,
        }
        return [name for name, value in required.items() if not value]

    @property
    def storage_configured(self) -> bool:
        return not self.missing_storage_settings()

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that the storage settings are configured.
        When:  Called during app startup (lifespan).
        How:   Raises ValueError listing every missing variable.
        """
        missing = self.missing_storage_settings()
        if missing:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {name} is not set" for name in missing)
            )


# Singleton instance, imported throughout the application
settings = Settings()
