"""
Uploader Backend — Custom Exception Hierarchy
=============================================

What:  Defines application-specific exceptions for the upload flow.
Why:   Custom exceptions enable targeted error handling with the right HTTP
       status code and a stable JSON error body.
How:   Each exception carries a user-facing message, an optional `details`
       string that IS returned to the caller, and an optional context dict
       that is only logged. Global handlers (registered in main.py) turn
       them into responses.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    UploaderError (base)            → 500 {error, details}
    ├── ValidationError             → 400 {error}
    │   └── MalformedKeyError       → 400 {error}
    └── BackendUnavailableError     → 500 {error, details}

None of these are retried by the service; retrying is the caller's choice.
"""

from typing import Any, Dict, Optional


class UploaderError(Exception):
    """
    Base exception for all uploader application errors.

    Attributes:
        message:  User-facing error description (returned as `error`)
        details:  Diagnostic text returned as `details` on 5xx responses
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(UploaderError):
    """
    Raised when client input is missing or malformed.

    HTTP:    400 Bad Request

    Example response:
        {"error": "Missing required parameters: filename and filetype"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MalformedKeyError(ValidationError):
    """
    Raised when an object key does not have the shape the issuer produces.

    This is a syntactic check only; a well-shaped key for an object that
    was never uploaded is not an error.
    """

    def __init__(self, key: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["key"] = key
        super().__init__(message="Invalid key format", field="key", context=ctx)
        self.key = key


class BackendUnavailableError(UploaderError):
    """
    Raised when the storage backend is misconfigured or the signing call fails.

    HTTP:    500 Internal Server Error

    Unlike most 5xx errors the underlying reason is surfaced in `details`
    (e.g. "S3 client could not be initialized. Check AWS credentials.") so
    operators can diagnose a broken deployment from the client side.
    """

    def __init__(
        self,
        details: str,
        message: str = "Failed to generate upload URL",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, details=details, context=context)
