"""
Uploader Backend — Application Package Initializer
==================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin, stateless presigned-upload service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Key shaping, validation
    ├─────────────────────────────────────┤
    │       Schemas (API contracts)       │  ← Pydantic request/response
    ├─────────────────────────────────────┤
    │    Storage client (S3 via boto3)    │  ← Presigning only, no bytes
    └─────────────────────────────────────┘

    There is no database: every request is independent and the only
    process-wide state is the lazily built S3 client handle.
"""

__version__ = "1.0.0"
