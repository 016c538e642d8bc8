# Middleware package init
"""
Uploader Backend — Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. CORS: Answers preflights and stamps CORS/cache headers

    The order is reversed for responses, so preflight responses are
    still logged and still carry X-Request-ID.
"""
