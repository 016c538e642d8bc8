# Routes package init
"""
Uploader Backend — API Routes Package
=====================================

Route Inventory:
    - uploads.py: POST /get-upload-url    (issue presigned PUT URL)
                  POST /confirm-upload    (validate key, return public URL)
    - demo.py:    GET  /, GET /users      (routing examples)
                  POST /                  (Authorization header required)
    - health.py:  GET  /health            (service health check)

Routes stay thin: extract the body, call the service, return the result.
"""
