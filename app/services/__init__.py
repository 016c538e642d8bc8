# Services package init
"""
Uploader Backend — Services Layer
=================================

Service Inventory:
    - object_keys:     Key construction, sanitization, shape check, public URLs
    - S3ClientProvider: Lazily built boto3 client; presigns PUT requests
    - UploadService:   Issue upload URLs and confirm uploaded keys

Services know nothing about HTTP; routes translate their results and
exceptions into responses.
"""
