"""
Uploader Backend — Middleware Tests
===================================

What:  Preflight handling, CORS/cache headers, request IDs, and 404/405
       error bodies.
"""

import re

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.middleware.cors import PreflightCORSMiddleware, cache_control_for, preflight_headers
from app.middleware.request_id import resolve_request_id


class TestPreflight:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/get-upload-url", "/confirm-upload", "/anything"])
    async def test_options_returns_empty_preflight(self, test_client, path):
        response = await test_client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
        assert response.headers["access-control-max-age"] == "86400"
        assert response.headers["cache-control"] == "public, max-age=86400"

    @pytest.mark.asyncio
    async def test_configured_origin_is_used(self):
        app = FastAPI()

        @app.get("/ping")
        async def ping():
            return {"ok": True}

        app.add_middleware(PreflightCORSMiddleware, allowed_origin="https://uploads.example.com")
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            preflight = await client.options("/ping")
            response = await client.get("/ping")

        assert preflight.headers["access-control-allow-origin"] == "https://uploads.example.com"
        assert response.headers["access-control-allow-origin"] == "https://uploads.example.com"
        assert response.headers["cache-control"] == "private, no-cache"


class TestHeaderHelpers:

    def test_cache_control_by_status(self):
        assert cache_control_for(200) == "private, no-cache"
        assert cache_control_for(201) == "no-store"
        assert cache_control_for(400) == "no-store"
        assert cache_control_for(500) == "no-store"

    def test_preflight_headers_origin_override(self):
        headers = preflight_headers("https://a.example")
        assert headers["Access-Control-Allow-Origin"] == "https://a.example"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/users")
        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_echoed(self, test_client):
        response = await test_client.get("/users", headers={"X-Request-ID": "trace-123"})
        assert response.headers["x-request-id"] == "trace-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header",
        ["   ", "x" * 65, "bad;id", "id with spaces"],
    )
    async def test_unusable_client_request_id_replaced(self, test_client, header):
        response = await test_client.get("/users", headers={"X-Request-ID": header})
        rid = response.headers["x-request-id"]
        assert rid != header.strip()
        assert re.fullmatch(r"[0-9a-f]{8}", rid)

    @pytest.mark.asyncio
    async def test_longest_client_request_id_kept(self, test_client):
        rid = "a" * 64
        response = await test_client.get("/users", headers={"X-Request-ID": rid})
        assert response.headers["x-request-id"] == rid


class TestResolveRequestId:

    def test_missing_header_generates_id(self):
        assert len(resolve_request_id(None)) == 8

    def test_surrounding_whitespace_trimmed(self):
        assert resolve_request_id("  trace-9:abc.1  ") == "trace-9:abc.1"


class TestFallbackErrors:

    @pytest.mark.asyncio
    async def test_unknown_path_is_404(self, test_client):
        response = await test_client.post("/nope", json={})
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}
        assert response.headers["cache-control"] == "no-store"
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_wrong_method_is_405(self, test_client):
        response = await test_client.get("/get-upload-url")
        assert response.status_code == 405
        assert "error" in response.json()
