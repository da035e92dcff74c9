"""Unit tests for the Folk API gateway module."""

import pytest
from unittest.mock import AsyncMock
import httpx

from folk_crm_mcp.gateway import (
    FolkClient,
    RateLimitedError,
    UnauthenticatedError,
    UpstreamError,
    UpstreamUnavailableError,
    build_query,
    path_segment,
)
from tests.conftest import TEST_API_KEY, TEST_BASE_URL


class TestBuildQuery:
    """Tests for query-string construction."""
    
    def test_empty_when_nothing_supplied(self):
        assert build_query({}) == ""
        assert build_query({"limit": None, "cursor": None}) == ""
    
    def test_skips_none_and_keeps_order(self):
        query = build_query({"limit": 10, "cursor": None, "search": "ann"})
        assert query == "?limit=10&search=ann"
    
    def test_encodes_reserved_characters(self):
        query = build_query({"search": "a&b=c d"})
        assert query == "?search=a%26b%3Dc+d"
    
    def test_booleans_rendered_lowercase(self):
        assert build_query({"completed": True}) == "?completed=true"
        assert build_query({"completed": False}) == "?completed=false"
    
    def test_falsy_values_are_kept(self):
        assert build_query({"search": "", "limit": 0}) == "?search=&limit=0"


class TestPathSegment:
    """Tests for path identifier encoding."""
    
    def test_plain_ids_unchanged(self):
        assert path_segment("per_123-abc") == "per_123-abc"
    
    def test_separators_are_escaped(self):
        assert path_segment("a/b?c#d") == "a%2Fb%3Fc%23d"


class TestFolkClient:
    """Tests for request sending and status mapping."""
    
    @pytest.mark.asyncio
    async def test_sends_bearer_and_json_headers(self, folk_client, folk_api):
        folk_api.respond(200, {"data": {"id": "per_1"}})
        
        data = await folk_client.request("GET", "/people/per_1")
        
        assert data == {"data": {"id": "per_1"}}
        assert str(folk_api.last.url) == f"{TEST_BASE_URL}/people/per_1"
        assert folk_api.last.headers["Authorization"] == f"Bearer {TEST_API_KEY}"
        assert folk_api.last.headers["Content-Type"] == "application/json"
    
    @pytest.mark.asyncio
    async def test_sends_json_body(self, folk_client, folk_api):
        await folk_client.request("POST", "/companies", {"name": "Acme"})
        
        assert folk_api.last.method == "POST"
        assert folk_api.last_body() == {"name": "Acme"}
    
    @pytest.mark.asyncio
    async def test_no_body_without_payload(self, folk_client, folk_api):
        await folk_client.request("GET", "/groups")
        
        assert folk_api.last.content == b""
    
    @pytest.mark.asyncio
    async def test_rate_limited(self, folk_client, folk_api):
        folk_api.respond(429, "Too many requests, retry in 30s")
        
        with pytest.raises(RateLimitedError) as exc_info:
            await folk_client.request("GET", "/people")
        
        assert exc_info.value.code == "RATE_LIMITED"
        assert "Too many requests, retry in 30s" in exc_info.value.message
        assert exc_info.value.message.startswith("Rate limit exceeded.")
    
    @pytest.mark.asyncio
    async def test_unauthenticated_hides_credential(self, folk_client, folk_api):
        folk_api.respond(401, f"invalid token Bearer {TEST_API_KEY}")
        
        with pytest.raises(UnauthenticatedError) as exc_info:
            await folk_client.request("GET", "/users/me")
        
        message = exc_info.value.message
        assert message == "Authentication failed. Please check your FOLK_API_KEY is valid."
        assert "Bearer" not in message
        assert TEST_API_KEY not in message
    
    @pytest.mark.asyncio
    async def test_other_status_is_upstream_error(self, folk_client, folk_api):
        folk_api.respond(500, "internal failure")
        
        with pytest.raises(UpstreamError) as exc_info:
            await folk_client.request("GET", "/people")
        
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Folk API error (500): internal failure"
    
    @pytest.mark.asyncio
    async def test_not_found_is_upstream_error(self, folk_client, folk_api):
        folk_api.respond(404, {"error": "not found"})
        
        with pytest.raises(UpstreamError) as exc_info:
            await folk_client.request("GET", "/people/missing")
        
        assert "404" in exc_info.value.message
        assert "not found" in exc_info.value.detail
    
    @pytest.mark.asyncio
    async def test_no_content_returns_empty_dict(self, folk_client, folk_api):
        folk_api.respond(204)
        
        assert await folk_client.request("DELETE", "/people/per_1") == {}
    
    @pytest.mark.asyncio
    async def test_invalid_json_on_success(self, folk_client, folk_api):
        folk_api.respond(200, "<html>oops</html>")
        
        with pytest.raises(UpstreamError) as exc_info:
            await folk_client.request("GET", "/people")
        
        assert exc_info.value.detail == "Invalid JSON in response body"
    
    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self):
        mock_http = AsyncMock()
        mock_http.request.side_effect = httpx.ReadTimeout("timed out")
        client = FolkClient(mock_http, TEST_BASE_URL, TEST_API_KEY)
        
        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.request("GET", "/people")
        
        assert exc_info.value.code == "UPSTREAM_UNAVAILABLE"
        assert exc_info.value.reason == "request timed out"
    
    @pytest.mark.asyncio
    async def test_connection_error_is_unavailable(self):
        mock_http = AsyncMock()
        mock_http.request.side_effect = httpx.ConnectError("Connection refused")
        client = FolkClient(mock_http, TEST_BASE_URL, TEST_API_KEY)
        
        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.request("GET", "/people")
        
        assert "Connection refused" in exc_info.value.message
        assert TEST_API_KEY not in exc_info.value.message
    
    def test_repr_hides_api_key(self, folk_client):
        assert TEST_API_KEY not in repr(folk_client)
