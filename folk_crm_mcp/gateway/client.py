"""HTTP client for the Folk REST API."""

import json
from typing import Any
from urllib.parse import quote

import httpx

from .exceptions import (
    RateLimitedError,
    UnauthenticatedError,
    UpstreamError,
    UpstreamUnavailableError,
)


def path_segment(value: str) -> str:
    """Percent-encode a caller-supplied identifier as a single path segment."""
    return quote(str(value), safe="")


class FolkClient:
    """Issues one authenticated request per tool invocation.
    
    Attributes:
        base_url: Folk API base URL, prefixed verbatim to every path.
    """
    
    def __init__(self, http_client: httpx.AsyncClient, base_url: str, api_key: str) -> None:
        """Initialize the client.
        
        Args:
            http_client: Shared async HTTP client (connection pool).
            base_url: Folk API base URL.
            api_key: Bearer credential sent on every request.
        """
        self._http = http_client
        self._api_key = api_key
        self.base_url = base_url
    
    def __repr__(self) -> str:
        return f"FolkClient(base_url={self.base_url!r})"
    
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
    
    async def request(self, method: str, path: str, body: Any | None = None) -> Any:
        """Send a request to the Folk API and return the parsed JSON response.
        
        A single attempt is made; there are no retries at this layer.
        
        Args:
            method: HTTP method.
            path: Path below the base URL, including any query string.
            body: Optional JSON-serializable request body.
            
        Returns:
            Parsed JSON body, or an empty dict for 204 No Content.
            
        Raises:
            RateLimitedError: On HTTP 429.
            UnauthenticatedError: On HTTP 401.
            UpstreamError: On any other non-2xx status or an unparseable body.
            UpstreamUnavailableError: If the API cannot be reached.
        """
        url = f"{self.base_url}{path}"
        content = json.dumps(body) if body is not None else None
        
        try:
            response = await self._http.request(
                method,
                url,
                headers=self._headers(),
                content=content,
            )
        except httpx.TimeoutException:
            raise UpstreamUnavailableError(reason="request timed out")
        except httpx.RequestError as e:
            raise UpstreamUnavailableError(reason=f"{type(e).__name__}: {e}")
        
        if not 200 <= response.status_code < 300:
            if response.status_code == 429:
                raise RateLimitedError(detail=response.text)
            if response.status_code == 401:
                raise UnauthenticatedError()
            raise UpstreamError(status_code=response.status_code, detail=response.text)
        
        if response.status_code == 204:
            return {}
        
        try:
            return response.json()
        except ValueError:
            raise UpstreamError(
                status_code=response.status_code,
                detail="Invalid JSON in response body",
            )
