"""Classified failures raised by the Folk API gateway."""

from folk_crm_mcp.exceptions import FolkMCPError


class FolkAPIError(FolkMCPError):
    """Base exception for failed calls to the Folk API."""
    pass


class RateLimitedError(FolkAPIError):
    """Raised when the Folk API answers 429 Too Many Requests.
    
    Attributes:
        detail: Response body text returned by the API.
    """
    
    def __init__(self, detail: str = ""):
        super().__init__(
            message=f"Rate limit exceeded. Please wait before making more requests. Details: {detail}",
            code="RATE_LIMITED"
        )
        self.detail = detail


class UnauthenticatedError(FolkAPIError):
    """Raised when the Folk API rejects the configured credential (401).
    
    The message is fixed and never carries credential material.
    """
    
    def __init__(self):
        super().__init__(
            message="Authentication failed. Please check your FOLK_API_KEY is valid.",
            code="UNAUTHENTICATED"
        )


class UpstreamError(FolkAPIError):
    """Raised when the Folk API returns any other non-2xx response.
    
    Attributes:
        status_code: HTTP status code from the API.
        detail: Response body text returned by the API.
    """
    
    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(
            message=f"Folk API error ({status_code}): {detail}",
            code="UPSTREAM_ERROR"
        )
        self.status_code = status_code
        self.detail = detail


class UpstreamUnavailableError(FolkAPIError):
    """Raised when the Folk API cannot be reached at all.
    
    Attributes:
        reason: Description of the connection failure.
    """
    
    def __init__(self, reason: str = "Connection failed"):
        super().__init__(
            message=f"Folk API is unavailable: {reason}",
            code="UPSTREAM_UNAVAILABLE"
        )
        self.reason = reason
