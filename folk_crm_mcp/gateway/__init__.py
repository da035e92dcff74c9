"""Gateway module - outbound calls to the Folk API."""

from .client import FolkClient, path_segment
from .exceptions import (
    FolkAPIError,
    RateLimitedError,
    UnauthenticatedError,
    UpstreamError,
    UpstreamUnavailableError,
)
from .query import build_query


__all__ = [
    # Client
    "FolkClient",
    "path_segment",
    "build_query",
    # Exceptions
    "FolkAPIError",
    "RateLimitedError",
    "UnauthenticatedError",
    "UpstreamError",
    "UpstreamUnavailableError",
]
