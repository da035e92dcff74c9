# Test configuration
import json
import sys
from pathlib import Path

import httpx
import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from folk_crm_mcp.config import get_settings  # noqa: E402
from folk_crm_mcp.gateway import FolkClient  # noqa: E402
from folk_crm_mcp.registry import ToolRegistry  # noqa: E402

TEST_API_KEY = "test-secret-key-123"
TEST_BASE_URL = "https://api.folk.test/v1"


class FolkAPIRecorder:
    """Mock Folk API that records every request it receives.
    
    Attributes:
        requests: Requests seen, in order.
        status_code: Status returned for the next responses.
        payload: JSON document (or raw text) returned for the next responses.
    """
    
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {"data": {}}
    
    def respond(self, status_code: int, payload: object = None) -> None:
        self.status_code = status_code
        self.payload = payload
    
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code == 204:
            return httpx.Response(204)
        if isinstance(self.payload, str):
            return httpx.Response(self.status_code, text=self.payload)
        return httpx.Response(self.status_code, json=self.payload)
    
    @property
    def call_count(self) -> int:
        return len(self.requests)
    
    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]
    
    def last_body(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture
def folk_api() -> FolkAPIRecorder:
    return FolkAPIRecorder()


@pytest.fixture
def folk_client(folk_api: FolkAPIRecorder) -> FolkClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(folk_api.handler))
    return FolkClient(http_client, TEST_BASE_URL, TEST_API_KEY)


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
