"""MCP transport module - result envelope, dispatcher and stdio binding."""

from .schemas import MCPContent, MCPToolCallResult

__all__ = [
    "MCPContent",
    "MCPToolCallResult",
]
