"""Pydantic schemas for MCP tool results."""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field


class MCPContent(BaseModel):
    """Content item in tool response."""
    
    type: Literal["text"] = "text"
    text: str


class MCPToolCallResult(BaseModel):
    """Uniform result envelope returned by every tool call.
    
    Attributes:
        content: Ordered text content items.
        isError: Whether the call failed.
    """
    
    content: list[MCPContent] = Field(default_factory=list)
    isError: bool = False
    
    @classmethod
    def success(cls, text: str) -> "MCPToolCallResult":
        """Create a successful result carrying a single text item."""
        return cls(content=[MCPContent(text=text)], isError=False)
    
    @classmethod
    def from_data(cls, data: Any) -> "MCPToolCallResult":
        """Create a successful result from an upstream JSON document.
        
        The document is pretty-printed with a two-space indent; parsing the
        text back yields the original value.
        """
        return cls.success(json.dumps(data, indent=2, ensure_ascii=False))
    
    @classmethod
    def failure(cls, message: str) -> "MCPToolCallResult":
        """Create a failed result carrying the error message."""
        return cls(content=[MCPContent(text=message)], isError=True)
    
    @property
    def text(self) -> str:
        """Concatenated text of all content items."""
        return "".join(item.text for item in self.content)
