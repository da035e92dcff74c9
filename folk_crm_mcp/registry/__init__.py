"""Registry module - tool definitions and filtering."""

from .models import Domain, ToolDescriptor
from .filtering import filter_tools, is_filtered
from .service import ToolRegistry


__all__ = [
    "Domain",
    "ToolDescriptor",
    "filter_tools",
    "is_filtered",
    "ToolRegistry",
]
