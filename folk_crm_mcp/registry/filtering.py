"""Tool filtering applied once, when the registry is built."""

from typing import AbstractSet, Iterable

from .models import ToolDescriptor


def is_filtered(name: str, filtered_tools: AbstractSet[str]) -> bool:
    """Determine if a tool is excluded from registration.
    
    Args:
        name: Tool name.
        filtered_tools: Names excluded by configuration.
        
    Returns:
        True if the name is an exact, case-sensitive member of the set.
    """
    return name in filtered_tools


def filter_tools(
    tools: Iterable[ToolDescriptor],
    filtered_tools: AbstractSet[str],
) -> list[ToolDescriptor]:
    """Drop filtered tools from a descriptor table, preserving order.
    
    Args:
        tools: Full descriptor table.
        filtered_tools: Names excluded by configuration.
        
    Returns:
        Descriptors that should be registered.
    """
    return [tool for tool in tools if not is_filtered(tool.name, filtered_tools)]
