"""Registry of the tools exposed by this server."""

from typing import AbstractSet, Iterable, Iterator

from .filtering import filter_tools
from .models import ToolDescriptor


class ToolRegistry:
    """Immutable, enumerable view of the registered tools.
    
    Built once at startup; a tool that is filtered out is never registered
    and cannot be looked up for the lifetime of the registry.
    
    Attributes:
        filtered_tools: Names excluded by configuration.
    """
    
    def __init__(
        self,
        filtered_tools: AbstractSet[str] = frozenset(),
        tools: Iterable[ToolDescriptor] | None = None,
    ) -> None:
        """Build the registry from the static tool table.
        
        Args:
            filtered_tools: Names excluded by configuration.
            tools: Descriptor table override (defaults to every known tool).
            
        Raises:
            ValueError: If the table contains duplicate tool names.
        """
        if tools is None:
            from folk_crm_mcp.tools import ALL_TOOLS
            tools = ALL_TOOLS
        table = list(tools)
        
        seen_names: set[str] = set()
        for tool in table:
            if tool.name in seen_names:
                raise ValueError(f"duplicate tool name in table: {tool.name}")
            seen_names.add(tool.name)
        
        self.filtered_tools = frozenset(filtered_tools)
        self._tools = {tool.name: tool for tool in filter_tools(table, self.filtered_tools)}
    
    @property
    def tools(self) -> list[ToolDescriptor]:
        """Registered descriptors in table order."""
        return list(self._tools.values())
    
    @property
    def names(self) -> list[str]:
        """Registered tool names in table order."""
        return list(self._tools)
    
    def get(self, name: str) -> ToolDescriptor | None:
        """Look up a registered tool by name."""
        return self._tools.get(name)
    
    def __contains__(self, name: object) -> bool:
        return name in self._tools
    
    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools.values())
    
    def __len__(self) -> int:
        return len(self._tools)
