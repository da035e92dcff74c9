"""Folk CRM MCP server - exposes the Folk REST API as MCP tools."""

__version__ = "0.1.0"
