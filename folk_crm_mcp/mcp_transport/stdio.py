"""Binding of the tool registry to the MCP stdio server."""

from typing import Any

import httpx
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from folk_crm_mcp import __version__
from folk_crm_mcp.audit.logger import logger
from folk_crm_mcp.config import Settings
from folk_crm_mcp.gateway import FolkClient
from folk_crm_mcp.registry import ToolDescriptor, ToolRegistry

from .schemas import MCPToolCallResult
from .service import handle_tools_call, handle_tools_list

SERVER_NAME = "folk-crm"


def to_mcp_tool(tool: ToolDescriptor) -> types.Tool:
    """Convert a registry descriptor into the SDK tool definition."""
    return types.Tool(
        name=tool.name,
        title=tool.title,
        description=tool.description,
        inputSchema=tool.input_schema,
        annotations=types.ToolAnnotations(
            title=tool.title,
            readOnlyHint=tool.read_only,
            openWorldHint=tool.open_world,
        ),
    )


def to_call_tool_result(result: MCPToolCallResult) -> types.CallToolResult:
    """Convert the result envelope into the SDK call result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in result.content],
        isError=result.isError,
    )


def create_server(registry: ToolRegistry, client: FolkClient) -> Server:
    """Create the MCP server exposing every registered tool.
    
    Args:
        registry: Registry built at startup.
        client: Folk API client shared by all calls.
        
    Returns:
        Configured low-level MCP server.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(tool) for tool in await handle_tools_list(registry)]

    # Arguments are validated against the pydantic models in the dispatcher
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        result = await handle_tools_call(registry, client, name, arguments)
        return to_call_tool_result(result)

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client disconnects.
    
    Args:
        settings: Process configuration with a non-empty API key.
    """
    registry = ToolRegistry(filtered_tools=settings.filtered_tools)

    async with httpx.AsyncClient(timeout=None) as http_client:
        client = FolkClient(http_client, settings.FOLK_BASE_URL, settings.FOLK_API_KEY)
        server = create_server(registry, client)

        logger.info(
            "server_starting",
            base_url=settings.FOLK_BASE_URL,
            registered_tools=len(registry),
            filtered_tools=len(registry.filtered_tools),
        )

        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
