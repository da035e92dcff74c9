"""Business logic for MCP protocol handlers."""

from typing import Any

from pydantic import ValidationError

from folk_crm_mcp.audit import audit_tool_invocation
from folk_crm_mcp.audit.logger import logger
from folk_crm_mcp.gateway import FolkAPIError, FolkClient, RateLimitedError
from folk_crm_mcp.registry import ToolDescriptor, ToolRegistry

from .schemas import MCPToolCallResult

MAX_VALIDATION_ERRORS = 5


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Reduce validation errors to short ``field: message`` strings.

    Args:
        exc: Validation error instance.

    Returns:
        Limited list of simplified error details.
    """
    details: list[str] = []
    for item in exc.errors()[:MAX_VALIDATION_ERRORS]:
        location = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
        details.append(f"{location}: {item.get('msg', 'Invalid value')}")
    return details


async def handle_tools_list(registry: ToolRegistry) -> list[ToolDescriptor]:
    """Handle tools/list request.
    
    Args:
        registry: Registry built at startup.
        
    Returns:
        Registered tool descriptors in table order.
    """
    return registry.tools


async def handle_tools_call(
    registry: ToolRegistry,
    client: FolkClient,
    name: str,
    arguments: dict[str, Any] | None,
) -> MCPToolCallResult:
    """Handle tools/call request.
    
    Every outcome, including upstream and unexpected failures, is returned as
    an envelope; nothing raised here reaches the transport.
    
    Args:
        registry: Registry built at startup.
        client: Folk API client.
        name: Tool name to invoke.
        arguments: Tool arguments.
        
    Returns:
        Tool execution result.
    """
    tool = registry.get(name)
    if tool is None:
        return MCPToolCallResult.failure(f"Tool '{name}' not found")

    async with audit_tool_invocation(name) as audit:
        try:
            params = tool.input_model.model_validate(arguments or {})
        except ValidationError as exc:
            audit.mark_error("VALIDATION_ERROR")
            details = "; ".join(format_validation_errors(exc))
            return MCPToolCallResult.failure(f"Invalid arguments for {name}: {details}")

        try:
            result = await tool.handler(client, params)
        except RateLimitedError as exc:
            audit.mark_rate_limited()
            return MCPToolCallResult.failure(exc.message)
        except FolkAPIError as exc:
            audit.mark_error(exc.code)
            return MCPToolCallResult.failure(exc.message)
        except Exception as e:
            logger.exception("tool_failed", tool_name=name, request_id=audit.request_id)
            audit.mark_error("INTERNAL_ERROR")
            return MCPToolCallResult.failure(str(e) or type(e).__name__)

        if result.isError:
            audit.mark_error("REJECTED")
        return result
