"""Tool descriptor model for the static tool table."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable

if TYPE_CHECKING:
    from folk_crm_mcp.gateway.client import FolkClient
    from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
    from folk_crm_mcp.tools.common import ToolInput


class Domain(str, Enum):
    """CRM resource domain a tool belongs to."""
    
    people = "people"
    companies = "companies"
    groups = "groups"
    notes = "notes"
    reminders = "reminders"
    users = "users"
    interactions = "interactions"
    webhooks = "webhooks"
    deals = "deals"


ToolHandler = Callable[["FolkClient", Any], Awaitable["MCPToolCallResult"]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Definition of a single MCP tool.
    
    Attributes:
        name: Unique snake_case tool identifier (e.g. "list_people").
        title: Human-readable title.
        description: Description shown to the calling agent.
        domain: CRM domain the tool operates on.
        input_model: Pydantic model validating the tool arguments.
        handler: Coroutine executing the validated call against the API.
        read_only: Whether the tool only reads data.
        open_world: Whether the tool talks to an external system.
    """
    
    name: str
    title: str
    description: str
    domain: Domain
    input_model: type["ToolInput"]
    handler: ToolHandler
    read_only: bool
    open_world: bool = True
    
    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema advertised for the tool arguments."""
        return self.input_model.input_schema()
