"""Interaction logging tool."""

from typing import Literal

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import MISSING_RELATION_MESSAGE, ToolInput, fetch, has_relation_target, present_fields

InteractionType = Literal["call", "email", "meeting", "note", "other"]


class CreateInteractionInput(ToolInput):
    type: InteractionType = Field(..., description="Type of interaction")
    personId: str | None = Field(default=None, description="ID of the person the interaction was with")
    companyId: str | None = Field(default=None, description="ID of the company the interaction was with")
    date: str | None = Field(default=None, description="Date of interaction in ISO 8601 format (defaults to now)")
    notes: str | None = Field(default=None, description="Notes about the interaction")


async def create_interaction(client: FolkClient, params: CreateInteractionInput) -> MCPToolCallResult:
    if not has_relation_target(params):
        return MCPToolCallResult.failure(MISSING_RELATION_MESSAGE)

    # An omitted date is left for the API to default to now
    body = present_fields(params, "type", "personId", "companyId", "date", "notes")
    return await fetch(client, "POST", "/interactions", body)


TOOLS = [
    ToolDescriptor(
        name="create_interaction",
        title="Create Interaction",
        description="Log an interaction with a person or company in Folk CRM",
        domain=Domain.interactions,
        input_model=CreateInteractionInput,
        handler=create_interaction,
        read_only=False,
    ),
]
