"""Group tools."""

from typing import Literal

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import Limit, ToolInput, fetch


class ListGroupsInput(ToolInput):
    limit: Limit | None = None


class ListGroupCustomFieldsInput(ToolInput):
    groupId: str = Field(..., description="The ID of the group")
    entityType: Literal["person", "company"] = Field(..., description="The entity type (person or company)")


async def list_groups(client: FolkClient, params: ListGroupsInput) -> MCPToolCallResult:
    query = build_query({"limit": params.limit})
    return await fetch(client, "GET", f"/groups{query}")


async def list_group_custom_fields(client: FolkClient, params: ListGroupCustomFieldsInput) -> MCPToolCallResult:
    return await fetch(
        client,
        "GET",
        f"/groups/{path_segment(params.groupId)}/custom-fields/{params.entityType}",
    )


TOOLS = [
    ToolDescriptor(
        name="list_groups",
        title="List Groups",
        description="List all groups in your Folk CRM workspace",
        domain=Domain.groups,
        input_model=ListGroupsInput,
        handler=list_groups,
        read_only=True,
    ),
    ToolDescriptor(
        name="list_group_custom_fields",
        title="List Group Custom Fields",
        description="List custom fields for a specific group and entity type",
        domain=Domain.groups,
        input_model=ListGroupCustomFieldsInput,
        handler=list_group_custom_fields,
        read_only=True,
    ),
]
