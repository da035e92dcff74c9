"""Deal and custom object tools.

Deals are group-scoped objects; the same five operations address any custom
object type by passing its name as ``objectType``. Every path is built as
``/groups/<groupId>/<objectType>[/<objectId>]``.
"""

from typing import Any

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import Cursor, Limit, Number, ToolInput, fetch, present_fields, remove

DEFAULT_OBJECT_TYPE = "deal"
DEAL_FIELDS = ("name", "value", "personId", "companyId", "customFields")


class GroupObjectInput(ToolInput):
    groupId: str = Field(..., description="The ID of the group")
    objectType: str = Field(default=DEFAULT_OBJECT_TYPE, description="The type of object (default: deal)")

    def collection_path(self) -> str:
        return f"/groups/{path_segment(self.groupId)}/{path_segment(self.objectType)}"


class ListDealsInput(GroupObjectInput):
    limit: Limit | None = None
    cursor: Cursor | None = None


class DealIdInput(GroupObjectInput):
    objectId: str = Field(..., description="The ID of the deal/object")

    def object_path(self) -> str:
        return f"{self.collection_path()}/{path_segment(self.objectId)}"


class CreateDealInput(GroupObjectInput):
    name: str = Field(..., description="Name of the deal")
    value: Number | None = Field(default=None, description="Monetary value of the deal")
    personId: str | None = Field(default=None, description="ID of the associated person")
    companyId: str | None = Field(default=None, description="ID of the associated company")
    customFields: dict[str, Any] | None = Field(default=None, description="Custom field values as key-value pairs")


class UpdateDealInput(DealIdInput):
    name: str | None = Field(default=None, description="Name of the deal")
    value: Number | None = Field(default=None, description="Monetary value of the deal")
    personId: str | None = Field(default=None, description="ID of the associated person")
    companyId: str | None = Field(default=None, description="ID of the associated company")
    customFields: dict[str, Any] | None = Field(default=None, description="Custom field values as key-value pairs")


async def list_deals(client: FolkClient, params: ListDealsInput) -> MCPToolCallResult:
    query = build_query({"limit": params.limit, "cursor": params.cursor})
    return await fetch(client, "GET", f"{params.collection_path()}{query}")


async def get_deal(client: FolkClient, params: DealIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", params.object_path())


async def create_deal(client: FolkClient, params: CreateDealInput) -> MCPToolCallResult:
    body = present_fields(params, *DEAL_FIELDS)
    return await fetch(client, "POST", params.collection_path(), body)


async def update_deal(client: FolkClient, params: UpdateDealInput) -> MCPToolCallResult:
    body = present_fields(params, *DEAL_FIELDS)
    return await fetch(client, "PATCH", params.object_path(), body)


async def delete_deal(client: FolkClient, params: DealIdInput) -> MCPToolCallResult:
    return await remove(
        client,
        params.object_path(),
        f"{params.objectType} {params.objectId} deleted successfully.",
    )


TOOLS = [
    ToolDescriptor(
        name="list_deals",
        title="List Deals",
        description="List deals (or custom objects) in a specific group",
        domain=Domain.deals,
        input_model=ListDealsInput,
        handler=list_deals,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_deal",
        title="Get Deal",
        description="Get a specific deal (or custom object) by ID",
        domain=Domain.deals,
        input_model=DealIdInput,
        handler=get_deal,
        read_only=True,
    ),
    ToolDescriptor(
        name="create_deal",
        title="Create Deal",
        description="Create a new deal (or custom object) in a group",
        domain=Domain.deals,
        input_model=CreateDealInput,
        handler=create_deal,
        read_only=False,
    ),
    ToolDescriptor(
        name="update_deal",
        title="Update Deal",
        description="Update an existing deal (or custom object)",
        domain=Domain.deals,
        input_model=UpdateDealInput,
        handler=update_deal,
        read_only=False,
    ),
    ToolDescriptor(
        name="delete_deal",
        title="Delete Deal",
        description="Delete a deal (or custom object) from Folk CRM",
        domain=Domain.deals,
        input_model=DealIdInput,
        handler=delete_deal,
        read_only=False,
    ),
]
