"""Workspace user tools."""

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import Cursor, Limit, ToolInput, fetch


class ListUsersInput(ToolInput):
    limit: Limit | None = None
    cursor: Cursor | None = None


class CurrentUserInput(ToolInput):
    pass


class UserIdInput(ToolInput):
    userId: str = Field(..., description="The ID of the user to retrieve")


async def list_users(client: FolkClient, params: ListUsersInput) -> MCPToolCallResult:
    query = build_query({"limit": params.limit, "cursor": params.cursor})
    return await fetch(client, "GET", f"/users{query}")


async def get_current_user(client: FolkClient, params: CurrentUserInput) -> MCPToolCallResult:
    return await fetch(client, "GET", "/users/me")


async def get_user(client: FolkClient, params: UserIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", f"/users/{path_segment(params.userId)}")


TOOLS = [
    ToolDescriptor(
        name="list_users",
        title="List Users",
        description="List all users in your Folk CRM workspace",
        domain=Domain.users,
        input_model=ListUsersInput,
        handler=list_users,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_current_user",
        title="Get Current User",
        description="Get the currently authenticated user",
        domain=Domain.users,
        input_model=CurrentUserInput,
        handler=get_current_user,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_user",
        title="Get User",
        description="Get a user by their ID from Folk CRM",
        domain=Domain.users,
        input_model=UserIdInput,
        handler=get_user,
        read_only=True,
    ),
]
