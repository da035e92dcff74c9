"""Reminder tools."""

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import (
    MISSING_RELATION_MESSAGE,
    Cursor,
    Limit,
    ToolInput,
    fetch,
    has_relation_target,
    present_fields,
    remove,
)


class ListRemindersInput(ToolInput):
    limit: Limit | None = None
    cursor: Cursor | None = None
    personId: str | None = Field(default=None, description="Filter by person ID")
    companyId: str | None = Field(default=None, description="Filter by company ID")


class ReminderIdInput(ToolInput):
    reminderId: str = Field(..., description="The ID of the reminder")


class CreateReminderInput(ToolInput):
    title: str = Field(..., description="The title of the reminder")
    dueDate: str = Field(..., description="Due date in ISO 8601 format (e.g., 2024-01-15T10:00:00Z)")
    personId: str | None = Field(default=None, description="ID of the person to attach the reminder to")
    companyId: str | None = Field(default=None, description="ID of the company to attach the reminder to")
    description: str | None = Field(default=None, description="Additional description")


class UpdateReminderInput(ToolInput):
    reminderId: str = Field(..., description="The ID of the reminder to update")
    title: str | None = Field(default=None, description="The title of the reminder")
    dueDate: str | None = Field(default=None, description="Due date in ISO 8601 format")
    description: str | None = Field(default=None, description="Additional description")
    completed: bool | None = Field(default=None, description="Mark reminder as completed")


async def list_reminders(client: FolkClient, params: ListRemindersInput) -> MCPToolCallResult:
    query = build_query({
        "limit": params.limit,
        "cursor": params.cursor,
        "personId": params.personId,
        "companyId": params.companyId,
    })
    return await fetch(client, "GET", f"/reminders{query}")


async def get_reminder(client: FolkClient, params: ReminderIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", f"/reminders/{path_segment(params.reminderId)}")


async def create_reminder(client: FolkClient, params: CreateReminderInput) -> MCPToolCallResult:
    if not has_relation_target(params):
        return MCPToolCallResult.failure(MISSING_RELATION_MESSAGE)

    body = present_fields(params, "title", "dueDate", "personId", "companyId", "description")
    return await fetch(client, "POST", "/reminders", body)


async def update_reminder(client: FolkClient, params: UpdateReminderInput) -> MCPToolCallResult:
    body = present_fields(params, "title", "dueDate", "description", "completed")
    return await fetch(client, "PATCH", f"/reminders/{path_segment(params.reminderId)}", body)


async def delete_reminder(client: FolkClient, params: ReminderIdInput) -> MCPToolCallResult:
    return await remove(
        client,
        f"/reminders/{path_segment(params.reminderId)}",
        f"Reminder {params.reminderId} deleted successfully.",
    )


TOOLS = [
    ToolDescriptor(
        name="list_reminders",
        title="List Reminders",
        description="List reminders in Folk CRM with optional filtering",
        domain=Domain.reminders,
        input_model=ListRemindersInput,
        handler=list_reminders,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_reminder",
        title="Get Reminder",
        description="Get a reminder by its ID from Folk CRM",
        domain=Domain.reminders,
        input_model=ReminderIdInput,
        handler=get_reminder,
        read_only=True,
    ),
    ToolDescriptor(
        name="create_reminder",
        title="Create Reminder",
        description="Create a new reminder attached to a person or company",
        domain=Domain.reminders,
        input_model=CreateReminderInput,
        handler=create_reminder,
        read_only=False,
    ),
    ToolDescriptor(
        name="update_reminder",
        title="Update Reminder",
        description="Update an existing reminder in Folk CRM",
        domain=Domain.reminders,
        input_model=UpdateReminderInput,
        handler=update_reminder,
        read_only=False,
    ),
    ToolDescriptor(
        name="delete_reminder",
        title="Delete Reminder",
        description="Delete a reminder from Folk CRM",
        domain=Domain.reminders,
        input_model=ReminderIdInput,
        handler=delete_reminder,
        read_only=False,
    ),
]
