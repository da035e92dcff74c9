"""Webhook subscription tools."""

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import Cursor, Limit, ToolInput, WebUrl, fetch, present_fields, remove


class ListWebhooksInput(ToolInput):
    limit: Limit | None = None
    cursor: Cursor | None = None


class WebhookIdInput(ToolInput):
    webhookId: str = Field(..., description="The ID of the webhook")


class CreateWebhookInput(ToolInput):
    url: WebUrl = Field(..., description="The URL to send webhook events to")
    events: list[str] = Field(
        ...,
        description="Array of event types to subscribe to (e.g., person.created, company.updated)",
    )
    secret: str | None = Field(default=None, description="Secret for webhook signature verification")


class UpdateWebhookInput(ToolInput):
    webhookId: str = Field(..., description="The ID of the webhook to update")
    url: WebUrl | None = Field(default=None, description="The URL to send webhook events to")
    events: list[str] | None = Field(default=None, description="Array of event types to subscribe to")
    enabled: bool | None = Field(default=None, description="Enable or disable the webhook")


async def list_webhooks(client: FolkClient, params: ListWebhooksInput) -> MCPToolCallResult:
    query = build_query({"limit": params.limit, "cursor": params.cursor})
    return await fetch(client, "GET", f"/webhooks{query}")


async def get_webhook(client: FolkClient, params: WebhookIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", f"/webhooks/{path_segment(params.webhookId)}")


async def create_webhook(client: FolkClient, params: CreateWebhookInput) -> MCPToolCallResult:
    body = present_fields(params, "url", "events", "secret")
    return await fetch(client, "POST", "/webhooks", body)


async def update_webhook(client: FolkClient, params: UpdateWebhookInput) -> MCPToolCallResult:
    body = present_fields(params, "url", "events", "enabled")
    return await fetch(client, "PATCH", f"/webhooks/{path_segment(params.webhookId)}", body)


async def delete_webhook(client: FolkClient, params: WebhookIdInput) -> MCPToolCallResult:
    return await remove(
        client,
        f"/webhooks/{path_segment(params.webhookId)}",
        f"Webhook {params.webhookId} deleted successfully.",
    )


TOOLS = [
    ToolDescriptor(
        name="list_webhooks",
        title="List Webhooks",
        description="List all webhooks in your Folk CRM workspace",
        domain=Domain.webhooks,
        input_model=ListWebhooksInput,
        handler=list_webhooks,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_webhook",
        title="Get Webhook",
        description="Get a webhook by its ID from Folk CRM",
        domain=Domain.webhooks,
        input_model=WebhookIdInput,
        handler=get_webhook,
        read_only=True,
    ),
    ToolDescriptor(
        name="create_webhook",
        title="Create Webhook",
        description="Create a new webhook subscription in Folk CRM",
        domain=Domain.webhooks,
        input_model=CreateWebhookInput,
        handler=create_webhook,
        read_only=False,
    ),
    ToolDescriptor(
        name="update_webhook",
        title="Update Webhook",
        description="Update an existing webhook in Folk CRM",
        domain=Domain.webhooks,
        input_model=UpdateWebhookInput,
        handler=update_webhook,
        read_only=False,
    ),
    ToolDescriptor(
        name="delete_webhook",
        title="Delete Webhook",
        description="Delete a webhook from Folk CRM",
        domain=Domain.webhooks,
        input_model=WebhookIdInput,
        handler=delete_webhook,
        read_only=False,
    ),
]
