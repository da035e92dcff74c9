"""People tools."""

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import (
    Cursor,
    EmailAddress,
    Limit,
    ToolInput,
    fetch,
    present_fields,
    remove,
    with_relations,
)

PERSON_FIELDS = ("firstName", "lastName", "emails", "groups", "phones", "jobTitle", "companyId")


class ListPeopleInput(ToolInput):
    limit: Limit | None = None
    cursor: Cursor | None = None
    search: str | None = Field(default=None, description="Search query to filter people")


class PersonIdInput(ToolInput):
    personId: str = Field(..., description="The ID of the person")


class CreatePersonInput(ToolInput):
    firstName: str = Field(..., description="First name of the person")
    lastName: str = Field(..., description="Last name of the person")
    emails: list[EmailAddress] = Field(..., description="Array of email addresses")
    groups: list[str] | None = Field(default=None, description="Array of group IDs to add the person to")
    phones: list[str] | None = Field(default=None, description="Array of phone numbers")
    jobTitle: str | None = Field(default=None, description="Job title of the person")
    companyId: str | None = Field(default=None, description="ID of the company this person works at")


class UpdatePersonInput(ToolInput):
    personId: str = Field(..., description="The ID of the person to update")
    firstName: str | None = Field(default=None, description="First name of the person")
    lastName: str | None = Field(default=None, description="Last name of the person")
    emails: list[EmailAddress] | None = Field(default=None, description="Array of email addresses")
    groups: list[str] | None = Field(default=None, description="Array of group IDs")
    phones: list[str] | None = Field(default=None, description="Array of phone numbers")
    jobTitle: str | None = Field(default=None, description="Job title of the person")
    companyId: str | None = Field(default=None, description="ID of the company this person works at")


async def list_people(client: FolkClient, params: ListPeopleInput) -> MCPToolCallResult:
    query = build_query({"limit": params.limit, "cursor": params.cursor, "search": params.search})
    return await fetch(client, "GET", f"/people{query}")


async def get_person(client: FolkClient, params: PersonIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", f"/people/{path_segment(params.personId)}")


async def create_person(client: FolkClient, params: CreatePersonInput) -> MCPToolCallResult:
    body = with_relations(present_fields(params, *PERSON_FIELDS), "groups")
    return await fetch(client, "POST", "/people", body)


async def update_person(client: FolkClient, params: UpdatePersonInput) -> MCPToolCallResult:
    body = with_relations(present_fields(params, *PERSON_FIELDS), "groups")
    return await fetch(client, "PATCH", f"/people/{path_segment(params.personId)}", body)


async def delete_person(client: FolkClient, params: PersonIdInput) -> MCPToolCallResult:
    return await remove(
        client,
        f"/people/{path_segment(params.personId)}",
        f"Person {params.personId} deleted successfully.",
    )


TOOLS = [
    ToolDescriptor(
        name="list_people",
        title="List People",
        description="List people in your Folk CRM workspace with optional search and pagination",
        domain=Domain.people,
        input_model=ListPeopleInput,
        handler=list_people,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_person",
        title="Get Person",
        description="Get a person by their ID from Folk CRM",
        domain=Domain.people,
        input_model=PersonIdInput,
        handler=get_person,
        read_only=True,
    ),
    ToolDescriptor(
        name="create_person",
        title="Create Person",
        description="Create a new person in Folk CRM",
        domain=Domain.people,
        input_model=CreatePersonInput,
        handler=create_person,
        read_only=False,
    ),
    ToolDescriptor(
        name="update_person",
        title="Update Person",
        description="Update an existing person in Folk CRM",
        domain=Domain.people,
        input_model=UpdatePersonInput,
        handler=update_person,
        read_only=False,
    ),
    ToolDescriptor(
        name="delete_person",
        title="Delete Person",
        description="Delete a person from Folk CRM",
        domain=Domain.people,
        input_model=PersonIdInput,
        handler=delete_person,
        read_only=False,
    ),
]
