"""Note tools."""

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


class ListNotesInput(ToolInput):
    limit: Limit | None = None
    cursor: Cursor | None = None
    personId: str | None = Field(default=None, description="Filter by person ID")
    companyId: str | None = Field(default=None, description="Filter by company ID")


class NoteIdInput(ToolInput):
    noteId: str = Field(..., description="The ID of the note")


class CreateNoteInput(ToolInput):
    content: str = Field(..., description="The content of the note")
    personId: str | None = Field(default=None, description="ID of the person to attach the note to")
    companyId: str | None = Field(default=None, description="ID of the company to attach the note to")


class UpdateNoteInput(ToolInput):
    noteId: str = Field(..., description="The ID of the note to update")
    content: str = Field(..., description="The new content of the note")


async def list_notes(client: FolkClient, params: ListNotesInput) -> MCPToolCallResult:
    query = build_query({
        "limit": params.limit,
        "cursor": params.cursor,
        "personId": params.personId,
        "companyId": params.companyId,
    })
    return await fetch(client, "GET", f"/notes{query}")


async def get_note(client: FolkClient, params: NoteIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", f"/notes/{path_segment(params.noteId)}")


async def create_note(client: FolkClient, params: CreateNoteInput) -> MCPToolCallResult:
    if not has_relation_target(params):
        return MCPToolCallResult.failure(MISSING_RELATION_MESSAGE)

    body = present_fields(params, "content", "personId", "companyId")
    return await fetch(client, "POST", "/notes", body)


async def update_note(client: FolkClient, params: UpdateNoteInput) -> MCPToolCallResult:
    return await fetch(client, "PATCH", f"/notes/{path_segment(params.noteId)}", {"content": params.content})


async def delete_note(client: FolkClient, params: NoteIdInput) -> MCPToolCallResult:
    return await remove(
        client,
        f"/notes/{path_segment(params.noteId)}",
        f"Note {params.noteId} deleted successfully.",
    )


TOOLS = [
    ToolDescriptor(
        name="list_notes",
        title="List Notes",
        description="List notes in Folk CRM with optional filtering",
        domain=Domain.notes,
        input_model=ListNotesInput,
        handler=list_notes,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_note",
        title="Get Note",
        description="Get a note by its ID from Folk CRM",
        domain=Domain.notes,
        input_model=NoteIdInput,
        handler=get_note,
        read_only=True,
    ),
    ToolDescriptor(
        name="create_note",
        title="Create Note",
        description="Create a new note attached to a person or company",
        domain=Domain.notes,
        input_model=CreateNoteInput,
        handler=create_note,
        read_only=False,
    ),
    ToolDescriptor(
        name="update_note",
        title="Update Note",
        description="Update an existing note in Folk CRM",
        domain=Domain.notes,
        input_model=UpdateNoteInput,
        handler=update_note,
        read_only=False,
    ),
    ToolDescriptor(
        name="delete_note",
        title="Delete Note",
        description="Delete a note from Folk CRM",
        domain=Domain.notes,
        input_model=NoteIdInput,
        handler=delete_note,
        read_only=False,
    ),
]
