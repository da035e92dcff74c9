"""Company tools."""

from pydantic import Field

from folk_crm_mcp.gateway import FolkClient, build_query, path_segment
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult
from folk_crm_mcp.registry.models import Domain, ToolDescriptor

from .common import Cursor, Limit, ToolInput, fetch, present_fields, remove, with_relations

COMPANY_FIELDS = ("name", "domain", "groups")


class ListCompaniesInput(ToolInput):
    limit: Limit | None = None
    cursor: Cursor | None = None


class CompanyIdInput(ToolInput):
    companyId: str = Field(..., description="The ID of the company")


class CreateCompanyInput(ToolInput):
    name: str = Field(..., description="Name of the company")
    domain: str | None = Field(default=None, description="Website domain of the company")
    groups: list[str] | None = Field(default=None, description="Array of group IDs to add the company to")


class UpdateCompanyInput(ToolInput):
    companyId: str = Field(..., description="The ID of the company to update")
    name: str | None = Field(default=None, description="Name of the company")
    domain: str | None = Field(default=None, description="Website domain of the company")
    groups: list[str] | None = Field(default=None, description="Array of group IDs")


async def list_companies(client: FolkClient, params: ListCompaniesInput) -> MCPToolCallResult:
    query = build_query({"limit": params.limit, "cursor": params.cursor})
    return await fetch(client, "GET", f"/companies{query}")


async def get_company(client: FolkClient, params: CompanyIdInput) -> MCPToolCallResult:
    return await fetch(client, "GET", f"/companies/{path_segment(params.companyId)}")


async def create_company(client: FolkClient, params: CreateCompanyInput) -> MCPToolCallResult:
    body = with_relations(present_fields(params, *COMPANY_FIELDS), "groups")
    return await fetch(client, "POST", "/companies", body)


async def update_company(client: FolkClient, params: UpdateCompanyInput) -> MCPToolCallResult:
    body = with_relations(present_fields(params, *COMPANY_FIELDS), "groups")
    return await fetch(client, "PATCH", f"/companies/{path_segment(params.companyId)}", body)


async def delete_company(client: FolkClient, params: CompanyIdInput) -> MCPToolCallResult:
    return await remove(
        client,
        f"/companies/{path_segment(params.companyId)}",
        f"Company {params.companyId} deleted successfully.",
    )


TOOLS = [
    ToolDescriptor(
        name="list_companies",
        title="List Companies",
        description="List companies in your Folk CRM workspace with optional pagination",
        domain=Domain.companies,
        input_model=ListCompaniesInput,
        handler=list_companies,
        read_only=True,
    ),
    ToolDescriptor(
        name="get_company",
        title="Get Company",
        description="Get a company by its ID from Folk CRM",
        domain=Domain.companies,
        input_model=CompanyIdInput,
        handler=get_company,
        read_only=True,
    ),
    ToolDescriptor(
        name="create_company",
        title="Create Company",
        description="Create a new company in Folk CRM",
        domain=Domain.companies,
        input_model=CreateCompanyInput,
        handler=create_company,
        read_only=False,
    ),
    ToolDescriptor(
        name="update_company",
        title="Update Company",
        description="Update an existing company in Folk CRM",
        domain=Domain.companies,
        input_model=UpdateCompanyInput,
        handler=update_company,
        read_only=False,
    ),
    ToolDescriptor(
        name="delete_company",
        title="Delete Company",
        description="Delete a company from Folk CRM",
        domain=Domain.companies,
        input_model=CompanyIdInput,
        handler=delete_company,
        read_only=False,
    ),
]
