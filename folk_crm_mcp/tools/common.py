"""Shared building blocks for tool input models and request bodies."""

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    WithJsonSchema,
    field_validator,
)
from pydantic.networks import validate_email

from folk_crm_mcp.gateway import FolkClient
from folk_crm_mcp.mcp_transport.schemas import MCPToolCallResult

MISSING_RELATION_MESSAGE = "Either personId or companyId must be provided"

_url_adapter = TypeAdapter(AnyUrl)


def _check_email(value: str) -> str:
    validate_email(value)
    return value


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("value is not a valid URL")
    return value


# Validated, but forwarded exactly as the caller wrote them
EmailAddress = Annotated[
    str,
    AfterValidator(_check_email),
    WithJsonSchema({"type": "string", "format": "email"}),
]
WebUrl = Annotated[
    str,
    AfterValidator(_check_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]

Limit = Annotated[int, Field(ge=1, le=100, description="Number of results (1-100, default 50)")]
Cursor = Annotated[str, Field(description="Pagination cursor from previous response")]

# JSON integers stay integers on the wire
Number = Annotated[int | float, WithJsonSchema({"type": "number"})]


def _clean_property(schema: dict[str, Any]) -> dict[str, Any]:
    prop = {key: value for key, value in schema.items() if key != "title"}

    variants = prop.pop("anyOf", None)
    if variants is not None:
        non_null = [variant for variant in variants if variant.get("type") != "null"]
        if len(non_null) == 1:
            prop = {**non_null[0], **prop}
        else:
            prop["anyOf"] = non_null

    if "default" in prop and prop["default"] is None:
        del prop["default"]
    return prop


class ToolInput(BaseModel):
    """Base model for tool arguments.

    Optional fields default to None; ``model_fields_set`` records which
    fields the caller actually supplied. Validation is strict so that it
    accepts exactly what the advertised schema describes: no string-to-number
    or string-to-boolean coercion, and no explicit null.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Defaults are not validated, so None here was sent by the caller
        if value is None:
            raise ValueError("Input should not be null")
        return value

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON schema for the tool arguments, without pydantic's nullable noise."""
        raw = cls.model_json_schema()
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                name: _clean_property(prop)
                for name, prop in raw.get("properties", {}).items()
            },
        }
        if raw.get("required"):
            schema["required"] = list(raw["required"])
        return schema


def present_fields(model: ToolInput, *names: str) -> dict[str, Any]:
    """Collect the named fields the caller supplied, in the order given.

    Omitted fields are left out entirely; supplied values are kept even when
    falsy (``""``, ``False``, ``0``).

    Args:
        model: Validated tool input.
        names: Field names eligible for the body.

    Returns:
        Body mapping of supplied fields.
    """
    supplied = model.model_fields_set
    return {name: getattr(model, name) for name in names if name in supplied}


def to_relations(ids: list[str] | None) -> list[dict[str, str]] | None:
    """Convert plain IDs into the ``{"id": ...}`` records the API expects."""
    if ids is None:
        return None
    return [{"id": relation_id} for relation_id in ids]


def with_relations(body: dict[str, Any], *fields: str) -> dict[str, Any]:
    """Rewrite relation fields present in a body into ``{"id": ...}`` records."""
    for field in fields:
        if field in body:
            body[field] = to_relations(body[field])
    return body


def has_relation_target(model: ToolInput) -> bool:
    """Whether a person or company to attach to was given."""
    return bool(getattr(model, "personId", None) or getattr(model, "companyId", None))


async def fetch(client: FolkClient, method: str, path: str, body: Any | None = None) -> MCPToolCallResult:
    """Call the API and wrap the JSON response as a successful result."""
    data = await client.request(method, path, body)
    return MCPToolCallResult.from_data(data)


async def remove(client: FolkClient, path: str, confirmation: str) -> MCPToolCallResult:
    """Call DELETE and answer with a fixed confirmation instead of the body."""
    await client.request("DELETE", path)
    return MCPToolCallResult.success(confirmation)
