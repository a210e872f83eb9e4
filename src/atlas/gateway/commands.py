"""
Gateway commands.

Each HTTP request becomes exactly one command. A command carries the
fields its operation needs, so a built command is always complete:
required identifiers and bodies are checked here, before any backend
is contacted.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from atlas.db.query import QuerySpec
from atlas.errors import BadRequest, MethodNotAllowed
from atlas.gateway.query import parse_query


class ListRecords(BaseModel):
    kind: Literal["list"] = "list"
    operation: Literal["read"] = "read"
    resource: str
    query: QuerySpec = Field(default_factory=QuerySpec)


class GetRecord(BaseModel):
    kind: Literal["get"] = "get"
    operation: Literal["read"] = "read"
    resource: str
    record_id: str


class CreateRecords(BaseModel):
    """Insert one record, or a batch when the body was an array."""

    kind: Literal["create"] = "create"
    operation: Literal["create"] = "create"
    resource: str
    records: list[dict[str, Any]]
    batch: bool = False


class UpdateRecord(BaseModel):
    kind: Literal["update"] = "update"
    operation: Literal["update"] = "update"
    resource: str
    record_id: str
    changes: dict[str, Any]


class DeleteRecord(BaseModel):
    kind: Literal["delete"] = "delete"
    operation: Literal["delete"] = "delete"
    resource: str
    record_id: str


Command = Union[ListRecords, GetRecord, CreateRecords, UpdateRecord, DeleteRecord]


def _records_from_body(body: Any) -> tuple[list[dict[str, Any]], bool]:
    if not body:
        raise BadRequest("Request body is required")
    if isinstance(body, dict):
        return [body], False
    if isinstance(body, list) and all(isinstance(item, dict) for item in body):
        return body, True
    raise BadRequest("Request body must be a JSON object or an array of objects")


def build_command(
    method: str,
    resource: str,
    record_id: str | None = None,
    query_params: list[tuple[str, str]] | None = None,
    body: Any = None,
) -> Command:
    """
    Map an HTTP method plus parsed request parts onto a command.

    Raises:
        BadRequest: a required identifier or body is missing or malformed
        MethodNotAllowed: the method has no operation
    """
    match method.upper():
        case "GET":
            if record_id is not None:
                return GetRecord(resource=resource, record_id=record_id)
            return ListRecords(resource=resource, query=parse_query(query_params or []))

        case "POST":
            records, batch = _records_from_body(body)
            return CreateRecords(resource=resource, records=records, batch=batch)

        case "PUT" | "PATCH":
            if record_id is None or not body:
                raise BadRequest("Both ID and request body are required")
            if not isinstance(body, dict):
                raise BadRequest("Request body must be a JSON object")
            # id is immutable once created
            changes = {k: v for k, v in body.items() if k != "id"}
            if not changes:
                raise BadRequest("No fields to update")
            return UpdateRecord(resource=resource, record_id=record_id, changes=changes)

        case "DELETE":
            if record_id is None:
                raise BadRequest("ID is required for deletion")
            return DeleteRecord(resource=resource, record_id=record_id)

        case _:
            raise MethodNotAllowed()
