"""
Table Backend Protocol.

Defines the operations the gateway needs from a table-oriented store.
SupabaseBackend implements it on the PostgREST query builder;
InMemoryBackend implements it on dicts for development and tests.

Backends translate their own "no rows" signal into RecordNotFound and
any other failure into BackendError, keeping the store's message.
"""

from typing import Any, Protocol, runtime_checkable

from atlas.db.query import QuerySpec


@runtime_checkable
class TableBackend(Protocol):
    """
    Abstract table access for the gateway.

    Every method addresses records by their `id` column. Write methods
    return the affected rows as they are (insert/update) or were
    (delete); an empty list means nothing matched.
    """

    def list_records(self, resource: str, query: QuerySpec) -> list[dict[str, Any]]:
        """Apply equality filters, then ordering, then offset, then limit."""
        ...

    def get_record(self, resource: str, record_id: str) -> dict[str, Any]:
        """Return exactly one record; raise RecordNotFound on zero matches."""
        ...

    def insert_records(self, resource: str, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Insert records, returning them as persisted (with server-assigned fields)."""
        ...

    def update_record(self, resource: str, record_id: str, changes: dict[str, Any]) -> list[dict[str, Any]]:
        """Apply changes to the record with this id."""
        ...

    def delete_record(self, resource: str, record_id: str) -> list[dict[str, Any]]:
        """Remove the record with this id."""
        ...
