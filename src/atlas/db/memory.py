"""
In-memory implementation of TableBackend.

Used for local development (ATLAS_BACKEND=memory) and the test suite.
Mirrors the PostgREST behavior the gateway relies on: equality filters
compare text representations, ordering happens before offset/limit, and
inserts assign an `id` when the record has none.
"""

import copy
import threading
import uuid
from typing import Any

from atlas.db.query import QuerySpec
from atlas.errors import BackendError, RecordNotFound


def _as_text(value: Any) -> str:
    """Render a stored value the way it appears in a query string."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _sort_key(value: Any) -> tuple:
    # Nulls last, numbers before strings
    if value is None:
        return (2, 0, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    return (1, 0, _as_text(value))


class InMemoryBackend:
    """
    Dict-of-tables store.

    Tables spring into existence on first insert; listing an unknown
    table returns no rows. Records are copied on the way in and out so
    callers never share state with the store.
    """

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None):
        self._lock = threading.Lock()
        self._tables: dict[str, dict[str, dict[str, Any]]] = {}
        for name, rows in (tables or {}).items():
            self.insert_records(name, rows)

    def _table(self, resource: str) -> dict[str, dict[str, Any]]:
        return self._tables.setdefault(resource, {})

    def list_records(self, resource: str, query: QuerySpec) -> list[dict[str, Any]]:
        with self._lock:
            rows = list(self._tables.get(resource, {}).values())

            if query.filters:
                rows = [
                    row for row in rows
                    if all(
                        field in row and _as_text(row[field]) == value
                        for field, value in query.filters.items()
                    )
                ]

            if query.order:
                field = query.order.field
                rows.sort(key=lambda row: _sort_key(row.get(field)), reverse=query.order.descending)

            start = query.offset or 0
            end = start + query.limit if query.limit is not None else None
            return copy.deepcopy(rows[start:end])

    def get_record(self, resource: str, record_id: str) -> dict[str, Any]:
        with self._lock:
            row = self._tables.get(resource, {}).get(str(record_id))
            if row is None:
                raise RecordNotFound(resource, record_id)
            return copy.deepcopy(row)

    def insert_records(self, resource: str, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with self._lock:
            table = self._table(resource)
            prepared = []
            for record in records:
                row = copy.deepcopy(record)
                row_id = str(row.setdefault("id", str(uuid.uuid4())))
                if row_id in table or any(str(p["id"]) == row_id for p in prepared):
                    raise BackendError(
                        f'duplicate key value violates unique constraint "{resource}_pkey"',
                        code="23505",
                    )
                prepared.append(row)

            for row in prepared:
                table[str(row["id"])] = row
            return copy.deepcopy(prepared)

    def update_record(self, resource: str, record_id: str, changes: dict[str, Any]) -> list[dict[str, Any]]:
        with self._lock:
            row = self._tables.get(resource, {}).get(str(record_id))
            if row is None:
                return []
            row.update({k: copy.deepcopy(v) for k, v in changes.items() if k != "id"})
            return [copy.deepcopy(row)]

    def delete_record(self, resource: str, record_id: str) -> list[dict[str, Any]]:
        with self._lock:
            row = self._tables.get(resource, {}).pop(str(record_id), None)
            return [row] if row is not None else []
