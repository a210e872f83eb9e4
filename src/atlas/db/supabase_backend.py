"""
Supabase implementation of TableBackend.

Builds PostgREST queries with the supabase-py fluent API. PostgREST
applies order before offset/limit regardless of call order, so paging
always walks an ordered sequence.
"""

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import Client

from atlas.db.query import QuerySpec
from atlas.errors import BackendError, RecordNotFound

logger = logging.getLogger(__name__)

# PostgREST: "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"


class SupabaseBackend:
    """TableBackend over a Supabase client."""

    def __init__(self, client: Client):
        self._client = client

    def _execute(self, query: Any, resource: str, record_id: str | None = None) -> Any:
        """Run a query, translating PostgREST errors into gateway errors."""
        try:
            return query.execute()
        except APIError as e:
            if e.code == NO_ROWS_CODE:
                raise RecordNotFound(resource, record_id) from e
            logger.warning(f"Supabase error on {resource}: {e.code} {e.message}")
            raise BackendError(e.message or "An error occurred", code=e.code) from e

    def list_records(self, resource: str, query: QuerySpec) -> list[dict[str, Any]]:
        if query.limit == 0:
            return []

        builder = self._client.table(resource).select("*")

        for field, value in query.filters.items():
            builder = builder.eq(field, value)

        if query.order:
            builder = builder.order(query.order.field, desc=query.order.descending)

        if query.offset:
            builder = builder.offset(query.offset)

        if query.limit is not None:
            builder = builder.limit(query.limit)

        result = self._execute(builder, resource)
        return result.data or []

    def get_record(self, resource: str, record_id: str) -> dict[str, Any]:
        builder = self._client.table(resource).select("*").eq("id", record_id).single()
        result = self._execute(builder, resource, record_id)
        if not result.data:
            raise RecordNotFound(resource, record_id)
        return result.data

    def insert_records(self, resource: str, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        builder = self._client.table(resource).insert(records)
        result = self._execute(builder, resource)
        return result.data or []

    def update_record(self, resource: str, record_id: str, changes: dict[str, Any]) -> list[dict[str, Any]]:
        builder = self._client.table(resource).update(changes).eq("id", record_id)
        result = self._execute(builder, resource, record_id)
        return result.data or []

    def delete_record(self, resource: str, record_id: str) -> list[dict[str, Any]]:
        # Representation of a DELETE is the rows as they were before removal
        builder = self._client.table(resource).delete().eq("id", record_id)
        result = self._execute(builder, resource, record_id)
        return result.data or []
