"""
Command execution.

Runs a command against a TableBackend and shapes the payload that goes
into the success envelope: an array for list and batch-create, a single
object for everything else.
"""

import logging
from typing import Any

from atlas.db.adapter import TableBackend
from atlas.errors import BackendError, RecordNotFound
from atlas.gateway.commands import (
    Command,
    CreateRecords,
    DeleteRecord,
    GetRecord,
    ListRecords,
    UpdateRecord,
)

logger = logging.getLogger(__name__)


def execute_command(command: Command, backend: TableBackend) -> Any:
    """
    Execute one command.

    Raises:
        RecordNotFound: point operation matched nothing
        BackendError: the backend rejected the operation
    """
    logger.debug(f"Executing {command.kind} on {command.resource}")

    match command:
        case ListRecords(resource=resource, query=query):
            return backend.list_records(resource, query)

        case GetRecord(resource=resource, record_id=record_id):
            return backend.get_record(resource, record_id)

        case CreateRecords(resource=resource, records=records, batch=batch):
            created = backend.insert_records(resource, records)
            if batch:
                return created
            if not created:
                raise BackendError(f"Failed to create {resource} record")
            return created[0]

        case UpdateRecord(resource=resource, record_id=record_id, changes=changes):
            updated = backend.update_record(resource, record_id, changes)
            if not updated:
                raise RecordNotFound(resource, record_id)
            return updated[0]

        case DeleteRecord(resource=resource, record_id=record_id):
            deleted = backend.delete_record(resource, record_id)
            if not deleted:
                raise RecordNotFound(resource, record_id)
            return deleted[0]

    raise TypeError(f"Unknown command: {command!r}")
