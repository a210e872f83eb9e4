"""
Atlas Gateway - Request translation.

Turns one HTTP request into one typed command and runs it against a
TableBackend.
"""

from atlas.db.query import Ordering, QuerySpec
from atlas.gateway.commands import (
    Command,
    CreateRecords,
    DeleteRecord,
    GetRecord,
    ListRecords,
    UpdateRecord,
    build_command,
)
from atlas.gateway.executor import execute_command
from atlas.gateway.query import parse_query

__all__ = [
    "Command",
    "CreateRecords",
    "DeleteRecord",
    "GetRecord",
    "ListRecords",
    "UpdateRecord",
    "build_command",
    "execute_command",
    "Ordering",
    "QuerySpec",
    "parse_query",
]
