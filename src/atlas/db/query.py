"""
Query specification for list operations.
"""

from typing import Literal

from pydantic import BaseModel


class Ordering(BaseModel):
    """A single `<field>.<direction>` ordering."""

    field: str
    direction: Literal["asc", "desc"] = "asc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


class QuerySpec(BaseModel):
    """Equality filters and pagination for a list operation.

    Filters are ANDed. Backends apply them as: filters, then order,
    then offset, then limit.
    """

    filters: dict[str, str] = {}
    order: Ordering | None = None
    offset: int | None = None
    limit: int | None = None
