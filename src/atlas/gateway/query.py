"""
Query string parsing for list requests.

Every query parameter except the reserved controls becomes an equality
filter.
"""

from collections.abc import Iterable

from atlas.db.query import Ordering, QuerySpec
from atlas.errors import BadRequest

RESERVED_PARAMS = frozenset({"limit", "offset", "order"})


def _parse_count(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise BadRequest(f"Query parameter '{name}' must be an integer") from None
    if value < 0:
        raise BadRequest(f"Query parameter '{name}' must be >= 0")
    return value


def parse_order(raw: str) -> Ordering:
    """Parse `field.direction`; any direction other than `desc` is ascending."""
    field, _, direction = raw.partition(".")
    if not field:
        raise BadRequest("Query parameter 'order' must look like '<field>.<asc|desc>'")
    return Ordering(field=field, direction="desc" if direction == "desc" else "asc")


def parse_query(params: Iterable[tuple[str, str]]) -> QuerySpec:
    """
    Build a QuerySpec from query string pairs.

    A repeated parameter keeps its last value.
    """
    values: dict[str, str] = {}
    for key, value in params:
        values[key] = value

    return QuerySpec(
        filters={k: v for k, v in values.items() if k not in RESERVED_PARAMS},
        order=parse_order(values["order"]) if "order" in values else None,
        offset=_parse_count("offset", values["offset"]) if "offset" in values else None,
        limit=_parse_count("limit", values["limit"]) if "limit" in values else None,
    )
