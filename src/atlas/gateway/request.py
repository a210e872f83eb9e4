"""
Request body handling.
"""

import json
from typing import Any

from atlas.errors import BadRequest

# Methods whose body is never read
BODYLESS_METHODS = {"GET", "DELETE"}


def parse_body(method: str, content_type: str | None, raw: bytes) -> Any:
    """
    Decode a JSON request body.

    Returns None when the method carries no body, the content type is not
    JSON, or the body is empty. Malformed JSON fails the request.
    """
    if method.upper() in BODYLESS_METHODS:
        return None
    if "application/json" not in (content_type or "").lower():
        return None
    if not raw.strip():
        return None

    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BadRequest(f"Invalid JSON body: {e}") from None
