"""
Atlas Gateway - Table backends.

TableBackend is the store-facing seam of the gateway; SupabaseBackend
is the production implementation, InMemoryBackend the local one.
"""

from atlas.db.adapter import TableBackend
from atlas.db.memory import InMemoryBackend
from atlas.db.supabase_backend import SupabaseBackend

__all__ = [
    "TableBackend",
    "InMemoryBackend",
    "SupabaseBackend",
]
