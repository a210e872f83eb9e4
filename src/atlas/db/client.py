"""
Atlas Gateway - Supabase Client.

Low-level client construction. Queries are built in atlas.db.supabase_backend.
"""

from supabase import Client, create_client

from atlas.config import settings

# Singleton anon client instance
_client: Client | None = None


def get_client() -> Client:
    """
    Get the anon-key Supabase client.

    Uses singleton pattern to reuse connection.
    """
    global _client

    if _client is None:
        _client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _client


def get_authenticated_client(access_token: str) -> Client:
    """
    Get a Supabase client that queries as the caller.

    PostgREST evaluates row-level security against the caller's JWT
    instead of the anon role. A fresh client per request; never cached.
    """
    client = create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
    )
    client.postgrest.auth(access_token)
    return client


def reset_client() -> None:
    """Drop the cached anon client (settings changed, tests)."""
    global _client
    _client = None
