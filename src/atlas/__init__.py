"""
Atlas Gateway - Generic resource CRUD gateway.

Maps HTTP verbs and a resource path segment onto table operations
against the Atlas Supabase backend.
"""

__version__ = "1.0.0"
