"""
Atlas Gateway - HTTP layer.
"""

from atlas.web.app import create_app

__all__ = ["create_app"]
