"""HTTP API for the KMZ Renamer."""

from .app_factory import create_app

__all__ = ["create_app"]
