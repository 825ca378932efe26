"""Top-level package for the KMZ Renamer backend."""

from .api.app_factory import create_app
from .pipelines.rename_pipeline import RenamePipeline
from .services.naming import normalize

__all__ = ["create_app", "RenamePipeline", "normalize"]
