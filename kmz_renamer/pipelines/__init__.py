"""Pipeline exports."""

from .rename_pipeline import RenamePipeline

__all__ = ["RenamePipeline"]
