"""Core domain primitives for the KMZ Renamer."""

from .models import (
    LabelChange,
    LabelEntry,
    LabelSource,
    RenameOutcome,
    RenameResult,
)
from .exceptions import (
    DocumentNotFoundError,
    InvalidArchiveError,
    MissingInputError,
    ProcessingError,
)

__all__ = [
    "LabelChange",
    "LabelEntry",
    "LabelSource",
    "RenameOutcome",
    "RenameResult",
    "ProcessingError",
    "MissingInputError",
    "InvalidArchiveError",
    "DocumentNotFoundError",
]
