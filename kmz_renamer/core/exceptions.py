"""Custom exception hierarchy for the KMZ Renamer domain."""

from __future__ import annotations


class ProcessingError(RuntimeError):
    """Raised when the rename workflow fails."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class MissingInputError(ProcessingError):
    """Raised when no archive was supplied or the project number is blank."""


class InvalidArchiveError(ProcessingError):
    """Raised when the supplied bytes are not a readable zip archive."""


class DocumentNotFoundError(ProcessingError):
    """Raised when a KMZ archive carries no KML document."""
