"""Exceptions raised while resolving customers and importing rows."""
from typing import List, Optional


class MigrationTrackerError(Exception):
    """Base class for errors raised by this package."""


class StorageUnavailable(MigrationTrackerError):
    """A read or write against the customer store failed."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"Customer store {operation} failed: {message}")


class ImportFailed(MigrationTrackerError):
    """An import was aborted and none of its rows were saved."""

    def __init__(self, entity: str, message: str, issues: Optional[List[str]] = None):
        self.entity = entity
        self.issues = issues or []
        super().__init__(f"{entity} import failed: {message}")
