from typing import Any


class PotHubError(Exception):
    """Base class for errors raised by the resource layer."""


class ValidationError(PotHubError):
    """A request body could not be decoded into a typed entity."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConflictError(PotHubError):
    """A caller-supplied identity is already taken."""


class StorageUnavailableError(PotHubError):
    """The database could not be reached or rejected a statement."""


class AuditFailure(StorageUnavailableError):
    """An audit record could not be appended."""
