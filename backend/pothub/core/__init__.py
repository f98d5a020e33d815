from pothub.core.config import Settings, settings
from pothub.core.database import Base, Database
from pothub.core.errors import (
    AuditFailure,
    ConflictError,
    PotHubError,
    StorageUnavailableError,
    ValidationError,
)

__all__ = [
    "AuditFailure",
    "Base",
    "ConflictError",
    "Database",
    "PotHubError",
    "Settings",
    "StorageUnavailableError",
    "ValidationError",
    "settings",
]
