from typing import Optional

from pothub.core.database import Database
from pothub.core.errors import AuditFailure, PotHubError
from pothub.models.audit_log import AuditLog


class CRUDAudit:
    def __init__(self, database: Database) -> None:
        self.database = database

    def append(self, sensor_id: Optional[str], device_id: Optional[str], action: str) -> None:
        record = AuditLog(sensor_id=sensor_id or "", device_id=device_id or "", action=action)
        try:
            with self.database.session() as db:
                db.add(record)
        except PotHubError as exc:
            raise AuditFailure(f"Audit append failed for '{action}': {exc}") from exc
