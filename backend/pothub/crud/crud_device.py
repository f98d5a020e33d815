import logging
from typing import List

from sqlalchemy import delete, select, update

from pothub.core.database import Database
from pothub.core.errors import ConflictError
from pothub.models.device import Device
from pothub.schemas.device import DeviceIn, DeviceOut

logger = logging.getLogger(__name__)


class CRUDDevice:
    def __init__(self, database: Database) -> None:
        self.database = database

    def create(self, device: DeviceIn) -> DeviceOut:
        try:
            with self.database.session() as db:
                db_obj = Device(**device.model_dump())
                db.add(db_obj)
        except ConflictError as exc:
            raise ConflictError(f"Device '{device.id}' already exists") from exc
        return DeviceOut.model_validate(db_obj)

    def list_all(self) -> List[DeviceOut]:
        with self.database.session() as db:
            rows = db.execute(select(Device).order_by(Device.id)).scalars().all()
            return [DeviceOut.model_validate(row) for row in rows]

    def list_by_pot(self, pot_id: int) -> List[DeviceOut]:
        with self.database.session() as db:
            query = select(Device).where(Device.pot_id == pot_id).order_by(Device.id)
            rows = db.execute(query).scalars().all()
            return [DeviceOut.model_validate(row) for row in rows]

    def update_status(self, device_id: str, status: str) -> bool:
        """Set a device's status.

        Returns False when no row matched. That case is not an error: the
        update is idempotent and callers treat it as success.
        """
        with self.database.session() as db:
            result = db.execute(update(Device).where(Device.id == device_id).values(status=status))
        if result.rowcount == 0:
            logger.info("Status update for unknown device %s matched no rows", device_id)
        return result.rowcount > 0

    def delete(self, device_id: str) -> bool:
        with self.database.session() as db:
            result = db.execute(delete(Device).where(Device.id == device_id))
        if result.rowcount == 0:
            logger.info("Delete of unknown device %s ignored", device_id)
        return result.rowcount > 0
