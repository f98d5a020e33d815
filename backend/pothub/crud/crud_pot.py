import logging
from typing import List

from sqlalchemy import delete, insert, select

from pothub.core.database import Database
from pothub.crud.crud_device import CRUDDevice
from pothub.crud.crud_sensor import CRUDSensor
from pothub.models.pot import Pot
from pothub.schemas.pot import PotOut

logger = logging.getLogger(__name__)


class CRUDPot:
    """Pot rows plus the sensors and devices that reference them.

    Sensors and devices are looked up per pot on every read, so a listing
    always reflects what is persisted at that moment.
    """

    def __init__(self, database: Database, sensors: CRUDSensor, devices: CRUDDevice) -> None:
        self.database = database
        self.sensors = sensors
        self.devices = devices

    def create(self, name: str) -> PotOut:
        # INSERT ... RETURNING keeps id assignment in the same statement.
        with self.database.session() as db:
            pot_id = db.execute(insert(Pot).values(name=name).returning(Pot.id)).scalar_one()
        logger.info("Created pot %s (%s)", pot_id, name)
        return PotOut(id=pot_id, name=name)

    def delete(self, pot_id: int) -> bool:
        """Delete the pot row only; sensors and devices keep their pot_id."""
        with self.database.session() as db:
            result = db.execute(delete(Pot).where(Pot.id == pot_id))
        if result.rowcount == 0:
            logger.info("Delete of unknown pot %s ignored", pot_id)
        return result.rowcount > 0

    def list_all(self) -> List[PotOut]:
        with self.database.session() as db:
            rows = db.execute(select(Pot.id, Pot.name).order_by(Pot.id)).all()

        return [
            PotOut(
                id=row.id,
                name=row.name,
                sensors=self.sensors.list_by_pot(row.id),
                devices=self.devices.list_by_pot(row.id),
            )
            for row in rows
        ]
