import logging
from typing import List

from sqlalchemy import delete, select

from pothub.core.database import Database
from pothub.core.errors import ConflictError
from pothub.models.sensor import Sensor
from pothub.schemas.sensor import SensorIn, SensorOut

logger = logging.getLogger(__name__)


class CRUDSensor:
    def __init__(self, database: Database) -> None:
        self.database = database

    def create(self, sensor: SensorIn) -> SensorOut:
        try:
            with self.database.session() as db:
                db_obj = Sensor(**sensor.model_dump())
                db.add(db_obj)
        except ConflictError as exc:
            raise ConflictError(f"Sensor '{sensor.id}' already exists") from exc
        return SensorOut.model_validate(db_obj)

    def list_all(self) -> List[SensorOut]:
        with self.database.session() as db:
            rows = db.execute(select(Sensor).order_by(Sensor.id)).scalars().all()
            return [SensorOut.model_validate(row) for row in rows]

    def list_by_pot(self, pot_id: int) -> List[SensorOut]:
        with self.database.session() as db:
            query = select(Sensor).where(Sensor.pot_id == pot_id).order_by(Sensor.id)
            rows = db.execute(query).scalars().all()
            return [SensorOut.model_validate(row) for row in rows]

    def delete(self, sensor_id: str) -> bool:
        with self.database.session() as db:
            result = db.execute(delete(Sensor).where(Sensor.id == sensor_id))
        if result.rowcount == 0:
            logger.info("Delete of unknown sensor %s ignored", sensor_id)
        return result.rowcount > 0
