import logging
from typing import List

from pothub.core.database import Database
from pothub.core.errors import StorageUnavailableError
from pothub.crud import CRUDAudit, CRUDDevice, CRUDPot, CRUDSensor
from pothub.schemas import DeviceIn, DeviceOut, PotOut, SensorIn, SensorOut

logger = logging.getLogger(__name__)


class ResourceService:
    """Runs each mutation against its store, then records it in the audit log.

    The store call decides the outcome. The audit append only happens after the
    store succeeded, and its failure is logged without affecting the result.
    """

    def __init__(
        self,
        database: Database,
        sensors: CRUDSensor,
        devices: CRUDDevice,
        pots: CRUDPot,
        audit: CRUDAudit,
    ) -> None:
        self.database = database
        self.sensors = sensors
        self.devices = devices
        self.pots = pots
        self.audit = audit

    @classmethod
    def from_database(cls, database: Database) -> "ResourceService":
        sensors = CRUDSensor(database)
        devices = CRUDDevice(database)
        return cls(
            database=database,
            sensors=sensors,
            devices=devices,
            pots=CRUDPot(database, sensors, devices),
            audit=CRUDAudit(database),
        )

    def _record(self, action: str, sensor_id: str = "", device_id: str = "") -> None:
        try:
            self.audit.append(sensor_id, device_id, action)
        except StorageUnavailableError as exc:
            logger.error("Audit record dropped (sensor=%r device=%r action=%r): %s", sensor_id, device_id, action, exc)

    def ping(self) -> None:
        self.database.ping()

    # Sensors

    def list_sensors(self) -> List[SensorOut]:
        return self.sensors.list_all()

    def add_sensor(self, sensor: SensorIn) -> SensorOut:
        created = self.sensors.create(sensor)
        logger.info("Sensor %s added", created.id)
        self._record("Sensor added", sensor_id=created.id)
        return created

    def delete_sensor(self, sensor_id: str) -> None:
        self.sensors.delete(sensor_id)
        self._record("Sensor deleted", sensor_id=sensor_id)

    # Devices

    def list_devices(self) -> List[DeviceOut]:
        return self.devices.list_all()

    def add_device(self, device: DeviceIn) -> DeviceOut:
        created = self.devices.create(device)
        logger.info("Device %s added", created.id)
        self._record("Device added", device_id=created.id)
        return created

    def update_device_status(self, device_id: str, status: str) -> None:
        self.devices.update_status(device_id, status)
        self._record(f"Device status updated to {status}", device_id=device_id)

    def delete_device(self, device_id: str) -> None:
        self.devices.delete(device_id)
        self._record("Device deleted", device_id=device_id)

    # Pots

    def list_pots(self) -> List[PotOut]:
        return self.pots.list_all()

    def add_pot(self, name: str) -> PotOut:
        created = self.pots.create(name)
        # The audit table has no pot column; pots use the device slot.
        self._record("Pot added", device_id=str(created.id))
        return created

    def delete_pot(self, pot_id: int) -> None:
        self.pots.delete(pot_id)
        self._record("Pot deleted", device_id=str(pot_id))
