from pothub.crud.crud_sensor import CRUDSensor
from pothub.crud.crud_device import CRUDDevice
from pothub.crud.crud_pot import CRUDPot
from pothub.crud.crud_audit import CRUDAudit

__all__ = ["CRUDSensor", "CRUDDevice", "CRUDPot", "CRUDAudit"]
