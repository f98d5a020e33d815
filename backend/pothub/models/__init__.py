from pothub.models.sensor import Sensor
from pothub.models.device import Device
from pothub.models.pot import Pot
from pothub.models.audit_log import AuditLog

__all__ = ["Sensor", "Device", "Pot", "AuditLog"]
