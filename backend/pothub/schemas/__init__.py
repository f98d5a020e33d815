from pothub.schemas.common import POT_ID_MAX, PotId, StatusResponse, decode
from pothub.schemas.device import DeviceIn, DeviceOut, DeviceStatusUpdate
from pothub.schemas.pot import PotIn, PotOut
from pothub.schemas.sensor import SensorIn, SensorOut

__all__ = [
    "DeviceIn",
    "DeviceOut",
    "DeviceStatusUpdate",
    "POT_ID_MAX",
    "PotId",
    "PotIn",
    "PotOut",
    "SensorIn",
    "SensorOut",
    "StatusResponse",
    "decode",
]
