from pydantic import BaseModel, ConfigDict, Field

from pothub.schemas.device import DeviceOut
from pothub.schemas.sensor import SensorOut


class PotIn(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    name: str


class PotOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    sensors: list[SensorOut] = Field(default_factory=list)
    devices: list[DeviceOut] = Field(default_factory=list)
