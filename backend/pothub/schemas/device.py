from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pothub.schemas.common import PotId


class DeviceIn(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Caller-assigned device identity")
    type: str = Field(..., description="Device type tag, e.g. pump")
    status: str
    pot_id: PotId | None = Field(default=None, validation_alias=AliasChoices("pot_id", "potID"))


class DeviceStatusUpdate(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    status: str


class DeviceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    status: str
    pot_id: int | None
