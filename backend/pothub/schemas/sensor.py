from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pothub.schemas.common import PotId


class SensorIn(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", allow_inf_nan=False)

    id: str = Field(..., min_length=1, description="Caller-assigned sensor identity")
    type: str = Field(..., description="Sensor type tag, e.g. temperature")
    value: float = Field(..., description="Latest measured value")
    status: str
    pot_id: PotId | None = Field(default=None, validation_alias=AliasChoices("pot_id", "potID"))


class SensorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    value: float
    status: str
    pot_id: int | None
