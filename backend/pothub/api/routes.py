from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Request
from fastapi.responses import JSONResponse

from pothub.core.errors import StorageUnavailableError
from pothub.schemas import (
    DeviceIn,
    DeviceOut,
    DeviceStatusUpdate,
    POT_ID_MAX,
    PotIn,
    PotOut,
    SensorIn,
    SensorOut,
    StatusResponse,
    decode,
)
from pothub.services import ResourceService

router = APIRouter()


def get_service(request: Request) -> ResourceService:
    return request.app.state.service


@router.get("/health", response_model=None)
def health(service: ResourceService = Depends(get_service)) -> Any:
    try:
        service.ping()
    except StorageUnavailableError as exc:
        return JSONResponse(status_code=503, content={"status": "unavailable", "detail": str(exc)})
    return {"status": "ok"}


@router.get("/sensors", response_model=list[SensorOut])
def get_sensors(service: ResourceService = Depends(get_service)) -> list[SensorOut]:
    return service.list_sensors()


@router.post("/sensors/add", response_model=SensorOut)
def add_sensor(
    payload: dict[str, Any] = Body(...),
    service: ResourceService = Depends(get_service),
) -> SensorOut:
    return service.add_sensor(decode(SensorIn, payload))


@router.delete("/sensors/delete/{sensor_id}", response_model=StatusResponse)
def delete_sensor(sensor_id: str, service: ResourceService = Depends(get_service)) -> StatusResponse:
    service.delete_sensor(sensor_id)
    return StatusResponse(status="Sensor deleted")


@router.get("/devices", response_model=list[DeviceOut])
def get_devices(service: ResourceService = Depends(get_service)) -> list[DeviceOut]:
    return service.list_devices()


@router.post("/devices/add", response_model=DeviceOut)
def add_device(
    payload: dict[str, Any] = Body(...),
    service: ResourceService = Depends(get_service),
) -> DeviceOut:
    return service.add_device(decode(DeviceIn, payload))


@router.put("/devices/{device_id}/status", response_model=StatusResponse)
def update_device_status(
    device_id: str,
    payload: dict[str, Any] = Body(...),
    service: ResourceService = Depends(get_service),
) -> StatusResponse:
    update = decode(DeviceStatusUpdate, payload)
    service.update_device_status(device_id, update.status)
    return StatusResponse(status="Device status updated")


@router.delete("/devices/delete/{device_id}", response_model=StatusResponse)
def delete_device(device_id: str, service: ResourceService = Depends(get_service)) -> StatusResponse:
    service.delete_device(device_id)
    return StatusResponse(status="Device deleted")


@router.get("/pots", response_model=list[PotOut])
def get_pots(service: ResourceService = Depends(get_service)) -> list[PotOut]:
    return service.list_pots()


@router.post("/pots/add", response_model=PotOut)
def add_pot(
    payload: dict[str, Any] = Body(...),
    service: ResourceService = Depends(get_service),
) -> PotOut:
    pot = decode(PotIn, payload)
    return service.add_pot(pot.name)


@router.delete("/pots/delete/{pot_id}", response_model=StatusResponse)
def delete_pot(
    pot_id: int = Path(..., ge=1, le=POT_ID_MAX),
    service: ResourceService = Depends(get_service),
) -> StatusResponse:
    service.delete_pot(pot_id)
    return StatusResponse(status="Pot deleted")
