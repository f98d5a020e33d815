import pytest
from fastapi.testclient import TestClient

from pothub.core import Database, StorageUnavailableError
from pothub.main import create_app

SENSOR = {"id": "temp-01", "type": "temperature", "value": 21.5, "status": "ok", "pot_id": None}


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "PotHub backend is running"

    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_greenhouse_scenario(client):
    response = client.post("/api/pots/add", json={"name": "greenhouse-1"})
    assert response.status_code == 200
    pot = response.json()
    assert pot["name"] == "greenhouse-1"
    assert pot["sensors"] == [] and pot["devices"] == []
    pot_id = pot["id"]

    sensor = dict(SENSOR, pot_id=pot_id)
    response = client.post("/api/sensors/add", json=sensor)
    assert response.status_code == 200
    assert response.json() == sensor

    pots = client.get("/api/pots").json()
    assert pots == [{"id": pot_id, "name": "greenhouse-1", "sensors": [sensor], "devices": []}]

    response = client.delete(f"/api/pots/delete/{pot_id}")
    assert response.json() == {"status": "Pot deleted"}

    assert client.get("/api/pots").json() == []
    assert client.get("/api/sensors").json() == [sensor]


def test_add_sensor_accepts_pot_id_alias(client):
    payload = {"id": "temp-02", "type": "temperature", "value": 19, "status": "ok", "potID": 4}

    response = client.post("/api/sensors/add", json=payload)

    assert response.status_code == 200
    assert response.json()["pot_id"] == 4
    assert response.json()["value"] == 19.0


def test_duplicate_sensor_is_conflict(client):
    assert client.post("/api/sensors/add", json=SENSOR).status_code == 200

    response = client.post("/api/sensors/add", json=dict(SENSOR, value=30.0))

    assert response.status_code == 409
    assert "temp-01" in response.json()["detail"]
    assert client.get("/api/sensors").json() == [SENSOR]


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "temp-01", "type": "temperature", "value": "hot", "status": "ok"},
        {"id": "temp-01", "type": "temperature", "status": "ok"},
        dict(SENSOR, colour="red"),
        dict(SENSOR, id=""),
        [SENSOR],
    ],
)
def test_malformed_sensor_is_rejected(client, payload):
    response = client.post("/api/sensors/add", json=payload)

    assert response.status_code == 400
    assert client.get("/api/sensors").json() == []


def test_invalid_json_is_rejected(client):
    response = client.post("/api/pots/add", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400


def test_device_lifecycle(client):
    device = {"id": "pump-01", "type": "pump", "status": "off", "pot_id": None}
    assert client.post("/api/devices/add", json=device).json() == device

    response = client.put("/api/devices/pump-01/status", json={"status": "on"})
    assert response.status_code == 200
    assert response.json() == {"status": "Device status updated"}
    assert client.get("/api/devices").json() == [dict(device, status="on")]

    assert client.delete("/api/devices/delete/pump-01").json() == {"status": "Device deleted"}
    assert client.get("/api/devices").json() == []


def test_device_status_update_requires_status(client):
    response = client.put("/api/devices/pump-01/status", json={"state": "on"})

    assert response.status_code == 400


def test_status_update_of_unknown_device_succeeds(client):
    response = client.put("/api/devices/ghost/status", json={"status": "on"})

    assert response.status_code == 200


@pytest.mark.parametrize("path", ["/api/sensors/delete/nope", "/api/devices/delete/nope", "/api/pots/delete/99"])
def test_delete_of_missing_resource_succeeds_twice(client, path):
    assert client.delete(path).status_code == 200
    assert client.delete(path).status_code == 200


def test_delete_pot_requires_integer_id(client):
    assert client.delete("/api/pots/delete/abc").status_code == 400


def test_pots_with_same_name_get_distinct_ids(client):
    first = client.post("/api/pots/add", json={"name": "bed"}).json()
    second = client.post("/api/pots/add", json={"name": "bed"}).json()

    assert first["id"] < second["id"]


def test_storage_failure_is_service_unavailable(app, client, monkeypatch):
    def broken():
        raise StorageUnavailableError("connection refused")

    monkeypatch.setattr(app.state.service.sensors, "list_all", broken)

    response = client.get("/api/sensors")

    assert response.status_code == 503
    assert response.json() == {"detail": "connection refused"}


def test_health_reports_unreachable_database(app, client, monkeypatch):
    def broken():
        raise StorageUnavailableError("Database unreachable")

    monkeypatch.setattr(app.state.database, "ping", broken)

    response = client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"


def test_startup_fails_without_database(tmp_path):
    app = create_app(Database(f"sqlite:///{tmp_path}/missing/dir/pothub.db"))

    with pytest.raises(StorageUnavailableError):
        with TestClient(app):
            pass


@pytest.mark.parametrize("literal", [b"NaN", b"Infinity", b"-Infinity"])
def test_non_finite_sensor_value_is_rejected(client, literal):
    body = b'{"id": "n", "type": "temperature", "value": ' + literal + b', "status": "ok"}'

    response = client.post("/api/sensors/add", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert client.get("/api/sensors").json() == []


def test_oversized_pot_id_is_rejected(client):
    assert client.post("/api/sensors/add", json=dict(SENSOR, pot_id=2**70)).status_code == 400
    assert client.post("/api/devices/add", json={"id": "p", "type": "pump", "status": "on", "pot_id": 2**70}).status_code == 400
    assert client.delete(f"/api/pots/delete/{2**70}").status_code == 400
    assert client.delete("/api/pots/delete/0").status_code == 400
