from unittest.mock import MagicMock, patch

import pytest
import requests

from pothub.services import PotHubClient


@pytest.fixture()
def response():
    mock = MagicMock()
    mock.json.return_value = {"status": "ok"}
    return mock


@patch("pothub.services.pothub_client.requests.request")
def test_update_device_status_sends_put(mock_request, response):
    mock_request.return_value = response
    client = PotHubClient("http://localhost:8080/api/", timeout=3)

    assert client.update_device_status("pump-01", "on") == {"status": "ok"}
    mock_request.assert_called_once_with(
        "PUT", "http://localhost:8080/api/devices/pump-01/status", json={"status": "on"}, timeout=3
    )


@patch("pothub.services.pothub_client.requests.request")
def test_add_pot_posts_name(mock_request, response):
    response.json.return_value = {"id": 1, "name": "greenhouse-1", "sensors": [], "devices": []}
    mock_request.return_value = response
    client = PotHubClient("http://localhost:8080/api")

    assert client.add_pot("greenhouse-1")["id"] == 1
    mock_request.assert_called_once_with(
        "POST", "http://localhost:8080/api/pots/add", json={"name": "greenhouse-1"}, timeout=8
    )


@patch("pothub.services.pothub_client.requests.request")
def test_http_errors_are_raised(mock_request, response):
    response.raise_for_status.side_effect = requests.HTTPError("409 Conflict")
    mock_request.return_value = response
    client = PotHubClient("http://localhost:8080/api")

    with pytest.raises(requests.HTTPError):
        client.add_sensor({"id": "temp-01"})
