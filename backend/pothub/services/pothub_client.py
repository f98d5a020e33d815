from typing import Any

import requests


class PotHubClient:
    """Thin HTTP client for the PotHub API, used by the dashboard."""

    def __init__(self, base_url: str, timeout: int = 8) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        response = requests.request(method, f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health")

    def list_sensors(self) -> list[dict[str, Any]]:
        return self._request("GET", "/sensors")

    def add_sensor(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/sensors/add", payload)

    def delete_sensor(self, sensor_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/sensors/delete/{sensor_id}")

    def list_devices(self) -> list[dict[str, Any]]:
        return self._request("GET", "/devices")

    def add_device(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/devices/add", payload)

    def update_device_status(self, device_id: str, status: str) -> dict[str, Any]:
        return self._request("PUT", f"/devices/{device_id}/status", {"status": status})

    def delete_device(self, device_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/devices/delete/{device_id}")

    def list_pots(self) -> list[dict[str, Any]]:
        return self._request("GET", "/pots")

    def add_pot(self, name: str) -> dict[str, Any]:
        return self._request("POST", "/pots/add", {"name": name})

    def delete_pot(self, pot_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/pots/delete/{pot_id}")

