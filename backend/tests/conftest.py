"""
Shared fixtures: an in-memory SQLite ``Database`` per test, the stores and
service wired to it, and a ``TestClient`` around a freshly created app.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from pothub.core import Database
from pothub.crud import CRUDAudit, CRUDDevice, CRUDPot, CRUDSensor
from pothub.main import create_app
from pothub.services import ResourceService

logging.getLogger("pothub").setLevel(logging.WARNING)


@pytest.fixture()
def database():
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def sensor_crud(database):
    return CRUDSensor(database)


@pytest.fixture()
def device_crud(database):
    return CRUDDevice(database)


@pytest.fixture()
def pot_crud(database, sensor_crud, device_crud):
    return CRUDPot(database, sensor_crud, device_crud)


@pytest.fixture()
def audit_crud(database):
    return CRUDAudit(database)


@pytest.fixture()
def service(database):
    return ResourceService.from_database(database)


@pytest.fixture()
def app(database):
    return create_app(database)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
