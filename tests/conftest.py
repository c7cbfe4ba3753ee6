"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from booking.core.store import AppointmentStore
from booking.main import create_app

FUTURE_DATE = "2099-06-01"


@pytest.fixture
def store() -> AppointmentStore:
    """Fresh, empty store per test."""
    return AppointmentStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    """FastAPI test client bound to an isolated application."""
    return TestClient(app)


@pytest.fixture
def booking_payload():
    def _create(**overrides):
        payload = {
            "name": "Jane Doe",
            "email": "jane@x.com",
            "date": FUTURE_DATE,
            "time": "09:00",
        }
        payload.update(overrides)
        return payload
    return _create
