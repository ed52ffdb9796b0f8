import pytest
from fastapi.testclient import TestClient

from location_core.store import LocationStore
from main import create_app


@pytest.fixture
def store():
    """Fresh store seeded with the sample locations (ids 1-3)."""
    return LocationStore.with_seed()


@pytest.fixture
def client(store):
    """API test client around a new app that owns the test store."""
    with TestClient(create_app(store)) as c:
        yield c
