import pytest
from fastapi.testclient import TestClient

from farmadvisor.main import app
from farmadvisor.reference import get_rand


@pytest.fixture
def client():
    # pin the "other factors" term so match scores are exact
    app.dependency_overrides[get_rand] = lambda: (lambda: 0.0)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
