import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_rate_service
from api.main import app


@pytest.fixture
def make_client():
    """Test client wired to the given RateService."""
    def _make(service):
        app.dependency_overrides[get_rate_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
