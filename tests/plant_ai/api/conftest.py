import pytest
from fastapi.testclient import TestClient

from app.main import create_application
from app.modules.plant_ai.presentation.dependencies import get_inference_client
from app.shared.config.settings import get_settings
from tests.fakes import FakeInferenceGateway


@pytest.fixture
def fake_gateway() -> FakeInferenceGateway:
    return FakeInferenceGateway()


@pytest.fixture
def api_app(settings, fake_gateway):
    app = create_application(settings)
    app.dependency_overrides[get_inference_client] = lambda: fake_gateway
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(api_app) -> TestClient:
    return TestClient(api_app, raise_server_exceptions=False)
