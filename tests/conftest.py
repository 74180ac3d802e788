import os

os.environ["ENVIRONMENT"] = "test"
os.environ["OPENAI_API_KEY"] = "sk-test-key"
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from app.shared.config.settings import Settings, get_settings  # noqa: E402
from tests.fakes import FakeInferenceGateway  # noqa: E402

IMAGE_URL = "https://example.com/monstera.jpg"


@pytest.fixture
def settings() -> Settings:
    return Settings(ENVIRONMENT="test", OPENAI_API_KEY="sk-test-key", LOG_FORMAT="text")


@pytest.fixture
def gateway() -> FakeInferenceGateway:
    return FakeInferenceGateway()


@pytest.fixture
def image_url() -> str:
    return IMAGE_URL


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
