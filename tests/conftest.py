import pytest
from fastapi.testclient import TestClient

from employee_api.app import app
from employee_api.storage import reset_engine


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def _fresh_engine():
    reset_engine()
    yield
    reset_engine()


@pytest.fixture(autouse=True)
def _info_logging(monkeypatch):
    from employee_api import config
    monkeypatch.setattr(config, "LOG_LEVEL", 1)
    monkeypatch.setattr(config, "DATABASE_URL", None)
