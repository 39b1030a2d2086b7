import pytest
from fastapi.testclient import TestClient

from sentiment_api.main import app, limiter


@pytest.fixture
def client():
    limiter.enabled = False
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        limiter.enabled = True
