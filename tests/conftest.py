import pytest
from fastapi.testclient import TestClient

from cnhsocial.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def lenient_client():
    """Client that returns 500 responses instead of re-raising server errors."""

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
