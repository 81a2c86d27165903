import httpx
import pytest
from fastapi.testclient import TestClient

from top10.config import database
from top10.database import base as store_base
from top10.main import app

@pytest.fixture(autouse=True)
def memory_store(monkeypatch):
    """Every test starts from an empty in-memory store"""
    monkeypatch.setattr(database, "BACKEND", "memory")
    monkeypatch.setattr(store_base, "_store", None)

@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def mock_client():
    """Factory for an AsyncClient whose requests are answered by ``handler``"""
    def _make(handler):
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url="http://testserver"
        )
    return _make

@pytest.fixture
async def asgi_client():
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver"
    ) as c:
        yield c
