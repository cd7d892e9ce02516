"""Tests for the shutdown endpoint."""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from singletonsort.api import shutdown as shutdown_module
from singletonsort.api.shutdown import get_server
from singletonsort.main import app


class FakeServer:
    """Stands in for uvicorn.Server; only should_exit is used."""

    def __init__(self) -> None:
        self.should_exit = False


@pytest.fixture
def server(monkeypatch: pytest.MonkeyPatch) -> FakeServer:
    monkeypatch.setattr(shutdown_module, "SHUTDOWN_DELAY", 0)
    return FakeServer()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestShutdown:
    async def test_shutdown_stops_server(self, client: AsyncClient, server: FakeServer) -> None:
        app.dependency_overrides[get_server] = lambda: server

        response = await client.post("/api/shutdown")

        assert response.status_code == 200
        assert response.json() == {"message": "Server shutting down..."}

        await asyncio.sleep(0.05)
        assert server.should_exit is True

    async def test_not_available_without_launcher(self, client: AsyncClient) -> None:
        """Without a registered server the endpoint refuses."""
        app.dependency_overrides[get_server] = lambda: None

        response = await client.post("/api/shutdown")

        assert response.status_code == 503

    async def test_get_not_allowed(self, client: AsyncClient) -> None:
        response = await client.get("/api/shutdown")

        assert response.status_code == 405
