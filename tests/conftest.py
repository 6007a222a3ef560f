"""Pytest configuration and fixtures."""

import os

# Set DEBUG=true for all tests BEFORE any subway imports
# This must be done before subway.core.config loads settings
os.environ["DEBUG"] = "true"

import uuid
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from subway.core.config import settings
from subway.core.store import Store, get_store
from subway.main import app
from subway.models.line import Line
from subway.models.station import Station

API = settings.API_V1_PREFIX


# ==================== Domain fixtures ====================


@pytest.fixture
def gangnam() -> Station:
    return Station.of("Gangnam")


@pytest.fixture
def yangjae() -> Station:
    return Station.of("Yangjae")


@pytest.fixture
def pangyo() -> Station:
    return Station.of("Pangyo")


@pytest.fixture
def gwanggyo() -> Station:
    return Station.of("Gwanggyo")


@pytest.fixture
def shinbundang() -> Line:
    """Empty line used as the owner of sections in model tests."""
    return Line.of("Shinbundang", "bg-red-600")


# ==================== Store & HTTP fixtures ====================


@pytest.fixture
def store() -> Store:
    """
    Fresh in-memory store for one test.

    Returns:
        Store with no stations and no lines
    """
    return Store()


@pytest.fixture
def client(store: Store) -> Generator[TestClient, None, None]:
    """
    FastAPI synchronous test client bound to the test's store.

    Yields:
        Synchronous test client with app context
    """
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def async_client(store: Store) -> AsyncGenerator[AsyncClient, None]:
    """
    FastAPI asynchronous HTTP client for async endpoint testing.

    Yields:
        Async HTTP client with ASGI transport
    """
    app.dependency_overrides[get_store] = lambda: store
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def create_station(client: TestClient) -> Callable[[str], str]:
    """
    Factory creating a station through the API.

    Returns:
        Function taking a station name and returning the new station id
    """

    def _create(name: str) -> str:
        response = client.post(f"{API}/stations", json={"name": name})
        assert response.status_code == 201, response.text
        return str(response.json()["id"])

    return _create


@pytest.fixture
def line_payload() -> Callable[..., dict[str, Any]]:
    """Factory building a line creation payload."""

    def _payload(
        name: str,
        color: str,
        up_station_id: str | uuid.UUID | None = None,
        down_station_id: str | uuid.UUID | None = None,
        distance: int | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": name, "color": color}
        if up_station_id is not None:
            payload["up_station_id"] = str(up_station_id)
        if down_station_id is not None:
            payload["down_station_id"] = str(down_station_id)
        if distance is not None:
            payload["distance"] = distance
        return payload

    return _payload
