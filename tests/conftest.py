"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.network import InterchangeDeclaration, NetworkModel, StationSeed, build_default_network
from src.routes.service import PathFinder, RouteService

HOP_MINUTES = 2.5


@pytest.fixture(scope="session")
def network() -> NetworkModel:
    """Hyderabad Metro network, built once like the application does."""
    return build_default_network(hop_minutes=HOP_MINUTES)


@pytest.fixture
def path_finder(network: NetworkModel) -> PathFinder:
    return PathFinder(network)


@pytest.fixture
def route_service(network: NetworkModel) -> RouteService:
    return RouteService(network)


@pytest.fixture
def network_factory():
    """Build a small network from plain station names (no coordinates)."""

    def make_network(corridors, interchanges=(), hop_minutes: float = 2.0) -> NetworkModel:
        return NetworkModel.from_corridors(
            {line: [StationSeed(name=name) for name in names] for line, names in corridors.items()},
            [
                InterchangeDeclaration(station_a=a, line_a=la, station_b=b, line_b=lb, minutes=minutes)
                for a, la, b, lb, minutes in interchanges
            ],
            hop_minutes=hop_minutes,
        )

    return make_network


@pytest.fixture
def client() -> Generator[TestClient]:
    """Test client with the application lifespan running."""
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
