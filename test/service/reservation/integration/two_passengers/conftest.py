from collections.abc import Generator

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint, Trip
from ride_reservation.service.reservation.driven_adapter.catalog.in_memory_pickup_directory import (
    InMemoryPickupDirectory,
)
from ride_reservation.service.reservation.driven_adapter.catalog.in_memory_trip_catalog import (
    InMemoryTripCatalog,
)


@pytest.fixture
def client(
    trip_t1: Trip, pickup_points: list[PickupPoint]
) -> Generator[TestClient, None, None]:
    """App client whose catalog holds only trip T1 and its pickup points"""
    from ride_reservation.main import app
    from ride_reservation.platform.config.di import container

    container.trip_catalog.override(providers.Object(InMemoryTripCatalog(trips=[trip_t1])))
    container.pickup_directory.override(
        providers.Object(InMemoryPickupDirectory(points_by_trip={trip_t1.id: pickup_points}))
    )
    container.reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    container.reset_override()
    container.reset_singletons()


@pytest.fixture
def context() -> dict:
    return {'sessions': {}, 'responses': {}, 'bookings': {}}
