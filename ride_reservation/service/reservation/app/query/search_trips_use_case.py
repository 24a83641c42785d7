from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from ride_reservation.platform.config.di import Container
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.dto.seat_map_dto import SeatMapEntry, SeatMapView
from ride_reservation.service.reservation.app.interface.i_pickup_directory import (
    IPickupDirectory,
)
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.app.interface.i_trip_catalog import ITripCatalog
from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint, Trip
from ride_reservation.service.reservation.domain.reservation_error import TripNotFoundError


class SearchTripsUseCase:
    """Trip search plus the per-trip read side: live seat map and pickup points"""

    def __init__(
        self,
        *,
        trip_catalog: ITripCatalog,
        pickup_directory: IPickupDirectory,
        seat_inventory: ISeatInventory,
    ) -> None:
        self.trip_catalog = trip_catalog
        self.pickup_directory = pickup_directory
        self.seat_inventory = seat_inventory

    @classmethod
    @inject
    def depends(
        cls,
        trip_catalog: ITripCatalog = Depends(Provide[Container.trip_catalog]),
        pickup_directory: IPickupDirectory = Depends(Provide[Container.pickup_directory]),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
    ) -> Self:
        return cls(
            trip_catalog=trip_catalog,
            pickup_directory=pickup_directory,
            seat_inventory=seat_inventory,
        )

    @Logger.io
    async def search(
        self, *, origin: str | None = None, destination: str | None = None
    ) -> list[Trip]:
        return await self.trip_catalog.list_trips(origin=origin, destination=destination)

    @Logger.io
    async def get_seat_map(self, *, trip_id: str) -> SeatMapView:
        trip = await self._require_trip(trip_id)
        self.seat_inventory.register_trip(trip)
        statuses = self.seat_inventory.seat_map(trip.id)
        return SeatMapView(
            trip=trip,
            seats=[SeatMapEntry(seat=seat, status=statuses[seat.id]) for seat in trip.seats],
        )

    @Logger.io
    async def list_pickup_points(self, *, trip_id: str) -> list[PickupPoint]:
        trip = await self._require_trip(trip_id)
        return await self.pickup_directory.list_pickup_points(trip_id=trip.id)

    async def _require_trip(self, trip_id: str) -> Trip:
        trip = await self.trip_catalog.get_trip(trip_id=trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        return trip
