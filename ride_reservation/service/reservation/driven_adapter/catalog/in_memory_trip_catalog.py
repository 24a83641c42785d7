from typing import Iterable

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_trip_catalog import ITripCatalog
from ride_reservation.service.reservation.domain.entity.trip_entity import Trip


class InMemoryTripCatalog(ITripCatalog):
    def __init__(self, *, trips: Iterable[Trip] = ()) -> None:
        self._trips: dict[str, Trip] = {trip.id: trip for trip in trips}
        Logger.base.info(f'🚌 [CATALOG] Loaded {len(self._trips)} trips')

    async def list_trips(
        self, *, origin: str | None = None, destination: str | None = None
    ) -> list[Trip]:
        trips = list(self._trips.values())
        if origin:
            trips = [trip for trip in trips if trip.origin.lower() == origin.strip().lower()]
        if destination:
            trips = [
                trip for trip in trips if trip.destination.lower() == destination.strip().lower()
            ]
        return sorted(trips, key=lambda trip: (trip.departure_date, trip.departure_time, trip.id))

    async def get_trip(self, *, trip_id: str) -> Trip | None:
        return self._trips.get(trip_id)
