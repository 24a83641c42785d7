from ride_reservation.service.reservation.app.interface.i_pickup_directory import (
    IPickupDirectory,
)
from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint


class InMemoryPickupDirectory(IPickupDirectory):
    def __init__(self, *, points_by_trip: dict[str, list[PickupPoint]] | None = None) -> None:
        self._points_by_trip = dict(points_by_trip or {})

    async def list_pickup_points(self, *, trip_id: str) -> list[PickupPoint]:
        return [point for point in self._points_by_trip.get(trip_id, []) if point.is_active]
