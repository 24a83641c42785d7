from abc import ABC, abstractmethod

from ride_reservation.service.reservation.domain.entity.trip_entity import Trip


class ITripCatalog(ABC):
    """Read-only source of trips (route + vehicle + schedule)"""

    @abstractmethod
    async def list_trips(
        self, *, origin: str | None = None, destination: str | None = None
    ) -> list[Trip]:
        pass

    @abstractmethod
    async def get_trip(self, *, trip_id: str) -> Trip | None:
        pass
