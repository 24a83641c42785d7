from abc import ABC, abstractmethod

from uuid_utils import UUID

from ride_reservation.service.reservation.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    @abstractmethod
    async def save(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Booking | None:
        pass

    @abstractmethod
    async def list_by_trip(self, *, trip_id: str) -> list[Booking]:
        pass
