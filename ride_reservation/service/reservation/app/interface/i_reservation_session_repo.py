from abc import ABC, abstractmethod

from uuid_utils import UUID

from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)


class IReservationSessionRepo(ABC):
    @abstractmethod
    async def add(self, *, session: ReservationSession) -> None:
        pass

    @abstractmethod
    async def get(self, *, session_id: UUID) -> ReservationSession | None:
        pass

    @abstractmethod
    async def remove(self, *, session_id: UUID) -> None:
        pass

    @abstractmethod
    async def list_all(self) -> list[ReservationSession]:
        pass

    @abstractmethod
    async def list_active(self) -> list[ReservationSession]:
        pass
