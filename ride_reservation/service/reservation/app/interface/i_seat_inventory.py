"""
Seat Inventory Interface

Single source of truth for seat availability. Operations are synchronous:
every state change is a short in-memory critical section under a per-trip lock.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from uuid_utils import UUID

from ride_reservation.service.reservation.domain.entity.trip_entity import Trip
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus
from ride_reservation.service.reservation.domain.value_object.hold_token import HoldToken


class ISeatInventory(ABC):
    @abstractmethod
    def register_trip(self, trip: Trip) -> None:
        """Seed every seat of the trip as available; no-op if already registered"""
        pass

    @abstractmethod
    def hold(self, trip_id: str, seat_id: str, session_id: UUID) -> HoldToken:
        """
        available -> held (an elapsed hold is reclaimed first)

        Raises:
            SeatUnavailableError: seat is held (live) or booked
            SeatNotFoundError: unknown trip or seat
        """
        pass

    @abstractmethod
    def release(self, trip_id: str, seat_id: str, session_id: UUID) -> None:
        """
        held -> available

        Raises:
            NotHolderError: caller is not the current holder
        """
        pass

    @abstractmethod
    def confirm(self, trip_id: str, seat_id: str, session_id: UUID) -> None:
        """
        held -> booked

        Raises:
            HoldExpiredOrMissingError: caller owns no live hold on the seat
        """
        pass

    @abstractmethod
    def revert_confirm(self, trip_id: str, seat_id: str, session_id: UUID) -> None:
        """booked -> held by the same session; only used to roll back a failed finalize"""
        pass

    @abstractmethod
    def expire_hold(self, trip_id: str, seat_id: str) -> bool:
        """held -> available when the TTL has elapsed. Returns whether anything expired."""
        pass

    @abstractmethod
    def expired_holds(self, now: datetime) -> list[tuple[str, str]]:
        """(trip_id, seat_id) pairs whose holds have elapsed at `now`"""
        pass

    @abstractmethod
    def seat_status(self, trip_id: str, seat_id: str) -> SeatStatus:
        pass

    @abstractmethod
    def is_held_by(self, trip_id: str, seat_id: str, session_id: UUID) -> bool:
        """True only while the session's hold is live"""
        pass

    @abstractmethod
    def seat_map(self, trip_id: str) -> dict[str, SeatStatus]:
        pass
