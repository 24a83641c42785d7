"""Seat ledger port used by the session and the step validator"""

from typing import Protocol

from uuid_utils import UUID

from ride_reservation.service.reservation.domain.value_object.hold_token import HoldToken


class SeatLedger(Protocol):
    def hold(self, trip_id: str, seat_id: str, session_id: UUID) -> HoldToken: ...

    def release(self, trip_id: str, seat_id: str, session_id: UUID) -> None: ...

    def is_held_by(self, trip_id: str, seat_id: str, session_id: UUID) -> bool: ...
