"""
In-Memory Seat Inventory

One lock per trip, created under a registry lock. Every state change happens
inside the trip's lock and only touches in-memory records, so racing sessions
(event-loop tasks or OS threads) always get exactly one winner per seat.

    available --hold--> held --confirm--> booked
        ^                 |
        +--release/expire-+
"""

from datetime import datetime, timedelta
from threading import Lock

import attrs
from uuid_utils import UUID

from ride_reservation.platform.clock import Clock, utc_now
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.domain.entity.trip_entity import Trip
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus
from ride_reservation.service.reservation.domain.reservation_error import (
    HoldExpiredOrMissingError,
    NotHolderError,
    SeatNotFoundError,
    SeatUnavailableError,
)
from ride_reservation.service.reservation.domain.value_object.hold_token import HoldToken


@attrs.define
class _SeatRecord:
    status: SeatStatus = SeatStatus.AVAILABLE
    holder: UUID | None = None
    held_at: datetime | None = None
    expires_at: datetime | None = None

    def is_live_hold(self, now: datetime) -> bool:
        return (
            self.status is SeatStatus.HELD
            and self.expires_at is not None
            and now < self.expires_at
        )

    def is_elapsed_hold(self, now: datetime) -> bool:
        return self.status is SeatStatus.HELD and not self.is_live_hold(now)

    def make_available(self) -> None:
        self.status = SeatStatus.AVAILABLE
        self.holder = None
        self.held_at = None
        self.expires_at = None


@attrs.define
class _TripLedger:
    lock: Lock = attrs.field(factory=Lock)
    seats: dict[str, _SeatRecord] = attrs.field(factory=dict)


class InMemorySeatInventory(ISeatInventory):
    def __init__(self, *, hold_ttl: timedelta, clock: Clock = utc_now) -> None:
        self.hold_ttl = hold_ttl
        self.clock = clock
        self._registry_lock = Lock()
        self._trips: dict[str, _TripLedger] = {}

    def register_trip(self, trip: Trip) -> None:
        with self._registry_lock:
            if trip.id in self._trips:
                return
            self._trips[trip.id] = _TripLedger(
                seats={seat.id: _SeatRecord() for seat in trip.seats}
            )
        Logger.base.info(f'🪑 [INVENTORY] Registered trip {trip.id} with {trip.capacity} seats')

    def _ledger(self, trip_id: str, seat_id: str) -> _TripLedger:
        with self._registry_lock:
            ledger = self._trips.get(trip_id)
        if ledger is None or seat_id not in ledger.seats:
            raise SeatNotFoundError(trip_id, seat_id)
        return ledger

    def hold(self, trip_id: str, seat_id: str, session_id: UUID) -> HoldToken:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            record = ledger.seats[seat_id]
            now = self.clock()
            if record.is_elapsed_hold(now):
                Logger.base.info(f'♻️ [INVENTORY] Reclaiming elapsed hold on {trip_id}/{seat_id}')
                record.make_available()
            if record.status is not SeatStatus.AVAILABLE:
                raise SeatUnavailableError(seat_id)

            record.status = SeatStatus.HELD
            record.holder = session_id
            record.held_at = now
            record.expires_at = now + self.hold_ttl
            return HoldToken(
                trip_id=trip_id,
                seat_id=seat_id,
                session_id=session_id,
                held_at=now,
                expires_at=record.expires_at,
            )

    def release(self, trip_id: str, seat_id: str, session_id: UUID) -> None:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            record = ledger.seats[seat_id]
            if record.status is not SeatStatus.HELD or record.holder != session_id:
                raise NotHolderError(seat_id)
            record.make_available()

    def confirm(self, trip_id: str, seat_id: str, session_id: UUID) -> None:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            record = ledger.seats[seat_id]
            if record.holder != session_id or not record.is_live_hold(self.clock()):
                raise HoldExpiredOrMissingError(seat_id)
            # Holder and expiry are kept so a rollback can restore the hold
            record.status = SeatStatus.BOOKED

    def revert_confirm(self, trip_id: str, seat_id: str, session_id: UUID) -> None:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            record = ledger.seats[seat_id]
            if record.status is not SeatStatus.BOOKED or record.holder != session_id:
                raise NotHolderError(seat_id)
            record.status = SeatStatus.HELD

    def expire_hold(self, trip_id: str, seat_id: str) -> bool:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            record = ledger.seats[seat_id]
            if not record.is_elapsed_hold(self.clock()):
                return False
            Logger.base.info(
                f'⏰ [INVENTORY] Hold on {trip_id}/{seat_id} by {record.holder} expired'
            )
            record.make_available()
            return True

    def expired_holds(self, now: datetime) -> list[tuple[str, str]]:
        with self._registry_lock:
            trips = list(self._trips.items())
        expired = []
        for trip_id, ledger in trips:
            with ledger.lock:
                expired.extend(
                    (trip_id, seat_id)
                    for seat_id, record in ledger.seats.items()
                    if record.is_elapsed_hold(now)
                )
        return expired

    def seat_status(self, trip_id: str, seat_id: str) -> SeatStatus:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            return ledger.seats[seat_id].status

    def is_held_by(self, trip_id: str, seat_id: str, session_id: UUID) -> bool:
        ledger = self._ledger(trip_id, seat_id)
        with ledger.lock:
            record = ledger.seats[seat_id]
            return record.holder == session_id and record.is_live_hold(self.clock())

    def seat_map(self, trip_id: str) -> dict[str, SeatStatus]:
        with self._registry_lock:
            ledger = self._trips.get(trip_id)
        if ledger is None:
            return {}
        with ledger.lock:
            return {seat_id: record.status for seat_id, record in ledger.seats.items()}
