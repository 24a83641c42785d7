"""
Reservation Session Entity

Step-gated state machine holding one passenger's in-progress booking:

    1 ROUTE_SELECTED -> 2 TRIP_SELECTED -> 3 SEAT_SELECTED
      -> 4 DETAILS_COLLECTED -> 5 PAID

Forward moves go through StepValidator one step at a time. Backward moves are
always allowed and never clear state. A session is owned by a single caller,
so it carries no lock of its own; seat exclusivity is the seat ledger's job.
"""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterable

import attrs
from uuid_utils import UUID

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.domain.enum.reservation_step import ReservationStep
from ride_reservation.service.reservation.domain.enum.session_status import (
    PaymentStatus,
    SessionStatus,
)
from ride_reservation.service.reservation.domain.entity.trip_entity import (
    PickupPoint,
    Seat,
    TravelExtra,
    Trip,
)
from ride_reservation.service.reservation.domain.fare_calculator import (
    FareBreakdown,
    compute_fare,
)
from ride_reservation.service.reservation.domain.reservation_error import (
    InvalidExtraError,
    InvalidPickupPointError,
    NotHolderError,
    SeatLimitExceededError,
    SessionClosedError,
    StepSkippedError,
    ValidationError,
)
from ride_reservation.service.reservation.domain.seat_ledger import SeatLedger
from ride_reservation.service.reservation.domain.value_object.extra_selection import (
    ExtraSelection,
)
from ride_reservation.service.reservation.domain.value_object.hold_token import HoldToken
from ride_reservation.service.reservation.domain.value_object.payment_receipt import (
    PaymentReceipt,
)


if TYPE_CHECKING:
    from ride_reservation.service.reservation.domain.step_validator import StepValidator


@attrs.define
class ReservationSession:
    id: UUID
    trip: Trip
    created_at: datetime
    last_activity_at: datetime
    max_seats: int = 1
    max_extra_quantity: int = 5
    step: ReservationStep = ReservationStep.ROUTE_SELECTED
    status: SessionStatus = SessionStatus.ACTIVE
    holds: dict[str, HoldToken] = attrs.field(factory=dict)
    pickup_requested: bool = False
    pickup_point: PickupPoint | None = None
    extras: tuple[ExtraSelection, ...] = ()
    passenger_name: str | None = None
    fare: FareBreakdown = attrs.field(factory=FareBreakdown.empty)
    payment_status: PaymentStatus = PaymentStatus.NOT_ATTEMPTED
    payment_reference: str | None = None
    captured_payment: PaymentReceipt | None = None
    booking_id: UUID | None = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: UUID,
        trip: Trip,
        now: datetime,
        max_seats: int = 1,
        max_extra_quantity: int = 5,
    ) -> 'ReservationSession':
        return cls(
            id=id,
            trip=trip,
            created_at=now,
            last_activity_at=now,
            max_seats=max_seats,
            max_extra_quantity=max_extra_quantity,
            fare=FareBreakdown.empty(trip.base_price.currency),
        )

    # Read side

    @property
    def seat_limit(self) -> int:
        return min(self.max_seats, self.trip.capacity)

    @property
    def seat_ids(self) -> tuple[str, ...]:
        return tuple(self.holds)

    @property
    def held_seats(self) -> tuple[Seat, ...]:
        seats = (self.trip.find_seat(seat_id) for seat_id in self.holds)
        return tuple(seat for seat in seats if seat is not None)

    @property
    def extra_lines(self) -> tuple[tuple[TravelExtra, int], ...]:
        lines = []
        for selection in self.extras:
            if extra := self.trip.find_extra(selection.extra_id):
                lines.append((extra, selection.quantity))
        return tuple(lines)

    @property
    def is_active(self) -> bool:
        return self.status is SessionStatus.ACTIVE

    def is_idle(self, now: datetime, timeout: timedelta) -> bool:
        return now - self.last_activity_at >= timeout

    # Mutations

    @Logger.io
    def select_seat(self, seat_id: str, *, ledger: SeatLedger, now: datetime) -> HoldToken:
        self._ensure_active()
        if self.step < ReservationStep.TRIP_SELECTED:
            raise ValidationError('Seats can only be selected once the trip is selected')
        self._forget_lost_holds(ledger)
        if seat_id not in self.holds and len(self.holds) >= self.seat_limit:
            raise SeatLimitExceededError(self.seat_limit)

        token = ledger.hold(self.trip.id, seat_id, self.id)
        self.holds[seat_id] = token
        self._recompute_fare()
        self._touch(now)
        return token

    @Logger.io
    def deselect_seat(self, seat_id: str, *, ledger: SeatLedger, now: datetime) -> None:
        self._ensure_active()
        if seat_id not in self.holds:
            raise NotHolderError(seat_id)
        try:
            ledger.release(self.trip.id, seat_id, self.id)
        except NotHolderError:
            # Hold already lost: forget the seat, then report it
            self._drop_seat(seat_id, now)
            raise
        self._drop_seat(seat_id, now)

    @Logger.io
    def set_pickup(
        self,
        *,
        needed: bool,
        pickup_point_id: str | None,
        offered_points: Iterable[PickupPoint],
        now: datetime,
    ) -> None:
        """`offered_points` are the trip's pickup points; inactive ones are never accepted"""
        self._ensure_active()
        if not needed:
            self.pickup_requested = False
            self.pickup_point = None
        elif pickup_point_id is None:
            self.pickup_requested = True
            self.pickup_point = None
        else:
            point = next(
                (p for p in offered_points if p.id == pickup_point_id and p.is_active), None
            )
            if point is None:
                raise InvalidPickupPointError(pickup_point_id)
            self.pickup_requested = True
            self.pickup_point = point
        self._recompute_fare()
        self._touch(now)

    @Logger.io
    def set_extras(self, selections: Iterable[ExtraSelection], *, now: datetime) -> None:
        self._ensure_active()
        chosen: dict[str, ExtraSelection] = {}
        for selection in selections:
            if self.trip.find_extra(selection.extra_id) is None:
                raise InvalidExtraError(selection.extra_id)
            if selection.extra_id in chosen:
                raise InvalidExtraError(selection.extra_id, 'is selected more than once')
            if selection.quantity > self.max_extra_quantity:
                raise InvalidExtraError(
                    selection.extra_id, f'quantity exceeds {self.max_extra_quantity}'
                )
            chosen[selection.extra_id] = selection

        self.extras = tuple(s for s in chosen.values() if s.quantity > 0)
        self._recompute_fare()
        self._touch(now)

    @Logger.io
    def set_passenger_details(self, *, name: str, now: datetime) -> None:
        self._ensure_active()
        if not name or not name.strip():
            raise ValidationError('Passenger name cannot be blank')
        self.passenger_name = name.strip()
        self._touch(now)

    @Logger.io
    def advance(self, *, validator: 'StepValidator', now: datetime) -> ReservationStep:
        validator.ensure_can_advance(self)
        self.step = ReservationStep(self.step + 1)
        self._touch(now)
        return self.step

    @Logger.io
    def go_to_step(self, step: int, *, now: datetime) -> ReservationStep:
        self._ensure_active()
        if not ReservationStep.ROUTE_SELECTED <= step <= ReservationStep.PAID:
            raise ValidationError(f'Step must be between 1 and {len(ReservationStep)}')
        if step > self.step:
            raise StepSkippedError(self.step, step)
        self.step = ReservationStep(step)
        self._touch(now)
        return self.step

    @Logger.io
    def begin_payment(self, *, now: datetime) -> None:
        """Mark a charge as in flight; StepValidator refuses to finalize meanwhile"""
        self._ensure_active()
        self.payment_status = PaymentStatus.PENDING
        self._touch(now)

    @Logger.io
    def record_payment_failure(self, *, now: datetime) -> None:
        self.payment_status = PaymentStatus.FAILED
        self._touch(now)

    @Logger.io
    def record_captured_payment(self, receipt: PaymentReceipt, *, now: datetime) -> None:
        """Funds were taken; kept so a later finalize attempt reuses this receipt"""
        self.payment_status = PaymentStatus.CAPTURED
        self.payment_reference = receipt.reference
        self.captured_payment = receipt
        self._touch(now)

    @Logger.io
    def mark_confirmed(self, *, booking_id: UUID, payment_reference: str, now: datetime) -> None:
        self._ensure_active()
        self.payment_status = PaymentStatus.SUCCEEDED
        self.payment_reference = payment_reference
        self.booking_id = booking_id
        self.step = ReservationStep.PAID
        self.status = SessionStatus.CONFIRMED
        self._touch(now)

    @Logger.io
    def cancel(self, *, ledger: SeatLedger, now: datetime) -> list[str]:
        self._ensure_active()
        released = self.release_all_holds(ledger)
        self.status = SessionStatus.ABANDONED
        self._touch(now)
        return released

    @Logger.io
    def expire(self, *, ledger: SeatLedger, now: datetime) -> list[str]:
        self._ensure_active()
        released = self.release_all_holds(ledger)
        self.status = SessionStatus.EXPIRED
        self._touch(now)
        return released

    def release_all_holds(self, ledger: SeatLedger) -> list[str]:
        """Release every seat still held; holds already lost are skipped"""
        released = []
        for seat_id in list(self.holds):
            try:
                ledger.release(self.trip.id, seat_id, self.id)
                released.append(seat_id)
            except NotHolderError:
                Logger.base.info(f'[SESSION] Hold on {seat_id} already lost for {self.id}')
            del self.holds[seat_id]
        self._recompute_fare()
        return released

    def _ensure_active(self) -> None:
        if not self.is_active:
            raise SessionClosedError(self.status)

    def _forget_lost_holds(self, ledger: SeatLedger) -> None:
        lost = [
            seat_id
            for seat_id in self.holds
            if not ledger.is_held_by(self.trip.id, seat_id, self.id)
        ]
        for seat_id in lost:
            Logger.base.info(f'[SESSION] Forgetting lost hold on {seat_id} for {self.id}')
            del self.holds[seat_id]
        if lost:
            self._recompute_fare()

    def _drop_seat(self, seat_id: str, now: datetime) -> None:
        del self.holds[seat_id]
        self._recompute_fare()
        self._touch(now)

    def _touch(self, now: datetime) -> None:
        self.last_activity_at = now

    def _recompute_fare(self) -> None:
        self.fare = compute_fare(
            self.held_seats,
            self.pickup_point,
            self.extra_lines,
            currency=self.trip.base_price.currency,
        )
