"""
Reservation Session View DTOs

Read-only snapshot of a session for the passenger's screen. Built fresh on
every request; the live hold state comes from the seat inventory.
"""

from dataclasses import dataclass, field
from datetime import datetime

from uuid_utils import UUID

from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint, Trip
from ride_reservation.service.reservation.domain.enum.reservation_step import ReservationStep
from ride_reservation.service.reservation.domain.enum.seat_class import SeatClass
from ride_reservation.service.reservation.domain.enum.session_status import (
    PaymentStatus,
    SessionStatus,
)
from ride_reservation.service.reservation.domain.fare_calculator import FareBreakdown
from ride_reservation.service.reservation.domain.value_object.money import Money


@dataclass
class SeatLineView:
    seat_id: str
    number: str
    seat_class: SeatClass
    price: Money
    hold_expires_at: datetime
    hold_live: bool


@dataclass
class ExtraLineView:
    extra_id: str
    name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass
class ReservationSessionView:
    session_id: UUID
    trip: Trip
    step: ReservationStep
    status: SessionStatus
    pickup_requested: bool
    pickup_point: PickupPoint | None
    fare: FareBreakdown
    passenger_name: str | None
    payment_status: PaymentStatus
    payment_reference: str | None
    booking_id: UUID | None
    created_at: datetime
    last_activity_at: datetime
    seats: list[SeatLineView] = field(default_factory=list)
    extras: list[ExtraLineView] = field(default_factory=list)

    @classmethod
    def from_session(
        cls, session: ReservationSession, *, seat_inventory: ISeatInventory
    ) -> 'ReservationSessionView':
        seats = []
        for seat in session.held_seats:
            token = session.holds[seat.id]
            seats.append(
                SeatLineView(
                    seat_id=seat.id,
                    number=seat.number,
                    seat_class=seat.seat_class,
                    price=seat.price,
                    hold_expires_at=token.expires_at,
                    hold_live=session.is_active
                    and seat_inventory.is_held_by(session.trip.id, seat.id, session.id),
                )
            )
        extras = [
            ExtraLineView(
                extra_id=extra.id,
                name=extra.name,
                quantity=quantity,
                unit_price=extra.price,
                line_total=extra.price.times(quantity),
            )
            for extra, quantity in session.extra_lines
        ]
        return cls(
            session_id=session.id,
            trip=session.trip,
            step=session.step,
            status=session.status,
            pickup_requested=session.pickup_requested,
            pickup_point=session.pickup_point,
            fare=session.fare,
            passenger_name=session.passenger_name,
            payment_status=session.payment_status,
            payment_reference=session.payment_reference,
            booking_id=session.booking_id,
            created_at=session.created_at,
            last_activity_at=session.last_activity_at,
            seats=seats,
            extras=extras,
        )
