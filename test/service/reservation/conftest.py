"""
Reservation fixtures

The reference trip T1 has two standard seats, S1 at 10.00 and S2 at 15.00,
one active pickup point P1 with a 5.00 fee and one inactive point P9.
"""

from datetime import date, time, timedelta
from typing import Any

import pytest
from uuid_utils import uuid7

from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.entity.trip_entity import (
    PickupPoint,
    Seat,
    TravelExtra,
    Trip,
)
from ride_reservation.service.reservation.domain.enum.seat_class import SeatClass
from ride_reservation.service.reservation.domain.step_validator import StepValidator
from ride_reservation.service.reservation.domain.value_object.money import Money
from ride_reservation.service.reservation.driven_adapter.state.in_memory_seat_inventory import (
    InMemorySeatInventory,
)


HOLD_TTL = timedelta(minutes=10)


@pytest.fixture
def trip_t1() -> Trip:
    return Trip(
        id='T1',
        origin='Downtown Station',
        destination='Airport Terminal',
        departure_date=date(2025, 6, 1),
        departure_time=time(10, 0),
        vehicle_id='v1',
        base_price=Money.of('10.00'),
        capacity=2,
        seats=(
            Seat(id='S1', number='1', seat_class=SeatClass.STANDARD, price=Money.of('10.00')),
            Seat(id='S2', number='2', seat_class=SeatClass.STANDARD, price=Money.of('15.00')),
        ),
        extras=(
            TravelExtra(id='e1', name='Extra Luggage', price=Money.of('10.00')),
            TravelExtra(id='e3', name='Travel Insurance', price=Money.of('8.50')),
        ),
    )


@pytest.fixture
def pickup_points() -> list[PickupPoint]:
    return [
        PickupPoint(id='P1', name='Main Street Corner', address='120 Main St', fee=Money.of('5.00')),
        PickupPoint(
            id='P9', name='Harbor Plaza', address='9 Harbor Way', fee=Money.of('5.00'), is_active=False
        ),
    ]


@pytest.fixture
def inventory(trip_t1: Trip, clock: Any) -> InMemorySeatInventory:
    seat_inventory = InMemorySeatInventory(hold_ttl=HOLD_TTL, clock=clock)
    seat_inventory.register_trip(trip_t1)
    return seat_inventory


@pytest.fixture
def validator(inventory: InMemorySeatInventory) -> StepValidator:
    return StepValidator(inventory)


@pytest.fixture
def new_session(trip_t1: Trip, clock: Any):
    def _new_session(max_seats: int = 1) -> ReservationSession:
        return ReservationSession.create(id=uuid7(), trip=trip_t1, now=clock(), max_seats=max_seats)

    return _new_session


@pytest.fixture
def session_at_details(
    new_session: Any, inventory: InMemorySeatInventory, validator: StepValidator, clock: Any
) -> ReservationSession:
    """Session holding S1 with a passenger name, sitting at step 4"""
    session = new_session()
    session.advance(validator=validator, now=clock())
    session.select_seat('S1', ledger=inventory, now=clock())
    session.advance(validator=validator, now=clock())
    session.set_passenger_details(name='Alice', now=clock())
    session.advance(validator=validator, now=clock())
    return session
