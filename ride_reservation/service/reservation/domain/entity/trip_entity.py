"""
Trip Entity

Trips, their seats, pickup points and travel extras are owned by the trip
catalog. The reservation engine only reads them, so they are all frozen.
"""

from datetime import date, time
from math import ceil

import attrs

from ride_reservation.platform.exception.exceptions import DomainError
from ride_reservation.service.reservation.domain.enum.seat_class import SeatClass
from ride_reservation.service.reservation.domain.value_object.money import Money


SEATS_PER_ROW = 4


@attrs.define(frozen=True)
class Seat:
    id: str
    number: str
    seat_class: SeatClass
    price: Money


@attrs.define(frozen=True)
class PickupPoint:
    id: str
    name: str
    address: str
    fee: Money
    is_active: bool = True


@attrs.define(frozen=True)
class TravelExtra:
    id: str
    name: str
    price: Money
    description: str = ''


@attrs.define(frozen=True)
class Trip:
    id: str
    origin: str
    destination: str
    departure_date: date
    departure_time: time
    vehicle_id: str
    base_price: Money
    capacity: int
    seats: tuple[Seat, ...] = attrs.field(converter=tuple)
    extras: tuple[TravelExtra, ...] = attrs.field(converter=tuple, factory=tuple)

    def __attrs_post_init__(self) -> None:
        if self.capacity != len(self.seats):
            raise DomainError(
                f'Trip {self.id} capacity {self.capacity} does not match {len(self.seats)} seats'
            )
        seat_ids = [seat.id for seat in self.seats]
        if len(set(seat_ids)) != len(seat_ids):
            raise DomainError(f'Trip {self.id} has duplicate seat ids')

    def find_seat(self, seat_id: str) -> Seat | None:
        return next((seat for seat in self.seats if seat.id == seat_id), None)

    def find_extra(self, extra_id: str) -> TravelExtra | None:
        return next((extra for extra in self.extras if extra.id == extra_id), None)


def seat_class_for_position(index: int, capacity: int) -> SeatClass:
    """
    Default cabin layout, four seats per row:
    the second row is premium, the window seats of the last row are accessible,
    and every seventh seat in the middle rows is vip.
    """
    rows = ceil(capacity / SEATS_PER_ROW)
    row, col = divmod(index, SEATS_PER_ROW)
    if row == 1:
        return SeatClass.PREMIUM
    if row == rows - 1 and col in (0, SEATS_PER_ROW - 1):
        return SeatClass.ACCESSIBLE
    if 1 < row < rows - 1 and index % 7 == 0:
        return SeatClass.VIP
    return SeatClass.STANDARD


def build_seat_layout(
    *, vehicle_id: str, base_price: Money, capacity: int
) -> tuple[Seat, ...]:
    """Seats priced as base price times class multiplier"""
    seats = []
    for index in range(capacity):
        seat_class = seat_class_for_position(index, capacity)
        seats.append(
            Seat(
                id=f'{vehicle_id}-s{index + 1}',
                number=str(index + 1),
                seat_class=seat_class,
                price=base_price.apply_percent(seat_class.multiplier_percent),
            )
        )
    return tuple(seats)

