"""
Fare Calculator

Pure fare arithmetic. The breakdown it returns is the single source of the
price shown to the passenger and charged by the payment gateway.

    total = sum(seat prices) + pickup fee + sum(extra price * quantity)
"""

from typing import Iterable

import attrs

from ride_reservation.service.reservation.domain.entity.trip_entity import (
    PickupPoint,
    Seat,
    TravelExtra,
)
from ride_reservation.service.reservation.domain.value_object.money import Money


@attrs.define(frozen=True)
class FareBreakdown:
    seats_total: Money
    pickup_fee: Money
    extras_total: Money

    @property
    def total(self) -> Money:
        return self.seats_total + self.pickup_fee + self.extras_total

    @classmethod
    def empty(cls, currency: str = 'USD') -> 'FareBreakdown':
        zero = Money.zero(currency)
        return cls(seats_total=zero, pickup_fee=zero, extras_total=zero)


def compute_fare(
    seats: Iterable[Seat],
    pickup: PickupPoint | None,
    extras: Iterable[tuple[TravelExtra, int]] = (),
    *,
    currency: str = 'USD',
) -> FareBreakdown:
    seats_total = Money.total((seat.price for seat in seats), currency)
    pickup_fee = pickup.fee if pickup else Money.zero(currency)
    extras_total = Money.total((extra.price.times(qty) for extra, qty in extras), currency)
    return FareBreakdown(seats_total=seats_total, pickup_fee=pickup_fee, extras_total=extras_total)
