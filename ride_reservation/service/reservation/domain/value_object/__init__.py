"""Reservation Value Objects"""

from ride_reservation.service.reservation.domain.value_object.extra_selection import (
    ExtraSelection,
)
from ride_reservation.service.reservation.domain.value_object.hold_token import HoldToken
from ride_reservation.service.reservation.domain.value_object.money import Money
from ride_reservation.service.reservation.domain.value_object.payment_receipt import (
    PaymentReceipt,
)

__all__ = ['ExtraSelection', 'HoldToken', 'Money', 'PaymentReceipt']
