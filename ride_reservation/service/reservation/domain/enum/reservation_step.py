"""Reservation Step Enum"""

from enum import IntEnum


class ReservationStep(IntEnum):
    ROUTE_SELECTED = 1
    TRIP_SELECTED = 2
    SEAT_SELECTED = 3
    DETAILS_COLLECTED = 4
    PAID = 5

    @property
    def is_last(self) -> bool:
        return self is ReservationStep.PAID
