"""Reservation Entities"""

from ride_reservation.service.reservation.domain.entity.booking_entity import Booking
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.entity.trip_entity import (
    PickupPoint,
    Seat,
    TravelExtra,
    Trip,
)

__all__ = ['Booking', 'PickupPoint', 'ReservationSession', 'Seat', 'TravelExtra', 'Trip']
