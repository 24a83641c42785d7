"""Reservation Enums"""

from ride_reservation.service.reservation.domain.enum.reservation_step import ReservationStep
from ride_reservation.service.reservation.domain.enum.seat_class import SeatClass
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus
from ride_reservation.service.reservation.domain.enum.session_status import (
    PaymentStatus,
    SessionStatus,
)

__all__ = ['PaymentStatus', 'ReservationStep', 'SeatClass', 'SeatStatus', 'SessionStatus']
