"""Reservation Service Interfaces"""

from ride_reservation.service.reservation.app.interface.i_booking_repo import IBookingRepo
from ride_reservation.service.reservation.app.interface.i_payment_gateway import IPaymentGateway
from ride_reservation.service.reservation.app.interface.i_pickup_directory import (
    IPickupDirectory,
)
from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.app.interface.i_trip_catalog import ITripCatalog

__all__ = [
    'IBookingRepo',
    'IPaymentGateway',
    'IPickupDirectory',
    'IReservationSessionRepo',
    'ISeatInventory',
    'ITripCatalog',
]
