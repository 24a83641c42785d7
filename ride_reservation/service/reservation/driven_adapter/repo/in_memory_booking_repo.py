from threading import Lock

from uuid_utils import UUID

from ride_reservation.platform.exception.exceptions import ConflictError
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_booking_repo import IBookingRepo
from ride_reservation.service.reservation.domain.entity.booking_entity import Booking


class InMemoryBookingRepo(IBookingRepo):
    def __init__(self) -> None:
        self._lock = Lock()
        self._bookings: dict[UUID, Booking] = {}

    @Logger.io
    async def save(self, *, booking: Booking) -> Booking:
        with self._lock:
            if booking.id in self._bookings:
                raise ConflictError(f'Booking {booking.id} already exists')
            self._bookings[booking.id] = booking
        return booking

    async def get_by_id(self, *, booking_id: UUID) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    async def list_by_trip(self, *, trip_id: str) -> list[Booking]:
        with self._lock:
            return [booking for booking in self._bookings.values() if booking.trip_id == trip_id]
