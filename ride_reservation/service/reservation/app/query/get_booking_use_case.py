from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from ride_reservation.platform.config.di import Container
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_booking_repo import IBookingRepo
from ride_reservation.service.reservation.domain.entity.booking_entity import Booking
from ride_reservation.service.reservation.domain.reservation_error import BookingNotFoundError


class GetBookingUseCase:
    def __init__(self, *, booking_repo: IBookingRepo):
        self.booking_repo = booking_repo

    @classmethod
    @inject
    def depends(
        cls, booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo])
    ) -> Self:
        return cls(booking_repo=booking_repo)

    @Logger.io
    async def get_booking(self, *, booking_id: UUID) -> Booking:
        booking = await self.booking_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise BookingNotFoundError(booking_id)
        return booking

    @Logger.io
    async def list_trip_bookings(self, *, trip_id: str) -> list[Booking]:
        return await self.booking_repo.list_by_trip(trip_id=trip_id)
