from typing import List

from fastapi import APIRouter, Depends

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.platform.types import UtilsUUID7
from ride_reservation.service.reservation.app.query.get_booking_use_case import (
    GetBookingUseCase,
)
from ride_reservation.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    BookingResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_trip_bookings(
    trip_id: str,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_trip_bookings(trip_id=trip_id)
    return [BookingResponse.from_booking(booking) for booking in bookings]


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UtilsUUID7,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return BookingResponse.from_booking(booking)
