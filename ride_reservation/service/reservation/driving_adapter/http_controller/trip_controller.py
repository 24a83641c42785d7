from typing import List, Optional

from fastapi import APIRouter, Depends

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.query.search_trips_use_case import (
    SearchTripsUseCase,
)
from ride_reservation.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    PickupPointResponse,
    SeatMapResponse,
    TripResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def search_trips(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    use_case: SearchTripsUseCase = Depends(SearchTripsUseCase.depends),
) -> List[TripResponse]:
    trips = await use_case.search(origin=origin, destination=destination)
    return [TripResponse.from_trip(trip) for trip in trips]


@router.get('/{trip_id}/seat')
@Logger.io
async def get_seat_map(
    trip_id: str,
    use_case: SearchTripsUseCase = Depends(SearchTripsUseCase.depends),
) -> SeatMapResponse:
    view = await use_case.get_seat_map(trip_id=trip_id)
    return SeatMapResponse.from_view(view)


@router.get('/{trip_id}/pickup')
@Logger.io
async def list_pickup_points(
    trip_id: str,
    use_case: SearchTripsUseCase = Depends(SearchTripsUseCase.depends),
) -> List[PickupPointResponse]:
    points = await use_case.list_pickup_points(trip_id=trip_id)
    return [PickupPointResponse.from_point(point) for point in points]
