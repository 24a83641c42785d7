from fastapi import APIRouter, Depends, status

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.platform.types import UtilsUUID7
from ride_reservation.service.reservation.app.command.advance_step_use_case import (
    AdvanceStepUseCase,
)
from ride_reservation.service.reservation.app.command.cancel_session_use_case import (
    CancelSessionUseCase,
)
from ride_reservation.service.reservation.app.command.create_session_use_case import (
    CreateSessionUseCase,
)
from ride_reservation.service.reservation.app.command.deselect_seat_use_case import (
    DeselectSeatUseCase,
)
from ride_reservation.service.reservation.app.command.finalize_reservation_use_case import (
    FinalizeReservationUseCase,
)
from ride_reservation.service.reservation.app.command.go_to_step_use_case import GoToStepUseCase
from ride_reservation.service.reservation.app.command.select_seat_use_case import (
    SelectSeatUseCase,
)
from ride_reservation.service.reservation.app.command.set_extras_use_case import SetExtrasUseCase
from ride_reservation.service.reservation.app.command.set_passenger_details_use_case import (
    SetPassengerDetailsUseCase,
)
from ride_reservation.service.reservation.app.command.set_pickup_use_case import SetPickupUseCase
from ride_reservation.service.reservation.app.query.get_session_view_use_case import (
    GetSessionViewUseCase,
)
from ride_reservation.service.reservation.domain.value_object.extra_selection import (
    ExtraSelection,
)
from ride_reservation.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    BookingResponse,
    CreateReservationRequest,
    GoToStepRequest,
    PaymentRequest,
    ReservationSessionResponse,
    SelectSeatRequest,
    SetExtrasRequest,
    SetPassengerRequest,
    SetPickupRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: CreateReservationRequest,
    use_case: CreateSessionUseCase = Depends(CreateSessionUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(trip_id=request.trip_id)
    return ReservationSessionResponse.from_view(view)


@router.get('/{session_id}')
@Logger.io
async def get_reservation(
    session_id: UtilsUUID7,
    use_case: GetSessionViewUseCase = Depends(GetSessionViewUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id)
    return ReservationSessionResponse.from_view(view)


@router.delete('/{session_id}')
@Logger.io
async def cancel_reservation(
    session_id: UtilsUUID7,
    use_case: CancelSessionUseCase = Depends(CancelSessionUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id)
    return ReservationSessionResponse.from_view(view)


@router.post('/{session_id}/seat')
@Logger.io
async def select_seat(
    session_id: UtilsUUID7,
    request: SelectSeatRequest,
    use_case: SelectSeatUseCase = Depends(SelectSeatUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id, seat_id=request.seat_id)
    return ReservationSessionResponse.from_view(view)


@router.delete('/{session_id}/seat/{seat_id}')
@Logger.io
async def deselect_seat(
    session_id: UtilsUUID7,
    seat_id: str,
    use_case: DeselectSeatUseCase = Depends(DeselectSeatUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id, seat_id=seat_id)
    return ReservationSessionResponse.from_view(view)


@router.put('/{session_id}/pickup')
@Logger.io
async def set_pickup(
    session_id: UtilsUUID7,
    request: SetPickupRequest,
    use_case: SetPickupUseCase = Depends(SetPickupUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(
        session_id=session_id, needed=request.needed, pickup_point_id=request.pickup_point_id
    )
    return ReservationSessionResponse.from_view(view)


@router.put('/{session_id}/extras')
@Logger.io
async def set_extras(
    session_id: UtilsUUID7,
    request: SetExtrasRequest,
    use_case: SetExtrasUseCase = Depends(SetExtrasUseCase.depends),
) -> ReservationSessionResponse:
    selections = [
        ExtraSelection(extra_id=item.extra_id, quantity=item.quantity) for item in request.extras
    ]
    view = await use_case.execute(session_id=session_id, selections=selections)
    return ReservationSessionResponse.from_view(view)


@router.put('/{session_id}/passenger')
@Logger.io
async def set_passenger(
    session_id: UtilsUUID7,
    request: SetPassengerRequest,
    use_case: SetPassengerDetailsUseCase = Depends(SetPassengerDetailsUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id, name=request.name)
    return ReservationSessionResponse.from_view(view)


@router.post('/{session_id}/advance')
@Logger.io
async def advance_step(
    session_id: UtilsUUID7,
    use_case: AdvanceStepUseCase = Depends(AdvanceStepUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id)
    return ReservationSessionResponse.from_view(view)


@router.post('/{session_id}/step')
@Logger.io
async def go_to_step(
    session_id: UtilsUUID7,
    request: GoToStepRequest,
    use_case: GoToStepUseCase = Depends(GoToStepUseCase.depends),
) -> ReservationSessionResponse:
    view = await use_case.execute(session_id=session_id, step=request.step)
    return ReservationSessionResponse.from_view(view)


@router.post('/{session_id}/pay')
@Logger.io
async def pay_reservation(
    session_id: UtilsUUID7,
    request: PaymentRequest,
    use_case: FinalizeReservationUseCase = Depends(FinalizeReservationUseCase.depends),
) -> BookingResponse:
    booking = await use_case.execute(
        session_id=session_id,
        method=request.method,
        details={'card_number': request.card_number},
    )
    return BookingResponse.from_booking(booking)
