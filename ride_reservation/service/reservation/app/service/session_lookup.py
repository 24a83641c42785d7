from uuid_utils import UUID

from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.reservation_error import SessionNotFoundError


async def load_session(repo: IReservationSessionRepo, session_id: UUID) -> ReservationSession:
    session = await repo.get(session_id=session_id)
    if session is None:
        raise SessionNotFoundError(session_id)
    return session
