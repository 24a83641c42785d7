from threading import Lock

from uuid_utils import UUID

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)


class InMemoryReservationSessionRepo(IReservationSessionRepo):
    """Sessions keyed by id. The lock guards the registry only, never a session."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._sessions: dict[UUID, ReservationSession] = {}

    @Logger.io
    async def add(self, *, session: ReservationSession) -> None:
        with self._lock:
            self._sessions[session.id] = session

    async def get(self, *, session_id: UUID) -> ReservationSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    @Logger.io
    async def remove(self, *, session_id: UUID) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    async def list_all(self) -> list[ReservationSession]:
        with self._lock:
            return list(self._sessions.values())

    async def list_active(self) -> list[ReservationSession]:
        with self._lock:
            return [session for session in self._sessions.values() if session.is_active]
