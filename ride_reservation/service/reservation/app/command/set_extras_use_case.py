from typing import Iterable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from ride_reservation.platform.clock import Clock
from ride_reservation.platform.config.di import Container
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.dto.reservation_session_view_dto import (
    ReservationSessionView,
)
from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.app.service.session_lookup import load_session
from ride_reservation.service.reservation.domain.value_object.extra_selection import (
    ExtraSelection,
)


class SetExtrasUseCase:
    """Replace the travel extras selected for the session"""

    def __init__(
        self,
        *,
        session_repo: IReservationSessionRepo,
        seat_inventory: ISeatInventory,
        clock: Clock,
    ) -> None:
        self.session_repo = session_repo
        self.seat_inventory = seat_inventory
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        session_repo: IReservationSessionRepo = Depends(
            Provide[Container.reservation_session_repo]
        ),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
        clock: Clock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(session_repo=session_repo, seat_inventory=seat_inventory, clock=clock)

    @Logger.io
    async def execute(
        self, *, session_id: UUID, selections: Iterable[ExtraSelection]
    ) -> ReservationSessionView:
        session = await load_session(self.session_repo, session_id)
        session.set_extras(selections, now=self.clock())
        return ReservationSessionView.from_session(session, seat_inventory=self.seat_inventory)
