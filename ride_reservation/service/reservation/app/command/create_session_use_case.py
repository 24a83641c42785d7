from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import uuid7

from ride_reservation.platform.clock import Clock
from ride_reservation.platform.config.core_setting import Settings
from ride_reservation.platform.config.di import Container
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.dto.reservation_session_view_dto import (
    ReservationSessionView,
)
from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.app.interface.i_trip_catalog import ITripCatalog
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.reservation_error import TripNotFoundError


class CreateSessionUseCase:
    """Open a reservation session bound to a catalog trip (step 1)"""

    def __init__(
        self,
        *,
        trip_catalog: ITripCatalog,
        seat_inventory: ISeatInventory,
        session_repo: IReservationSessionRepo,
        settings: Settings,
        clock: Clock,
    ) -> None:
        self.trip_catalog = trip_catalog
        self.seat_inventory = seat_inventory
        self.session_repo = session_repo
        self.settings = settings
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        trip_catalog: ITripCatalog = Depends(Provide[Container.trip_catalog]),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
        session_repo: IReservationSessionRepo = Depends(
            Provide[Container.reservation_session_repo]
        ),
        settings: Settings = Depends(Provide[Container.config_service]),
        clock: Clock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            trip_catalog=trip_catalog,
            seat_inventory=seat_inventory,
            session_repo=session_repo,
            settings=settings,
            clock=clock,
        )

    @Logger.io
    async def execute(self, *, trip_id: str) -> ReservationSessionView:
        trip = await self.trip_catalog.get_trip(trip_id=trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)

        self.seat_inventory.register_trip(trip)
        session = ReservationSession.create(
            id=uuid7(),
            trip=trip,
            now=self.clock(),
            max_seats=self.settings.MAX_SEATS_PER_SESSION,
            max_extra_quantity=self.settings.MAX_EXTRA_QUANTITY,
        )
        await self.session_repo.add(session=session)

        Logger.base.info(f'🧾 [SESSION] Opened {session.id} for trip {trip.id}')
        return ReservationSessionView.from_session(session, seat_inventory=self.seat_inventory)
