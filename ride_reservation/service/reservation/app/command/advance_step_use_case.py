from typing import Self

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
from ride_reservation.service.reservation.domain.step_validator import StepValidator


class AdvanceStepUseCase:
    """Move one step forward; fails with the specific unmet requirement"""

    def __init__(
        self,
        *,
        session_repo: IReservationSessionRepo,
        seat_inventory: ISeatInventory,
        step_validator: StepValidator,
        clock: Clock,
    ) -> None:
        self.session_repo = session_repo
        self.seat_inventory = seat_inventory
        self.step_validator = step_validator
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        session_repo: IReservationSessionRepo = Depends(
            Provide[Container.reservation_session_repo]
        ),
        seat_inventory: ISeatInventory = Depends(Provide[Container.seat_inventory]),
        step_validator: StepValidator = Depends(Provide[Container.step_validator]),
        clock: Clock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            session_repo=session_repo,
            seat_inventory=seat_inventory,
            step_validator=step_validator,
            clock=clock,
        )

    @Logger.io
    async def execute(self, *, session_id: UUID) -> ReservationSessionView:
        session = await load_session(self.session_repo, session_id)
        step = session.advance(validator=self.step_validator, now=self.clock())
        Logger.base.info(f'➡️ [ADVANCE] {session_id} is now at step {step.value} ({step.name})')
        return ReservationSessionView.from_session(session, seat_inventory=self.seat_inventory)
