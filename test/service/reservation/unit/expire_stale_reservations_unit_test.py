from datetime import timedelta
from typing import Any
from unittest.mock import AsyncMock

import anyio
import pytest

from ride_reservation.service.reservation.app.command.expire_stale_reservations_use_case import (
    ExpireStaleReservationsUseCase,
)
from ride_reservation.service.reservation.app.dto.expiry_sweep_dto import ExpirySweepResult
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus
from ride_reservation.service.reservation.domain.enum.session_status import SessionStatus
from ride_reservation.service.reservation.domain.step_validator import StepValidator
from ride_reservation.service.reservation.driven_adapter.repo.in_memory_reservation_session_repo import (
    InMemoryReservationSessionRepo,
)
from ride_reservation.service.reservation.driven_adapter.state.in_memory_seat_inventory import (
    InMemorySeatInventory,
)
from ride_reservation.service.reservation.driving_adapter.background.hold_expiry_sweeper import (
    HoldExpirySweeper,
)


pytestmark = pytest.mark.unit

IDLE_TIMEOUT = timedelta(minutes=30)


@pytest.fixture
def session_repo() -> InMemoryReservationSessionRepo:
    return InMemoryReservationSessionRepo()


@pytest.fixture
def use_case(
    inventory: InMemorySeatInventory, session_repo: InMemoryReservationSessionRepo, clock: Any
) -> ExpireStaleReservationsUseCase:
    return ExpireStaleReservationsUseCase(
        seat_inventory=inventory,
        session_repo=session_repo,
        idle_timeout=IDLE_TIMEOUT,
        clock=clock,
    )


@pytest.fixture
def holding_session(
    new_session: Any, inventory: InMemorySeatInventory, validator: StepValidator, clock: Any
) -> ReservationSession:
    session = new_session()
    session.advance(validator=validator, now=clock())
    session.select_seat('S1', ledger=inventory, now=clock())
    return session


class TestExpireStaleReservations:
    @pytest.mark.asyncio
    async def test_nothing_to_do(self, use_case: ExpireStaleReservationsUseCase):
        result = await use_case.execute()

        assert result.is_empty

    @pytest.mark.asyncio
    async def test_elapsed_hold_returns_to_available(
        self,
        use_case: ExpireStaleReservationsUseCase,
        session_repo: InMemoryReservationSessionRepo,
        inventory: InMemorySeatInventory,
        holding_session: ReservationSession,
        clock: Any,
    ):
        await session_repo.add(session=holding_session)
        clock.advance(minutes=10)

        result = await use_case.execute()

        assert result.expired_holds == [('T1', 'S1')]
        assert result.expired_sessions == []
        assert inventory.seat_status('T1', 'S1') is SeatStatus.AVAILABLE
        assert holding_session.is_active

    @pytest.mark.asyncio
    async def test_live_hold_is_left_alone(
        self,
        use_case: ExpireStaleReservationsUseCase,
        inventory: InMemorySeatInventory,
        holding_session: ReservationSession,
        clock: Any,
    ):
        clock.advance(minutes=9)

        result = await use_case.execute()

        assert result.is_empty
        assert inventory.is_held_by('T1', 'S1', holding_session.id)

    @pytest.mark.asyncio
    async def test_idle_session_expires_then_is_purged(
        self,
        use_case: ExpireStaleReservationsUseCase,
        session_repo: InMemoryReservationSessionRepo,
        holding_session: ReservationSession,
        clock: Any,
    ):
        await session_repo.add(session=holding_session)
        clock.advance(minutes=30)

        first = await use_case.execute()

        assert first.expired_sessions == [holding_session.id]
        assert holding_session.status is SessionStatus.EXPIRED
        assert await session_repo.get(session_id=holding_session.id) is holding_session

        clock.advance(minutes=30)
        second = await use_case.execute()

        assert second.purged_sessions == [holding_session.id]
        assert await session_repo.get(session_id=holding_session.id) is None

    @pytest.mark.asyncio
    async def test_release_all_active_frees_held_seats(
        self,
        use_case: ExpireStaleReservationsUseCase,
        session_repo: InMemoryReservationSessionRepo,
        inventory: InMemorySeatInventory,
        holding_session: ReservationSession,
    ):
        await session_repo.add(session=holding_session)

        released = await use_case.release_all_active()

        assert released == 1
        assert inventory.seat_status('T1', 'S1') is SeatStatus.AVAILABLE


class TestHoldExpirySweeper:
    @pytest.mark.asyncio
    async def test_sweep_once_runs_one_expiry_pass(self):
        expire_use_case = AsyncMock()
        expire_use_case.execute.return_value = ExpirySweepResult(expired_holds=[('T1', 'S1')])
        sweeper = HoldExpirySweeper(expire_use_case=expire_use_case, interval_seconds=0.01)

        result = await sweeper.sweep_once()

        expire_use_case.execute.assert_awaited_once()
        assert result.expired_holds == [('T1', 'S1')]

    @pytest.mark.asyncio
    async def test_loop_keeps_sweeping_after_a_failed_pass(self):
        expire_use_case = AsyncMock()
        expire_use_case.execute.side_effect = [RuntimeError('boom')] + [
            ExpirySweepResult() for _ in range(100)
        ]
        sweeper = HoldExpirySweeper(expire_use_case=expire_use_case, interval_seconds=0.01)

        async with anyio.create_task_group() as tg:
            await sweeper.start(task_group=tg)
            await anyio.sleep(0.1)
            tg.cancel_scope.cancel()

        assert expire_use_case.execute.await_count >= 2
