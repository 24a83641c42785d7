"""
Expire Stale Reservations Use Case

One expiry pass, run periodically by HoldExpirySweeper:

1. Elapsed seat holds go back to available (a confirm that got the trip lock
   first has already turned the seat booked and is left alone)
2. Active sessions idle longer than the timeout are expired, releasing holds
3. Terminal sessions idle longer than the timeout are dropped from the repo
"""

from datetime import timedelta

from ride_reservation.platform.clock import Clock
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.dto.expiry_sweep_dto import ExpirySweepResult
from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory


class ExpireStaleReservationsUseCase:
    def __init__(
        self,
        *,
        seat_inventory: ISeatInventory,
        session_repo: IReservationSessionRepo,
        idle_timeout: timedelta,
        clock: Clock,
    ) -> None:
        self.seat_inventory = seat_inventory
        self.session_repo = session_repo
        self.idle_timeout = idle_timeout
        self.clock = clock

    @Logger.io(truncate_content=True)
    async def execute(self) -> ExpirySweepResult:
        now = self.clock()
        result = ExpirySweepResult()

        for trip_id, seat_id in self.seat_inventory.expired_holds(now):
            if self.seat_inventory.expire_hold(trip_id, seat_id):
                result.expired_holds.append((trip_id, seat_id))

        for session in await self.session_repo.list_active():
            if session.is_idle(now, self.idle_timeout):
                session.expire(ledger=self.seat_inventory, now=now)
                result.expired_sessions.append(session.id)

        for session in await self.session_repo.list_all():
            if not session.is_active and session.is_idle(now, self.idle_timeout):
                await self.session_repo.remove(session_id=session.id)
                result.purged_sessions.append(session.id)

        if not result.is_empty:
            Logger.base.info(
                f'🧹 [EXPIRY] holds={len(result.expired_holds)} '
                f'sessions={len(result.expired_sessions)} purged={len(result.purged_sessions)}'
            )
        return result

    @Logger.io
    async def release_all_active(self) -> int:
        """Give back every seat held by an active session (shutdown)"""
        released = 0
        for session in await self.session_repo.list_active():
            released += len(session.release_all_holds(self.seat_inventory))
        return released
