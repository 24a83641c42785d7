import anyio
from anyio.abc import TaskGroup

from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.command.expire_stale_reservations_use_case import (
    ExpireStaleReservationsUseCase,
)
from ride_reservation.service.reservation.app.dto.expiry_sweep_dto import ExpirySweepResult


class HoldExpirySweeper:
    """Periodically expire elapsed seat holds and idle reservation sessions"""

    def __init__(
        self,
        *,
        expire_use_case: ExpireStaleReservationsUseCase,
        interval_seconds: float = 15.0,
    ) -> None:
        self.expire_use_case = expire_use_case
        self.interval_seconds = interval_seconds

    async def start(self, *, task_group: TaskGroup) -> None:
        task_group.start_soon(self._sweep_loop)
        Logger.base.info(f'🧹 [Sweeper] Started, every {self.interval_seconds}s')

    async def sweep_once(self) -> ExpirySweepResult:
        return await self.expire_use_case.execute()

    async def _sweep_loop(self) -> None:
        while True:
            await anyio.sleep(self.interval_seconds)
            try:
                await self.sweep_once()
            except Exception as e:
                # Keep sweeping: a failed pass is retried on the next tick
                Logger.base.exception(f'❌ [Sweeper] Expiry pass failed: {e}')
