"""
FastAPI Application

Reservation HTTP API plus the hold expiry sweeper running in the lifespan
task group.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from ride_reservation.platform.app_factory import create_app
from ride_reservation.platform.config.di import container
from ride_reservation.platform.config.wire_modules import WIRE_MODULES
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.driving_adapter.background.hold_expiry_sweeper import (
    HoldExpirySweeper,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ride Reservation] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ride Reservation] Dependency injection wired')

    seat_inventory = container.seat_inventory()
    for trip in await container.trip_catalog().list_trips():
        seat_inventory.register_trip(trip)

    settings = container.config_service()
    expire_use_case = container.expire_stale_reservations_use_case()
    sweeper = HoldExpirySweeper(
        expire_use_case=expire_use_case,
        interval_seconds=settings.HOLD_SWEEP_INTERVAL_SECONDS,
    )

    async with anyio.create_task_group() as tg:
        await sweeper.start(task_group=tg)
        Logger.base.info('✅ [Ride Reservation] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Ride Reservation] Shutting down...')
        tg.cancel_scope.cancel()

    released = await expire_use_case.release_all_active()
    Logger.base.info(f'🔓 [Ride Reservation] Released {released} held seat(s)')

    container.unwire()
    Logger.base.info('👋 [Ride Reservation] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
