"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from datetime import timedelta

from dependency_injector import containers, providers

from ride_reservation.platform.clock import utc_now
from ride_reservation.platform.config.core_setting import Settings
from ride_reservation.service.reservation.app.command.expire_stale_reservations_use_case import (
    ExpireStaleReservationsUseCase,
)
from ride_reservation.service.reservation.app.service.booking_finalizer import BookingFinalizer
from ride_reservation.service.reservation.domain.step_validator import StepValidator
from ride_reservation.service.reservation.driven_adapter.catalog.demo_catalog_data import (
    build_demo_pickup_points,
    seed_demo_trips,
)
from ride_reservation.service.reservation.driven_adapter.catalog.in_memory_pickup_directory import (
    InMemoryPickupDirectory,
)
from ride_reservation.service.reservation.driven_adapter.catalog.in_memory_trip_catalog import (
    InMemoryTripCatalog,
)
from ride_reservation.service.reservation.driven_adapter.payment.mock_payment_gateway import (
    MockPaymentGateway,
)
from ride_reservation.service.reservation.driven_adapter.repo.in_memory_booking_repo import (
    InMemoryBookingRepo,
)
from ride_reservation.service.reservation.driven_adapter.repo.in_memory_reservation_session_repo import (
    InMemoryReservationSessionRepo,
)
from ride_reservation.service.reservation.driven_adapter.state.in_memory_seat_inventory import (
    InMemorySeatInventory,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)
    clock = providers.Object(utc_now)

    # Trip catalog and pickup directory (in-memory, optionally seeded with demo trips)
    demo_trips = providers.Singleton(
        seed_demo_trips,
        enabled=config_service.provided.SEED_DEMO_CATALOG,
        currency=config_service.provided.DEFAULT_CURRENCY,
    )
    trip_catalog = providers.Singleton(InMemoryTripCatalog, trips=demo_trips)
    pickup_directory = providers.Singleton(
        InMemoryPickupDirectory,
        points_by_trip=providers.Singleton(
            build_demo_pickup_points,
            demo_trips,
            currency=config_service.provided.DEFAULT_CURRENCY,
        ),
    )

    # Seat inventory: the only shared mutable state, must stay a Singleton
    seat_inventory = providers.Singleton(
        InMemorySeatInventory,
        hold_ttl=providers.Factory(timedelta, seconds=config_service.provided.HOLD_TTL_SECONDS),
        clock=clock,
    )

    # Repositories
    reservation_session_repo = providers.Singleton(InMemoryReservationSessionRepo)
    booking_repo = providers.Singleton(InMemoryBookingRepo)

    # Payment
    payment_gateway = providers.Singleton(MockPaymentGateway, clock=clock)

    # Domain / app services
    step_validator = providers.Singleton(StepValidator, ledger=seat_inventory)
    booking_finalizer = providers.Singleton(
        BookingFinalizer,
        seat_inventory=seat_inventory,
        booking_repo=booking_repo,
        step_validator=step_validator,
        confirmation_code_length=config_service.provided.CONFIRMATION_CODE_LENGTH,
        clock=clock,
    )

    # Expiry pass run by the background sweeper
    expire_stale_reservations_use_case = providers.Singleton(
        ExpireStaleReservationsUseCase,
        seat_inventory=seat_inventory,
        session_repo=reservation_session_repo,
        idle_timeout=providers.Factory(
            timedelta, seconds=config_service.provided.SESSION_IDLE_TIMEOUT_SECONDS
        ),
        clock=clock,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
