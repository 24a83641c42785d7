"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from ride_reservation.service.reservation.app.command import (
    advance_step_use_case,
    cancel_session_use_case,
    create_session_use_case,
    deselect_seat_use_case,
    finalize_reservation_use_case,
    go_to_step_use_case,
    select_seat_use_case,
    set_extras_use_case,
    set_passenger_details_use_case,
    set_pickup_use_case,
)
from ride_reservation.service.reservation.app.query import (
    get_booking_use_case,
    get_session_view_use_case,
    search_trips_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_session_use_case,
    select_seat_use_case,
    deselect_seat_use_case,
    set_pickup_use_case,
    set_extras_use_case,
    set_passenger_details_use_case,
    advance_step_use_case,
    go_to_step_use_case,
    finalize_reservation_use_case,
    cancel_session_use_case,
    get_session_view_use_case,
    search_trips_use_case,
    get_booking_use_case,
]
