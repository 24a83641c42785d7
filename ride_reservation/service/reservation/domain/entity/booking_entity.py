from datetime import datetime

import attrs
from uuid_utils import UUID

from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint
from ride_reservation.service.reservation.domain.value_object.extra_selection import (
    ExtraSelection,
)
from ride_reservation.service.reservation.domain.value_object.money import Money


@attrs.define(frozen=True)
class Booking:
    """Terminal artifact of a paid reservation session. Never mutated."""

    id: UUID
    session_id: UUID
    trip_id: str
    seat_ids: tuple[str, ...]
    passenger_name: str
    total_price: Money
    payment_reference: str
    confirmation_code: str
    created_at: datetime
    pickup_point: PickupPoint | None = None
    extras: tuple[ExtraSelection, ...] = ()
