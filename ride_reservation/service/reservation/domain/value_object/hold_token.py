"""Seat hold token (Value Object)"""

from datetime import datetime

import attrs
from uuid_utils import UUID


@attrs.define(frozen=True)
class HoldToken:
    """Proof that a session holds a seat until `expires_at`"""

    trip_id: str
    seat_id: str
    session_id: UUID
    held_at: datetime
    expires_at: datetime

    def is_elapsed(self, now: datetime) -> bool:
        return now >= self.expires_at
