"""Reservation Session Status Enums"""

from enum import StrEnum


class SessionStatus(StrEnum):
    ACTIVE = 'active'
    CONFIRMED = 'confirmed'
    ABANDONED = 'abandoned'
    EXPIRED = 'expired'

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.ACTIVE


class PaymentStatus(StrEnum):
    NOT_ATTEMPTED = 'not_attempted'
    PENDING = 'pending'  # charge in flight
    FAILED = 'failed'
    CAPTURED = 'captured'  # charged, booking not created yet
    SUCCEEDED = 'succeeded'
