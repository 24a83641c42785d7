"""
Reservation Domain Errors

Every error carries a `code` so callers can branch on the kind of failure
without parsing messages. HTTP status comes from the platform base class.
"""

from enum import StrEnum

from ride_reservation.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    PaymentRequiredError,
    UpstreamError,
)


class ReservationErrorCode(StrEnum):
    VALIDATION_ERROR = 'VALIDATION_ERROR'
    MISSING_TRIP = 'MISSING_TRIP'
    MISSING_SEAT = 'MISSING_SEAT'
    MISSING_PICKUP_POINT = 'MISSING_PICKUP_POINT'
    MISSING_PASSENGER_NAME = 'MISSING_PASSENGER_NAME'
    MISSING_PAYMENT = 'MISSING_PAYMENT'
    SEAT_LIMIT_EXCEEDED = 'SEAT_LIMIT_EXCEEDED'
    INVALID_PICKUP_POINT = 'INVALID_PICKUP_POINT'
    INVALID_EXTRA = 'INVALID_EXTRA'
    SEAT_UNAVAILABLE = 'SEAT_UNAVAILABLE'
    NOT_HOLDER = 'NOT_HOLDER'
    HOLD_EXPIRED_OR_MISSING = 'HOLD_EXPIRED_OR_MISSING'
    STEP_SKIPPED = 'STEP_SKIPPED'
    SESSION_CLOSED = 'SESSION_CLOSED'
    PAYMENT_DECLINED = 'PAYMENT_DECLINED'
    PAYMENT_ERROR = 'PAYMENT_ERROR'
    FINALIZATION_FAILED = 'FINALIZATION_FAILED'
    SESSION_NOT_FOUND = 'SESSION_NOT_FOUND'
    TRIP_NOT_FOUND = 'TRIP_NOT_FOUND'
    SEAT_NOT_FOUND = 'SEAT_NOT_FOUND'
    BOOKING_NOT_FOUND = 'BOOKING_NOT_FOUND'


class ValidationError(DomainError):
    code = ReservationErrorCode.VALIDATION_ERROR


class MissingRequirementError(ValidationError):
    """A precondition for advancing to the next step is not met"""

    def __init__(self, code: ReservationErrorCode, message: str):
        super().__init__(message)
        self.code = code


class SeatLimitExceededError(ValidationError):
    code = ReservationErrorCode.SEAT_LIMIT_EXCEEDED

    def __init__(self, limit: int):
        super().__init__(f'A session may hold at most {limit} seat(s)')
        self.limit = limit


class InvalidPickupPointError(DomainError):
    code = ReservationErrorCode.INVALID_PICKUP_POINT

    def __init__(self, pickup_point_id: str | None):
        super().__init__(f'Pickup point {pickup_point_id} is not offered for this trip')
        self.pickup_point_id = pickup_point_id


class InvalidExtraError(DomainError):
    code = ReservationErrorCode.INVALID_EXTRA

    def __init__(self, extra_id: str, reason: str = 'is not offered for this trip'):
        super().__init__(f'Extra {extra_id} {reason}')
        self.extra_id = extra_id


class SeatUnavailableError(ConflictError):
    code = ReservationErrorCode.SEAT_UNAVAILABLE

    def __init__(self, seat_id: str):
        super().__init__(f'Seat {seat_id} is not available')
        self.seat_id = seat_id


class NotHolderError(ConflictError):
    code = ReservationErrorCode.NOT_HOLDER

    def __init__(self, seat_id: str):
        super().__init__(f'Seat {seat_id} is not held by this session')
        self.seat_id = seat_id


class HoldExpiredOrMissingError(ConflictError):
    code = ReservationErrorCode.HOLD_EXPIRED_OR_MISSING

    def __init__(self, seat_id: str):
        super().__init__(f'Hold on seat {seat_id} has expired or does not exist')
        self.seat_id = seat_id


class StepSkippedError(DomainError):
    code = ReservationErrorCode.STEP_SKIPPED

    def __init__(self, current: int, requested: int):
        super().__init__(f'Cannot jump from step {current} to step {requested}')
        self.current = current
        self.requested = requested


class SessionClosedError(ConflictError):
    code = ReservationErrorCode.SESSION_CLOSED

    def __init__(self, status: str):
        super().__init__(f'Reservation session is {status}')
        self.status = status


class PaymentDeclinedError(PaymentRequiredError):
    code = ReservationErrorCode.PAYMENT_DECLINED

    def __init__(self, message: str = 'Payment was declined'):
        super().__init__(message)


class PaymentGatewayError(UpstreamError):
    code = ReservationErrorCode.PAYMENT_ERROR

    def __init__(self, message: str = 'Payment gateway error'):
        super().__init__(message)


class FinalizationError(ConflictError):
    code = ReservationErrorCode.FINALIZATION_FAILED


class SessionNotFoundError(NotFoundError):
    code = ReservationErrorCode.SESSION_NOT_FOUND

    def __init__(self, session_id: object):
        super().__init__(f'Reservation session {session_id} not found')


class TripNotFoundError(NotFoundError):
    code = ReservationErrorCode.TRIP_NOT_FOUND

    def __init__(self, trip_id: str):
        super().__init__(f'Trip {trip_id} not found')


class SeatNotFoundError(NotFoundError):
    code = ReservationErrorCode.SEAT_NOT_FOUND

    def __init__(self, trip_id: str, seat_id: str):
        super().__init__(f'Seat {seat_id} not found on trip {trip_id}')


class BookingNotFoundError(NotFoundError):
    code = ReservationErrorCode.BOOKING_NOT_FOUND

    def __init__(self, booking_id: object):
        super().__init__(f'Booking {booking_id} not found')
