"""
Step Validator

Decides whether a reservation session may move forward. Seat requirements are
checked against the seat ledger, not the session's own bookkeeping, so a hold
that expired behind the session's back counts as missing.
"""

from typing import TYPE_CHECKING

import attrs

from ride_reservation.platform.exception.exceptions import CustomBaseError
from ride_reservation.service.reservation.domain.enum.reservation_step import ReservationStep
from ride_reservation.service.reservation.domain.enum.session_status import PaymentStatus
from ride_reservation.service.reservation.domain.reservation_error import (
    HoldExpiredOrMissingError,
    MissingRequirementError,
    ReservationErrorCode,
    SessionClosedError,
    StepSkippedError,
)
from ride_reservation.service.reservation.domain.seat_ledger import SeatLedger


if TYPE_CHECKING:
    from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
        ReservationSession,
    )


@attrs.define(frozen=True)
class StepCheck:
    error: CustomBaseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> str | None:
        return None if self.error is None else str(getattr(self.error, 'code', ''))


PASSED = StepCheck()


def _missing(code: ReservationErrorCode, message: str) -> StepCheck:
    return StepCheck(MissingRequirementError(code, message))


class StepValidator:
    def __init__(self, ledger: SeatLedger):
        self.ledger = ledger

    def can_advance(self, session: 'ReservationSession') -> StepCheck:
        if not session.is_active:
            return StepCheck(SessionClosedError(session.status))

        match session.step:
            case ReservationStep.ROUTE_SELECTED:
                return self._trip_selected(session)
            case ReservationStep.TRIP_SELECTED:
                return self._seat_held(session)
            case ReservationStep.SEAT_SELECTED:
                return self._details_collected(session)
            case ReservationStep.DETAILS_COLLECTED:
                if session.payment_status is not PaymentStatus.SUCCEEDED:
                    return _missing(
                        ReservationErrorCode.MISSING_PAYMENT, 'Payment has not succeeded'
                    )
                return PASSED
            case _:
                return StepCheck(SessionClosedError('already at the last step'))

    def ensure_can_advance(self, session: 'ReservationSession') -> None:
        check = self.can_advance(session)
        if check.error is not None:
            raise check.error

    def can_finalize(self, session: 'ReservationSession') -> StepCheck:
        """Session must sit at step 4 with every seat hold still live and no charge in flight"""
        if not session.is_active:
            return StepCheck(SessionClosedError(session.status))
        if session.payment_status is PaymentStatus.SUCCEEDED:
            return StepCheck(SessionClosedError('already paid'))
        if session.payment_status is PaymentStatus.PENDING:
            return StepCheck(SessionClosedError('payment in progress'))
        if session.step != ReservationStep.DETAILS_COLLECTED:
            return StepCheck(StepSkippedError(session.step, ReservationStep.PAID))

        if not (check := self._seat_held(session)).ok:
            return check
        for seat_id in session.seat_ids:
            if not self.ledger.is_held_by(session.trip.id, seat_id, session.id):
                return StepCheck(HoldExpiredOrMissingError(seat_id))
        return self._details_collected(session)

    def ensure_can_finalize(self, session: 'ReservationSession') -> None:
        check = self.can_finalize(session)
        if check.error is not None:
            raise check.error

    @staticmethod
    def _trip_selected(session: 'ReservationSession') -> StepCheck:
        if session.trip is None:
            return _missing(ReservationErrorCode.MISSING_TRIP, 'No trip selected')
        return PASSED

    def _seat_held(self, session: 'ReservationSession') -> StepCheck:
        held = any(
            self.ledger.is_held_by(session.trip.id, seat_id, session.id)
            for seat_id in session.seat_ids
        )
        if not held:
            return _missing(ReservationErrorCode.MISSING_SEAT, 'No seat is held by this session')
        return PASSED

    @staticmethod
    def _details_collected(session: 'ReservationSession') -> StepCheck:
        if session.pickup_requested and session.pickup_point is None:
            return _missing(
                ReservationErrorCode.MISSING_PICKUP_POINT, 'Pickup requested but no point chosen'
            )
        if not session.passenger_name:
            return _missing(
                ReservationErrorCode.MISSING_PASSENGER_NAME, 'Passenger name is required'
            )
        return PASSED
