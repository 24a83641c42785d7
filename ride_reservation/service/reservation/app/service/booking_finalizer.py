"""
Booking Finalizer

Turns a paid reservation session into an immutable Booking. Seat confirmation
is all-or-nothing: if any seat cannot be confirmed, every seat confirmed so far
goes back to being held by the session and no Booking is written.
"""

import secrets
from typing import Iterable

from uuid_utils import uuid7

from ride_reservation.platform.clock import Clock, utc_now
from ride_reservation.platform.exception.exceptions import CustomBaseError
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_booking_repo import IBookingRepo
from ride_reservation.service.reservation.app.interface.i_seat_inventory import ISeatInventory
from ride_reservation.service.reservation.domain.entity.booking_entity import Booking
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.reservation_error import FinalizationError
from ride_reservation.service.reservation.domain.step_validator import StepValidator
from ride_reservation.service.reservation.domain.value_object.payment_receipt import (
    PaymentReceipt,
)


CONFIRMATION_CODE_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'  # no 0/O/1/I


def generate_confirmation_code(length: int = 6) -> str:
    return ''.join(secrets.choice(CONFIRMATION_CODE_ALPHABET) for _ in range(length))


class BookingFinalizer:
    def __init__(
        self,
        *,
        seat_inventory: ISeatInventory,
        booking_repo: IBookingRepo,
        step_validator: StepValidator,
        confirmation_code_length: int = 6,
        clock: Clock = utc_now,
    ) -> None:
        self.seat_inventory = seat_inventory
        self.booking_repo = booking_repo
        self.step_validator = step_validator
        self.confirmation_code_length = confirmation_code_length
        self.clock = clock

    @Logger.io
    async def finalize(self, *, session: ReservationSession, payment: PaymentReceipt) -> Booking:
        try:
            self.step_validator.ensure_can_finalize(session)
        except CustomBaseError as e:
            raise FinalizationError(f'Session {session.id} cannot be finalized: {e}') from e

        self._confirm_all_seats(session)

        booking = Booking(
            id=uuid7(),
            session_id=session.id,
            trip_id=session.trip.id,
            seat_ids=session.seat_ids,
            passenger_name=session.passenger_name or '',
            total_price=session.fare.total,
            payment_reference=payment.reference,
            confirmation_code=generate_confirmation_code(self.confirmation_code_length),
            created_at=self.clock(),
            pickup_point=session.pickup_point,
            extras=session.extras,
        )
        try:
            saved = await self.booking_repo.save(booking=booking)
        except Exception:
            self._revert_seats(session, session.seat_ids)
            raise

        Logger.base.info(
            f'🎫 [FINALIZE] Booking {saved.id} ({saved.confirmation_code}) '
            f'for seats {list(saved.seat_ids)} on trip {saved.trip_id}'
        )
        return saved

    def _confirm_all_seats(self, session: ReservationSession) -> None:
        confirmed: list[str] = []
        for seat_id in session.seat_ids:
            try:
                self.seat_inventory.confirm(session.trip.id, seat_id, session.id)
            except CustomBaseError as e:
                Logger.base.warning(
                    f'⚠️ [FINALIZE] Seat {seat_id} failed to confirm, rolling back {confirmed}'
                )
                self._revert_seats(session, confirmed)
                raise FinalizationError(f'Seat {seat_id} could not be confirmed: {e}') from e
            confirmed.append(seat_id)

    def _revert_seats(self, session: ReservationSession, seat_ids: Iterable[str]) -> None:
        for seat_id in seat_ids:
            self.seat_inventory.revert_confirm(session.trip.id, seat_id, session.id)
