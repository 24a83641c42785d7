"""
Finalize Reservation Use Case

Charge the passenger for the fare shown, then turn the session into a Booking.

- Preconditions are checked before any money moves: step 4, details complete,
  every seat hold still live
- Declined or failed payments leave the session at step 4 with its holds, so
  the passenger can retry until the holds expire
- Only one charge may be in flight per session, and only one successful payment
  is ever accepted
- A captured payment whose booking could not be created stays on the session,
  and the next attempt finalizes with that receipt instead of charging again
"""

from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from ride_reservation.platform.clock import Clock
from ride_reservation.platform.config.di import Container
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_payment_gateway import IPaymentGateway
from ride_reservation.service.reservation.app.interface.i_reservation_session_repo import (
    IReservationSessionRepo,
)
from ride_reservation.service.reservation.app.service.booking_finalizer import BookingFinalizer
from ride_reservation.service.reservation.app.service.session_lookup import load_session
from ride_reservation.service.reservation.domain.entity.booking_entity import Booking
from ride_reservation.service.reservation.domain.entity.reservation_session_entity import (
    ReservationSession,
)
from ride_reservation.service.reservation.domain.reservation_error import (
    FinalizationError,
    PaymentDeclinedError,
    PaymentGatewayError,
)
from ride_reservation.service.reservation.domain.step_validator import StepValidator
from ride_reservation.service.reservation.domain.value_object.money import Money
from ride_reservation.service.reservation.domain.value_object.payment_receipt import (
    PaymentReceipt,
)


class FinalizeReservationUseCase:
    def __init__(
        self,
        *,
        session_repo: IReservationSessionRepo,
        payment_gateway: IPaymentGateway,
        booking_finalizer: BookingFinalizer,
        step_validator: StepValidator,
        clock: Clock,
    ) -> None:
        self.session_repo = session_repo
        self.payment_gateway = payment_gateway
        self.booking_finalizer = booking_finalizer
        self.step_validator = step_validator
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        session_repo: IReservationSessionRepo = Depends(
            Provide[Container.reservation_session_repo]
        ),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        booking_finalizer: BookingFinalizer = Depends(Provide[Container.booking_finalizer]),
        step_validator: StepValidator = Depends(Provide[Container.step_validator]),
        clock: Clock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            session_repo=session_repo,
            payment_gateway=payment_gateway,
            booking_finalizer=booking_finalizer,
            step_validator=step_validator,
            clock=clock,
        )

    @Logger.io
    async def execute(
        self, *, session_id: UUID, method: str, details: dict[str, Any]
    ) -> Booking:
        session = await load_session(self.session_repo, session_id)
        self.step_validator.ensure_can_finalize(session)

        amount = session.fare.total
        if session.captured_payment is not None:
            receipt = session.captured_payment
            if receipt.amount != amount:
                raise FinalizationError(
                    f'Captured payment {receipt.reference} was for {receipt.amount}, '
                    f'but the fare is now {amount}'
                )
            Logger.base.info(f'🔁 [FINALIZE] Reusing captured payment {receipt.reference}')
        else:
            receipt = await self._charge(session, amount=amount, method=method, details=details)

        try:
            booking = await self.booking_finalizer.finalize(session=session, payment=receipt)
        except FinalizationError:
            Logger.base.error(
                f'💸 [FINALIZE] Payment {receipt.reference} captured for {session_id} '
                f'but the booking could not be created'
            )
            raise

        session.mark_confirmed(
            booking_id=booking.id, payment_reference=receipt.reference, now=self.clock()
        )
        Logger.base.info(
            f'✅ [FINALIZE] {session_id} confirmed as booking {booking.id} '
            f'({booking.confirmation_code}), total {amount}'
        )
        return booking

    async def _charge(
        self,
        session: ReservationSession,
        *,
        amount: Money,
        method: str,
        details: dict[str, Any],
    ) -> PaymentReceipt:
        session.begin_payment(now=self.clock())
        try:
            receipt = await self.payment_gateway.charge(
                amount=amount, method=method, details=details
            )
        except (PaymentDeclinedError, PaymentGatewayError):
            session.record_payment_failure(now=self.clock())
            raise
        except Exception as e:
            session.record_payment_failure(now=self.clock())
            raise PaymentGatewayError(f'Payment gateway error: {e}') from e

        session.record_captured_payment(receipt, now=self.clock())
        return receipt
