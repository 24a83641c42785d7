"""
Mock Payment Gateway

No funds move. Card numbers ending in 0000 are declined and card numbers
ending in 9999 simulate a gateway outage; anything else succeeds.
"""

import random
import string
from typing import Any

from ride_reservation.platform.clock import Clock, utc_now
from ride_reservation.platform.logging.loguru_io import Logger
from ride_reservation.service.reservation.app.interface.i_payment_gateway import IPaymentGateway
from ride_reservation.service.reservation.domain.reservation_error import (
    PaymentDeclinedError,
    PaymentGatewayError,
)
from ride_reservation.service.reservation.domain.value_object.money import Money
from ride_reservation.service.reservation.domain.value_object.payment_receipt import (
    PaymentReceipt,
)


DECLINED_SUFFIX = '0000'
OUTAGE_SUFFIX = '9999'


class MockPaymentGateway(IPaymentGateway):
    def __init__(self, *, clock: Clock = utc_now) -> None:
        self.clock = clock

    @Logger.io
    async def charge(
        self, *, amount: Money, method: str, details: dict[str, Any]
    ) -> PaymentReceipt:
        card_number = str(details.get('card_number') or '')
        if method == 'card' and not card_number:
            raise PaymentDeclinedError('Card number is required for payment')
        if card_number.endswith(DECLINED_SUFFIX):
            raise PaymentDeclinedError(f'Card ending {DECLINED_SUFFIX} was declined')
        if card_number.endswith(OUTAGE_SUFFIX):
            raise PaymentGatewayError('Payment gateway is not responding')

        reference = (
            f'PAY_MOCK_{"".join(random.choices(string.ascii_uppercase + string.digits, k=8))}'
        )
        Logger.base.info(f'💳 [PAYMENT] Charged {amount} {amount.currency} via {method}: {reference}')
        return PaymentReceipt(reference=reference, amount=amount, method=method, paid_at=self.clock())
