"""Payment receipt (Value Object)"""

from datetime import datetime

import attrs

from ride_reservation.service.reservation.domain.value_object.money import Money


@attrs.define(frozen=True)
class PaymentReceipt:
    """Success signal returned by the payment gateway"""

    reference: str
    amount: Money
    method: str
    paid_at: datetime
