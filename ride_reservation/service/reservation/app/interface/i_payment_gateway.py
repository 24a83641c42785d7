from abc import ABC, abstractmethod
from typing import Any

from ride_reservation.service.reservation.domain.value_object.money import Money
from ride_reservation.service.reservation.domain.value_object.payment_receipt import (
    PaymentReceipt,
)


class IPaymentGateway(ABC):
    @abstractmethod
    async def charge(
        self, *, amount: Money, method: str, details: dict[str, Any]
    ) -> PaymentReceipt:
        """
        Charge the passenger. Only the success/failure signal matters here.

        Raises:
            PaymentDeclinedError: the payment was refused
            PaymentGatewayError: the gateway failed to answer
        """
        pass
