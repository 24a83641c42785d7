"""
Money Value Object

Fixed-point amount in integer minor units (cents). No floating point is ever
involved in fare arithmetic.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Self

import attrs


def _non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError('Money amount must be an integer number of minor units')
    if value < 0:
        raise ValueError('Money amount cannot be negative')


def _currency_code(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if len(value) != 3 or not value.isalpha() or not value.isupper():
        raise ValueError(f'Invalid currency code: {value}')


@attrs.define(frozen=True, order=True)
class Money:
    minor_units: int = attrs.field(validator=_non_negative)
    currency: str = attrs.field(default='USD', validator=_currency_code)

    @classmethod
    def zero(cls, currency: str = 'USD') -> Self:
        return cls(0, currency)

    @classmethod
    def of(cls, amount: str | int | Decimal, currency: str = 'USD') -> Self:
        """Parse a major-unit amount like '12.50'. Floats are rejected."""
        if isinstance(amount, float):
            raise TypeError('Use a string or Decimal for money amounts, not float')
        cents = (Decimal(amount) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
        return cls(int(cents), currency)

    @classmethod
    def total(cls, amounts: Iterable['Money'], currency: str = 'USD') -> Self:
        result = cls.zero(currency)
        for amount in amounts:
            result = result + amount
        return result

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise ValueError(f'Currency mismatch: {self.currency} vs {other.currency}')
        return Money(self.minor_units + other.minor_units, self.currency)

    def times(self, quantity: int) -> 'Money':
        if quantity < 0:
            raise ValueError('Quantity cannot be negative')
        return Money(self.minor_units * quantity, self.currency)

    def apply_percent(self, percent: int) -> 'Money':
        """Scale by an integer percentage, rounding half-up to the nearest minor unit."""
        return Money((self.minor_units * percent + 50) // 100, self.currency)

    @property
    def amount(self) -> Decimal:
        return Decimal(self.minor_units) / 100

    def __str__(self) -> str:
        return f'{self.minor_units // 100}.{self.minor_units % 100:02d}'
