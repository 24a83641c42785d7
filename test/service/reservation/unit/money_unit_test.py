from decimal import Decimal

import pytest

from ride_reservation.service.reservation.domain.value_object.money import Money


pytestmark = pytest.mark.unit


class TestMoney:
    def test_of_parses_major_units_into_cents(self):
        assert Money.of('12.50').minor_units == 1250
        assert Money.of(3).minor_units == 300
        assert Money.of(Decimal('0.005')).minor_units == 1

    def test_float_amounts_are_rejected(self):
        with pytest.raises(TypeError):
            Money.of(12.5)  # type: ignore[arg-type]

    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValueError):
            Money(-1)

    def test_addition_keeps_currency(self):
        assert Money.of('10.00') + Money.of('5.00') == Money.of('15.00')

    def test_currency_mismatch_fails(self):
        with pytest.raises(ValueError, match='Currency mismatch'):
            Money.of('1.00', 'USD') + Money.of('1.00', 'EUR')

    def test_total_of_nothing_is_zero(self):
        assert Money.total([], 'EUR') == Money.zero('EUR')

    def test_times_and_percent(self):
        assert Money.of('8.50').times(3) == Money.of('25.50')
        assert Money.of('25.00').apply_percent(125) == Money.of('31.25')
        assert Money.of('27.50').apply_percent(90) == Money.of('24.75')

    def test_str_is_two_decimal_places(self):
        assert str(Money.of('15')) == '15.00'
        assert str(Money.of('0.07')) == '0.07'
