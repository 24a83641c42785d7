import pytest

from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint, Trip
from ride_reservation.service.reservation.domain.fare_calculator import (
    FareBreakdown,
    compute_fare,
)
from ride_reservation.service.reservation.domain.value_object.money import Money


pytestmark = pytest.mark.unit


class TestComputeFare:
    def test_empty_selection_costs_nothing(self):
        fare = compute_fare([], None)

        assert fare == FareBreakdown.empty()
        assert fare.total == Money.zero()

    def test_seats_pickup_and_extras_add_up(self, trip_t1: Trip, pickup_points: list[PickupPoint]):
        luggage, insurance = trip_t1.extras

        fare = compute_fare(
            trip_t1.seats, pickup_points[0], [(luggage, 2), (insurance, 1)]
        )

        assert fare.seats_total == Money.of('25.00')
        assert fare.pickup_fee == Money.of('5.00')
        assert fare.extras_total == Money.of('28.50')
        assert fare.total == Money.of('58.50')

    def test_no_pickup_means_no_fee(self, trip_t1: Trip):
        fare = compute_fare(trip_t1.seats[:1], None)

        assert fare.pickup_fee == Money.zero()
        assert fare.total == Money.of('10.00')

    def test_currency_is_carried_through(self):
        fare = compute_fare([], None, currency='EUR')

        assert fare.total.currency == 'EUR'
