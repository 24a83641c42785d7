from datetime import date, time, timedelta
from typing import Any

import pytest
from uuid_utils import uuid7

from ride_reservation.platform.exception.exceptions import DomainError
from ride_reservation.service.reservation.app.query.search_trips_use_case import (
    SearchTripsUseCase,
)
from ride_reservation.service.reservation.domain.entity.trip_entity import (
    PickupPoint,
    Trip,
    build_seat_layout,
    seat_class_for_position,
)
from ride_reservation.service.reservation.domain.enum.seat_class import SeatClass
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus
from ride_reservation.service.reservation.domain.reservation_error import TripNotFoundError
from ride_reservation.service.reservation.domain.value_object.money import Money
from ride_reservation.service.reservation.driven_adapter.catalog.demo_catalog_data import (
    build_demo_pickup_points,
    build_demo_trips,
    seed_demo_trips,
)
from ride_reservation.service.reservation.driven_adapter.catalog.in_memory_pickup_directory import (
    InMemoryPickupDirectory,
)
from ride_reservation.service.reservation.driven_adapter.catalog.in_memory_trip_catalog import (
    InMemoryTripCatalog,
)
from ride_reservation.service.reservation.driven_adapter.state.in_memory_seat_inventory import (
    InMemorySeatInventory,
)


pytestmark = pytest.mark.unit

DEPARTURE = date(2025, 6, 1)


class TestSeatLayout:
    def test_twenty_seat_cabin(self):
        classes = [seat_class_for_position(i, 20) for i in range(20)]

        assert classes[4:8] == [SeatClass.PREMIUM] * 4
        assert classes[16] == classes[19] == SeatClass.ACCESSIBLE
        assert classes[14] == SeatClass.VIP
        assert classes[0] == SeatClass.STANDARD

    def test_prices_follow_class_multiplier(self):
        seats = build_seat_layout(vehicle_id='v1', base_price=Money.of('20.00'), capacity=20)

        assert len(seats) == 20
        assert seats[0].id == 'v1-s1'
        assert seats[0].price == Money.of('20.00')
        assert seats[4].price == Money.of('25.00')
        assert seats[14].price == Money.of('30.00')
        assert seats[16].price == Money.of('18.00')

    def test_capacity_must_match_seats(self, trip_t1: Trip):
        with pytest.raises(DomainError):
            Trip(
                id='T2',
                origin='A',
                destination='B',
                departure_date=DEPARTURE,
                departure_time=time(9, 0),
                vehicle_id='v1',
                base_price=Money.of('10.00'),
                capacity=3,
                seats=trip_t1.seats,
            )


class TestDemoCatalog:
    def test_three_departures_per_route(self):
        trips = build_demo_trips(DEPARTURE)

        assert len(trips) == 12
        r1 = [trip for trip in trips if trip.id.startswith('r1-')]
        assert [trip.departure_time for trip in r1] == [time(8), time(10), time(12)]
        assert [str(trip.base_price) for trip in r1] == ['25.00', '27.50', '30.00']

    def test_seat_ids_are_unique_across_trips(self):
        seat_ids = [seat.id for trip in build_demo_trips(DEPARTURE) for seat in trip.seats]

        assert len(seat_ids) == len(set(seat_ids))
        assert 'r1-t1-v1-s3' in seat_ids

    def test_seeding_can_be_disabled(self):
        assert seed_demo_trips(enabled=False) == []

    def test_currency_is_applied_everywhere(self):
        trip = build_demo_trips(DEPARTURE, currency='EUR')[0]
        points = build_demo_pickup_points([trip], currency='EUR')[trip.id]

        assert trip.base_price.currency == 'EUR'
        assert {extra.price.currency for extra in trip.extras} == {'EUR'}
        assert {point.fee.currency for point in points} == {'EUR'}


class TestInMemoryTripCatalog:
    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_exact_match(self):
        catalog = InMemoryTripCatalog(trips=build_demo_trips(DEPARTURE))

        trips = await catalog.list_trips(origin='downtown station', destination='AIRPORT TERMINAL')

        assert [trip.id for trip in trips] == ['r1-t1', 'r1-t2', 'r1-t3']
        assert await catalog.list_trips(origin='Downtown') == []

    @pytest.mark.asyncio
    async def test_unknown_trip(self):
        assert await InMemoryTripCatalog().get_trip(trip_id='nope') is None


class TestSearchTripsUseCase:
    @pytest.fixture
    def use_case(
        self, trip_t1: Trip, pickup_points: list[PickupPoint], clock: Any
    ) -> SearchTripsUseCase:
        return SearchTripsUseCase(
            trip_catalog=InMemoryTripCatalog(trips=[trip_t1]),
            pickup_directory=InMemoryPickupDirectory(points_by_trip={'T1': pickup_points}),
            seat_inventory=InMemorySeatInventory(hold_ttl=timedelta(minutes=10), clock=clock),
        )

    @pytest.mark.asyncio
    async def test_seat_map_reflects_holds(self, use_case: SearchTripsUseCase):
        await use_case.get_seat_map(trip_id='T1')
        use_case.seat_inventory.hold('T1', 'S2', uuid7())

        seat_map = await use_case.get_seat_map(trip_id='T1')

        assert [entry.status for entry in seat_map.seats] == [
            SeatStatus.AVAILABLE,
            SeatStatus.HELD,
        ]
        assert seat_map.available_count == 1

    @pytest.mark.asyncio
    async def test_only_active_pickup_points_are_offered(self, use_case: SearchTripsUseCase):
        points = await use_case.list_pickup_points(trip_id='T1')

        assert [point.id for point in points] == ['P1']

    @pytest.mark.asyncio
    async def test_unknown_trip_is_not_found(self, use_case: SearchTripsUseCase):
        with pytest.raises(TripNotFoundError):
            await use_case.get_seat_map(trip_id='T404')
        with pytest.raises(TripNotFoundError):
            await use_case.list_pickup_points(trip_id='T404')
