"""
Demo catalog

Routes, vehicles, pickup points and extras of the demo shuttle network. Each
route runs three trips a day at 08:00, 10:00 and 12:00; later departures cost
2.50 more than the one before.
"""

from datetime import date, time

from ride_reservation.platform.clock import utc_now
from ride_reservation.service.reservation.domain.entity.trip_entity import (
    PickupPoint,
    TravelExtra,
    Trip,
    build_seat_layout,
)
from ride_reservation.service.reservation.domain.value_object.money import Money


DEMO_LOCATIONS = {
    'loc1': 'Downtown Station',
    'loc2': 'Airport Terminal',
    'loc3': 'Central Mall',
    'loc4': 'University Campus',
}

# route id -> (origin location, destination location)
DEMO_ROUTES = {
    'r1': ('loc1', 'loc2'),
    'r2': ('loc2', 'loc1'),
    'r3': ('loc1', 'loc3'),
    'r4': ('loc4', 'loc2'),
}

# vehicle id -> capacity
DEMO_VEHICLES = {'v1': 20, 'v2': 15, 'v3': 25}

DEMO_DEPARTURE_HOURS = (8, 10, 12)
DEMO_BASE_PRICE = '25.00'
DEMO_PRICE_STEP = '2.50'
PICKUP_FEE = '5.00'

# id, name, description, price
DEMO_EXTRAS = (
    ('e1', 'Extra Luggage', 'Additional luggage allowance (up to 20kg)', '10.00'),
    ('e2', 'Priority Boarding', 'Board first and choose your seat', '5.00'),
    ('e3', 'Travel Insurance', 'Basic travel insurance coverage', '8.50'),
    ('e4', 'Onboard Meal', 'Light meal and beverage during the trip', '12.00'),
)

# id, name, address, active
DEMO_PICKUP_POINTS = (
    ('hp1', 'Main Street Corner', '120 Main Street', True),
    ('hp2', 'Oak Avenue Stop', '456 Oak Ave', True),
    ('hp3', 'College Gate', '210 College Road', True),
    ('hp4', 'Harbor Plaza', '9 Harbor Way', False),
)


def build_demo_extras(currency: str = 'USD') -> tuple[TravelExtra, ...]:
    return tuple(
        TravelExtra(id=id, name=name, description=description, price=Money.of(price, currency))
        for id, name, description, price in DEMO_EXTRAS
    )


def build_demo_trips(departure_date: date, currency: str = 'USD') -> list[Trip]:
    vehicles = list(DEMO_VEHICLES.items())
    extras = build_demo_extras(currency)
    trips = []
    for route_index, (route_id, (origin_id, destination_id)) in enumerate(DEMO_ROUTES.items()):
        vehicle_id, capacity = vehicles[route_index % len(vehicles)]
        for idx, hour in enumerate(DEMO_DEPARTURE_HOURS):
            trip_id = f'{route_id}-t{idx + 1}'
            base_price = Money.of(DEMO_BASE_PRICE, currency) + Money.of(
                DEMO_PRICE_STEP, currency
            ).times(idx)
            trips.append(
                Trip(
                    id=trip_id,
                    origin=DEMO_LOCATIONS[origin_id],
                    destination=DEMO_LOCATIONS[destination_id],
                    departure_date=departure_date,
                    departure_time=time(hour, 0),
                    vehicle_id=vehicle_id,
                    base_price=base_price,
                    capacity=capacity,
                    seats=build_seat_layout(
                        vehicle_id=f'{trip_id}-{vehicle_id}',
                        base_price=base_price,
                        capacity=capacity,
                    ),
                    extras=extras,
                )
            )
    return trips


def build_demo_pickup_points(
    trips: list[Trip], currency: str = 'USD'
) -> dict[str, list[PickupPoint]]:
    """Every demo trip offers the same city pickup points"""
    points = [
        PickupPoint(
            id=id,
            name=name,
            address=address,
            fee=Money.of(PICKUP_FEE, currency),
            is_active=is_active,
        )
        for id, name, address, is_active in DEMO_PICKUP_POINTS
    ]
    return {trip.id: list(points) for trip in trips}


def seed_demo_trips(*, enabled: bool, currency: str = 'USD') -> list[Trip]:
    if not enabled:
        return []
    return build_demo_trips(utc_now().date(), currency)
