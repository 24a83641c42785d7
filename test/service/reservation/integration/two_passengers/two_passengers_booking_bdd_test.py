from typing import Any

from fastapi.testclient import TestClient
import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from ride_reservation.platform.constant.route_constant import (
    RESERVATION_ADVANCE,
    RESERVATION_CREATE,
    RESERVATION_GET,
    RESERVATION_PASSENGER,
    RESERVATION_PAY,
    RESERVATION_PICKUP,
    RESERVATION_SEAT,
    TRIP_SEAT_MAP,
)


pytestmark = pytest.mark.integration

scenarios('features/two_passengers_booking.feature')


def _seat_statuses(client: TestClient) -> dict[str, str]:
    response = client.get(TRIP_SEAT_MAP.format(trip_id='T1'))
    assert response.status_code == 200, response.text
    return {seat['id']: seat['status'] for seat in response.json()['seats']}


def _advance(client: TestClient, session_id: str) -> None:
    response = client.post(RESERVATION_ADVANCE.format(session_id=session_id))
    assert response.status_code == 200, response.text


def _pay(client: TestClient, context: dict[str, Any], name: str, card: str) -> None:
    session_id = context['sessions'][name]
    response = client.post(
        RESERVATION_PAY.format(session_id=session_id),
        json={'method': 'card', 'card_number': card},
    )
    context['responses'][name] = response
    if response.status_code == 200:
        context['bookings'][name] = response.json()


# ========== Given ==========


@given('trip T1 is open for reservations')
def trip_t1_is_open(client: TestClient):
    assert set(_seat_statuses(client).values()) == {'available'}


@given(parsers.parse('passenger "{name}" has reached the seat step'))
def passenger_reaches_seat_step(client: TestClient, context: dict[str, Any], name: str):
    response = client.post(RESERVATION_CREATE, json={'trip_id': 'T1'})
    assert response.status_code == 201, response.text
    session_id = response.json()['session_id']
    _advance(client, session_id)
    context['sessions'][name] = session_id


# ========== When ==========


@when(parsers.parse('passenger "{name}" selects seat "{seat_id}"'))
def passenger_selects_seat(client: TestClient, context: dict[str, Any], name: str, seat_id: str):
    session_id = context['sessions'][name]
    context['responses'][name] = client.post(
        RESERVATION_SEAT.format(session_id=session_id), json={'seat_id': seat_id}
    )


@when(parsers.parse('passenger "{name}" requests pickup at "{pickup_point_id}"'))
def passenger_requests_pickup(
    client: TestClient, context: dict[str, Any], name: str, pickup_point_id: str
):
    response = client.put(
        RESERVATION_PICKUP.format(session_id=context['sessions'][name]),
        json={'needed': True, 'pickup_point_id': pickup_point_id},
    )
    assert response.status_code == 200, response.text


@when(
    parsers.parse(
        'passenger "{name}" enters passenger name "{passenger_name}" and pays with card "{card}"'
    )
)
def passenger_checks_out(
    client: TestClient, context: dict[str, Any], name: str, passenger_name: str, card: str
):
    session_id = context['sessions'][name]
    _advance(client, session_id)
    response = client.put(
        RESERVATION_PASSENGER.format(session_id=session_id), json={'name': passenger_name}
    )
    assert response.status_code == 200, response.text
    _advance(client, session_id)
    _pay(client, context, name, card)


@when(parsers.parse('passenger "{name}" retries payment with card "{card}"'))
def passenger_retries_payment(client: TestClient, context: dict[str, Any], name: str, card: str):
    _pay(client, context, name, card)


# ========== Then ==========


@then(parsers.parse('the fare total for passenger "{name}" is "{amount}"'))
def fare_total_is(client: TestClient, context: dict[str, Any], name: str, amount: str):
    response = client.get(RESERVATION_GET.format(session_id=context['sessions'][name]))
    assert response.json()['fare']['total']['amount'] == amount


@then(parsers.parse('both bookings are confirmed with {length:d} character codes'))
def both_bookings_confirmed(client: TestClient, context: dict[str, Any], length: int):
    assert set(context['bookings']) == {'A', 'B'}
    for name, booking in context['bookings'].items():
        assert len(booking['confirmation_code']) == length
        session = client.get(RESERVATION_GET.format(session_id=context['sessions'][name])).json()
        assert session['status'] == 'confirmed'
        assert session['booking_id'] == booking['id']
        assert booking['total_price']['amount'] == session['fare']['total']['amount']


@then('the bookings hold different seats')
def bookings_hold_different_seats(context: dict[str, Any]):
    seats_a = set(context['bookings']['A']['seat_ids'])
    seats_b = set(context['bookings']['B']['seat_ids'])
    assert seats_a == {'S1'}
    assert seats_b == {'S2'}


@then(parsers.parse('seats "{first}" and "{second}" are booked'))
def seats_are_booked(client: TestClient, first: str, second: str):
    statuses = _seat_statuses(client)
    assert statuses[first] == statuses[second] == 'booked'


@then(parsers.parse('seat "{seat_id}" is booked'))
def seat_is_booked(client: TestClient, seat_id: str):
    assert _seat_statuses(client)[seat_id] == 'booked'


@then(parsers.parse('seat "{seat_id}" is still {status}'))
def seat_is_still(client: TestClient, seat_id: str, status: str):
    assert _seat_statuses(client)[seat_id] == status


@then(parsers.parse('passenger "{name}" gets a {status_code:d} "{code}" error'))
def passenger_gets_error(context: dict[str, Any], name: str, status_code: int, code: str):
    response = context['responses'][name]
    assert response.status_code == status_code, response.text
    assert response.json()['code'] == code
