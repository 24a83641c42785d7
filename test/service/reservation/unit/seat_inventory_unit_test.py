from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
from uuid_utils import uuid7

from ride_reservation.service.reservation.domain.entity.trip_entity import Trip
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus
from ride_reservation.service.reservation.domain.reservation_error import (
    HoldExpiredOrMissingError,
    NotHolderError,
    SeatNotFoundError,
    SeatUnavailableError,
)
from ride_reservation.service.reservation.driven_adapter.state.in_memory_seat_inventory import (
    InMemorySeatInventory,
)


pytestmark = pytest.mark.unit


class TestHoldAndRelease:
    def test_hold_marks_seat_held_until_ttl(self, inventory: InMemorySeatInventory, clock: Any):
        session_id = uuid7()

        token = inventory.hold('T1', 'S1', session_id)

        assert token.session_id == session_id
        assert token.expires_at - token.held_at == inventory.hold_ttl
        assert inventory.seat_status('T1', 'S1') is SeatStatus.HELD
        assert inventory.is_held_by('T1', 'S1', session_id)

    def test_second_holder_is_rejected(self, inventory: InMemorySeatInventory):
        inventory.hold('T1', 'S1', uuid7())

        with pytest.raises(SeatUnavailableError):
            inventory.hold('T1', 'S1', uuid7())

    def test_release_by_holder_frees_seat(self, inventory: InMemorySeatInventory):
        session_id = uuid7()
        inventory.hold('T1', 'S1', session_id)

        inventory.release('T1', 'S1', session_id)

        assert inventory.seat_status('T1', 'S1') is SeatStatus.AVAILABLE

    def test_release_by_other_session_fails(self, inventory: InMemorySeatInventory):
        inventory.hold('T1', 'S1', uuid7())

        with pytest.raises(NotHolderError):
            inventory.release('T1', 'S1', uuid7())
        assert inventory.seat_status('T1', 'S1') is SeatStatus.HELD

    def test_unknown_seat_or_trip(self, inventory: InMemorySeatInventory):
        with pytest.raises(SeatNotFoundError):
            inventory.hold('T1', 'S99', uuid7())
        with pytest.raises(SeatNotFoundError):
            inventory.hold('T404', 'S1', uuid7())
        assert inventory.seat_map('T404') == {}

    def test_register_trip_twice_keeps_state(
        self, inventory: InMemorySeatInventory, trip_t1: Trip
    ):
        inventory.hold('T1', 'S1', uuid7())

        inventory.register_trip(trip_t1)

        assert inventory.seat_status('T1', 'S1') is SeatStatus.HELD


class TestExpiry:
    def test_elapsed_hold_is_not_live(self, inventory: InMemorySeatInventory, clock: Any):
        session_id = uuid7()
        inventory.hold('T1', 'S1', session_id)

        clock.advance(minutes=10)

        assert not inventory.is_held_by('T1', 'S1', session_id)
        assert inventory.expired_holds(clock()) == [('T1', 'S1')]

    def test_elapsed_hold_is_reclaimed_by_next_holder(
        self, inventory: InMemorySeatInventory, clock: Any
    ):
        first, second = uuid7(), uuid7()
        inventory.hold('T1', 'S1', first)
        clock.advance(minutes=11)

        inventory.hold('T1', 'S1', second)

        assert inventory.is_held_by('T1', 'S1', second)
        with pytest.raises(NotHolderError):
            inventory.release('T1', 'S1', first)

    def test_expire_hold_only_touches_elapsed_holds(
        self, inventory: InMemorySeatInventory, clock: Any
    ):
        inventory.hold('T1', 'S1', uuid7())

        assert inventory.expire_hold('T1', 'S1') is False
        clock.advance(minutes=10)
        assert inventory.expire_hold('T1', 'S1') is True
        assert inventory.seat_status('T1', 'S1') is SeatStatus.AVAILABLE
        assert inventory.expire_hold('T1', 'S1') is False


class TestConfirm:
    def test_confirm_live_hold_books_seat(self, inventory: InMemorySeatInventory):
        session_id = uuid7()
        inventory.hold('T1', 'S1', session_id)

        inventory.confirm('T1', 'S1', session_id)

        assert inventory.seat_status('T1', 'S1') is SeatStatus.BOOKED
        with pytest.raises(SeatUnavailableError):
            inventory.hold('T1', 'S1', uuid7())

    def test_confirm_after_expiry_fails(self, inventory: InMemorySeatInventory, clock: Any):
        session_id = uuid7()
        inventory.hold('T1', 'S1', session_id)
        clock.advance(minutes=10, seconds=1)

        with pytest.raises(HoldExpiredOrMissingError):
            inventory.confirm('T1', 'S1', session_id)

    def test_confirm_by_non_holder_fails(self, inventory: InMemorySeatInventory):
        inventory.hold('T1', 'S1', uuid7())

        with pytest.raises(HoldExpiredOrMissingError):
            inventory.confirm('T1', 'S1', uuid7())

    def test_revert_confirm_restores_hold(self, inventory: InMemorySeatInventory):
        session_id = uuid7()
        inventory.hold('T1', 'S1', session_id)
        inventory.confirm('T1', 'S1', session_id)

        inventory.revert_confirm('T1', 'S1', session_id)

        assert inventory.seat_status('T1', 'S1') is SeatStatus.HELD
        assert inventory.is_held_by('T1', 'S1', session_id)

    def test_booked_seat_never_expires(self, inventory: InMemorySeatInventory, clock: Any):
        session_id = uuid7()
        inventory.hold('T1', 'S1', session_id)
        inventory.confirm('T1', 'S1', session_id)
        clock.advance(hours=2)

        assert inventory.expired_holds(clock()) == []
        assert inventory.expire_hold('T1', 'S1') is False
        assert inventory.seat_status('T1', 'S1') is SeatStatus.BOOKED


class TestConcurrentHolds:
    def test_exactly_one_session_wins_a_contested_seat(self, inventory: InMemorySeatInventory):
        sessions = [uuid7() for _ in range(32)]

        def try_hold(session_id):
            try:
                inventory.hold('T1', 'S2', session_id)
                return session_id
            except SeatUnavailableError:
                return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            winners = [s for s in pool.map(try_hold, sessions) if s is not None]

        assert len(winners) == 1
        assert inventory.is_held_by('T1', 'S2', winners[0])
