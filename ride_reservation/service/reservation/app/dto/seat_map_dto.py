from dataclasses import dataclass

from ride_reservation.service.reservation.domain.entity.trip_entity import Seat, Trip
from ride_reservation.service.reservation.domain.enum.seat_status import SeatStatus


@dataclass
class SeatMapEntry:
    seat: Seat
    status: SeatStatus


@dataclass
class SeatMapView:
    trip: Trip
    seats: list[SeatMapEntry]

    @property
    def available_count(self) -> int:
        return sum(1 for entry in self.seats if entry.status is SeatStatus.AVAILABLE)
