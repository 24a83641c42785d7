from abc import ABC, abstractmethod

from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint


class IPickupDirectory(ABC):
    @abstractmethod
    async def list_pickup_points(self, *, trip_id: str) -> list[PickupPoint]:
        """Active pickup points offered for the trip"""
        pass
