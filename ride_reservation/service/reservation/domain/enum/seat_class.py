"""Seat Class Enum"""

from enum import StrEnum


class SeatClass(StrEnum):
    STANDARD = 'standard'
    PREMIUM = 'premium'
    VIP = 'vip'
    ACCESSIBLE = 'accessible'

    @property
    def multiplier_percent(self) -> int:
        """Price multiplier applied to the trip base price, in percent"""
        return _MULTIPLIER_PERCENT[self]


_MULTIPLIER_PERCENT = {
    SeatClass.STANDARD: 100,
    SeatClass.PREMIUM: 125,
    SeatClass.VIP: 150,
    SeatClass.ACCESSIBLE: 90,
}
