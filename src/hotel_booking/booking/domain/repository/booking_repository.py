from abc import abstractmethod

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.shared.domain import Repository


class BookingRepository(Repository[Booking, int]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def find_by_room_id(self, room_id: int) -> tuple[Booking, ...]:
        """部屋IDで予約を検索する"""
        raise NotImplementedError
