from hotel_booking.room.domain.entity import Room
from hotel_booking.shared.domain import Repository


class RoomRepository(Repository[Room, int]):
    """部屋レポジトリのインターフェース"""
