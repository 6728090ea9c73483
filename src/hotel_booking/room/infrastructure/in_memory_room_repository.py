from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.infrastructure import InMemoryRepository


class InMemoryRoomRepository(InMemoryRepository[Room], RoomRepository):
    """メモリ上に部屋を保持する RoomRepository の具象実装"""

    def __init__(self) -> None:
        super().__init__(entity_name="Room")
