from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.shared.infrastructure import InMemoryRepository


class InMemoryBookingRepository(InMemoryRepository[Booking], BookingRepository):
    """メモリ上に予約を保持する BookingRepository の具象実装"""

    def __init__(self) -> None:
        super().__init__(entity_name="Booking")

    def find_by_room_id(self, room_id: int) -> tuple[Booking, ...]:
        return tuple(booking for booking in self.find_all() if booking.room_id == room_id)
