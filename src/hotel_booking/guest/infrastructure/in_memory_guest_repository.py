from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.shared.infrastructure import InMemoryRepository


class InMemoryGuestRepository(InMemoryRepository[Guest], GuestRepository):
    """メモリ上に宿泊客を保持する GuestRepository の具象実装"""

    def __init__(self) -> None:
        super().__init__(entity_name="Guest")
