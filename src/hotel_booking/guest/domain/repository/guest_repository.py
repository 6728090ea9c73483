from hotel_booking.guest.domain.entity import Guest
from hotel_booking.shared.domain import Repository


class GuestRepository(Repository[Guest, int]):
    """宿泊客レポジトリのインターフェース"""
