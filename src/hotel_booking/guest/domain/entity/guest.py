from dataclasses import dataclass

from hotel_booking.guest.domain.enum import Gender
from hotel_booking.shared.domain import Entity


@dataclass(frozen=True)
class Guest(Entity):
    """宿泊客エンティティ"""

    first_name: str
    last_name: str
    gender: Gender

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
