from dataclasses import dataclass

from hotel_booking.room.domain.value_object import Amenity, amenity_capacity
from hotel_booking.shared.domain import Entity


@dataclass(frozen=True)
class Room(Entity):
    """部屋エンティティ

    備品は集合として保持し、同等の備品は1つにまとめられる。
    """

    amenities: frozenset[Amenity]

    def __post_init__(self) -> None:
        if self.amenities is not None and not isinstance(self.amenities, frozenset):
            object.__setattr__(self, "amenities", frozenset(self.amenities))

    @property
    def capacity(self) -> int:
        """ベッドから算出される定員（ベッドが無ければ 0）"""
        return sum(
            amenity_capacity(amenity)
            for amenity in self.amenities
            if amenity is not None
        )
