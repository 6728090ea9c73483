import dataclasses
import itertools
import threading
from collections.abc import Iterable

from hotel_booking.room.domain.entity.room import Room
from hotel_booking.room.domain.value_object.amenity import Amenity
from hotel_booking.shared.domain.exception import FailedInitializationException


class RoomFactory:
    """部屋を生成するFactory

    備品の在庫番号はこのファクトリのインスタンスごとに連番で採番する。
    """

    def __init__(self) -> None:
        self._inventory_sequence = itertools.count(1)
        self._lock = threading.Lock()

    def create(
        self, amenities: Iterable[Amenity] | None, room_id: int | None = None
    ) -> Room:
        """備品の集合から部屋エンティティを作成する"""
        if amenities is None:
            raise FailedInitializationException("Room amenities can not be None")
        amenities = list(amenities)
        if not amenities:
            raise FailedInitializationException("Room must have at least one amenity")
        if any(amenity is None for amenity in amenities):
            raise FailedInitializationException("Room amenities can not contain None")

        return Room(
            id=room_id,
            amenities=frozenset(self._number(amenity) for amenity in amenities),
        )

    def _number(self, amenity: Amenity) -> Amenity:
        with self._lock:
            inventory_id = next(self._inventory_sequence)
        return dataclasses.replace(amenity, inventory_id=inventory_id)
