from collections.abc import Sequence

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.domain import (
    InvalidArgumentException,
    ResourceNotFoundException,
)
from hotel_booking.shared.utils import get_logger

logger = get_logger()


class RoomService:
    """部屋の登録・更新・削除のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def find_all(self) -> tuple[Room, ...]:
        return self._repository.find_all()

    def find_by_id(self, room_id: int) -> Room:
        """IDで部屋を取得する"""
        if not self._repository.exists_by_id(room_id):
            raise ResourceNotFoundException(f"Room with id {room_id} does not exist")
        return self._repository.find_by_id(room_id)

    def exists_by_id(self, room_id: int) -> bool:
        return self._repository.exists_by_id(room_id)

    def capacity_of(self, room_id: int) -> int:
        """部屋の定員を返す（存在しない場合は ResourceNotFoundException）"""
        return self.find_by_id(room_id).capacity

    def save(self, room: Room) -> Room:
        """部屋を登録する"""
        self._validate(room)
        saved = self._repository.save(room)
        logger.info(
            "Room saved", extra={"room_id": saved.id, "capacity": saved.capacity}
        )
        return saved

    def save_all(self, rooms: Sequence[Room]) -> list[Room]:
        """複数の部屋を登録する（1件でも不正なら何も登録しない）"""
        if not rooms:
            raise InvalidArgumentException("Empty list of rooms")
        for room in rooms:
            self._validate(room)

        with self._repository.transaction():
            saved = [self._repository.save(room) for room in rooms]
        logger.info("Rooms saved", extra={"count": len(saved)})
        return saved

    def update(self, room: Room) -> Room:
        """部屋の備品を丸ごと置き換え、更新後の部屋を返す"""
        self._validate(room)
        with self._repository.transaction():
            self.find_by_id(room.id)
            updated = self._repository.replace(room)
        logger.info(
            "Room updated", extra={"room_id": updated.id, "capacity": updated.capacity}
        )
        return updated

    def delete(self, room: Room) -> bool:
        """完全一致する部屋を削除する"""
        self._validate(room)
        with self._repository.transaction():
            self.find_by_id(room.id)
            deleted = self._repository.delete(room)
        logger.info("Room deleted", extra={"room_id": room.id, "deleted": deleted})
        return deleted

    def delete_by_id(self, room_id: int) -> bool:
        with self._repository.transaction():
            self.find_by_id(room_id)
            deleted = self._repository.delete_by_id(room_id)
        logger.info("Room deleted", extra={"room_id": room_id})
        return deleted

    def delete_all(self) -> None:
        self._repository.delete_all()
        logger.info("All rooms deleted")

    @staticmethod
    def _validate(room: Room | None) -> None:
        if room is None:
            raise InvalidArgumentException("Room can not be None")
        if not room.amenities or None in room.amenities:
            raise InvalidArgumentException("Room must have at least one amenity")
