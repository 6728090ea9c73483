from collections.abc import Sequence

from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.shared.domain import (
    InvalidArgumentException,
    ResourceNotFoundException,
)
from hotel_booking.shared.utils import get_logger

logger = get_logger()


class GuestService:
    """宿泊客の登録・更新・削除のユースケース"""

    def __init__(self, repository: GuestRepository) -> None:
        self._repository = repository

    def find_all(self) -> tuple[Guest, ...]:
        return self._repository.find_all()

    def find_by_id(self, guest_id: int) -> Guest:
        """IDで宿泊客を取得する"""
        if not self._repository.exists_by_id(guest_id):
            raise ResourceNotFoundException(f"Guest with id {guest_id} does not exist")
        return self._repository.find_by_id(guest_id)

    def exists_by_id(self, guest_id: int) -> bool:
        return self._repository.exists_by_id(guest_id)

    def save(self, guest: Guest) -> Guest:
        """宿泊客を登録する"""
        self._validate(guest)
        saved = self._repository.save(guest)
        logger.info("Guest saved", extra={"guest_id": saved.id})
        return saved

    def save_all(self, guests: Sequence[Guest]) -> list[Guest]:
        """複数の宿泊客を登録する（1件でも不正なら何も登録しない）"""
        if not guests:
            raise InvalidArgumentException("Empty list of guests")
        for guest in guests:
            self._validate(guest)

        with self._repository.transaction():
            saved = [self._repository.save(guest) for guest in guests]
        logger.info("Guests saved", extra={"count": len(saved)})
        return saved

    def update(self, guest: Guest) -> Guest:
        """既存の宿泊客を丸ごと置き換える"""
        self._validate(guest)
        with self._repository.transaction():
            self.find_by_id(guest.id)
            updated = self._repository.replace(guest)
        logger.info("Guest updated", extra={"guest_id": updated.id})
        return updated

    def delete(self, guest: Guest) -> bool:
        """完全一致する宿泊客を削除する"""
        if guest is None:
            raise InvalidArgumentException("Guest can not be None")
        with self._repository.transaction():
            self.find_by_id(guest.id)
            deleted = self._repository.delete(guest)
        logger.info("Guest deleted", extra={"guest_id": guest.id, "deleted": deleted})
        return deleted

    def delete_by_id(self, guest_id: int) -> bool:
        with self._repository.transaction():
            self.find_by_id(guest_id)
            deleted = self._repository.delete_by_id(guest_id)
        logger.info("Guest deleted", extra={"guest_id": guest_id})
        return deleted

    def delete_all(self) -> None:
        self._repository.delete_all()
        logger.info("All guests deleted")

    @staticmethod
    def _validate(guest: Guest | None) -> None:
        if guest is None:
            raise InvalidArgumentException("Guest can not be None")
        if _is_blank(guest.first_name) or _is_blank(guest.last_name):
            raise InvalidArgumentException("Invalid guest fields")
        if guest.gender is None:
            raise InvalidArgumentException("Invalid guest fields")


def _is_blank(value: str | None) -> bool:
    return not value or len(value.strip()) == 0
