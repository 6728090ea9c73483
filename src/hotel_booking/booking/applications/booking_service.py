import dataclasses
from collections.abc import Callable, Iterable, Sequence
from datetime import date

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.domain.value_object import StayPeriod
from hotel_booking.guest.applications import GuestService
from hotel_booking.room.applications import RoomService
from hotel_booking.shared.domain import (
    BookingOverlapException,
    InvalidArgumentException,
    ResourceNotFoundException,
)
from hotel_booking.shared.utils import get_logger

logger = get_logger()


class BookingService:
    """予約の受付・変更・取消のユースケース

    - 同じ部屋の予約期間 [check_in, check_out) は互いに重ならない
    - 検証と保存は予約レポジトリのロックの内側でまとめて行う
    - 検証に失敗した場合、保存済みの状態は一切変更されない
    """

    def __init__(
        self,
        repository: BookingRepository,
        room_service: RoomService,
        guest_service: GuestService,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._room_service = room_service
        self._guest_service = guest_service
        self._today = today

    def find_all(self) -> tuple[Booking, ...]:
        return self._repository.find_all()

    def find_by_id(self, booking_id: int) -> Booking:
        """IDで予約を取得する"""
        if not self._repository.exists_by_id(booking_id):
            raise ResourceNotFoundException(
                f"Booking with id {booking_id} does not exist"
            )
        return self._repository.find_by_id(booking_id)

    def exists_by_id(self, booking_id: int) -> bool:
        return self._repository.exists_by_id(booking_id)

    def save(self, booking: Booking) -> Booking:
        """予約を登録する

        Raises:
            InvalidArgumentException: 入力が不正、または定員を超える場合
            ResourceNotFoundException: 宿泊客または部屋が存在しない場合
            BookingOverlapException: 同じ部屋の既存予約と期間が重なる場合
        """
        with self._repository.transaction():
            self._validate(booking)
            saved = self._repository.save(booking)
        logger.info(
            "Booking saved",
            extra={"booking_id": saved.id, "room_id": saved.room_id},
        )
        return saved

    def save_all(self, bookings: Sequence[Booking]) -> list[Booking]:
        """複数の予約を登録する

        全件の検証が通った場合のみ保存する。同じ一括登録内の予約同士が
        重なる場合も BookingOverlapException とする。
        """
        if not bookings:
            raise InvalidArgumentException("Empty list of bookings")

        with self._repository.transaction():
            accepted: list[Booking] = []
            for booking in bookings:
                self._validate(booking, pending=accepted)
                accepted.append(booking)
            saved = [self._repository.save(booking) for booking in accepted]
        logger.info("Bookings saved", extra={"count": len(saved)})
        return saved

    def update_booking(self, booking_id: int, new_booking: Booking) -> Booking:
        """予約の部屋・人数・期間を変更する（宿泊客は変更できない）

        新しい内容を自分自身を除いた既存予約に対して検証してから置き換える。
        """
        if new_booking is None:
            raise InvalidArgumentException("Booking can not be None")

        with self._repository.transaction():
            current = self.find_by_id(booking_id)
            if new_booking.guest_id != current.guest_id:
                raise InvalidArgumentException(
                    "Changing the guest of a booking is not allowed"
                )
            candidate = dataclasses.replace(new_booking, id=booking_id)
            self._validate(candidate, exclude_id=booking_id)
            updated = self._repository.replace(candidate)
        logger.info(
            "Booking updated",
            extra={"booking_id": booking_id, "room_id": updated.room_id},
        )
        return updated

    def update_booking_by_dates(
        self, booking_id: int, check_in: date, check_out: date
    ) -> Booking:
        """予約の期間だけを変更する"""
        stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        self._validate_stay_period(stay_period)

        with self._repository.transaction():
            current = self.find_by_id(booking_id)
            self._ensure_available(
                current.room_id, stay_period, exclude_id=booking_id
            )
            updated = self._repository.replace(current.with_stay_period(stay_period))
        logger.info(
            "Booking dates updated",
            extra={
                "booking_id": booking_id,
                "check_in": check_in.isoformat(),
                "check_out": check_out.isoformat(),
            },
        )
        return updated

    def delete(self, booking: Booking) -> bool:
        """完全一致する予約を削除する"""
        if booking is None:
            raise InvalidArgumentException("Booking can not be None")
        with self._repository.transaction():
            self.find_by_id(booking.id)
            deleted = self._repository.delete(booking)
        logger.info(
            "Booking deleted", extra={"booking_id": booking.id, "deleted": deleted}
        )
        return deleted

    def delete_by_id(self, booking_id: int) -> bool:
        with self._repository.transaction():
            self.find_by_id(booking_id)
            deleted = self._repository.delete_by_id(booking_id)
        logger.info("Booking deleted", extra={"booking_id": booking_id})
        return deleted

    def delete_all(self) -> None:
        self._repository.delete_all()
        logger.info("All bookings deleted")

    def _validate(
        self,
        booking: Booking | None,
        exclude_id: int | None = None,
        pending: Iterable[Booking] = (),
    ) -> None:
        if booking is None:
            raise InvalidArgumentException("Booking can not be None")
        if booking.stay_period is None:
            raise InvalidArgumentException("Booking dates are required")
        self._validate_stay_period(booking.stay_period)
        if booking.number_of_people is None or booking.number_of_people < 1:
            raise InvalidArgumentException("Number of people must be at least 1")

        self._guest_service.find_by_id(booking.guest_id)

        capacity = self._room_service.capacity_of(booking.room_id)
        if capacity < booking.number_of_people:
            logger.warning(
                "Room capacity exceeded",
                extra={
                    "room_id": booking.room_id,
                    "capacity": capacity,
                    "number_of_people": booking.number_of_people,
                },
            )
            raise InvalidArgumentException(
                f"Room {booking.room_id} does not have enough capacity"
            )

        self._ensure_available(
            booking.room_id, booking.stay_period, exclude_id=exclude_id, pending=pending
        )

    def _validate_stay_period(self, stay_period: StayPeriod) -> None:
        if stay_period.starts_before(self._today()):
            raise InvalidArgumentException("Booking can not start in the past")

    def _ensure_available(
        self,
        room_id: int,
        stay_period: StayPeriod,
        exclude_id: int | None = None,
        pending: Iterable[Booking] = (),
    ) -> None:
        others = [*self._repository.find_by_room_id(room_id), *pending]
        for other in others:
            if other.room_id != room_id:
                continue
            if exclude_id is not None and other.id == exclude_id:
                continue
            if other.stay_period.overlaps(stay_period):
                logger.warning(
                    "Booking dates overlap",
                    extra={"room_id": room_id, "conflicting_booking_id": other.id},
                )
                raise BookingOverlapException(
                    f"Room {room_id} is already booked "
                    f"from {other.check_in} to {other.check_out}"
                )
