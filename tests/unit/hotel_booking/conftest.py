from datetime import date

import pytest

from hotel_booking.booking.applications import BookingService
from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.infrastructure import InMemoryBookingRepository
from hotel_booking.guest.applications import GuestService
from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.enum import Gender
from hotel_booking.guest.infrastructure import InMemoryGuestRepository
from hotel_booking.room.applications import RoomService
from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.enum import BedSize
from hotel_booking.room.domain.factory import RoomFactory
from hotel_booking.room.domain.value_object import Bed, Shower, Toilet
from hotel_booking.room.infrastructure import InMemoryRoomRepository

TODAY = date(2024, 10, 1)


@pytest.fixture
def today():
    """全テスト共通の「今日」"""
    return TODAY


@pytest.fixture
def guest_service():
    return GuestService(repository=InMemoryGuestRepository())


@pytest.fixture
def room_service():
    return RoomService(repository=InMemoryRoomRepository())


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def booking_service(booking_repository, room_service, guest_service, today):
    return BookingService(
        repository=booking_repository,
        room_service=room_service,
        guest_service=guest_service,
        today=lambda: today,
    )


@pytest.fixture
def room_factory():
    return RoomFactory()


@pytest.fixture
def create_guest():
    """Guest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        first_name: str = "Taro",
        last_name: str = "Yamada",
        gender: Gender = Gender.MALE,
        guest_id: int | None = None,
    ) -> Guest:
        return Guest(
            id=guest_id, first_name=first_name, last_name=last_name, gender=gender
        )

    return _factory


@pytest.fixture
def create_room(room_factory):
    """Room を生成する Factory fixture（デフォルトはダブルベッド1台で定員2）"""

    def _factory(*beds: BedSize, room_id: int | None = None) -> Room:
        amenities = [Bed(size=size) for size in beds or (BedSize.DOUBLE,)]
        amenities += [Toilet(), Shower()]
        return room_factory.create(amenities, room_id=room_id)

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        check_in: date = date(2024, 10, 12),
        check_out: date = date(2024, 10, 17),
        guest_id: int = 1,
        room_id: int = 1,
        number_of_people: int = 2,
        booking_id: int | None = None,
    ) -> Booking:
        return Booking.of(
            id=booking_id,
            guest_id=guest_id,
            room_id=room_id,
            number_of_people=number_of_people,
            check_in=check_in,
            check_out=check_out,
        )

    return _factory


@pytest.fixture
def hotel(guest_service, room_service, create_guest, create_room):
    """宿泊客2名と部屋2室（定員2・定員1）を登録済みの状態"""
    guest_service.save_all(
        [create_guest(), create_guest(first_name="Hanako", gender=Gender.FEMALE)]
    )
    room_service.save_all([create_room(BedSize.DOUBLE), create_room(BedSize.SINGLE)])
