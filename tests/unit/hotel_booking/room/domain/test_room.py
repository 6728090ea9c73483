import pytest

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.enum import BedSize
from hotel_booking.room.domain.factory import RoomFactory
from hotel_booking.room.domain.value_object import (
    Bed,
    Shower,
    Toilet,
    amenity_capacity,
)
from hotel_booking.shared.domain.exception import FailedInitializationException


class TestAmenity:
    @pytest.mark.parametrize(
        "size, expected",
        [(BedSize.SINGLE, 1), (BedSize.DOUBLE, 2), (BedSize.KING_SIZE, 2)],
    )
    def test_bed_capacity(self, size, expected):
        assert amenity_capacity(Bed(size=size)) == expected

    def test_toilet_and_shower_have_no_capacity(self):
        assert amenity_capacity(Toilet()) == 0
        assert amenity_capacity(Shower()) == 0

    def test_equivalent_amenities_are_equal_regardless_of_inventory_id(self):
        assert Bed(size=BedSize.SINGLE, inventory_id=1) == Bed(
            size=BedSize.SINGLE, inventory_id=2
        )
        assert Toilet(inventory_id=1) == Toilet(inventory_id=5)

    def test_different_kinds_are_not_equal(self):
        assert Toilet() != Shower()
        assert Bed(size=BedSize.SINGLE) != Bed(size=BedSize.DOUBLE)


class TestRoom:
    def test_capacity_is_sum_of_beds(self):
        room = Room(
            amenities={Bed(size=BedSize.SINGLE), Bed(size=BedSize.KING_SIZE), Toilet()}
        )
        assert room.capacity == 3

    def test_room_without_beds_has_no_capacity(self):
        assert Room(amenities={Toilet(), Shower()}).capacity == 0

    def test_equivalent_amenities_are_collapsed(self):
        room = Room(amenities=[Toilet(inventory_id=1), Toilet(inventory_id=2)])
        assert len(room.amenities) == 1

    def test_amenities_are_stored_as_frozenset(self):
        room = Room(amenities=[Toilet()])
        assert isinstance(room.amenities, frozenset)


class TestRoomFactory:
    def test_create_numbers_amenities(self):
        factory = RoomFactory()

        room = factory.create([Bed(size=BedSize.DOUBLE), Toilet()])

        assert sorted(a.inventory_id for a in room.amenities) == [1, 2]
        assert room.capacity == 2
        assert room.id is None

    def test_inventory_numbers_continue_across_rooms(self):
        factory = RoomFactory()
        factory.create([Toilet()])

        room = factory.create([Shower()])

        assert [a.inventory_id for a in room.amenities] == [2]

    def test_separate_factories_have_separate_sequences(self):
        RoomFactory().create([Toilet()])
        room = RoomFactory().create([Toilet()])
        assert [a.inventory_id for a in room.amenities] == [1]

    def test_create_with_room_id(self):
        room = RoomFactory().create([Toilet()], room_id=3)
        assert room.id == 3

    @pytest.mark.parametrize("amenities", [None, [], [Toilet(), None]])
    def test_invalid_amenities_raise_error(self, amenities):
        with pytest.raises(FailedInitializationException):
            RoomFactory().create(amenities)
