from .entity import Room
from .enum import BedSize
from .factory import RoomFactory
from .repository import RoomRepository
from .value_object import Amenity, Bed, Shower, Toilet, amenity_capacity

__all__ = [
    "Room",
    "BedSize",
    "RoomFactory",
    "RoomRepository",
    "Amenity",
    "Bed",
    "Shower",
    "Toilet",
    "amenity_capacity",
]
