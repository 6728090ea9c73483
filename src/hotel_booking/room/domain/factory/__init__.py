from .room_factory import RoomFactory as RoomFactory
