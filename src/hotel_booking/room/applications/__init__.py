from .room_service import RoomService as RoomService
