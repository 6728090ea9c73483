from .in_memory_room_repository import InMemoryRoomRepository as InMemoryRoomRepository
