from .in_memory_repository import InMemoryRepository as InMemoryRepository
