from .in_memory_guest_repository import (
    InMemoryGuestRepository as InMemoryGuestRepository,
)
