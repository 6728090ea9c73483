from .in_memory_booking_repository import (
    InMemoryBookingRepository as InMemoryBookingRepository,
)
