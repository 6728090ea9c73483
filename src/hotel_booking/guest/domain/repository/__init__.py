from .guest_repository import GuestRepository as GuestRepository
