from .guest_service import GuestService as GuestService
