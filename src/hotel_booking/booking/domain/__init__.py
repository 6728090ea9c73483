from .entity import Booking
from .repository import BookingRepository
from .value_object import StayPeriod

__all__ = ["Booking", "BookingRepository", "StayPeriod"]
