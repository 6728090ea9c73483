from .entity import Guest
from .enum import Gender
from .repository import GuestRepository

__all__ = ["Guest", "Gender", "GuestRepository"]
