from .amenity import Amenity, Bed, Shower, Toilet, amenity_capacity

__all__ = ["Amenity", "Bed", "Shower", "Toilet", "amenity_capacity"]
