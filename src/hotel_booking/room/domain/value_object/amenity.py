from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from hotel_booking.room.domain.enum import BedSize


@dataclass(frozen=True)
class Bed:
    """ベッド"""

    size: BedSize
    inventory_id: int = field(default=0, compare=False)
    kind: Literal["Bed"] = field(default="Bed", init=False)


@dataclass(frozen=True)
class Toilet:
    """トイレ"""

    inventory_id: int = field(default=0, compare=False)
    kind: Literal["Toilet"] = field(default="Toilet", init=False)


@dataclass(frozen=True)
class Shower:
    """シャワー"""

    inventory_id: int = field(default=0, compare=False)
    kind: Literal["Shower"] = field(default="Shower", init=False)


# 備品は種類と属性で比較する（inventory_id は同一性の判定に含めない）
Amenity: TypeAlias = Bed | Toilet | Shower


def amenity_capacity(amenity: Amenity) -> int:
    """備品が提供する就寝可能人数"""
    match amenity:
        case Bed(size=size):
            return size.capacity
        case Toilet() | Shower():
            return 0
    raise TypeError(f"Unknown amenity: {amenity!r}")
