from typing import Annotated, Literal

from pydantic import BaseModel, Field

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.enum import BedSize
from hotel_booking.room.domain.factory import RoomFactory
from hotel_booking.room.domain.value_object import Amenity, Bed, Shower, Toilet


class BedRequest(BaseModel):
    """ベッドのリクエストモデル"""

    type: Literal["Bed"]
    bed_type: BedSize = Field(..., description="ベッドのサイズ")

    def to_amenity(self) -> Amenity:
        return Bed(size=self.bed_type)


class ToiletRequest(BaseModel):
    """トイレのリクエストモデル"""

    type: Literal["Toilet"]

    def to_amenity(self) -> Amenity:
        return Toilet()


class ShowerRequest(BaseModel):
    """シャワーのリクエストモデル"""

    type: Literal["Shower"]

    def to_amenity(self) -> Amenity:
        return Shower()


AmenityRequest = Annotated[
    BedRequest | ToiletRequest | ShowerRequest, Field(discriminator="type")
]


class RoomRequest(BaseModel):
    """部屋のリクエストモデル"""

    room_id: int | None = Field(default=None, ge=1, description="更新時のみ指定")
    amenities: list[AmenityRequest] = Field(..., description="備品の一覧")


def to_room(request: RoomRequest, factory: RoomFactory) -> Room:
    """リクエストを部屋エンティティに変換する"""
    return factory.create(
        [amenity.to_amenity() for amenity in request.amenities],
        room_id=request.room_id,
    )
