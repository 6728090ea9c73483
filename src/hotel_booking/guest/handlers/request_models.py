from pydantic import BaseModel, Field

from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.enum import Gender


class GuestRequest(BaseModel):
    """宿泊客のリクエストモデル"""

    guest_id: int | None = Field(default=None, ge=1, description="更新時のみ指定")
    first_name: str = Field(..., min_length=1, max_length=100, description="名")
    last_name: str = Field(..., min_length=1, max_length=100, description="姓")
    gender: Gender = Field(..., description="性別（MALE / FEMALE）")

    def to_entity(self) -> Guest:
        """ドメインエンティティに変換する"""
        return Guest(
            id=self.guest_id,
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
        )
