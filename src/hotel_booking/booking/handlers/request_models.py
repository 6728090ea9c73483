from datetime import date

from pydantic import BaseModel, Field, model_validator

from hotel_booking.booking.domain.entity import Booking


class BookingDatesRequest(BaseModel):
    """予約期間のリクエストモデル"""

    from_date: date = Field(..., description="チェックイン日（YYYY-MM-DD形式）")
    to_date: date = Field(..., description="チェックアウト日（YYYY-MM-DD形式）")

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "BookingDatesRequest":
        if self.to_date <= self.from_date:
            raise ValueError("Check-out date must be after check-in date")
        return self


class BookingRequest(BookingDatesRequest):
    """予約のリクエストモデル"""

    guest_id: int = Field(..., ge=1)
    room_id: int = Field(..., ge=1)
    number_of_people: int = Field(..., ge=1, description="宿泊人数")

    def to_entity(self) -> Booking:
        """ドメインエンティティに変換する"""
        return Booking.of(
            guest_id=self.guest_id,
            room_id=self.room_id,
            number_of_people=self.number_of_people,
            check_in=self.from_date,
            check_out=self.to_date,
        )
