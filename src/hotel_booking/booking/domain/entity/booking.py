from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date

from hotel_booking.booking.domain.value_object import StayPeriod
from hotel_booking.shared.domain import Entity


@dataclass(frozen=True)
class Booking(Entity):
    """予約エンティティ"""

    guest_id: int
    room_id: int
    number_of_people: int
    stay_period: StayPeriod

    @classmethod
    def of(
        cls,
        guest_id: int,
        room_id: int,
        number_of_people: int,
        check_in: date,
        check_out: date,
        id: int | None = None,
    ) -> Booking:
        """日付から予約を生成する"""
        return cls(
            id=id,
            guest_id=guest_id,
            room_id=room_id,
            number_of_people=number_of_people,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
        )

    @property
    def check_in(self) -> date:
        return self.stay_period.check_in

    @property
    def check_out(self) -> date:
        return self.stay_period.check_out

    def with_stay_period(self, stay_period: StayPeriod) -> Booking:
        """期間だけを変更した予約を返す"""
        return dataclasses.replace(self, stay_period=stay_period)
