from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from hotel_booking.shared.domain.exception import InvalidArgumentException


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間 [チェックイン日, チェックアウト日)

    チェックアウト日は期間に含まない（半開区間）。
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_in is None or self.check_out is None:
            raise InvalidArgumentException("Check-in and check-out dates are required")
        if self.check_out <= self.check_in:
            raise InvalidArgumentException(
                "Check-out date must be after check-in date"
            )

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: StayPeriod) -> bool:
        """期間が重なるかどうか（一方の終了日が他方の開始日と同じなら重ならない）"""
        return not (
            self.check_in >= other.check_out or self.check_out <= other.check_in
        )

    def starts_before(self, day: date) -> bool:
        return self.check_in < day
