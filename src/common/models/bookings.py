from enum import Enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.common.utils.money import to_money


class RoomType(str, Enum):
    NON_AC = "NON-AC Room"
    AC = "AC Room"


@dataclass(frozen=True)
class BookingItem:
    room_type: RoomType
    rate: Decimal
    from_date: date
    to_date: date

    @property
    def days(self) -> int:
        # check-in and check-out days are both charged
        return (self.to_date - self.from_date).days + 1

    @property
    def amount(self) -> Decimal:
        return to_money(self.rate * self.days)
