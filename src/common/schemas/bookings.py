from datetime import date
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, field_validator, model_validator

from src.common.models.bookings import RoomType
from src.common.utils.constants import MAX_RATE
from src.common.utils.datetime_normaliser import parse_date
from src.common.utils.money import CENT


class BookingItemRequest(BaseModel):
    room_type: RoomType
    rate: Decimal
    from_date: date
    to_date: date

    @field_validator("rate", mode="before")
    @classmethod
    def parse_rate(cls, v):
        try:
            rate = Decimal(str(v).strip())
        except (InvalidOperation, ValueError):
            raise ValueError("rate must be a valid non-negative number")
        if not rate.is_finite() or rate < 0:
            raise ValueError("rate must be a valid non-negative number")
        if rate > MAX_RATE:
            raise ValueError(f"rate cannot exceed {MAX_RATE}")
        if rate != rate.quantize(CENT):
            raise ValueError("rate must have at most two decimal places")
        return rate

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return parse_date(v)

    @model_validator(mode="after")
    def validate_period(self):
        if self.to_date < self.from_date:
            raise ValueError("end date must not be before start date")
        return self


class BillRequest(BaseModel):
    bill_number: str
    adults: int
    children: int

    @field_validator("bill_number", mode="before")
    @classmethod
    def require_bill_number(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("bill number is required")
        return v.strip() if isinstance(v, str) else v

    @field_validator("adults")
    @classmethod
    def validate_adults(cls, v: int):
        if v < 0:
            raise ValueError("number of adults cannot be negative")
        if v == 0:
            raise ValueError("number of adults cannot be zero")
        return v

    @field_validator("children")
    @classmethod
    def validate_children(cls, v: int):
        if v < 0:
            raise ValueError("number of children cannot be negative")
        return v
