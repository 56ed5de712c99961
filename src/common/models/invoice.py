from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Tuple

from src.common.models.bookings import BookingItem
from src.common.models.customers import Customer


@dataclass(frozen=True)
class ChargeBreakdown:
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class Bill:
    bill_number: str
    customer: Customer
    adults: int
    children: int
    items: Tuple[BookingItem, ...]
    issued_at: datetime


@dataclass(frozen=True)
class Invoice:
    bill: Bill
    charges: ChargeBreakdown
    path: str
