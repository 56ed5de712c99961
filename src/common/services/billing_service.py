from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, List, Optional

from src.common.models.bookings import BookingItem
from src.common.models.customers import Customer
from src.common.models.invoice import Bill, ChargeBreakdown
from src.common.schemas.bookings import BillRequest, BookingItemRequest
from src.common.utils.constants import CURRENCY, DISPLAY_DATE_FORMAT, TAX_RATE
from src.common.utils.custom_exceptions import (
    CustomerNotSelected,
    EmptyBill,
    InvalidDates,
)
from src.common.utils.money import format_money, to_money


def calculate_charges(
    items: Iterable[BookingItem], tax_rate: Decimal = TAX_RATE
) -> ChargeBreakdown:
    subtotal = to_money(sum((item.amount for item in items), Decimal("0")))
    tax = to_money(subtotal * tax_rate)
    return ChargeBreakdown(
        subtotal=subtotal,
        tax_rate=tax_rate,
        tax=tax,
        total=subtotal + tax,
    )


class BillingSession:
    """The bill being assembled: selected customer plus booked rooms."""

    def __init__(self):
        self.customer: Optional[Customer] = None
        self.items: List[BookingItem] = []

    def select_customer(self, customer: Customer):
        # keep a snapshot so the bill never tracks later store changes
        self.customer = replace(customer)

    def add_item(self, req: BookingItemRequest) -> BookingItem:
        if self.customer is None:
            raise CustomerNotSelected("Please select a customer first")

        item = BookingItem(
            room_type=req.room_type,
            rate=req.rate,
            from_date=req.from_date,
            to_date=req.to_date,
        )
        if item.days < 1:
            raise InvalidDates("end date must not be before start date")

        self.items.append(item)
        return item

    def clear(self):
        self.customer = None
        self.items = []

    def summary_lines(self) -> List[str]:
        lines = ["Rooms Booked:"]
        for i, item in enumerate(self.items, start=1):
            lines.append(
                f"{i}. {item.room_type.value} - {format_money(item.rate, CURRENCY)}"
                f" x {item.days} days = {format_money(item.amount, CURRENCY)}"
            )
            lines.append(
                f"   Period: {item.from_date.strftime(DISPLAY_DATE_FORMAT)}"
                f" to {item.to_date.strftime(DISPLAY_DATE_FORMAT)}"
            )
        return lines


class BillingService:
    def create_bill(self, session: BillingSession, req: BillRequest) -> Bill:
        if session.customer is None:
            raise CustomerNotSelected("Please select a customer")
        if not session.items:
            raise EmptyBill("Please add at least one room")

        return Bill(
            bill_number=req.bill_number,
            customer=session.customer,
            adults=req.adults,
            children=req.children,
            items=tuple(session.items),
            issued_at=datetime.now(timezone.utc),
        )
