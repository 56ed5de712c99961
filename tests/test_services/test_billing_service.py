import random
import unittest
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP

from src.common.models.bookings import BookingItem, RoomType
from src.common.models.customers import Customer, GovIDType
from src.common.schemas.bookings import BillRequest, BookingItemRequest
from src.common.services.billing_service import (
    BillingService,
    BillingSession,
    calculate_charges,
)
from src.common.utils.custom_exceptions import (
    CustomerNotSelected,
    EmptyBill,
    InvalidDates,
)


def make_item(rate="2000.00", start=date(2024, 5, 1), end=date(2024, 5, 3), room=RoomType.AC):
    return BookingItem(room_type=room, rate=Decimal(rate), from_date=start, to_date=end)


class TestBookingItem(unittest.TestCase):

    def test_days_counts_both_ends(self):
        start = date(2024, 5, 1)
        for offset in range(0, 40, 7):
            item = make_item(start=start, end=start + timedelta(days=offset))
            self.assertEqual(item.days, offset + 1)

    def test_same_day_is_one_day(self):
        item = make_item(start=date(2024, 5, 1), end=date(2024, 5, 1))

        self.assertEqual(item.days, 1)
        self.assertEqual(item.amount, Decimal("2000.00"))

    def test_amount(self):
        self.assertEqual(make_item().amount, Decimal("6000.00"))


class TestCalculateCharges(unittest.TestCase):

    def test_single_item(self):
        charges = calculate_charges([make_item()])

        self.assertEqual(charges.subtotal, Decimal("6000.00"))
        self.assertEqual(charges.tax, Decimal("1080.00"))
        self.assertEqual(charges.total, Decimal("7080.00"))
        self.assertEqual(charges.tax_rate, Decimal("0.18"))

    def test_no_items(self):
        charges = calculate_charges([])

        self.assertEqual(charges.subtotal, Decimal("0.00"))
        self.assertEqual(charges.total, Decimal("0.00"))

    def test_tax_rounds_half_up(self):
        # 0.18 * 0.25 = 0.045
        charges = calculate_charges([make_item(rate="0.25", end=date(2024, 5, 1))])

        self.assertEqual(charges.tax, Decimal("0.05"))
        self.assertEqual(charges.total, Decimal("0.30"))

    def test_custom_tax_rate(self):
        charges = calculate_charges([make_item()], tax_rate=Decimal("0.12"))

        self.assertEqual(charges.tax, Decimal("720.00"))
        self.assertEqual(charges.total, Decimal("6720.00"))

    def test_many_items_exact_and_order_independent(self):
        rng = random.Random(7)
        items = [
            make_item(
                rate=f"{rng.randint(0, 500000) / 100:.2f}",
                end=date(2024, 5, 1) + timedelta(days=rng.randint(0, 10)),
                room=rng.choice(list(RoomType)),
            )
            for _ in range(200)
        ]

        charges = calculate_charges(items)
        shuffled = list(items)
        rng.shuffle(shuffled)

        expected = sum(item.rate * item.days for item in items)
        self.assertEqual(charges.subtotal, expected)
        self.assertEqual(calculate_charges(shuffled), charges)
        self.assertEqual(charges.tax, (expected * Decimal("0.18")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
        self.assertEqual(charges.total, charges.subtotal + charges.tax)


class TestBillingSession(unittest.TestCase):

    def setUp(self):
        self.customer = Customer(
            customer_id="CUST1",
            name="Asha Rao",
            address="Chennai",
            phone="9000000000",
            gov_id_type=GovIDType.PASSPORT,
            gov_id_number="P1234567",
            gov_id_photo_path="customer_data/id_photos/id_1.jpg",
        )
        self.session = BillingSession()
        self.req = BookingItemRequest(
            room_type="AC Room", rate="2000", from_date="2024-05-01", to_date="2024-05-03"
        )

    def test_add_item_requires_customer(self):
        with self.assertRaises(CustomerNotSelected):
            self.session.add_item(self.req)

    def test_select_customer_keeps_copy(self):
        self.session.select_customer(self.customer)

        self.assertEqual(self.session.customer, self.customer)
        self.assertIsNot(self.session.customer, self.customer)

    def test_add_items_keeps_order(self):
        self.session.select_customer(self.customer)
        second = BookingItemRequest(
            room_type="NON-AC Room", rate="800", from_date="2024-05-02", to_date="2024-05-02"
        )

        self.session.add_item(self.req)
        self.session.add_item(second)

        self.assertEqual(
            [i.room_type for i in self.session.items], [RoomType.AC, RoomType.NON_AC]
        )

    def test_add_item_rejects_reversed_dates(self):
        self.session.select_customer(self.customer)
        req = BookingItemRequest.model_construct(
            room_type=RoomType.AC,
            rate=Decimal("100"),
            from_date=date(2024, 6, 10),
            to_date=date(2024, 6, 9),
        )

        with self.assertRaises(InvalidDates):
            self.session.add_item(req)

        self.assertEqual(self.session.items, [])

    def test_summary_lines(self):
        self.session.select_customer(self.customer)
        self.session.add_item(self.req)

        self.assertEqual(
            self.session.summary_lines(),
            [
                "Rooms Booked:",
                "1. AC Room - Rs.2000.00 x 3 days = Rs.6000.00",
                "   Period: 01-05-2024 to 03-05-2024",
            ],
        )

    def test_clear(self):
        self.session.select_customer(self.customer)
        self.session.add_item(self.req)

        self.session.clear()

        self.assertIsNone(self.session.customer)
        self.assertEqual(self.session.items, [])


class TestBillingService(unittest.TestCase):

    def setUp(self):
        self.service = BillingService()
        self.session = BillingSession()
        self.req = BillRequest(bill_number="B100", adults=2, children=1)
        self.customer = Customer(
            customer_id="CUST1",
            name="Asha Rao",
            address="Chennai",
            phone="9000000000",
            gov_id_type=GovIDType.PASSPORT,
            gov_id_number="P1234567",
            gov_id_photo_path="customer_data/id_photos/id_1.jpg",
        )

    def test_create_bill_requires_customer(self):
        with self.assertRaises(CustomerNotSelected):
            self.service.create_bill(self.session, self.req)

    def test_create_bill_requires_items(self):
        self.session.select_customer(self.customer)

        with self.assertRaises(EmptyBill):
            self.service.create_bill(self.session, self.req)

    def test_create_bill(self):
        self.session.select_customer(self.customer)
        self.session.add_item(
            BookingItemRequest(
                room_type="AC Room", rate="2000", from_date="2024-05-01", to_date="2024-05-03"
            )
        )

        bill = self.service.create_bill(self.session, self.req)

        self.assertEqual(bill.bill_number, "B100")
        self.assertEqual(bill.customer, self.customer)
        self.assertEqual(bill.adults, 2)
        self.assertEqual(bill.children, 1)
        self.assertEqual(len(bill.items), 1)
        self.assertIsNotNone(bill.issued_at.tzinfo)

        self.session.items.clear()
        self.assertEqual(len(bill.items), 1)


if __name__ == "__main__":
    unittest.main()
