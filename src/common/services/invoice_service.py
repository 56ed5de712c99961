import logging
import os
from decimal import Decimal
from typing import Callable, Optional

from fpdf import FPDF, XPos, YPos
from fpdf.errors import FPDFException

from src.common.models.invoice import Bill, ChargeBreakdown, Invoice
from src.common.services.billing_service import calculate_charges
from src.common.utils.constants import (
    BUSINESS_ADDRESS,
    BUSINESS_NAME,
    BUSINESS_PHONE,
    CURRENCY,
    DISPLAY_DATE_FORMAT,
    GSTIN,
    INVOICE_DIR,
    PERIOD_DATE_FORMAT,
    TAX_RATE,
    TERMS_AND_CONDITIONS,
)
from src.common.utils.custom_exceptions import (
    DuplicateBillNumber,
    InvalidBillNumber,
    InvoiceRenderError,
)
from src.common.utils.file_writer import atomic_write, ensure_dir
from src.common.utils.money import format_money

logger = logging.getLogger(__name__)

FONT = "Helvetica"
SHADE = (240, 240, 240)

BillNumberGuard = Callable[[str, str], None]


def reject_existing_invoice(bill_number: str, path: str):
    """Guard that refuses to overwrite an invoice already on disk."""
    if os.path.exists(path):
        raise DuplicateBillNumber(f"an invoice for bill number {bill_number} already exists")


class InvoiceDocument(FPDF):
    def footer(self):
        self.set_y(-17)
        self.set_font(FONT, "I", 8)
        self.cell(0, 10, f"Page {self.page_no()}")


class InvoiceService:
    def __init__(
        self,
        output_dir: str = INVOICE_DIR,
        tax_rate: Decimal = TAX_RATE,
        bill_number_guard: Optional[BillNumberGuard] = None,
        compress: bool = True,
    ):
        self.output_dir = output_dir
        self.tax_rate = tax_rate
        self.bill_number_guard = bill_number_guard
        self.compress = compress

    def invoice_path(self, bill_number: str) -> str:
        if (
            not bill_number
            or bill_number in (".", "..")
            or "/" in bill_number
            or "\\" in bill_number
        ):
            raise InvalidBillNumber(f"'{bill_number}' cannot be used as a bill number")
        return os.path.join(self.output_dir, f"Invoice_{bill_number}.pdf")

    def generate_invoice(self, bill: Bill) -> Invoice:
        path = self.invoice_path(bill.bill_number)
        if self.bill_number_guard:
            self.bill_number_guard(bill.bill_number, path)

        charges = calculate_charges(bill.items, self.tax_rate)
        try:
            data = self.render(bill, charges)
        except FPDFException as err:
            logger.error(f"Error rendering invoice {bill.bill_number}: {err}")
            raise InvoiceRenderError(str(err)) from err

        ensure_dir(self.output_dir)
        atomic_write(path, data)
        logger.info(f"Generated invoice {path}")
        return Invoice(bill=bill, charges=charges, path=path)

    def render(self, bill: Bill, charges: ChargeBreakdown) -> bytes:
        pdf = InvoiceDocument(orientation="P", unit="mm", format="A4")
        pdf.compress = self.compress
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        self._header(pdf)
        self._details(pdf, bill)
        self._guests_and_address(pdf, bill)
        self._items_table(pdf, bill)
        self._totals(pdf, charges)
        self._terms(pdf)
        self._signature(pdf)

        return bytes(pdf.output())

    def _header(self, pdf: FPDF):
        pdf.set_font(FONT, "B", 20)
        pdf.cell(190, 10, BUSINESS_NAME)
        pdf.ln(8)

        pdf.set_font(FONT, "", 10)
        for line in (BUSINESS_ADDRESS, f"Phone: {BUSINESS_PHONE}", f"GSTIN: {GSTIN}"):
            pdf.cell(190, 5, line)
            pdf.ln(5)
        pdf.ln(10)

        pdf.line(10, pdf.get_y(), 200, pdf.get_y())
        pdf.ln(5)

    def _details(self, pdf: FPDF, bill: Bill):
        pdf.set_fill_color(*SHADE)
        pdf.set_font(FONT, "B", 12)
        top = pdf.get_y()
        pdf.rect(10, top, 90, 8, style="F")
        pdf.cell(90, 8, "Bill Details")
        pdf.rect(105, top, 90, 8, style="F")
        pdf.cell(5, 8, "")
        pdf.cell(90, 8, "Customer Details")
        pdf.ln(10)

        top = pdf.get_y()
        pdf.rect(10, top, 90, 24, style="D")
        bill_rows = (
            ("Bill No:", bill.bill_number),
            ("Date:", bill.issued_at.astimezone().strftime(DISPLAY_DATE_FORMAT)),
            ("GSTIN:", GSTIN),
        )
        self._labelled_rows(pdf, 15, top, bill_rows)

        customer = bill.customer
        pdf.rect(105, top, 90, 40, style="D")
        customer_rows = (
            ("Name:", customer.name),
            ("Phone:", customer.phone),
            ("ID Type:", customer.gov_id_type.value),
            ("ID No:", customer.gov_id_number),
        )
        self._labelled_rows(pdf, 110, top, customer_rows)

        pdf.set_y(max(pdf.get_y(), top + 45))
        pdf.ln(5)

    @staticmethod
    def _labelled_rows(pdf: FPDF, x: float, top: float, rows):
        pdf.set_xy(x, top)
        for label, value in rows:
            pdf.set_x(x)
            pdf.set_font(FONT, "", 10)
            pdf.cell(25, 6, label)
            pdf.set_font(FONT, "B", 10)
            pdf.cell(60, 6, value)
            pdf.ln(6)

    def _guests_and_address(self, pdf: FPDF, bill: Bill):
        pdf.set_fill_color(*SHADE)
        pdf.rect(10, pdf.get_y(), 185, 8, style="F")
        pdf.set_x(15)
        pdf.set_font(FONT, "", 10)
        pdf.cell(50, 8, "No. of Guests:")
        pdf.set_font(FONT, "B", 10)
        pdf.cell(130, 8, f"{bill.adults} Adults, {bill.children} Children")
        pdf.ln(12)

        top = pdf.get_y()
        pdf.rect(10, top, 185, 8, style="F")
        pdf.set_x(15)
        pdf.set_font(FONT, "", 10)
        pdf.cell(50, 8, "Address:")
        pdf.set_font(FONT, "B", 10)
        pdf.set_xy(65, top)
        pdf.multi_cell(130, 8, bill.customer.address)
        pdf.ln(4)

        pdf.line(10, pdf.get_y(), 200, pdf.get_y())
        pdf.ln(5)

    def _items_table(self, pdf: FPDF, bill: Bill):
        widths = (45, 30, 20, 55, 40)
        headers = ("Room Type", "Rate/Day", "Days", "Period", "Amount")

        pdf.set_fill_color(*SHADE)
        pdf.set_font(FONT, "B", 10)
        self._table_row(pdf, widths, headers, fill=True)

        pdf.set_font(FONT, "", 10)
        for item in bill.items:
            period = (
                f"{item.from_date.strftime(PERIOD_DATE_FORMAT)}"
                f" to {item.to_date.strftime(PERIOD_DATE_FORMAT)}"
            )
            row = (
                item.room_type.value,
                format_money(item.rate, CURRENCY),
                str(item.days),
                period,
                format_money(item.amount, CURRENCY),
            )
            self._table_row(pdf, widths, row, fill=False)

    @staticmethod
    def _table_row(pdf: FPDF, widths, values, fill: bool):
        last = len(widths) - 1
        for i, (width, value) in enumerate(zip(widths, values)):
            if i == last:
                pdf.cell(width, 8, value, border=1, fill=fill,
                         new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            else:
                pdf.cell(width, 8, value, border=1, fill=fill)

    def _totals(self, pdf: FPDF, charges: ChargeBreakdown):
        pdf.ln(5)
        pdf.line(10, pdf.get_y(), 200, pdf.get_y())
        pdf.ln(5)

        pdf.set_font(FONT, "B", 10)
        rows = (
            ("Subtotal:", charges.subtotal),
            (f"GST ({_percent(charges.tax_rate)}%):", charges.tax),
        )
        for label, amount in rows:
            pdf.cell(150, 8, label, align="R")
            pdf.cell(40, 8, format_money(amount, CURRENCY), align="R",
                     new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_fill_color(*SHADE)
        pdf.cell(150, 8, "Total Amount:", border=1, align="R", fill=True)
        pdf.cell(40, 8, format_money(charges.total, CURRENCY), border=1, align="R",
                 fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(15)

    def _terms(self, pdf: FPDF):
        pdf.set_font(FONT, "B", 10)
        pdf.cell(190, 6, "Terms & Conditions:")
        pdf.ln(6)
        pdf.set_font(FONT, "", 8)
        for term in TERMS_AND_CONDITIONS:
            pdf.cell(190, 4, term)
            pdf.ln(4)

    def _signature(self, pdf: FPDF):
        pdf.ln(10)
        pdf.line(140, pdf.get_y(), 190, pdf.get_y())
        pdf.ln(3)
        pdf.set_font(FONT, "", 8)
        pdf.cell(130, 4, "")
        pdf.cell(60, 4, "Authorized Signature")


def _percent(rate: Decimal) -> str:
    text = f"{rate * 100:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
