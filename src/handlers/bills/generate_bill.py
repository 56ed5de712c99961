import logging

from pydantic import ValidationError

from src.common.schemas.bookings import BillRequest
from src.common.services.billing_service import BillingSession
from src.common.utils.custom_exceptions import (
    CustomerNotSelected,
    DuplicateBillNumber,
    EmptyBill,
    InvalidBillNumber,
    InvoiceRenderError,
    StorageError,
)
from src.common.utils.custom_response import (
    ResultKind,
    send_custom_response,
    validation_message,
)
from src.handlers.services import get_billing_service, get_invoice_service

logger = logging.getLogger(__name__)


def generate_bill(event, session: BillingSession):
    try:
        request = BillRequest.model_validate(event or {})
    except ValidationError as e:
        return send_custom_response(ResultKind.VALIDATION, validation_message(e))

    try:
        bill = get_billing_service().create_bill(session, request)
        invoice = get_invoice_service().generate_invoice(bill)
    except (
        CustomerNotSelected,
        EmptyBill,
        InvalidBillNumber,
        DuplicateBillNumber,
        InvoiceRenderError,
    ) as err:
        return send_custom_response(ResultKind.VALIDATION, str(err))
    except StorageError as err:
        return send_custom_response(ResultKind.IO, f"Error generating PDF: {err}")
    except Exception as err:
        logger.exception(f"Unhandled error generating bill: {err}")
        return send_custom_response(ResultKind.INTERNAL, "Internal error")

    return send_custom_response(
        ResultKind.OK,
        "Bill generated successfully!",
        {
            "bill_number": invoice.bill.bill_number,
            "path": invoice.path,
            "subtotal": invoice.charges.subtotal,
            "tax": invoice.charges.tax,
            "total": invoice.charges.total,
        },
    )
