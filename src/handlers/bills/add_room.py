import logging
from dataclasses import asdict

from pydantic import ValidationError

from src.common.schemas.bookings import BookingItemRequest
from src.common.services.billing_service import BillingSession
from src.common.utils.custom_exceptions import CustomerNotSelected, InvalidDates
from src.common.utils.custom_response import (
    ResultKind,
    send_custom_response,
    validation_message,
)

logger = logging.getLogger(__name__)


def add_room(event, session: BillingSession):
    if session.customer is None:
        return send_custom_response(
            ResultKind.VALIDATION, "Please select a customer first"
        )

    try:
        request = BookingItemRequest.model_validate(event or {})
    except ValidationError as e:
        return send_custom_response(ResultKind.VALIDATION, validation_message(e))

    try:
        item = session.add_item(request)
        data = asdict(item)
        data["days"] = item.days
        data["amount"] = item.amount
        data["summary"] = session.summary_lines()
    except (CustomerNotSelected, InvalidDates) as err:
        return send_custom_response(ResultKind.VALIDATION, str(err))
    except Exception as err:
        logger.exception(f"Unhandled error adding room: {err}")
        return send_custom_response(ResultKind.INTERNAL, "Internal error")

    return send_custom_response(ResultKind.OK, "Room added successfully!", data)
