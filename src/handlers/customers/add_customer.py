import logging
from dataclasses import asdict

from pydantic import ValidationError

from src.common.schemas.customers import CustomerRequest
from src.common.utils.custom_exceptions import CustomerStoreCorrupted, StorageError
from src.common.utils.custom_response import (
    ResultKind,
    send_custom_response,
    validation_message,
)
from src.handlers.services import get_customer_service

logger = logging.getLogger(__name__)


def add_customer(event, context=None):
    if not event:
        return send_custom_response(
            ResultKind.VALIDATION, "Please fill in all fields and upload ID photo"
        )

    try:
        request = CustomerRequest.model_validate(event)
    except ValidationError as e:
        return send_custom_response(ResultKind.VALIDATION, validation_message(e))

    try:
        customer = get_customer_service().add_customer(request)
    except (StorageError, CustomerStoreCorrupted) as err:
        return send_custom_response(ResultKind.IO, f"Error saving customer: {err}")
    except ValueError as err:
        return send_custom_response(ResultKind.VALIDATION, str(err))
    except Exception as err:
        logger.exception(f"Unhandled error adding customer: {err}")
        return send_custom_response(ResultKind.INTERNAL, "Internal error")

    return send_custom_response(
        ResultKind.OK, "Customer saved successfully!", asdict(customer)
    )
