import logging
from dataclasses import asdict

from src.common.services.billing_service import BillingSession
from src.common.utils.custom_exceptions import (
    CustomerStoreCorrupted,
    NoCustomers,
    NotFoundException,
    StorageError,
)
from src.common.utils.custom_response import ResultKind, send_custom_response
from src.handlers.services import get_customer_service

logger = logging.getLogger(__name__)


def select_customer(event, session: BillingSession):
    customer_id = (event or {}).get("customer_id")

    try:
        customer_service = get_customer_service()
        options = customer_service.customer_options()
        if not customer_id:
            return send_custom_response(
                ResultKind.VALIDATION, "Please select a customer first", options
            )
        customer = customer_service.get_customer(customer_id)
    except NoCustomers as err:
        return send_custom_response(ResultKind.NOT_FOUND, str(err))
    except NotFoundException as err:
        return send_custom_response(ResultKind.NOT_FOUND, str(err))
    except (StorageError, CustomerStoreCorrupted) as err:
        return send_custom_response(ResultKind.IO, f"Error loading customers: {err}")
    except Exception as err:
        logger.exception(f"Unhandled error selecting customer: {err}")
        return send_custom_response(ResultKind.INTERNAL, "Internal error")

    session.select_customer(customer)
    return send_custom_response(
        ResultKind.OK, f"Selected {customer.label}", asdict(customer)
    )
