import logging
from dataclasses import asdict

from src.common.utils.custom_exceptions import CustomerStoreCorrupted, StorageError
from src.common.utils.custom_response import ResultKind, send_custom_response
from src.handlers.services import get_customer_service

logger = logging.getLogger(__name__)


def list_customers(event=None, context=None):
    try:
        customers = get_customer_service().list_customers()
    except (StorageError, CustomerStoreCorrupted) as err:
        return send_custom_response(ResultKind.IO, f"Error loading customers: {err}")
    except Exception as err:
        logger.exception(f"Unhandled error listing customers: {err}")
        return send_custom_response(ResultKind.INTERNAL, "Internal error")

    return send_custom_response(
        ResultKind.OK,
        f"{len(customers)} customers",
        [asdict(c) for c in customers],
    )
