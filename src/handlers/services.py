import os
from functools import lru_cache

from src.common.repository.customer_repo import CustomerRepository
from src.common.repository.photo_repo import IdPhotoRepository
from src.common.services.billing_service import BillingService
from src.common.services.customer_service import CustomerService
from src.common.services.invoice_service import InvoiceService
from src.common.utils.constants import DATA_DIR, ID_PHOTOS_DIR, INVOICE_DIR, TAX_RATE


@lru_cache(maxsize=None)
def get_customer_service() -> CustomerService:
    customer_repo = CustomerRepository(DATA_DIR)
    photo_repo = IdPhotoRepository(os.path.join(DATA_DIR, ID_PHOTOS_DIR))
    return CustomerService(customer_repo=customer_repo, photo_repo=photo_repo)


@lru_cache(maxsize=None)
def get_billing_service() -> BillingService:
    return BillingService()


@lru_cache(maxsize=None)
def get_invoice_service() -> InvoiceService:
    return InvoiceService(output_dir=INVOICE_DIR, tax_rate=TAX_RATE)


def reset_services():
    get_customer_service.cache_clear()
    get_billing_service.cache_clear()
    get_invoice_service.cache_clear()
