import logging
from datetime import datetime, timezone
from typing import List

from src.common.models.customers import Customer
from src.common.repository.customer_repo import CustomerRepository
from src.common.repository.photo_repo import IdPhotoRepository
from src.common.schemas.customers import CustomerRequest
from src.common.utils.custom_exceptions import NoCustomers, NotFoundException, StorageError

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, customer_repo: CustomerRepository, photo_repo: IdPhotoRepository):
        self.customer_repo = customer_repo
        self.photo_repo = photo_repo

    def add_customer(self, req: CustomerRequest) -> Customer:
        photo_path = self.photo_repo.store_photo(req.photo_source)
        customer = Customer(
            customer_id=self.customer_repo.next_customer_id(),
            name=req.name,
            address=req.address,
            phone=req.phone,
            gov_id_type=req.gov_id_type,
            gov_id_number=req.gov_id_number,
            gov_id_photo_path=photo_path,
            added_on=datetime.now(timezone.utc),
        )
        try:
            self.customer_repo.add_customer(customer)
        except (StorageError, ValueError):
            try:
                self.photo_repo.remove_photo(photo_path)
            except StorageError as err:
                logger.error(f"Orphaned ID photo left at {photo_path}: {err}")
            raise
        return customer

    def list_customers(self) -> List[Customer]:
        return self.customer_repo.get_customers()

    def get_customer(self, customer_id: str) -> Customer:
        customer = self.customer_repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundException(resource="customer", identifier=customer_id)
        return customer

    def customer_options(self) -> List[str]:
        customers = self.list_customers()
        if not customers:
            raise NoCustomers("Please add customers first")
        return [c.label for c in customers]
