import json
import logging
import os
from typing import List, Optional

from src.common.models.customers import Customer, GovIDType
from src.common.utils.constants import CUSTOMERS_FILE, ID_PHOTOS_DIR
from src.common.utils.custom_exceptions import CustomerStoreCorrupted, StorageError
from src.common.utils.datetime_normaliser import from_iso_string, to_iso_string
from src.common.utils.file_writer import atomic_write, ensure_dir

logger = logging.getLogger(__name__)


class CustomerRepository:
    """Append-only customer registry backed by one JSON file.

    The whole list is rewritten on every add. There is no locking, so only
    one process may own a data directory at a time.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self.photo_dir = os.path.join(data_dir, ID_PHOTOS_DIR)
        self.file_path = os.path.join(data_dir, CUSTOMERS_FILE)
        self.customers: List[Customer] = []

        ensure_dir(self.data_dir)
        ensure_dir(self.photo_dir)
        self.load_customers()

    def load_customers(self):
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.info(f"No customer file at {self.file_path}, starting empty")
            self.customers = []
            return
        except OSError as err:
            logger.error(f"Error reading customers from {self.file_path}: {err}")
            raise StorageError(self.file_path, "read", str(err)) from err

        try:
            items = json.loads(raw) if raw.strip() else []
        except json.JSONDecodeError as err:
            raise CustomerStoreCorrupted(self.file_path, str(err)) from err
        # older files hold `null` for an empty list
        if items is None:
            items = []
        if not isinstance(items, list):
            raise CustomerStoreCorrupted(self.file_path, "expected a list of customers")

        customers = []
        for index, item in enumerate(items):
            try:
                customers.append(self._to_domain(item))
            except (KeyError, TypeError, ValueError) as err:
                raise CustomerStoreCorrupted(
                    self.file_path, f"record {index}: {err!r}"
                ) from err

        self.customers = customers
        logger.info(f"Loaded {len(customers)} customers from {self.file_path}")

    def save_customers(self):
        data = json.dumps(
            [self._to_item(c) for c in self.customers], indent=2, ensure_ascii=False
        )
        atomic_write(self.file_path, data.encode("utf-8"))

    def add_customer(self, customer: Customer):
        if self.get_by_id(customer.customer_id) is not None:
            raise ValueError(f"customer id {customer.customer_id} already exists")

        self.customers.append(customer)
        try:
            self.save_customers()
        except StorageError as err:
            self.customers.pop()
            logger.error(f"Error saving customer {customer.customer_id}: {err}")
            raise

        logger.info(f"Saved customer {customer.customer_id}")

    def get_customers(self) -> List[Customer]:
        return list(self.customers)

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        for customer in self.customers:
            if customer.customer_id == customer_id:
                return customer
        return None

    def next_customer_id(self) -> str:
        return f"CUST{len(self.customers) + 1}"

    @staticmethod
    def _to_item(customer: Customer) -> dict:
        return {
            "id": customer.customer_id,
            "name": customer.name,
            "address": customer.address,
            "phone": customer.phone,
            "gov_id_type": customer.gov_id_type.value,
            "gov_id_number": customer.gov_id_number,
            "gov_id_photo_path": customer.gov_id_photo_path,
            "added_on": to_iso_string(customer.added_on),
        }

    @staticmethod
    def _to_domain(item: dict) -> Customer:
        return Customer(
            customer_id=item["id"],
            name=item["name"],
            address=item["address"],
            phone=item["phone"],
            gov_id_type=GovIDType(item["gov_id_type"]),
            gov_id_number=item["gov_id_number"],
            gov_id_photo_path=item["gov_id_photo_path"],
            added_on=from_iso_string(item["added_on"]),
        )
