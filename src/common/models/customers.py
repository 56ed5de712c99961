from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime, timezone


class GovIDType(str, Enum):
    AADHAAR = "Aadhaar Card"
    PAN = "PAN Card"
    DRIVING_LICENSE = "Driving License"
    PASSPORT = "Passport"
    VOTER_ID = "Voter ID"


@dataclass(frozen=True)
class Customer:
    customer_id: str
    name: str
    address: str
    phone: str
    gov_id_type: GovIDType
    gov_id_number: str
    gov_id_photo_path: str
    added_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def label(self) -> str:
        return f"{self.customer_id} - {self.name} ({self.phone})"
