import os

from pydantic import BaseModel, ValidationInfo, field_validator

from src.common.models.customers import GovIDType
from src.common.utils.constants import ALLOWED_PHOTO_EXTENSIONS


class CustomerRequest(BaseModel):
    name: str
    address: str
    phone: str
    gov_id_type: GovIDType
    gov_id_number: str
    photo_source: str

    @field_validator(
        "name", "address", "phone", "gov_id_number", "photo_source", mode="before"
    )
    @classmethod
    def require_text(cls, v, info: ValidationInfo):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError(f"{info.field_name} is required")
        return v.strip() if isinstance(v, str) else v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str):
        if not v.isdigit():
            raise ValueError("phone must contain digits only")
        return v

    @field_validator("photo_source")
    @classmethod
    def validate_photo(cls, v: str):
        ext = os.path.splitext(v)[1].lower()
        if ext not in ALLOWED_PHOTO_EXTENSIONS:
            allowed = ", ".join(ALLOWED_PHOTO_EXTENSIONS)
            raise ValueError(f"ID photo must be one of: {allowed}")
        if not os.path.isfile(v):
            raise ValueError(f"ID photo '{v}' does not exist")
        return v
