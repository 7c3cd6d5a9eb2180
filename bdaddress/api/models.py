"""
Pydantic models for the address record shapes exchanged with storage and UI.
"""
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bdaddress.data.bangladesh import DIVISION_NAMES

POSTAL_CODE_PATTERN = re.compile(r"^\d{4}$")
BD_MOBILE_PATTERN = re.compile(r"^(?:\+?880|0)1[3-9]\d{8}$")


class AddressType(str, Enum):
    SHIPPING = "SHIPPING"
    BILLING = "BILLING"


class AddressRecord(BaseModel):
    """
    Hierarchy fields as the storage layer keeps them.

    division is the uppercase division name; district and upazila are ids.
    No validation beyond types: stale or malformed values are the
    reconciler's problem to degrade, not to reject.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    division: str = Field(default="", description="Division storage name, e.g. 'DHAKA'")
    district: str = Field(default="", description="District id, e.g. '301'")
    upazila: str = Field(default="", description="Upazila id, e.g. '30102'")

    @field_validator("division", "district", "upazila", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value


class StoredAddress(AddressRecord):
    """A full address as accepted by the storage layer's validation rules."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: AddressType = Field(default=AddressType.SHIPPING)
    first_name: Optional[str] = Field(default=None, alias="firstName", max_length=50)
    last_name: Optional[str] = Field(default=None, alias="lastName", max_length=50)
    address_line: str = Field(..., alias="addressLine", min_length=1, description="Street address")
    address_line2: Optional[str] = Field(default=None, alias="addressLine2")
    city: Optional[str] = Field(default=None)
    postal_code: Optional[str] = Field(default=None, alias="postalCode", description="4-digit postal code")
    phone: Optional[str] = Field(default=None, description="Bangladeshi mobile number")
    is_default: bool = Field(default=False, alias="isDefault")

    @field_validator("division")
    @classmethod
    def _division_in_enum(cls, value: str) -> str:
        if value not in DIVISION_NAMES:
            raise ValueError(f"division must be one of {', '.join(DIVISION_NAMES)}")
        return value

    @field_validator("district", "upazila")
    @classmethod
    def _required_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("address_line")
    @classmethod
    def _strip_line(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("postal_code")
    @classmethod
    def _postal_code(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        value = value.strip()
        if not POSTAL_CODE_PATTERN.match(value):
            raise ValueError("postal code must be exactly 4 digits")
        return value

    @field_validator("phone")
    @classmethod
    def _phone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        compact = re.sub(r"[\s-]", "", value)
        if not BD_MOBILE_PATTERN.match(compact):
            raise ValueError("phone must be a Bangladeshi mobile number, e.g. +8801712345678")
        return compact

    def to_storage(self) -> dict:
        """Serialize with the storage layer's camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class LocationOption(BaseModel):
    """One entry of a division/district/upazila select."""
    value: str = Field(description="Entity id")
    label: str = Field(description="Display name in the requested language")
