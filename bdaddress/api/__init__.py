"""
Record models for bdaddress.

Shapes exchanged with the storage layer and the select inputs.
"""
from bdaddress.api.models import (
    AddressRecord,
    AddressType,
    LocationOption,
    StoredAddress,
)

__all__ = [
    "AddressRecord",
    "AddressType",
    "LocationOption",
    "StoredAddress",
]
