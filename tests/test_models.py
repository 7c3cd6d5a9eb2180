"""Tests for the storage-facing pydantic models."""

import pytest
from pydantic import ValidationError

from bdaddress.api.models import AddressRecord, AddressType, StoredAddress


VALID = {
    "division": "DHAKA",
    "district": "301",
    "upazila": "30102",
    "addressLine": "House 12, Road 5",
}


class TestAddressRecord:
    def test_lenient_defaults(self):
        record = AddressRecord()
        assert (record.division, record.district, record.upazila) == ("", "", "")

    def test_coerces_numbers_and_none(self):
        record = AddressRecord(division=None, district=301, upazila=30102)
        assert record.division == ""
        assert record.district == "301"
        assert record.upazila == "30102"

    def test_whole_floats_become_integer_text(self):
        record = AddressRecord(division="DHAKA", district=301.0, upazila=30102.0)
        assert (record.district, record.upazila) == ("301", "30102")

    def test_accepts_unknown_division(self):
        assert AddressRecord(division="NOTAREALDIVISION").division == "NOTAREALDIVISION"

    def test_extra_fields_kept(self):
        record = AddressRecord(division="DHAKA", postalCode="1330")
        assert record.model_extra["postalCode"] == "1330"


class TestStoredAddress:
    def test_valid(self):
        stored = StoredAddress(**VALID)
        assert stored.type == AddressType.SHIPPING
        assert stored.postal_code is None
        assert not stored.is_default

    def test_python_names_accepted(self):
        stored = StoredAddress(
            division="SYLHET", district="804", upazila="80412",
            address_line="Zindabazar", postal_code="3100", is_default=True,
        )
        assert stored.to_storage()["isDefault"] is True
        assert stored.to_storage()["addressLine"] == "Zindabazar"

    @pytest.mark.parametrize("division", ["Dhaka", "", "3", "NOTAREALDIVISION"])
    def test_division_must_be_storage_name(self, division):
        with pytest.raises(ValidationError):
            StoredAddress(**{**VALID, "division": division})

    @pytest.mark.parametrize("field", ["district", "upazila"])
    def test_hierarchy_ids_required(self, field):
        with pytest.raises(ValidationError):
            StoredAddress(**{**VALID, field: "  "})

    def test_blank_address_line_rejected(self):
        with pytest.raises(ValidationError):
            StoredAddress(**{**VALID, "addressLine": "   "})

    @pytest.mark.parametrize("postal_code", ["1330", " 1000 "])
    def test_postal_code_valid(self, postal_code):
        assert StoredAddress(**VALID, postalCode=postal_code).postal_code == postal_code.strip()

    @pytest.mark.parametrize("postal_code", ["133", "13300", "13a0"])
    def test_postal_code_invalid(self, postal_code):
        with pytest.raises(ValidationError):
            StoredAddress(**VALID, postalCode=postal_code)

    @pytest.mark.parametrize("phone", ["+8801712345678", "01712345678", "8801912345678", "017-1234-5678"])
    def test_phone_valid(self, phone):
        assert StoredAddress(**VALID, phone=phone).phone is not None

    @pytest.mark.parametrize("phone", ["+8801234567", "01212345678", "12345"])
    def test_phone_invalid(self, phone):
        with pytest.raises(ValidationError):
            StoredAddress(**VALID, phone=phone)

    def test_billing_type(self):
        assert StoredAddress(**VALID, type="BILLING").to_storage()["type"] == "BILLING"
