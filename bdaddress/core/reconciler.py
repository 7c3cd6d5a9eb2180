"""
Translation between the stored address representation and AddressSelection.

Storage keeps the division by its uppercase name and the district and
upazila by id. Forms work with ids at every level. This module is the only
place that crosses between the two.

Degraded input never raises: an unknown division name, an unknown id or a
child that does not belong to the resolved parent is left unset, so the
form asks the user to pick again instead of silently showing a wrong
location.
"""
from typing import Any, Dict, Mapping, Optional

from bdaddress.core.config import AddressConfig, get_config
from bdaddress.core.errors import AddressContractError
from bdaddress.core.hierarchy import AddressSelection, clean_id, require_selection
from bdaddress.data.reference_store import ReferenceDataStore, get_reference_store
from bdaddress.utils.logger import get_logger

logger = get_logger("core.reconciler")


def _read_field(record: Any, name: str) -> Optional[str]:
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return clean_id(value)


class AddressReconciler:
    """Converts persisted address records to selections and back."""

    def __init__(self, store: Optional[ReferenceDataStore] = None, config: Optional[AddressConfig] = None):
        self.store = store or get_reference_store()
        self.config = config or get_config()

    def from_persisted_record(self, record: Any) -> AddressSelection:
        """
        Build a consistent selection from a stored record.

        Args:
            record: Mapping, AddressRecord, or any object with
                division/district/upazila attributes

        Returns:
            AddressSelection with each level set only if it exists and its
            parent link to the resolved level above holds
        """
        if record is None:
            raise AddressContractError("Persisted record must not be None")

        division_name = _read_field(record, "division")
        district_id = _read_field(record, "district")
        upazila_id = _read_field(record, "upazila")

        division_id = self.store.get_division_id_by_name(division_name, aliases=self.config.match_aliases)
        if division_id is None:
            if division_name is not None:
                logger.debug(f"Unknown division name {division_name!r}; leaving address unset")
            return AddressSelection()

        district = self.store.get_district_by_id(district_id)
        if district is None or district.division_id != division_id:
            if district_id is not None:
                logger.debug(
                    f"District {district_id!r} does not belong to division {division_id!r}; "
                    f"clearing district and upazila"
                )
            return AddressSelection(division_id=division_id)

        upazila = self.store.get_upazila_by_id(upazila_id)
        if upazila is None or upazila.district_id != district.id:
            if upazila_id is not None:
                logger.debug(
                    f"Upazila {upazila_id!r} does not belong to district {district.id!r}; clearing upazila"
                )
            return AddressSelection(division_id=division_id, district_id=district.id)

        return AddressSelection(division_id=division_id, district_id=district.id, upazila_id=upazila.id)

    def to_persisted_record(self, selection: AddressSelection) -> Dict[str, str]:
        """
        Convert a selection to the stored representation.

        division is always one of the storage enum names or "".
        """
        require_selection(selection)

        division = self.store.get_division_by_id(selection.division_id)
        return {
            "division": division.name.upper() if division else "",
            "district": selection.district_id or "",
            "upazila": selection.upazila_id or "",
        }
