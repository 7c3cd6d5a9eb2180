"""
Hierarchy validator for the three dependent address selects.

An AddressSelection holds all-id values. The setters keep it consistent:
a district must belong to the selected division and an upazila to the
selected district. Changing a parent to a value that no longer supports
the child clears the child (cascade-clear); nothing else clears a field.

Cascade-clearing belongs to explicit user edits only. Loading an existing
record goes through AddressReconciler.from_persisted_record, which builds
the whole selection in one step (see bdaddress.core.form for the
hydration gate).
"""
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from bdaddress.core.errors import AddressContractError
from bdaddress.data.reference_store import (
    District,
    Division,
    ReferenceDataStore,
    Upazila,
    get_reference_store,
)
from bdaddress.utils.logger import get_logger

logger = get_logger("core.hierarchy")


@dataclass(frozen=True)
class AddressSelection:
    """Per-form selection; every field is an id or None."""
    division_id: Optional[str] = None
    district_id: Optional[str] = None
    upazila_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.division_id is None and self.district_id is None and self.upazila_id is None

    @property
    def is_complete(self) -> bool:
        return None not in (self.division_id, self.district_id, self.upazila_id)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "division_id": self.division_id,
            "district_id": self.district_id,
            "upazila_id": self.upazila_id,
        }


def clean_id(value) -> Optional[str]:
    """Normalize an incoming id: None, '' and whitespace become None; 30102.0 becomes "30102"."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def require_selection(selection) -> AddressSelection:
    if not isinstance(selection, AddressSelection):
        raise AddressContractError(
            f"Expected AddressSelection, got {type(selection).__name__}"
        )
    return selection


class HierarchyValidator:
    """Cascading setters and candidate lists over a ReferenceDataStore."""

    def __init__(self, store: Optional[ReferenceDataStore] = None):
        self.store = store or get_reference_store()

    # ─── Setters ─────────────────────────────────────────────────────────

    def set_division(self, selection: AddressSelection, division_id: Optional[str]) -> AddressSelection:
        """
        Select a division.

        Clears district and upazila unless the current district belongs to
        the new division. An unknown division id leaves the whole selection
        unset.
        """
        require_selection(selection)
        new_id = clean_id(division_id)

        if new_id is None or self.store.get_division_by_id(new_id) is None:
            if new_id is not None:
                logger.debug(f"Unknown division id {new_id!r}; clearing selection")
            return AddressSelection()

        district = self.store.get_district_by_id(selection.district_id)
        if district is not None and district.division_id == new_id:
            return replace(selection, division_id=new_id)

        return AddressSelection(division_id=new_id)

    def set_district(self, selection: AddressSelection, district_id: Optional[str]) -> AddressSelection:
        """
        Select a district under the current division.

        Clears the upazila unless it belongs to the new district. A district
        that is unknown or outside the selected division is not accepted:
        district and upazila are left unset.
        """
        require_selection(selection)
        new_id = clean_id(district_id)

        district = self.store.get_district_by_id(new_id)
        if district is None or district.division_id != selection.division_id:
            if new_id is not None:
                logger.debug(
                    f"District {new_id!r} is not a child of division {selection.division_id!r}; clearing"
                )
            return replace(selection, district_id=None, upazila_id=None)

        upazila = self.store.get_upazila_by_id(selection.upazila_id)
        if upazila is not None and upazila.district_id == new_id:
            return replace(selection, district_id=new_id)

        return replace(selection, district_id=new_id, upazila_id=None)

    def set_upazila(self, selection: AddressSelection, upazila_id: Optional[str]) -> AddressSelection:
        """Select an upazila (leaf level, no cascade)."""
        require_selection(selection)
        new_id = clean_id(upazila_id)

        upazila = self.store.get_upazila_by_id(new_id)
        if upazila is None or upazila.district_id != selection.district_id:
            if new_id is not None:
                logger.debug(
                    f"Upazila {new_id!r} is not a child of district {selection.district_id!r}; clearing"
                )
            return replace(selection, upazila_id=None)

        return replace(selection, upazila_id=new_id)

    # ─── Candidate lists ─────────────────────────────────────────────────

    def candidate_divisions(self) -> List[Division]:
        return self.store.divisions()

    def candidate_districts(self, selection: AddressSelection) -> List[District]:
        require_selection(selection)
        return self.store.get_districts_by_division(selection.division_id)

    def candidate_upazilas(self, selection: AddressSelection) -> List[Upazila]:
        require_selection(selection)
        return self.store.get_upazilas_by_district(selection.district_id)

    # ─── Consistency ─────────────────────────────────────────────────────

    def is_consistent(self, selection: AddressSelection) -> bool:
        """True iff every set field exists and links to the selected parent."""
        require_selection(selection)

        if selection.division_id is not None and self.store.get_division_by_id(selection.division_id) is None:
            return False

        if selection.district_id is not None:
            district = self.store.get_district_by_id(selection.district_id)
            if district is None or district.division_id != selection.division_id:
                return False

        if selection.upazila_id is not None:
            upazila = self.store.get_upazila_by_id(selection.upazila_id)
            if upazila is None or upazila.district_id != selection.district_id:
                return False

        return True
