"""
Form-side state for the three dependent address selects.

Loading an existing address and editing one are different events:

- hydrate(record) sets all three levels at once from the stored record
  and marks the form as hydrating.
- While hydrating, change_* calls are ignored. Select widgets echo values
  back (often "" before their option list is filled) while the first
  render is in flight, and treating those echoes as edits is what wiped
  correctly loaded districts and upazilas.
- confirm_render(lists) ends hydration once a render has produced
  candidate lists for the current selection that contain every selected
  value. There is no timer: hydration ends on that event and nothing else.

After hydration, change_* go through the cascading HierarchyValidator
setters.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bdaddress.api.models import StoredAddress
from bdaddress.core.config import AddressConfig, get_config
from bdaddress.core.errors import IncompleteAddressError
from bdaddress.core.hierarchy import AddressSelection, HierarchyValidator
from bdaddress.core.i18n import HIERARCHY_FIELDS, translate
from bdaddress.core.reconciler import AddressReconciler
from bdaddress.data.reference_store import (
    District,
    Division,
    ReferenceDataStore,
    Upazila,
    get_reference_store,
)
from bdaddress.utils.logger import get_logger

logger = get_logger("core.form")


@dataclass(frozen=True)
class CandidateLists:
    """Options for each select, computed for one specific selection."""
    selection: AddressSelection
    divisions: List[Division] = field(default_factory=list)
    districts: List[District] = field(default_factory=list)
    upazilas: List[Upazila] = field(default_factory=list)

    def contains_selection(self) -> bool:
        """True if every selected id appears in its level's list."""
        checks = (
            (self.selection.division_id, self.divisions),
            (self.selection.district_id, self.districts),
            (self.selection.upazila_id, self.upazilas),
        )
        for selected_id, entities in checks:
            if selected_id is not None and selected_id not in {e.id for e in entities}:
                return False
        return True


class AddressFormState:
    """Selection plus the explicit hydration flag for one address form."""

    def __init__(
        self,
        store: Optional[ReferenceDataStore] = None,
        config: Optional[AddressConfig] = None,
    ):
        self.store = store or get_reference_store()
        self.config = config or get_config()
        self.validator = HierarchyValidator(self.store)
        self.reconciler = AddressReconciler(self.store, self.config)
        self._selection = AddressSelection()
        self._hydrating = False

    @property
    def selection(self) -> AddressSelection:
        return self._selection

    @property
    def hydrating(self) -> bool:
        return self._hydrating

    # ─── Loading ─────────────────────────────────────────────────────────

    def hydrate(self, record: Any) -> AddressSelection:
        """Apply a stored record to all three fields at once and start hydration."""
        self._selection = self.reconciler.from_persisted_record(record)
        self._hydrating = True
        logger.debug(f"Hydrating address form with {self._selection.as_dict()}")
        return self._selection

    def candidate_lists(self) -> CandidateLists:
        """Compute the options for the current selection (one render's worth)."""
        selection = self._selection
        return CandidateLists(
            selection=selection,
            divisions=self.validator.candidate_divisions(),
            districts=self.validator.candidate_districts(selection),
            upazilas=self.validator.candidate_upazilas(selection),
        )

    def confirm_render(self, lists: CandidateLists) -> bool:
        """
        Report a completed render.

        Ends hydration if `lists` were computed for the current selection
        and contain every selected value. Returns True once the form is
        stable (not hydrating).
        """
        if not self._hydrating:
            return True

        if lists.selection != self._selection:
            logger.debug("Render confirmed stale candidate lists; still hydrating")
            return False

        if not lists.contains_selection():
            logger.debug("Candidate lists do not yet cover the loaded selection; still hydrating")
            return False

        self._hydrating = False
        logger.debug("Address form hydration complete")
        return True

    # ─── User edits ──────────────────────────────────────────────────────

    def _ignored_during_hydration(self, field_name: str, value: Optional[str]) -> bool:
        if self._hydrating:
            logger.debug(f"Ignoring {field_name} change to {value!r} while hydrating")
            return True
        return False

    def change_division(self, division_id: Optional[str]) -> AddressSelection:
        """
        Apply a user division edit through the cascading setter.

        Ignored while hydrating, including genuine user edits: the UI must
        call confirm_render after each render so hydration can end and
        edits take effect.
        """
        if not self._ignored_during_hydration("division", division_id):
            self._selection = self.validator.set_division(self._selection, division_id)
        return self._selection

    def change_district(self, district_id: Optional[str]) -> AddressSelection:
        """Apply a user district edit. Ignored while hydrating (see change_division)."""
        if not self._ignored_during_hydration("district", district_id):
            self._selection = self.validator.set_district(self._selection, district_id)
        return self._selection

    def change_upazila(self, upazila_id: Optional[str]) -> AddressSelection:
        """Apply a user upazila edit. Ignored while hydrating (see change_division)."""
        if not self._ignored_during_hydration("upazila", upazila_id):
            self._selection = self.validator.set_upazila(self._selection, upazila_id)
        return self._selection

    def reset(self) -> None:
        self._selection = AddressSelection()
        self._hydrating = False

    # ─── Submit ──────────────────────────────────────────────────────────

    def missing_fields(self, lang: Optional[str] = None) -> Dict[str, str]:
        """Required-field messages for every unset hierarchy level."""
        lang = lang or self.config.default_language
        values = {
            "division": self._selection.division_id,
            "district": self._selection.district_id,
            "upazila": self._selection.upazila_id,
        }
        return {
            field_name: translate(f"required.{field_name}", lang)
            for field_name in HIERARCHY_FIELDS
            if values[field_name] is None
        }

    def submit(self, lang: Optional[str] = None, **details: Any) -> StoredAddress:
        """
        Build the stored address for the current selection.

        Args:
            lang: Language for missing-field messages
            **details: Non-hierarchy fields (address_line/addressLine, postal_code, phone, ...)

        Raises:
            IncompleteAddressError: a hierarchy level is unset
            pydantic.ValidationError: other fields break the storage rules
        """
        errors = self.missing_fields(lang)
        if errors:
            raise IncompleteAddressError(errors)

        record = self.reconciler.to_persisted_record(self._selection)
        return StoredAddress(**{**details, **record})
