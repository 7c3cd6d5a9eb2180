"""
English/Bangla text for the address selects.

Usage:
    from bdaddress.core.i18n import translate, format_address

    translate("placeholder.district", lang="bn")   # "জেলা নির্বাচন করুন"
    format_address(selection, lang="en")           # "Dohar, Dhaka, Dhaka"
"""
from enum import Enum
from typing import Dict, Iterable, List, Optional

from bdaddress.api.models import LocationOption
from bdaddress.core.hierarchy import AddressSelection, require_selection
from bdaddress.data.reference_store import Division, Entity, ReferenceDataStore, get_reference_store


class Language(Enum):
    """Supported languages."""
    ENGLISH = "en"
    BANGLA = "bn"


HIERARCHY_FIELDS = ("division", "district", "upazila")

TRANSLATIONS = {
    # Field labels
    "label.division": {"en": "Division", "bn": "বিভাগ"},
    "label.district": {"en": "District", "bn": "জেলা"},
    "label.upazila": {"en": "Upazila", "bn": "উপজেলা"},

    # Select placeholders
    "placeholder.division": {"en": "Select division", "bn": "বিভাগ নির্বাচন করুন"},
    "placeholder.district": {"en": "Select district", "bn": "জেলা নির্বাচন করুন"},
    "placeholder.upazila": {"en": "Select upazila", "bn": "উপজেলা নির্বাচন করুন"},

    # Required-field messages
    "required.division": {"en": "Division is required", "bn": "বিভাগ প্রয়োজনীয়"},
    "required.district": {"en": "District is required", "bn": "জেলা প্রয়োজনীয়"},
    "required.upazila": {"en": "Upazila is required", "bn": "উপজেলা প্রয়োজনীয়"},
}


def normalize_language(lang: Optional[str]) -> str:
    """Return "en" or "bn"; anything else falls back to English."""
    if not lang:
        return Language.ENGLISH.value
    code = lang.lower()[:2]
    if code == Language.BANGLA.value:
        return code
    return Language.ENGLISH.value


def translate(key: str, lang: str = "en", default: Optional[str] = None) -> str:
    """
    Translate a key to the specified language.

    Missing languages fall back to English; missing keys to `default`
    (or the key itself).
    """
    translation_dict = TRANSLATIONS.get(key, {})
    return translation_dict.get(normalize_language(lang), translation_dict.get("en", default or key))


def location_label(entity: Entity, lang: str = "en") -> str:
    """Display name of a division/district/upazila."""
    if normalize_language(lang) == Language.BANGLA.value:
        return entity.name_local
    if isinstance(entity, Division):
        return entity.title
    return entity.name


def location_options(entities: Iterable[Entity], lang: str = "en") -> List[LocationOption]:
    """Options for a select input, in the order given."""
    return [LocationOption(value=entity.id, label=location_label(entity, lang)) for entity in entities]


def field_texts(lang: str = "en") -> Dict[str, Dict[str, str]]:
    """Label and placeholder for each hierarchy field."""
    return {
        field: {
            "label": translate(f"label.{field}", lang),
            "placeholder": translate(f"placeholder.{field}", lang),
        }
        for field in HIERARCHY_FIELDS
    }


def format_address(
    selection: AddressSelection,
    lang: str = "en",
    store: Optional[ReferenceDataStore] = None,
) -> str:
    """
    One-line location, most specific level first: "Dohar, Dhaka, Dhaka".

    Unset or unknown levels are skipped.
    """
    require_selection(selection)
    store = store or get_reference_store()

    parts = [
        store.get_upazila_by_id(selection.upazila_id),
        store.get_district_by_id(selection.district_id),
        store.get_division_by_id(selection.division_id),
    ]
    return ", ".join(location_label(entity, lang) for entity in parts if entity is not None)
