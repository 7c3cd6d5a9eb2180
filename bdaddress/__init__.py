"""
bdaddress - Bangladesh administrative address hierarchy

Division -> District -> Upazila reference data with:
- Case-insensitive name/id lookups
- Cascading validation for dependent selects
- Reconciliation with the stored (division-as-name, others-as-id) records
"""

from bdaddress.core.config import AddressConfig, get_config, set_config
from bdaddress.core.errors import AddressContractError, IncompleteAddressError, ReferenceDataError
from bdaddress.core.form import AddressFormState, CandidateLists
from bdaddress.core.hierarchy import AddressSelection, HierarchyValidator
from bdaddress.core.reconciler import AddressReconciler
from bdaddress.data.reference_store import (
    District,
    Division,
    ReferenceDataStore,
    Upazila,
    get_reference_store,
    set_reference_store,
)

__all__ = [
    'AddressConfig',
    'get_config',
    'set_config',
    'AddressContractError',
    'IncompleteAddressError',
    'ReferenceDataError',
    'AddressFormState',
    'CandidateLists',
    'AddressSelection',
    'HierarchyValidator',
    'AddressReconciler',
    'Division',
    'District',
    'Upazila',
    'ReferenceDataStore',
    'get_reference_store',
    'set_reference_store',
]

__version__ = '0.1.0'
