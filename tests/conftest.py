"""Pytest configuration for bdaddress tests."""

import pytest

from bdaddress.core.config import AddressConfig, set_config
from bdaddress.core.hierarchy import HierarchyValidator
from bdaddress.core.reconciler import AddressReconciler
from bdaddress.data.reference_store import ReferenceDataStore, set_reference_store


# ---------------------------------------------------------------------------
# Config and reference store are module-level globals; isolate them per test.
# Reset both around every test so a YAML override or custom store set in one
# test never leaks into the next.
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function", autouse=True)
def _isolate_singletons(monkeypatch):
    monkeypatch.delenv("BDADDRESS_REFERENCE_DATA", raising=False)
    set_config(AddressConfig())
    set_reference_store(None)
    yield
    set_config(None)
    set_reference_store(None)


@pytest.fixture(scope="session")
def store():
    return ReferenceDataStore.default()


@pytest.fixture
def validator(store):
    return HierarchyValidator(store)


@pytest.fixture
def reconciler(store):
    return AddressReconciler(store, AddressConfig())
