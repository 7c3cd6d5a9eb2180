"""
Tests for AddressFormState: hydration gate, cascading edits and submit.

The hydration scenarios reproduce the "values vanish right after loading"
defect: select widgets echo empty values while their options are still
being computed, and those echoes must not clear a correctly loaded address.
"""

import asyncio

import pytest
from pydantic import ValidationError

from bdaddress.api.models import StoredAddress
from bdaddress.core.config import AddressConfig
from bdaddress.core.errors import IncompleteAddressError
from bdaddress.core.form import AddressFormState, CandidateLists
from bdaddress.core.hierarchy import AddressSelection


DHAKA_RECORD = {"division": "DHAKA", "district": "301", "upazila": "30102"}
DHAKA_SELECTION = AddressSelection(division_id="3", district_id="301", upazila_id="30102")


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def form(store):
    return AddressFormState(store, AddressConfig())


class TestHydration:
    def test_hydrate_sets_all_levels_at_once(self, form):
        assert form.hydrate(DHAKA_RECORD) == DHAKA_SELECTION
        assert form.selection == DHAKA_SELECTION
        assert form.hydrating

    def test_fresh_form_is_not_hydrating(self, form):
        assert not form.hydrating
        assert form.selection == AddressSelection()

    def test_render_confirmation_ends_hydration(self, form):
        form.hydrate(DHAKA_RECORD)
        assert form.confirm_render(form.candidate_lists())
        assert not form.hydrating
        assert form.selection == DHAKA_SELECTION

    def test_echoed_changes_ignored_while_hydrating(self, form):
        form.hydrate(DHAKA_RECORD)
        form.change_district("")
        form.change_upazila("")
        form.change_division("")
        assert form.selection == DHAKA_SELECTION
        assert form.hydrating

    def test_user_edit_takes_effect_only_after_render_confirmed(self, form):
        form.hydrate(DHAKA_RECORD)
        form.change_division("8")
        assert form.selection == DHAKA_SELECTION

        form.confirm_render(form.candidate_lists())
        form.change_division("8")
        assert form.selection == AddressSelection(division_id="8")

    def test_stale_lists_do_not_end_hydration(self, form, store):
        form.hydrate({"division": "SYLHET", "district": "804", "upazila": "80401"})
        stale = CandidateLists(
            selection=AddressSelection(division_id="3"),
            divisions=store.divisions(),
            districts=store.get_districts_by_division("3"),
        )
        assert not form.confirm_render(stale)
        assert form.hydrating

    def test_partially_populated_lists_do_not_end_hydration(self, form, store):
        form.hydrate(DHAKA_RECORD)
        partial = CandidateLists(
            selection=DHAKA_SELECTION,
            divisions=store.divisions(),
            districts=store.get_districts_by_division("3"),
            upazilas=[],
        )
        assert not form.confirm_render(partial)
        assert form.hydrating
        assert form.confirm_render(form.candidate_lists())

    def test_degraded_record_hydrates_to_partial_selection(self, form):
        form.hydrate({"division": "CHITTAGONG", "district": "301", "upazila": "30102"})
        assert form.selection == AddressSelection(division_id="2")
        assert form.confirm_render(form.candidate_lists())

    def test_async_render_cycle_keeps_loaded_selection(self, form):
        """Candidate lists computed in the background while widgets echo empty values."""

        async def scenario():
            form.hydrate(DHAKA_RECORD)
            loop = asyncio.get_running_loop()
            pending = loop.run_in_executor(None, form.candidate_lists)

            # widgets report "" before their options arrive
            form.change_division("")
            form.change_district("")
            form.change_upazila("")
            await asyncio.sleep(0)

            lists = await pending
            return form.confirm_render(lists)

        assert run(scenario())
        assert not form.hydrating
        assert form.selection == DHAKA_SELECTION

    def test_confirm_render_when_idle(self, form):
        assert form.confirm_render(form.candidate_lists())


class TestEditing:
    def test_cascade_after_hydration(self, form):
        form.hydrate(DHAKA_RECORD)
        form.confirm_render(form.candidate_lists())

        form.change_division("2")
        assert form.selection == AddressSelection(division_id="2")

    def test_same_division_after_hydration_keeps_children(self, form):
        form.hydrate(DHAKA_RECORD)
        form.confirm_render(form.candidate_lists())

        form.change_division("3")
        assert form.selection == DHAKA_SELECTION

    def test_build_address_from_scratch(self, form):
        form.change_division("6")
        form.change_district("607")
        form.change_upazila("60709")
        assert form.selection == AddressSelection("6", "607", "60709")

    def test_reset(self, form):
        form.hydrate(DHAKA_RECORD)
        form.reset()
        assert form.selection == AddressSelection()
        assert not form.hydrating


class TestSubmit:
    def test_missing_fields_english(self, form):
        form.change_division("3")
        assert form.missing_fields() == {
            "district": "District is required",
            "upazila": "Upazila is required",
        }

    def test_missing_fields_bangla(self, form):
        errors = form.missing_fields("bn")
        assert errors["division"] == "বিভাগ প্রয়োজনীয়"
        assert set(errors) == {"division", "district", "upazila"}

    def test_missing_fields_default_language_from_config(self, store):
        form = AddressFormState(store, AddressConfig(default_language="bn"))
        assert form.missing_fields()["upazila"] == "উপজেলা প্রয়োজনীয়"

    def test_submit_incomplete_raises(self, form):
        form.change_division("3")
        with pytest.raises(IncompleteAddressError) as excinfo:
            form.submit(address_line="House 12, Road 5")
        assert set(excinfo.value.errors) == {"district", "upazila"}

    def test_submit_builds_stored_address(self, form):
        form.hydrate(DHAKA_RECORD)
        form.confirm_render(form.candidate_lists())

        stored = form.submit(addressLine="House 12, Road 5", postalCode="1330", phone="01712345678")
        assert isinstance(stored, StoredAddress)
        assert stored.division == "DHAKA"
        assert stored.district == "301"
        assert stored.upazila == "30102"
        assert stored.to_storage()["postalCode"] == "1330"

    def test_selection_wins_over_details(self, form):
        form.hydrate(DHAKA_RECORD)
        stored = form.submit(address_line="House 1", division="SYLHET")
        assert stored.division == "DHAKA"

    def test_submit_rejects_bad_postal_code(self, form):
        form.hydrate(DHAKA_RECORD)
        with pytest.raises(ValidationError):
            form.submit(address_line="House 1", postal_code="12345")
