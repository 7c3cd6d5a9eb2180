"""
Tests for HierarchyValidator: cascade-clearing, candidate lists and the
consistency invariant.
"""

import random

import pytest

from bdaddress.core.errors import AddressContractError
from bdaddress.core.hierarchy import AddressSelection, clean_id


FULL_DHAKA = AddressSelection(division_id="3", district_id="301", upazila_id="30102")


class TestSetDivision:
    def test_same_division_keeps_children(self, validator):
        assert validator.set_division(FULL_DHAKA, "3") == FULL_DHAKA

    def test_different_division_clears_children(self, validator):
        result = validator.set_division(FULL_DHAKA, "2")
        assert result == AddressSelection(division_id="2")

    def test_clearing_division_clears_everything(self, validator):
        assert validator.set_division(FULL_DHAKA, None) == AddressSelection()
        assert validator.set_division(FULL_DHAKA, "") == AddressSelection()

    def test_unknown_division_leaves_selection_unset(self, validator):
        assert validator.set_division(FULL_DHAKA, "42") == AddressSelection()

    def test_from_empty(self, validator):
        assert validator.set_division(AddressSelection(), "5") == AddressSelection(division_id="5")

    def test_does_not_mutate_input(self, validator):
        before = AddressSelection(division_id="3", district_id="301")
        validator.set_division(before, "4")
        assert before == AddressSelection(division_id="3", district_id="301")


class TestSetDistrict:
    def test_same_district_keeps_upazila(self, validator):
        assert validator.set_district(FULL_DHAKA, "301") == FULL_DHAKA

    def test_different_district_clears_upazila(self, validator):
        result = validator.set_district(FULL_DHAKA, "303")
        assert result == AddressSelection(division_id="3", district_id="303")

    def test_district_does_not_alter_division(self, validator):
        result = validator.set_district(AddressSelection(division_id="3"), "313")
        assert result.division_id == "3"

    def test_district_outside_division_rejected(self, validator):
        result = validator.set_district(FULL_DHAKA, "204")
        assert result == AddressSelection(division_id="3")

    def test_district_without_division_rejected(self, validator):
        assert validator.set_district(AddressSelection(), "301") == AddressSelection()

    def test_clearing_district_clears_upazila(self, validator):
        assert validator.set_district(FULL_DHAKA, "") == AddressSelection(division_id="3")


class TestSetUpazila:
    def test_sets_leaf_only(self, validator):
        selection = AddressSelection(division_id="3", district_id="301")
        result = validator.set_upazila(selection, "30105")
        assert result == AddressSelection(division_id="3", district_id="301", upazila_id="30105")

    def test_upazila_outside_district_rejected(self, validator):
        result = validator.set_upazila(FULL_DHAKA, "20401")
        assert result == AddressSelection(division_id="3", district_id="301")

    def test_clear_upazila(self, validator):
        assert validator.set_upazila(FULL_DHAKA, None).upazila_id is None


class TestCandidates:
    def test_no_division_no_districts(self, validator):
        assert validator.candidate_districts(AddressSelection()) == []

    def test_no_district_no_upazilas(self, validator):
        assert validator.candidate_upazilas(AddressSelection(division_id="3")) == []

    def test_candidate_districts_match_division(self, validator, store):
        for division in store.divisions():
            selection = AddressSelection(division_id=division.id)
            candidates = validator.candidate_districts(selection)
            expected = [d for d in store.districts() if d.division_id == division.id]
            assert candidates == expected

    def test_candidate_upazilas(self, validator):
        names = [u.name for u in validator.candidate_upazilas(FULL_DHAKA)]
        assert names == ["Dhamrai", "Dohar", "Keraniganj", "Nawabganj", "Savar", "Dhaka Sadar"]

    def test_candidate_divisions(self, validator):
        assert len(validator.candidate_divisions()) == 8


class TestConsistency:
    def test_empty_is_consistent(self, validator):
        assert validator.is_consistent(AddressSelection())

    def test_full_valid_is_consistent(self, validator):
        assert validator.is_consistent(FULL_DHAKA)

    def test_cross_division_inconsistent(self, validator):
        assert not validator.is_consistent(AddressSelection(division_id="2", district_id="301"))

    def test_orphan_child_inconsistent(self, validator):
        assert not validator.is_consistent(AddressSelection(district_id="301"))
        assert not validator.is_consistent(AddressSelection(division_id="3", upazila_id="30102"))

    def test_unknown_id_inconsistent(self, validator):
        assert not validator.is_consistent(AddressSelection(division_id="99"))

    def test_random_edit_sequences_stay_consistent(self, validator, store):
        rng = random.Random(20240611)
        division_ids = [d.id for d in store.divisions()] + [None, "", "99"]
        district_ids = [d.id for d in store.districts()] + [None, "", "999"]
        upazila_ids = [u.id for u in store.upazilas()] + [None, "", "99999"]

        selection = AddressSelection()
        for _ in range(2000):
            step = rng.randrange(3)
            if step == 0:
                selection = validator.set_division(selection, rng.choice(division_ids))
            elif step == 1:
                # bias towards valid children so deep selections are reached
                children = validator.candidate_districts(selection)
                pick = rng.choice(children).id if children and rng.random() < 0.7 else rng.choice(district_ids)
                selection = validator.set_district(selection, pick)
            else:
                children = validator.candidate_upazilas(selection)
                pick = rng.choice(children).id if children and rng.random() < 0.7 else rng.choice(upazila_ids)
                selection = validator.set_upazila(selection, pick)
            assert validator.is_consistent(selection), selection


class TestContract:
    @pytest.mark.parametrize("method", ["set_division", "set_district", "set_upazila"])
    def test_none_selection_raises(self, validator, method):
        with pytest.raises(AddressContractError):
            getattr(validator, method)(None, "3")

    def test_dict_selection_raises(self, validator):
        with pytest.raises(AddressContractError):
            validator.is_consistent({"division_id": "3"})

    def test_contract_error_is_type_error(self, validator):
        with pytest.raises(TypeError):
            validator.candidate_districts(None)


class TestAddressSelection:
    def test_flags(self):
        assert AddressSelection().is_empty
        assert not AddressSelection().is_complete
        assert FULL_DHAKA.is_complete
        assert not FULL_DHAKA.is_empty

    def test_as_dict(self):
        assert FULL_DHAKA.as_dict() == {"division_id": "3", "district_id": "301", "upazila_id": "30102"}


class TestCleanId:
    @pytest.mark.parametrize("value,expected", [
        (None, None),
        ("", None),
        ("  ", None),
        (" 301 ", "301"),
        (301, "301"),
        (30102.0, "30102"),
        (301.5, "301.5"),
    ])
    def test_clean_id(self, value, expected):
        assert clean_id(value) == expected

    def test_whole_float_id_is_selectable(self, validator):
        selection = validator.set_division(AddressSelection(), 3.0)
        selection = validator.set_district(selection, 301.0)
        selection = validator.set_upazila(selection, 30102.0)
        assert selection == FULL_DHAKA
