"""
Read-only reference data for the Division -> District -> Upazila hierarchy.

The store is built once per process and shared by every form instance.
All tables are tuples or read-only mappings; list-returning methods hand
out fresh copies, so callers cannot mutate the hierarchy.

Lookup misses are normal results (None or an empty list), never exceptions:
persisted addresses may carry stale ids or unexpected spellings.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import yaml

from bdaddress.core.config import get_config
from bdaddress.core.errors import ReferenceDataError
from bdaddress.data import bangladesh
from bdaddress.utils.logger import get_logger

logger = get_logger("data.reference_store")


@dataclass(frozen=True)
class Division:
    id: str
    name: str
    name_local: str
    aliases: Tuple[str, ...] = ()

    @property
    def title(self) -> str:
        """Title-case display form of the uppercase storage name ("Dhaka")."""
        return self.name.title()


@dataclass(frozen=True)
class District:
    id: str
    name: str
    name_local: str
    division_id: str
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Upazila:
    id: str
    name: str
    name_local: str
    district_id: str
    aliases: Tuple[str, ...] = ()


Entity = Union[Division, District, Upazila]


def _normalize_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    text = str(name).strip()
    return text or None


def _first_match(entities: Iterable[Entity], name: str, aliases: bool) -> Optional[Entity]:
    """
    Resolve a name against entities in definition order.

    Passes: exact name, case-folded name, case-folded alias. The first
    entity matching in the earliest pass wins.
    """
    candidates = list(entities)
    for entity in candidates:
        if entity.name == name:
            return entity
    folded = name.casefold()
    for entity in candidates:
        if entity.name.casefold() == folded:
            return entity
    if aliases:
        for entity in candidates:
            if any(alias.casefold() == folded for alias in entity.aliases):
                return entity
    return None


def _index_names(entities: Sequence[Entity]) -> Tuple[Mapping[str, str], Mapping[str, str], Mapping[str, str]]:
    """Build exact, folded and alias name -> id indexes; first definition wins."""
    exact: Dict[str, str] = {}
    folded: Dict[str, str] = {}
    alias: Dict[str, str] = {}
    for entity in entities:
        exact.setdefault(entity.name, entity.id)
        folded.setdefault(entity.name.casefold(), entity.id)
        for spelling in entity.aliases:
            alias.setdefault(spelling.casefold(), entity.id)
    return MappingProxyType(exact), MappingProxyType(folded), MappingProxyType(alias)


class ReferenceDataStore:
    """
    Immutable lookup tables for the three hierarchy levels.

    Build with `from_rows`, `from_yaml` or `default()`; the constructor
    expects already-validated entity tuples.
    """

    def __init__(
        self,
        divisions: Sequence[Division],
        districts: Sequence[District],
        upazilas: Sequence[Upazila],
    ):
        self._divisions: Tuple[Division, ...] = tuple(divisions)
        self._districts: Tuple[District, ...] = tuple(districts)
        self._upazilas: Tuple[Upazila, ...] = tuple(upazilas)

        self._division_by_id = MappingProxyType({d.id: d for d in self._divisions})
        self._district_by_id = MappingProxyType({d.id: d for d in self._districts})
        self._upazila_by_id = MappingProxyType({u.id: u for u in self._upazilas})

        districts_by_division: Dict[str, List[District]] = {}
        for district in self._districts:
            districts_by_division.setdefault(district.division_id, []).append(district)
        self._districts_by_division = MappingProxyType(
            {key: tuple(value) for key, value in districts_by_division.items()}
        )

        upazilas_by_district: Dict[str, List[Upazila]] = {}
        for upazila in self._upazilas:
            upazilas_by_district.setdefault(upazila.district_id, []).append(upazila)
        self._upazilas_by_district = MappingProxyType(
            {key: tuple(value) for key, value in upazilas_by_district.items()}
        )

        self._division_names = _index_names(self._divisions)
        self._district_names = _index_names(self._districts)
        self._upazila_names = _index_names(self._upazilas)

    # ─── Construction ────────────────────────────────────────────────────

    @classmethod
    def from_rows(
        cls,
        division_rows: Iterable[Sequence],
        district_rows: Iterable[Sequence],
        upazila_rows: Mapping[str, Iterable[Sequence]],
    ) -> "ReferenceDataStore":
        """
        Build a store from raw row tuples (see bdaddress.data.bangladesh).

        Raises:
            ReferenceDataError: duplicate ids, a division name outside the
                storage enum, or a child whose parent is missing
        """
        divisions = [
            Division(id=str(row[0]), name=row[1], name_local=row[2], aliases=tuple(row[3]) if len(row) > 3 else ())
            for row in division_rows
        ]
        districts = [
            District(
                id=str(row[0]), name=row[1], name_local=row[2], division_id=str(row[3]),
                aliases=tuple(row[4]) if len(row) > 4 else (),
            )
            for row in district_rows
        ]
        upazilas = []
        for district_id, rows in upazila_rows.items():
            for index, row in enumerate(rows, start=1):
                upazilas.append(Upazila(
                    id=bangladesh.upazila_id(str(district_id), index),
                    name=row[0],
                    name_local=row[1],
                    district_id=str(district_id),
                    aliases=tuple(row[2]) if len(row) > 2 else (),
                ))

        cls._validate(divisions, districts, upazilas)
        return cls(divisions, districts, upazilas)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ReferenceDataStore":
        """
        Load a hierarchy from YAML.

        Expected shape:
            divisions: [{id, name, name_local, aliases?}, ...]
            districts: [{id, name, name_local, division_id, aliases?}, ...]
            upazilas:  {<district id>: [{name, name_local, aliases?}, ...]}
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        try:
            division_rows = [
                (d['id'], d['name'], d['name_local'], d.get('aliases') or ())
                for d in data.get('divisions', [])
            ]
            district_rows = [
                (d['id'], d['name'], d['name_local'], d['division_id'], d.get('aliases') or ())
                for d in data.get('districts', [])
            ]
            upazila_rows = {
                str(district_id): [(u['name'], u['name_local'], u.get('aliases') or ()) for u in rows or []]
                for district_id, rows in (data.get('upazilas') or {}).items()
            }
        except (KeyError, TypeError) as e:
            raise ReferenceDataError(f"Malformed reference data in {path}: {e}") from e

        store = cls.from_rows(division_rows, district_rows, upazila_rows)
        logger.info(
            f"Loaded reference data from {path}: {len(store._divisions)} divisions, "
            f"{len(store._districts)} districts, {len(store._upazilas)} upazilas"
        )
        return store

    @classmethod
    def default(cls) -> "ReferenceDataStore":
        """Build the store from the built-in Bangladesh tables."""
        return cls.from_rows(bangladesh.DIVISION_ROWS, bangladesh.DISTRICT_ROWS, bangladesh.UPAZILA_ROWS)

    @staticmethod
    def _validate(divisions: Sequence[Division], districts: Sequence[District], upazilas: Sequence[Upazila]) -> None:
        for level, entities in (("division", divisions), ("district", districts), ("upazila", upazilas)):
            seen = set()
            for entity in entities:
                if not entity.id:
                    raise ReferenceDataError(f"{level} {entity.name!r} has an empty id")
                if entity.id in seen:
                    raise ReferenceDataError(f"Duplicate {level} id {entity.id!r}")
                seen.add(entity.id)

        for division in divisions:
            if division.name not in bangladesh.DIVISION_NAMES:
                raise ReferenceDataError(
                    f"Division {division.id} name {division.name!r} is not a storage name "
                    f"({', '.join(bangladesh.DIVISION_NAMES)})"
                )

        division_ids = {d.id for d in divisions}
        for district in districts:
            if district.division_id not in division_ids:
                raise ReferenceDataError(
                    f"District {district.id} ({district.name}) references unknown division {district.division_id!r}"
                )

        district_ids = {d.id for d in districts}
        for upazila in upazilas:
            if upazila.district_id not in district_ids:
                raise ReferenceDataError(
                    f"Upazila {upazila.id} ({upazila.name}) references unknown district {upazila.district_id!r}"
                )

    # ─── Full lists ──────────────────────────────────────────────────────

    def divisions(self) -> List[Division]:
        return list(self._divisions)

    def districts(self) -> List[District]:
        return list(self._districts)

    def upazilas(self) -> List[Upazila]:
        return list(self._upazilas)

    def division_names(self) -> List[str]:
        """Storage names of all divisions, in definition order."""
        return [d.name for d in self._divisions]

    # ─── Lookup by id ────────────────────────────────────────────────────

    def get_division_by_id(self, division_id: Optional[str]) -> Optional[Division]:
        if division_id is None:
            return None
        return self._division_by_id.get(str(division_id))

    def get_district_by_id(self, district_id: Optional[str]) -> Optional[District]:
        if district_id is None:
            return None
        return self._district_by_id.get(str(district_id))

    def get_upazila_by_id(self, upazila_id: Optional[str]) -> Optional[Upazila]:
        if upazila_id is None:
            return None
        return self._upazila_by_id.get(str(upazila_id))

    # ─── Children ────────────────────────────────────────────────────────

    def get_districts_by_division(self, division_id: Optional[str]) -> List[District]:
        if not division_id:
            return []
        return list(self._districts_by_division.get(str(division_id), ()))

    def get_upazilas_by_district(self, district_id: Optional[str]) -> List[Upazila]:
        if not district_id:
            return []
        return list(self._upazilas_by_district.get(str(district_id), ()))

    # ─── Lookup by name ──────────────────────────────────────────────────

    @staticmethod
    def _resolve_indexed(
        indexes: Tuple[Mapping[str, str], Mapping[str, str], Mapping[str, str]],
        name: Optional[str],
        aliases: bool,
    ) -> Optional[str]:
        text = _normalize_name(name)
        if text is None:
            return None
        exact, folded, alias = indexes
        if text in exact:
            return exact[text]
        key = text.casefold()
        if key in folded:
            return folded[key]
        if aliases:
            return alias.get(key)
        return None

    def get_division_id_by_name(self, name: Optional[str], aliases: bool = True) -> Optional[str]:
        """Case-insensitive division name -> id ("dhaka", "DHAKA" and "Dhaka" all give "3")."""
        return self._resolve_indexed(self._division_names, name, aliases)

    def get_division_by_name(self, name: Optional[str], aliases: bool = True) -> Optional[Division]:
        return self.get_division_by_id(self.get_division_id_by_name(name, aliases=aliases))

    def get_district_id_by_name(
        self,
        name: Optional[str],
        division_id: Optional[str] = None,
        aliases: bool = True,
    ) -> Optional[str]:
        """
        Case-insensitive district name -> id.

        Args:
            name: District name
            division_id: Restrict matching to this division's districts
            aliases: Also match legacy spellings
        """
        if division_id is None:
            return self._resolve_indexed(self._district_names, name, aliases)
        text = _normalize_name(name)
        if text is None:
            return None
        match = _first_match(self._districts_by_division.get(str(division_id), ()), text, aliases)
        return match.id if match else None

    def get_upazila_id_by_name(
        self,
        name: Optional[str],
        district_id: Optional[str] = None,
        aliases: bool = True,
    ) -> Optional[str]:
        """
        Case-insensitive upazila name -> id.

        Several upazilas share a name (Kaliganj, Kawkhali, Lohagara, ...);
        without `district_id` the first one in definition order is returned.
        """
        if district_id is None:
            return self._resolve_indexed(self._upazila_names, name, aliases)
        text = _normalize_name(name)
        if text is None:
            return None
        match = _first_match(self._upazilas_by_district.get(str(district_id), ()), text, aliases)
        return match.id if match else None

    def __repr__(self) -> str:
        return (
            f"ReferenceDataStore(divisions={len(self._divisions)}, "
            f"districts={len(self._districts)}, upazilas={len(self._upazilas)})"
        )


# Global store instance
_store: Optional[ReferenceDataStore] = None


def get_reference_store() -> ReferenceDataStore:
    """Get the process-wide reference store, loading it on first use."""
    global _store
    if _store is None:
        path = get_config().reference_data_path
        if path:
            _store = ReferenceDataStore.from_yaml(path)
        else:
            _store = ReferenceDataStore.default()
            logger.debug(f"Loaded built-in reference data: {_store!r}")
    return _store


def set_reference_store(store: Optional[ReferenceDataStore]) -> None:
    """Replace the process-wide store (None reloads on next access)."""
    global _store
    _store = store
