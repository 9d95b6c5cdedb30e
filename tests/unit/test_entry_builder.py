from __future__ import annotations

import logging
import math

import pytest

from dexgen.errors import DuplicateEntryError, EmptySpeciesError
from dexgen.models.config_models import DuplicatePolicy, EntryMode
from dexgen.models.row_data import RawRow
from dexgen.services.aliases import build_alias_table
from dexgen.services.entry_builder import build_dex, build_entry, entry_key
from dexgen.services.header import resolve_header
from dexgen.services.schema import build_registry


def _row(line: int, *values: str) -> RawRow:
    return RawRow(line_number=line, values=values)


@pytest.fixture()
def legacy():
    registry = build_registry(EntryMode.LEGACY)
    header_map = resolve_header(["species", "num", "types", "heightm", "abilities"], registry)
    return registry, header_map


@pytest.fixture()
def standalone():
    registry = build_registry(EntryMode.STANDALONE)
    header_map = resolve_header(["species", "num", "forme", "types", "heightm"], registry)
    return registry, header_map


def test_entry_key_resolves_alias(legacy):
    _, header_map = legacy
    assert entry_key(_row(2, "megagengar"), header_map) == "gengarmega"
    assert entry_key(_row(3, "Mr. Mime"), header_map) == "mrmime"


def test_entry_key_empty_species_is_fatal(legacy):
    _, header_map = legacy
    with pytest.raises(EmptySpeciesError) as e:
        entry_key(_row(4, "", "25"), header_map)
    assert e.value.line_number == 4
    assert e.value.error_type == "EMPTY_SPECIES"


def test_legacy_entry_inherits_and_skips_species(legacy):
    registry, header_map = legacy
    entry = build_entry(_row(2, "pikachu", "25", "electric", "0,4", "static/-/lightning rod"), header_map, registry, EntryMode.LEGACY)
    assert entry == {
        "inherit": True,
        "num": 25,
        "types": ["Electric"],
        "heightm": 0.4,
        "abilities": {"0": "Static", "H": "Lightning Rod"},
    }
    assert list(entry)[0] == "inherit"


def test_legacy_entry_assigns_empty_cells(legacy):
    registry, header_map = legacy
    entry = build_entry(_row(2, "pikachu", "", "electric"), header_map, registry, EntryMode.LEGACY)
    assert math.isnan(entry["num"])
    assert entry["heightm"] == 0.0  # short row: missing cell reads as ""
    assert entry["abilities"] == {"0": ""}


def test_standalone_entry_has_species_and_skips_empty(standalone):
    registry, header_map = standalone
    entry = build_entry(_row(2, "rotomw", "479", "", "electric/water", ""), header_map, registry, EntryMode.STANDALONE)
    assert entry == {"species": "Rotom-Wash", "num": 479, "types": ["Electric", "Water"]}
    assert "inherit" not in entry


def test_build_dex_keeps_row_order(legacy):
    registry, header_map = legacy
    rows = [_row(2, "zam", "65"), _row(3, "bulbasaur", "1")]
    build = build_dex(rows, header_map, registry, mode=EntryMode.LEGACY)
    assert list(build.entries) == ["alakazam", "bulbasaur"]
    assert len(build) == 2
    assert build.duplicates == []


def test_build_dex_duplicate_overwrites_with_warning(legacy, caplog):
    registry, header_map = legacy
    rows = [_row(2, "ttar", "248"), _row(3, "Tyranitar", "999")]
    with caplog.at_level(logging.WARNING, logger="dexgen"):
        build = build_dex(rows, header_map, registry, mode=EntryMode.LEGACY)
    assert build.entries["tyranitar"]["num"] == 999
    assert build.duplicates == [("tyranitar", 3)]
    assert "entry 'tyranitar' at line 3 overwrites line 2" in caplog.text


def test_build_dex_duplicate_reject_policy(legacy):
    registry, header_map = legacy
    rows = [_row(2, "ttar", "248"), _row(5, "Tyranitar", "999")]
    with pytest.raises(DuplicateEntryError) as e:
        build_dex(rows, header_map, registry, mode=EntryMode.LEGACY, duplicate_policy=DuplicatePolicy.REJECT)
    assert e.value.line_number == 5
    assert "duplicates line 2" in str(e.value)


def test_build_dex_uses_given_alias_table(standalone):
    registry_aliases = build_alias_table({"bulba": "Bulbasaur"})
    registry = build_registry(EntryMode.STANDALONE, registry_aliases)
    _, header_map = standalone
    build = build_dex([_row(2, "Bulba", "1")], header_map, registry, mode=EntryMode.STANDALONE, aliases=registry_aliases)
    assert build.entries == {"bulbasaur": {"species": "Bulbasaur", "num": 1}}


class _CountingProgress:
    def __init__(self) -> None:
        self.keys: list[str | None] = []

    def advance(self, key: str | None = None) -> None:
        self.keys.append(key)


def test_build_dex_reports_progress(legacy):
    registry, header_map = legacy
    progress = _CountingProgress()
    build_dex([_row(2, "a"), _row(3, "b")], header_map, registry, progress=progress)  # type: ignore[arg-type]
    assert progress.keys == ["a", "b"]
