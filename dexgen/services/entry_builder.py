from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..errors import DuplicateEntryError, EmptySpeciesError
from ..models.config_models import DuplicatePolicy, EntryMode
from ..models.row_data import SPECIES_HEADER, HeaderMap, RawRow
from .aliases import DEFAULT_ALIASES, AliasTable, resolve_alias
from .normalize import to_id
from .progress import ProgressTracker
from .schema import Registry

"""Entry building: one data row -> (canonical key, entity record).

LEGACY records are patches over an existing entry: ``inherit`` is set, the
species attribute is left out and every other mapped column is assigned, empty
or not. STANDALONE records carry the species attribute and skip empty cells.
"""

__all__ = [
    "entry_key",
    "build_entry",
    "build_dex",
    "DexBuild",
]

logger = logging.getLogger(__name__)

EntityRecord = dict[str, Any]


def entry_key(row: RawRow, header_map: HeaderMap, aliases: AliasTable = DEFAULT_ALIASES) -> str:
    """Canonical id of the row's species (aliases resolved)."""
    key = to_id(resolve_alias(row.get(header_map.species_index), aliases))
    if not key:
        raise EmptySpeciesError(row.line_number, row.text)
    return key


def build_entry(row: RawRow, header_map: HeaderMap, registry: Registry, mode: EntryMode) -> EntityRecord:
    entry: EntityRecord = {}
    if mode is EntryMode.LEGACY:
        entry["inherit"] = True
    for header, index in header_map.columns.items():
        value = row.get(index)
        if mode is EntryMode.LEGACY:
            if header == SPECIES_HEADER:
                continue
        elif value == "":
            continue
        spec = registry[header]
        entry[spec.name] = spec.validate(value)
    return entry


class DexBuild:
    """Output collection plus the bookkeeping needed for the summary."""

    def __init__(self) -> None:
        self.entries: dict[str, EntityRecord] = {}
        self.duplicates: list[tuple[str, int]] = []  # (key, line) of overwriting rows
        self._lines: dict[str, int] = {}

    def add(self, key: str, entry: EntityRecord, line_number: int, policy: DuplicatePolicy) -> None:
        if key in self.entries:
            first = self._lines[key]
            if policy is DuplicatePolicy.REJECT:
                raise DuplicateEntryError(key, line_number, first)
            logger.warning(f"entry '{key}' at line {line_number} overwrites line {first}")
            self.duplicates.append((key, line_number))
        self.entries[key] = entry
        self._lines[key] = line_number

    def __len__(self) -> int:
        return len(self.entries)


def build_dex(
    rows: Iterable[RawRow],
    header_map: HeaderMap,
    registry: Registry,
    *,
    mode: EntryMode = EntryMode.LEGACY,
    aliases: AliasTable = DEFAULT_ALIASES,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
    progress: ProgressTracker | None = None,
) -> DexBuild:
    """Build the keyed output collection from the data rows (header excluded)."""
    build = DexBuild()
    for row in rows:
        key = entry_key(row, header_map, aliases)
        build.add(key, build_entry(row, header_map, registry, mode), row.line_number, duplicate_policy)
        if progress is not None:
            progress.advance(key)
    return build
