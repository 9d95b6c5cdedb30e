from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Any

from ..models.config_models import EntryMode
from .aliases import DEFAULT_ALIASES, AliasTable, resolve_alias
from .normalize import to_id, to_name

"""Validator registry: recognized header id -> (attribute name, value parser).

Two schema versions exist and are never mixed; ``build_registry`` picks one
from the entry mode. Parsers are pure functions of the raw cell text.
"""

__all__ = [
    "FieldSpec",
    "Registry",
    "NAN",
    "STAT_KEYS",
    "ABILITY_SLOTS",
    "build_registry",
    "parse_int",
    "parse_number",
    "parse_name_list",
    "parse_species",
    "parse_base_stats",
    "parse_abilities",
    "parse_gender",
]

NAN = math.nan
STAT_KEYS = ("hp", "atk", "def", "spa", "spd", "spe")
ABILITY_SLOTS = ("0", "1", "H")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"([+-]?)Infinity")

_GENDERS = {
    "m": "M",
    "male": "M",
    "f": "F",
    "female": "F",
    "n": "N",
    "none": "N",
    "genderless": "N",
}


@dataclass(frozen=True)
class FieldSpec:
    name: str  # attribute name in the output record
    validate: Callable[[str], Any]


Registry = Mapping[str, FieldSpec]


def parse_int(value: str) -> int | float:
    """Base-10 leading integer (``"12abc"`` -> 12); NaN when there is none."""
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else NAN


def parse_number(value: str) -> float:
    """Decimal number accepting ``,`` or ``.`` as separator; blank -> 0, junk -> NaN."""
    text = value.strip().replace(",", ".")
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    inf = _INFINITY.fullmatch(text)
    if inf:
        return -math.inf if inf.group(1) == "-" else math.inf
    return NAN


def parse_species(value: str, aliases: AliasTable = DEFAULT_ALIASES) -> str:
    """Display name of a (possibly aliased) species, spaces turned into hyphens."""
    return to_name(resolve_alias(value, aliases)).replace(" ", "-")


def parse_name_list(value: str, delimiter: str, item: Callable[[str], str] = to_name) -> list[str]:
    return [item(piece) for piece in value.split(delimiter)]


def parse_base_stats(value: str) -> dict[str, int | float]:
    stats = value.split("/")
    return {
        key: parse_int(stats[i]) if i < len(stats) else NAN
        for i, key in enumerate(STAT_KEYS)
    }


def parse_abilities(value: str) -> dict[str, str]:
    """``"overgrow/-/chlorophyll"`` -> ``{"0": "Overgrow", "H": "Chlorophyll"}``.

    Slot ``0`` is always written; ``1`` and ``H`` only when the name has an id.
    Placeholders such as ``-`` or ``?`` count as empty.
    """
    names = [_ability_name(piece) for piece in value.split("/")]
    output = {ABILITY_SLOTS[0]: names[0]}
    for slot, name in zip(ABILITY_SLOTS[1:], names[1:]):
        if name:
            output[slot] = name
    return output


def _ability_name(piece: str) -> str:
    name = to_name(piece)
    return name if to_id(name) else ""


def parse_gender(value: str) -> str:
    gender = to_id(value)
    return _GENDERS.get(gender, gender.upper())


def build_registry(mode: EntryMode = EntryMode.LEGACY, aliases: AliasTable = DEFAULT_ALIASES) -> Registry:
    """Return the read-only validator registry for ``mode``.

    Iteration order is the documented column order of the schema version.
    """
    species = partial(parse_species, aliases=aliases)
    species_list = partial(parse_name_list, delimiter=",", item=species)

    legacy: dict[str, FieldSpec] = {
        "num": FieldSpec("num", parse_int),
        "species": FieldSpec("species", species),
        "types": FieldSpec("types", partial(parse_name_list, delimiter="/")),
        "genderratio": FieldSpec("genderRatio", parse_number),
        "basestats": FieldSpec("baseStats", parse_base_stats),
        "abilities": FieldSpec("abilities", parse_abilities),
        "heightm": FieldSpec("heightm", parse_number),
        "weightkg": FieldSpec("weightkg", parse_number),
        "color": FieldSpec("color", to_name),
        "prevo": FieldSpec("prevo", species),
        "evolevel": FieldSpec("evoLevel", parse_int),
        "egggroups": FieldSpec("eggGroups", partial(parse_name_list, delimiter=",")),
        "otherformes": FieldSpec("otherFormes", species_list),
    }
    if mode is EntryMode.LEGACY:
        return MappingProxyType(legacy)

    extended: dict[str, FieldSpec] = {}
    for key, spec in legacy.items():
        extended[key] = spec
        if key == "species":
            extended["basespecies"] = FieldSpec("baseSpecies", species)
            extended["forme"] = FieldSpec("forme", to_name)
        elif key == "types":
            extended["gender"] = FieldSpec("gender", parse_gender)
    return MappingProxyType(extended)
