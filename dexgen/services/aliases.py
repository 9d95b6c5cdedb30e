from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ..data.aliases import ALIASES
from .normalize import to_id

"""Alias resolution over a read-only alias table.

The table is built once at startup (static dataset plus optional config
entries) and passed explicitly to whoever needs it.
"""

__all__ = [
    "AliasTable",
    "DEFAULT_ALIASES",
    "build_alias_table",
    "resolve_alias",
]

AliasTable = Mapping[str, str]

DEFAULT_ALIASES: AliasTable = ALIASES


def build_alias_table(extra: Mapping[str, str] | None = None) -> AliasTable:
    """Return the static alias table with ``extra`` entries layered on top.

    Keys of ``extra`` are normalized with ``to_id`` so config authors may write
    ``"Mega Gengar"`` as well as ``"megagengar"``.
    """
    if not extra:
        return DEFAULT_ALIASES
    merged = dict(ALIASES)
    for key, value in extra.items():
        merged[to_id(key)] = value
    return MappingProxyType(merged)


def resolve_alias(token: Any, aliases: AliasTable = DEFAULT_ALIASES) -> Any:
    """Return the canonical display name for ``token``.

    Unknown tokens are returned as given (not normalized).
    """
    return aliases.get(to_id(token), token)
