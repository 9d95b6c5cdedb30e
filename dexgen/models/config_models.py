from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

"""Configuration models for the CSV -> data module converter.

``ConversionConfig`` is the single, immutable settings object built at startup
(defaults <- config file <- command line) and passed down the pipeline.
"""

__all__ = [
    "EntryMode",
    "DuplicatePolicy",
    "ConversionConfig",
    "DEFAULT_INPUT",
    "DEFAULT_OUTPUT",
    "DEFAULT_EXPORT_NAME",
]

DEFAULT_INPUT = "pokedex.csv"
DEFAULT_OUTPUT = "pokedex.js.out"
DEFAULT_EXPORT_NAME = "BattlePokedex"

LINE_ENDINGS = {"crlf": "\r\n", "lf": "\n"}


class EntryMode(str, Enum):
    """Output entry shape, each bound to one schema version.

    LEGACY: patch entries (``inherit: true``, no species attribute), every mapped
    column assigned, original column set.
    STANDALONE: full entries (species attribute, no inherit marker), empty cells
    skipped, extended column set.
    """
    LEGACY = "legacy"
    STANDALONE = "standalone"


class DuplicatePolicy(str, Enum):
    OVERWRITE = "overwrite"  # last row wins (warned)
    REJECT = "reject"  # fatal DuplicateEntryError


@dataclass(frozen=True)
class ConversionConfig:
    input_path: str = DEFAULT_INPUT
    output_path: str = DEFAULT_OUTPUT
    mode: EntryMode = EntryMode.LEGACY
    export_name: str = DEFAULT_EXPORT_NAME
    line_ending: str = "crlf"  # key of LINE_ENDINGS
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE
    extra_aliases: Mapping[str, str] = field(default_factory=dict)
    error_log_dir: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra_aliases", MappingProxyType(dict(self.extra_aliases)))

    @property
    def eol(self) -> str:
        return LINE_ENDINGS[self.line_ending]
