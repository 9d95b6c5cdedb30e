from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

"""Row-level models: a tokenized CSV line and the resolved header map."""

__all__ = [
    "RawRow",
    "HeaderMap",
    "SPECIES_HEADER",
]

SPECIES_HEADER = "species"


@dataclass(frozen=True)
class RawRow:
    """One tokenized line, positionally aligned to the header row."""
    line_number: int  # physical line in the input file (1-based)
    values: tuple[str, ...]

    def get(self, index: int) -> str:
        """Value at ``index``; cells past the end of a short row read as ``""``."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return ""

    @property
    def text(self) -> str:
        return ",".join(self.values)


@dataclass(frozen=True)
class HeaderMap:
    """Recognized header id -> zero-based column, in header order.

    Built once from the first row. ``ignored`` keeps the unrecognized header ids
    (their columns are never read).
    """
    columns: Mapping[str, int]
    ignored: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @property
    def species_index(self) -> int:
        return self.columns[SPECIES_HEADER]

    def __contains__(self, header: object) -> bool:
        return header in self.columns

    def __len__(self) -> int:
        return len(self.columns)
