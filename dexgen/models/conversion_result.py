from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Conversion result model: aggregated counts for the SUMMARY line."""


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one successful conversion run."""
    input_path: Path
    output_path: Path
    total_rows: int  # data rows read (header excluded)
    entries: int  # keys in the output collection
    duplicates: int  # rows that overwrote an earlier entry
    warnings: int  # unrecognized headers + overwritten duplicates
    ignored_headers: tuple[str, ...]
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
