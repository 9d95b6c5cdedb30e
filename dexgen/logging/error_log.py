from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..errors import DexError
from ..models.error_record import ErrorRecord

"""Per-run error log for one conversion.

Ignored headers, overwritten entries and the fatal error (if any) of a run are
kept in memory, then appended as JSON Lines to
``<dir>/errors-YYYYMMDD-HHMMSS.log`` (UTC) once the run ends.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """Records problems found in ``source`` (the input CSV name)."""

    def __init__(self, directory: Path | str, source: str = "") -> None:
        self.directory = Path(directory)
        self.source = source
        self._records: list[ErrorRecord] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        # fixed on first use so repeated flushes land in the same file
        if self._file_path is None:
            self.directory.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self.directory / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def record(self, line: int, error_type: str, message: str) -> None:
        self.append(ErrorRecord.create(self.source, line, error_type, message))

    def record_error(self, error: DexError) -> None:
        """Record a fatal conversion error under its own type and line."""
        self.record(error.line_number, error.error_type, str(error))

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        if not self._records:
            return None
        path = self.file_path
        with path.open("a", encoding="utf-8") as f:
            f.writelines(record.to_json_line() + "\n" for record in self._records)
        self._records.clear()
        return path
