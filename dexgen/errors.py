from __future__ import annotations

from pathlib import Path

"""Fatal error kinds raised by the conversion pipeline.

Every error carries an ``error_type`` in UPPER_SNAKE form which is reused as the
``error_type`` field of the JSON Lines error log. Unrecognized headers are not
an error (they only produce a warning) and therefore have no class here.
"""

__all__ = [
    "DexError",
    "InputReadError",
    "MalformedRowError",
    "EmptySpeciesError",
    "DuplicateHeaderError",
    "MissingSpeciesHeaderError",
    "DuplicateEntryError",
    "OutputWriteError",
]


class DexError(Exception):
    """Base class for fatal conversion errors."""

    error_type = "DEX_ERROR"
    line_number: int = -1


class InputReadError(DexError):
    error_type = "INPUT_NOT_FOUND"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"File '{path}' was not found or could not be read.")


class MalformedRowError(DexError):
    """Raised when a line does not follow the CSV grammar (or cannot be keyed)."""

    error_type = "MALFORMED_ROW"

    def __init__(self, line_number: int, text: str, reason: str = "malformed row") -> None:
        self.line_number = line_number
        self.text = text
        super().__init__(f"{reason} at line {line_number}: {text!r}")


class EmptySpeciesError(MalformedRowError):
    error_type = "EMPTY_SPECIES"

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(line_number, text, reason="empty species value")


class DuplicateHeaderError(DexError):
    error_type = "DUPLICATE_HEADER"

    def __init__(self, header: str, first: int, second: int) -> None:
        self.header = header
        self.line_number = 1
        super().__init__(f"Header '{header}' appears twice (columns {first + 1} and {second + 1}).")


class MissingSpeciesHeaderError(DexError):
    error_type = "MISSING_SPECIES_HEADER"

    def __init__(self, source: str = "") -> None:
        self.line_number = 1
        where = f" in file: '{source}'" if source else ""
        super().__init__(f"'Species' header not found{where}.")


class DuplicateEntryError(DexError):
    error_type = "DUPLICATE_ENTRY"

    def __init__(self, key: str, line_number: int, first_line: int) -> None:
        self.key = key
        self.line_number = line_number
        super().__init__(f"entry '{key}' at line {line_number} duplicates line {first_line}")


class OutputWriteError(DexError):
    error_type = "OUTPUT_UNWRITABLE"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Error while trying to write output to file: '{path}'.")
