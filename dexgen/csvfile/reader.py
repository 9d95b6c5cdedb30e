from __future__ import annotations

import re
from pathlib import Path

from ..errors import InputReadError, MalformedRowError
from ..models.row_data import RawRow

"""CSV line tokenizer and file reader.

Dialect (fixed, not sniffed):
- fields are separated by ``,``
- a field is either double-quoted or bare; whitespace around a field is dropped
- inside quotes a backslash escapes the next character (``\\"`` -> ``"``)
- bare fields may not contain ``"``, ``,`` or ``\\``; inner whitespace is kept
- a trailing ``,`` yields one extra empty field

A line that does not follow the dialect aborts the whole run; there is no
per-line recovery.
"""

__all__ = [
    "tokenize_line",
    "read_rows",
    "split_lines",
]

_QUOTED = r'"[^"\\]*(?:\\[\S\s][^"\\]*)*"'
_BARE = r'[^,"\s\\]*(?:\s+[^,"\s\\]+)*'
_FIELD = rf"\s*(?:{_QUOTED}|{_BARE})\s*"

_VALID_LINE = re.compile(rf"{_FIELD}(?:,{_FIELD})*")
_VALUE = re.compile(
    r'(?!\s*$)\s*(?:"([^"\\]*(?:\\[\S\s][^"\\]*)*)"|(' + _BARE + r"))\s*(?:,|$)"
)
_ESCAPE = re.compile(r"\\([\S\s])")
_TRAILING_COMMA = re.compile(r",\s*$")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def tokenize_line(line: str, line_number: int = 1) -> list[str]:
    """Split one CSV line into field values.

    A blank line is a single empty field (``[""]``).

    Raises:
        MalformedRowError: line does not match the dialect
    """
    if not _VALID_LINE.fullmatch(line):
        raise MalformedRowError(line_number, line)
    fields: list[str] = []
    for match in _VALUE.finditer(line):
        quoted, bare = match.group(1), match.group(2)
        if quoted is not None:
            fields.append(_ESCAPE.sub(r"\1", quoted))
        else:
            fields.append(bare or "")
    if _TRAILING_COMMA.search(line) or not fields:
        fields.append("")
    return fields


def split_lines(text: str) -> list[tuple[int, str]]:
    """Return ``(line_number, line)`` for every non-blank physical line."""
    return [
        (number, line)
        for number, line in enumerate(_LINE_BREAK.split(text), start=1)
        if line.strip()
    ]


def read_rows(path: Path) -> list[RawRow]:
    """Read a CSV file into tokenized rows (header row included, first).

    Raises:
        InputReadError: file missing or unreadable
        MalformedRowError: first line that does not follow the dialect
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(path) from e
    return [
        RawRow(line_number=number, values=tuple(tokenize_line(line, number)))
        for number, line in split_lines(text)
    ]
