from __future__ import annotations

from ..models.conversion_result import ConversionResult

"""SUMMARY line rendering.

Format::

    rows={rows} entries={entries} duplicates={dups} warnings={warns} elapsed_sec={sec}

The ``SUMMARY`` label itself is added by the logger (``log_summary``).
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation for very small numbers
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ConversionResult) -> str:
    """Render the summary content for ``result``.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = ConversionResult(
        ...     input_path=Path("pokedex.csv"), output_path=Path("pokedex.js.out"),
        ...     total_rows=3, entries=2, duplicates=1, warnings=1, ignored_headers=(),
        ...     start_time=t, end_time=t, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'rows=3 entries=2 duplicates=1 warnings=1 elapsed_sec=2'
    """
    return (
        f"rows={result.total_rows} "
        f"entries={result.entries} "
        f"duplicates={result.duplicates} "
        f"warnings={result.warnings} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
