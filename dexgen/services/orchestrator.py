from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..csvfile.reader import read_rows
from ..errors import DexError, MissingSpeciesHeaderError, OutputWriteError
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import ConversionConfig
from ..models.conversion_result import ConversionResult
from .aliases import build_alias_table
from .entry_builder import build_dex
from .header import resolve_header
from .progress import ProgressTracker
from .schema import build_registry
from .serializer import render_module

"""Conversion orchestration.

One synchronous pass: read the whole input, resolve the header, build every
entry, render the module and write it once. Any fatal error aborts the run
before the output file is touched.
"""

__all__ = [
    "convert",
    "write_module",
]

logger = logging.getLogger(__name__)


def write_module(path: Path, text: str) -> None:
    """Write ``text`` verbatim (line endings untouched).

    Raises:
        OutputWriteError: path cannot be written
    """
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise OutputWriteError(path) from e


def _flush_error_log(error_log: ErrorLogBuffer | None) -> None:
    if error_log is None:
        return
    try:
        path = error_log.flush()
    except OSError as e:
        logger.warning(f"error log could not be written: {e}")
        return
    if path is not None:
        logger.info(f"error log written: {path}")


def convert(config: ConversionConfig) -> ConversionResult:
    """Convert ``config.input_path`` into ``config.output_path``.

    Raises:
        DexError: any fatal conversion error (see ``dexgen.errors``)
    """
    start_time = datetime.now(UTC)
    input_path = Path(config.input_path)
    output_path = Path(config.output_path)
    error_log = ErrorLogBuffer(config.error_log_dir, source=input_path.name) if config.error_log_dir else None

    aliases = build_alias_table(config.extra_aliases)
    registry = build_registry(config.mode, aliases)
    logger.debug(f"mode={config.mode.value} headers={', '.join(registry)}")

    try:
        rows = read_rows(input_path)
        if not rows:
            raise MissingSpeciesHeaderError(str(input_path))

        header_map = resolve_header(rows[0].values, registry, source=str(input_path))
        if error_log is not None:
            for header in header_map.ignored:
                error_log.record(rows[0].line_number, "UNRECOGNIZED_HEADER", f"header '{header}' ignored")

        data_rows = rows[1:]
        logger.info(f"Processing {len(data_rows)} rows from: {input_path}")
        with ProgressTracker(len(data_rows)) as progress:
            build = build_dex(
                data_rows,
                header_map,
                registry,
                mode=config.mode,
                aliases=aliases,
                duplicate_policy=config.duplicate_policy,
                progress=progress,
            )
        if error_log is not None:
            for key, line in build.duplicates:
                error_log.record(line, "DUPLICATE_ENTRY", f"entry '{key}' overwritten")

        write_module(output_path, render_module(build.entries, config.export_name, config.eol))
    except DexError as e:
        if error_log is not None:
            error_log.record_error(e)
        raise
    finally:
        _flush_error_log(error_log)

    end_time = datetime.now(UTC)
    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        total_rows=len(data_rows),
        entries=len(build),
        duplicates=len(build.duplicates),
        warnings=len(header_map.ignored) + len(build.duplicates),
        ignored_headers=header_map.ignored,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
