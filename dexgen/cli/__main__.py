from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from dexgen.config.loader import DEFAULT_CONFIG_PATH, ConfigError, apply_overrides, load_config
from dexgen.errors import DexError
from dexgen.logging.init import log_summary, set_debug, setup_logging
from dexgen.models.config_models import ConversionConfig, EntryMode
from dexgen.services.orchestrator import convert
from dexgen.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Parse flags and up to two positionals (input path, output path)
- Load ``.env`` then the optional YAML config
- Run the conversion and print the SUMMARY line

Unknown flags are ignored. Exit code 0 on success, 1 on any fatal error.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

CONFIG_ENV = "DEXGEN_CONFIG"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load ``.env`` (if present) so DEXGEN_* variables can live next to the data."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    p = argparse.ArgumentParser(
        prog="dexgen",
        description="Convert a Pokedex override CSV into a Showdown data module",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--standalone",
        dest="mode",
        action="store_const",
        const=EntryMode.STANDALONE,
        help="Full entries: species attribute, no inherit marker, empty cells skipped",
    )
    mode.add_argument(
        "--legacy",
        dest="mode",
        action="store_const",
        const=EntryMode.LEGACY,
        help="Patch entries inheriting from the base dex (default)",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("input", nargs="?", help="Input CSV file (default: pokedex.csv)")
    p.add_argument("output", nargs="?", help="Output file (default: pokedex.js.out)")
    return p.parse_known_intermixed_args(argv)


def _resolve_config(explicit: Path | None) -> ConversionConfig:
    """Explicit path (flag, then env) must exist; the default path is optional."""
    if explicit is None and os.getenv(CONFIG_ENV):
        explicit = Path(os.environ[CONFIG_ENV])
    if explicit is not None:
        return load_config(explicit)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return ConversionConfig()


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not fall back to sys.argv (pytest args)
    if argv is None:
        argv = sys.argv[1:]
    args, extras = _parse_args(argv)

    if args.debug:
        set_debug()
        logger.debug("debug mode enabled")
    for extra in extras:
        if extra.startswith("-"):
            logger.debug(f"ignoring unknown flag: {extra}")
        else:
            logger.warning(f"ignoring extra argument: {extra}")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    cfg = apply_overrides(cfg, input_path=args.input, output_path=args.output, mode=args.mode)

    try:
        result = convert(cfg)
    except DexError as e:
        logger.error(str(e))
        return EXIT_FATAL

    logger.info(f"File '{result.output_path}' successfully written.")
    log_summary(render_summary_line(result))
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
