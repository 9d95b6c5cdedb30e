from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ConversionConfig, DuplicatePolicy, EntryMode

"""Config loader.

Responsibilities:
- Load the YAML config file (all keys optional)
- Validate it against ``config_schema.json`` (unknown keys rejected)
- Build the immutable ``ConversionConfig``; missing keys keep their defaults
- Apply command line overrides on top (``apply_overrides``)
"""

__all__ = [
    "ConfigError",
    "SCHEMA_PATH",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "config_from_mapping",
    "apply_overrides",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/dexgen.yml")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data fails validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def config_from_mapping(data: dict[str, Any]) -> ConversionConfig:
    _validate_config_schema(data)
    defaults = ConversionConfig()
    return ConversionConfig(
        input_path=data.get("input_path", defaults.input_path),
        output_path=data.get("output_path", defaults.output_path),
        mode=EntryMode(data.get("mode", defaults.mode.value)),
        export_name=data.get("export_name", defaults.export_name),
        line_ending=data.get("line_ending", defaults.line_ending),
        duplicate_policy=DuplicatePolicy(data.get("duplicate_policy", defaults.duplicate_policy.value)),
        extra_aliases=data.get("extra_aliases") or {},
        error_log_dir=data.get("error_log_dir"),
    )


def load_config(path: Path) -> ConversionConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")
    return config_from_mapping(data)


def apply_overrides(
    config: ConversionConfig,
    *,
    input_path: str | None = None,
    output_path: str | None = None,
    mode: EntryMode | None = None,
) -> ConversionConfig:
    """Command line values win over the config file."""
    changes: dict[str, Any] = {}
    if input_path:
        changes["input_path"] = input_path
    if output_path:
        changes["output_path"] = output_path
    if mode is not None:
        changes["mode"] = mode
    return replace(config, **changes) if changes else config
