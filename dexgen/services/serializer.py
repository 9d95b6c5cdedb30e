from __future__ import annotations

import json
import math
import re
from typing import Any

from ..models.config_models import DEFAULT_EXPORT_NAME

"""Render the output collection as a ``exports.<Name> = {...};`` module.

JSON is pretty printed with tabs, then two house-style rules are applied:

1. an array holding only scalars goes on one line: ``["Grass", "Poison"]``
2. an object nested inside an entity record (members three or more tabs
   deep) holding only scalars goes on one line: ``{"hp": 45, "atk": 49}``

The root object and entity records stay one member per line.
"""

__all__ = [
    "render_module",
    "to_json_text",
    "compact_scalar_blocks",
]

_STRING = r'"(?:[^"\\\n]|\\.)*"'
_SCALAR = rf"(?:{_STRING}|-?\d[\d.eE+\-]*|true|false|null)"
_SCALAR_ARRAY = re.compile(rf"\[\n((?:\t+{_SCALAR},\n)*\t+{_SCALAR})\n\t*\]")
_SCALAR_OBJECT = re.compile(
    rf"\{{\n((?:\t{{3,}}{_STRING}: {_SCALAR},\n)*\t{{3,}}{_STRING}: {_SCALAR})\n\t*\}}"
)

# floats at or above this print in exponent form in JS; leave them as floats
_MAX_PLAIN_INT = 1e21


def _plain(value: Any) -> Any:
    """JS number semantics: NaN/Infinity become null, integral floats lose ``.0``."""
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < _MAX_PLAIN_INT:
            return int(value)
    return value


def _join_block(match: re.Match[str], opening: str, closing: str) -> str:
    items = [line.strip().removesuffix(",") for line in match.group(1).split("\n")]
    return opening + ", ".join(items) + closing


def compact_scalar_blocks(text: str) -> str:
    text = _SCALAR_ARRAY.sub(lambda m: _join_block(m, "[", "]"), text)
    return _SCALAR_OBJECT.sub(lambda m: _join_block(m, "{", "}"), text)


def to_json_text(dex: dict[str, Any]) -> str:
    """Tab-indented JSON with house-style compaction, ``\\n`` line endings."""
    text = json.dumps(_plain(dex), indent="\t", ensure_ascii=False, allow_nan=False)
    return compact_scalar_blocks(text)


def render_module(dex: dict[str, Any], export_name: str = DEFAULT_EXPORT_NAME, eol: str = "\r\n") -> str:
    body = to_json_text(dex).replace("\n", eol)
    return f"exports.{export_name} = {body};{eol}"
