from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

"""Identifier and display-name normalization.

``to_id`` produces the canonical lookup key (``"Mr. Mime"`` -> ``"mrmime"``).
``to_name`` produces the human readable form (``"mr. mime"`` -> ``"Mr Mime"``).
Both are total: input that is neither text nor a number normalizes to ``""``.
"""

__all__ = [
    "to_id",
    "to_name",
]

_NON_ID = re.compile(r"[^a-z0-9]+")
_NON_NAME = re.compile(r"[^a-z0-9 \-']+")
_WORD_START = re.compile(r"(^|[ \-]+)([a-z])")


def _unwrap(value: Any) -> Any:
    # objects that carry their own identifier (e.g. {"id": ...} / user.userid)
    for attr in ("id", "userid"):
        if isinstance(value, Mapping):
            if value.get(attr):
                return value[attr]
        elif getattr(value, attr, None):
            return getattr(value, attr)
    return value


def _as_text(value: Any) -> str:
    value = _unwrap(value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return str(value).replace("inf", "Infinity").replace("nan", "NaN")
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return ""


def to_id(text: Any) -> str:
    """Return the canonical lowercase alphanumeric identifier for ``text``."""
    return _NON_ID.sub("", _as_text(text).lower())


def to_name(text: Any) -> str:
    """Return the title-cased display form, keeping spaces, hyphens and apostrophes."""
    name = _NON_NAME.sub("", _as_text(text).lower().strip())
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), name)
