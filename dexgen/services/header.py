from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import DuplicateHeaderError, MissingSpeciesHeaderError
from ..models.row_data import SPECIES_HEADER, HeaderMap
from .normalize import to_id
from .schema import Registry

logger = logging.getLogger(__name__)


def resolve_header(tokens: Sequence[str], registry: Registry, source: str = "") -> HeaderMap:
    """Map the header row onto column positions.

    Unrecognized headers are warned about and ignored. A recognized header
    given twice, or a missing species column, is fatal.
    """
    columns: dict[str, int] = {}
    ignored: list[str] = []
    for index, token in enumerate(tokens):
        header = to_id(token)
        if header not in registry:
            logger.warning(
                "Header '%s' is invalid. Use one of the following: %s",
                header,
                ", ".join(registry),
            )
            ignored.append(header)
            continue
        if header in columns:
            raise DuplicateHeaderError(header, columns[header], index)
        columns[header] = index

    if SPECIES_HEADER not in columns:
        raise MissingSpeciesHeaderError(source)
    return HeaderMap(columns=columns, ignored=tuple(ignored))
