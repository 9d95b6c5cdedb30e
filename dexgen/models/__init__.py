"""Domain models for the Pokedex CSV converter."""

from .config_models import ConversionConfig, DuplicatePolicy, EntryMode
from .conversion_result import ConversionResult
from .error_record import ErrorRecord
from .row_data import SPECIES_HEADER, HeaderMap, RawRow

__all__ = [
    # Configuration models
    "ConversionConfig",
    "DuplicatePolicy",
    "EntryMode",
    # Processing models
    "ConversionResult",
    "ErrorRecord",
    "HeaderMap",
    "RawRow",
    "SPECIES_HEADER",
]
