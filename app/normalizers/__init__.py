from .pipeline import get_default_normalizer, normalize_response
from .rules import AliasNormalizer
from .aliases import FIELD_ALIASES
from .parsing import parse_model_output
from .types import CARD_FIELDS, Normalizer, Record, ScanResult

__all__ = [
    "get_default_normalizer",
    "normalize_response",
    "AliasNormalizer",
    "FIELD_ALIASES",
    "parse_model_output",
    "CARD_FIELDS",
    "Normalizer",
    "Record",
    "ScanResult",
]
