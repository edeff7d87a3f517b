from typing import Dict, Optional, Sequence
from .aliases import FIELD_ALIASES
from .types import CARD_FIELDS, Normalizer, Record

class AliasNormalizer(Normalizer):
    """
    Rule-based normalizer:
    maps whatever keys the model emitted onto the seven canonical
    card fields, so every record leaving here has the full schema.
    """
    def __init__(self, aliases: Optional[Dict[str, Sequence[str]]] = None):
        self.aliases = aliases or FIELD_ALIASES

    def normalize_record(self, rec: Record) -> Record:
        return {
            field: first_present(rec, self.aliases.get(field, (field,)))
            for field in CARD_FIELDS
        }


def first_present(rec: Record, keys: Sequence[str], default: str = ""):
    """Value of the first key that exists and is not null. Values are kept verbatim."""
    for k in keys:
        if rec.get(k) is not None:
            return rec[k]
    return default
