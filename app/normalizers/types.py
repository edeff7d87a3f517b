# app/normalizers/types.py
from typing import Any, Dict, List, NamedTuple, Protocol

Record = Dict[str, Any]

# Canonical CardRecord text fields, in API order
CARD_FIELDS = (
    "name",
    "position",
    "email",
    "phone",
    "companyName",
    "companyAddress",
    "category",
)


class ScanResult(NamedTuple):
    cards: List[Record]   # normalized, not yet persisted
    raw_text: str         # model output, kept for manual inspection


class Normalizer(Protocol):
    def normalize_record(self, rec: Record) -> Record:
        """Return a NEW record with every canonical field. Do not mutate `rec`."""
        ...
