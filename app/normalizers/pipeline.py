"""Raw model text -> card records: parse, unwrap, then map keys per object."""
import logging
from typing import Any, List, Optional
from .parsing import parse_model_output
from .types import Normalizer, Record, ScanResult
from .rules import AliasNormalizer

log = logging.getLogger(__name__)


def get_default_normalizer() -> Normalizer:
    return AliasNormalizer()


def _as_objects(parsed: Any) -> List[Record]:
    """A lone object becomes a one-element list; anything else non-list is dropped."""
    if isinstance(parsed, dict):
        return [parsed]
    if not isinstance(parsed, list):
        return []
    objs = []
    for i, item in enumerate(parsed):
        if isinstance(item, dict):
            objs.append(item)
        else:
            log.warning("skipping non-object entry %d in model output: %r", i, item)
    return objs


def normalize_response(raw_text: str, normalizer: Optional[Normalizer] = None) -> ScanResult:
    """
    Turn the model's raw text into card records.
    Never raises on bad model output: unparsable text gives an empty list,
    and the raw text is always handed back for inspection.
    """
    normalizer = normalizer or get_default_normalizer()
    parsed = parse_model_output(raw_text)
    if parsed is None:
        return ScanResult(cards=[], raw_text=raw_text)
    cards = [normalizer.normalize_record(obj) for obj in _as_objects(parsed)]
    return ScanResult(cards=cards, raw_text=raw_text)
