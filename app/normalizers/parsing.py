# app/normalizers/parsing.py
import json
import logging
import re
from typing import Any, Callable, List, Optional, Tuple

log = logging.getLogger(__name__)

FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
BRACKETED_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


def _loads(text: str) -> Optional[Any]:
    """json.loads that reports failure as None instead of raising."""
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return None


def from_fenced_block(text: str) -> Optional[Any]:
    """Content of the first ```json fenced block."""
    m = FENCED_JSON_RE.search(text)
    return _loads(m.group(1)) if m else None


def from_bracketed_array(text: str) -> Optional[Any]:
    """Everything from the first '[' to the last ']'."""
    m = BRACKETED_ARRAY_RE.search(text)
    return _loads(m.group(0)) if m else None


def from_whole_text(text: str) -> Optional[Any]:
    return _loads(text)


Strategy = Callable[[str], Optional[Any]]

DEFAULT_STRATEGIES: List[Tuple[str, Strategy]] = [
    ("fenced_json", from_fenced_block),
    ("bracketed_array", from_bracketed_array),
    ("whole_text", from_whole_text),
]


def holds_objects(parsed: Any) -> bool:
    """True for an object, or a list with at least one object in it."""
    if isinstance(parsed, dict):
        return True
    return isinstance(parsed, list) and any(isinstance(x, dict) for x in parsed)


def parse_model_output(text: str, strategies=None) -> Optional[Any]:
    """
    Run the parsing strategies in order; the first result holding at least
    one JSON object wins. The bracketed-array match can land on a list
    nested inside an object (say, several phone numbers), so results with
    no object in them fall through to the next strategy.
    Returns None when no strategy yields card data.
    """
    if not isinstance(text, str) or not text.strip():
        return None
    for name, strategy in (strategies or DEFAULT_STRATEGIES):
        parsed = strategy(text)
        if holds_objects(parsed):
            log.debug("model output parsed via %s", name)
            return parsed
        if parsed is not None:
            log.debug("%s matched but held no objects, trying next", name)
    log.warning("no JSON found in model output (%d chars)", len(text))
    return None
