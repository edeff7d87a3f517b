import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.db import get_db
from app.errors import CardScannerError, PersistenceError, ValidationError
from app import repositories

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.post("")
def save_cards(payload: Any = Body(None), db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Save a batch of cards.

    Accepts:
        {"cards": [ {name, position, ...}, ... ]}
    """
    cards = payload.get("cards") if isinstance(payload, dict) else None
    if not isinstance(cards, list):
        raise ValidationError("Invalid data format", "Body must be {\"cards\": [...]}")
    if not all(isinstance(c, dict) for c in cards):
        raise ValidationError("Invalid data format", "Every card must be a JSON object")

    try:
        saved = repositories.insert_many(db, cards)
    except CardScannerError:
        raise
    except Exception as e:
        log.exception("save failed")
        raise PersistenceError("Save failed", str(e)) from e
    return {
        "success": True,
        "message": f"Successfully saved {len(saved)} business card(s)",
        "cards": saved,
    }


@router.get("")
def list_cards(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """All saved cards, newest first. No paging."""
    try:
        cards = repositories.find_all(db)
    except CardScannerError:
        raise
    except Exception as e:
        log.exception("list failed")
        raise PersistenceError("Failed to retrieve data", str(e)) from e
    return {"success": True, "cards": cards}


@router.put("/{card_id}")
def update_card(
    card_id: str,
    fields: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    try:
        card = repositories.update_by_id(db, card_id, fields)
    except CardScannerError:
        raise
    except Exception as e:
        log.exception("update failed: id=%s", card_id)
        raise PersistenceError("Update failed", str(e)) from e
    # Missing ids are not an error: the card comes back as null
    return {"success": True, "card": card}


@router.delete("/{card_id}")
def delete_card(card_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    try:
        deleted = repositories.delete_by_id(db, card_id)
    except CardScannerError:
        raise
    except Exception as e:
        log.exception("delete failed: id=%s", card_id)
        raise PersistenceError("Delete failed", str(e)) from e
    if not deleted:
        log.info("delete: card %s did not exist", card_id)
    return {"success": True, "message": "Deleted successfully"}
