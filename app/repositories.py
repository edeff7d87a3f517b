import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import PersistenceError
from app.models import BusinessCard
from app.normalizers import CARD_FIELDS

log = logging.getLogger(__name__)

# API field name -> ORM attribute
_ATTRS = {
    "name": "name",
    "position": "position",
    "email": "email",
    "phone": "phone",
    "companyName": "company_name",
    "companyAddress": "company_address",
    "category": "category",
}


def card_to_dict(c: BusinessCard) -> Dict[str, Any]:
    """Serialize a row with the API's camelCase keys."""
    out: Dict[str, Any] = {"id": c.id}
    for field in CARD_FIELDS:
        out[field] = getattr(c, _ATTRS[field])
    out["createdAt"] = c.created_at.isoformat() if c.created_at else None
    return out


def _text(v: Any) -> str:
    return "" if v is None else str(v)


MAX_ID = 2**63 - 1  # signed 64-bit INTEGER


def _parse_id(card_id: Any) -> Optional[int]:
    """Path id -> primary key; anything that can't be a stored id is None."""
    try:
        pk = int(card_id)
    except (TypeError, ValueError):
        return None
    return pk if 1 <= pk <= MAX_ID else None


def insert_many(db: Session, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Persist a batch of cards in one transaction.
    Every row gets the same createdAt; ids increase in input order.
    """
    now = datetime.now(timezone.utc)
    rows = [
        BusinessCard(
            created_at=now,
            **{_ATTRS[f]: _text(r.get(f)) for f in CARD_FIELDS},
        )
        for r in records
    ]
    try:
        db.add_all(rows)
        db.commit()
        for row in rows:
            db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("insert_many failed for %d card(s)", len(rows))
        raise PersistenceError("Save failed", str(e)) from e
    log.info("saved %d card(s)", len(rows))
    return [card_to_dict(r) for r in rows]


def find_all(db: Session) -> List[Dict[str, Any]]:
    """All cards, newest first."""
    try:
        q = select(BusinessCard).order_by(
            BusinessCard.created_at.desc(), BusinessCard.id.desc()
        )
        return [card_to_dict(c) for c in db.execute(q).scalars().all()]
    except SQLAlchemyError as e:
        log.exception("find_all failed")
        raise PersistenceError("Failed to retrieve data", str(e)) from e


def update_by_id(db: Session, card_id: Any, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Replace the given canonical fields; others stay as they are.
    Returns None when no card has that id. id and createdAt are never written.
    """
    pk = _parse_id(card_id)
    if pk is None:
        return None
    try:
        row = db.get(BusinessCard, pk)
        if row is None:
            log.info("update skipped, card %s not found", card_id)
            return None
        for field, value in fields.items():
            if field in _ATTRS:
                setattr(row, _ATTRS[field], _text(value))
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("update failed: id=%s", card_id)
        raise PersistenceError("Update failed", str(e)) from e
    return card_to_dict(row)


def delete_by_id(db: Session, card_id: Any) -> bool:
    """Idempotent: deleting a missing id is not an error."""
    pk = _parse_id(card_id)
    if pk is None:
        return False
    try:
        row = db.get(BusinessCard, pk)
        if row is None:
            return False
        db.delete(row)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("delete failed: id=%s", card_id)
        raise PersistenceError("Delete failed", str(e)) from e
    return True
